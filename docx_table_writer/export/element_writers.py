"""
Element writers: tables, paragraphs, text breaks and content containers.

TableWriter is the table emitter. It fits the table into the page
(margin redistribution), resolves the column grid, then writes the grid,
the table properties and every row and cell, handing cell content over to
ContainerWriter.
"""

import xml.etree.ElementTree as ET
from typing import Optional
import logging

from .base_writer import AbstractWriter, XML_NS
from .style_writers import (
    TableStyleWriter,
    RowStyleWriter,
    CellStyleWriter,
    ParagraphStyleWriter,
)
from ..engine.table_grid import GridResolution, MarginRedistributor, TableGridResolver
from ..models.base import Models
from ..models.paragraph import Paragraph, TextBreak
from ..models.table import Table, TableRow, TableCell
from ..styles.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)


class TextBreakWriter(AbstractWriter):
    """Writes an empty w:p carrying only paragraph properties."""

    def __init__(self, parent: ET.Element, element: TextBreak):
        super().__init__(parent)
        self.element = element

    def write(self) -> ET.Element:
        p = self._sub(self.parent, 'p')
        ParagraphStyleWriter(p, self.element.style).write()
        return p


class ParagraphWriter(AbstractWriter):
    """Writes a w:p with a single text run."""

    def __init__(self, parent: ET.Element, element: Paragraph):
        super().__init__(parent)
        self.element = element

    def write(self) -> ET.Element:
        p = self._sub(self.parent, 'p')
        ParagraphStyleWriter(p, self.element.style).write()

        text = self.element.text
        if text:
            run = self._sub(p, 'r')
            t = self._sub(run, 't')
            t.text = text
            # Word drops leading/trailing spaces unless told otherwise
            if text != text.strip():
                t.set(f'{{{XML_NS}}}space', 'preserve')
        return p


class TableWriter(AbstractWriter):
    """
    Writes a table (w:tbl) and the spacer paragraphs standing in for its
    top and bottom margins.

    A table without rows produces no output at all.
    """

    def __init__(self, parent: ET.Element, table: Table, redistribute_margins: bool = True):
        super().__init__(parent)
        self.table = table
        self.redistribute_margins = redistribute_margins
        self.resolution: Optional[GridResolution] = None

    def write(self) -> Optional[ET.Element]:
        table = self.table
        if not table.rows:
            logger.debug("Skipping table without rows")
            return None

        self._write_margin_top()

        tbl = self._sub(self.parent, 'tbl')
        self.resolution = self._resolve_grid()

        TableStyleWriter(tbl, table.style).set_width(table.width).write()
        self._write_columns(tbl, self.resolution)

        for row_index, row in enumerate(table.rows):
            self._write_row(tbl, row, row_index)

        self._write_margin_bottom()

        logger.debug(
            f"Table written: {len(table.rows)} rows, "
            f"{self.resolution.column_count} {self.resolution.mode} grid columns"
        )
        return tbl

    def _resolve_grid(self) -> GridResolution:
        table = self.table
        if self.redistribute_margins:
            if table.margins_applied:
                logger.warning(
                    "Table %s was already fitted to its right margin; "
                    "widths are used as they are (emit a clone to start over)",
                    table.id[:8],
                )
            else:
                MarginRedistributor().redistribute(table)
                table.margins_applied = True
        return TableGridResolver().resolve(table)

    def _write_columns(self, tbl: ET.Element, resolution: GridResolution) -> None:
        tbl_grid = self._sub(tbl, 'tblGrid')
        for width in resolution.columns:
            grid_col = self._sub(tbl_grid, 'gridCol')
            if width is not None:
                self._set_length(grid_col, 'w', width)
                self._set_attr(grid_col, 'type', 'dxa')

    def _write_row(self, tbl: ET.Element, row: TableRow, row_index: int) -> None:
        tr = self._sub(tbl, 'tr')
        RowStyleWriter(tr, row.style).set_height(row.height).write()

        for cell_index, cell in enumerate(row.cells):
            span = self.resolution.span_for(row_index, cell_index)
            self._write_cell(tr, cell, span)

    def _write_cell(self, tr: ET.Element, cell: TableCell, span: int) -> None:
        tc = self._sub(tr, 'tc')

        style_writer = CellStyleWriter(tc, cell.style).set_width(cell.width)
        if span > 1:
            style_writer.set_grid_span(span)
        style_writer.write()

        ContainerWriter(tc, cell).write()

    def _write_margin_top(self) -> None:
        style = self.table.style
        if style is not None and style.margin_top is not None:
            self._write_text_break(ParagraphStyle.spacer(style.margin_top, above=True))

    def _write_margin_bottom(self) -> None:
        style = self.table.style
        if style is not None and style.margin_bottom is not None:
            self._write_text_break(ParagraphStyle.spacer(style.margin_bottom, above=False))

    def _write_text_break(self, paragraph_style: ParagraphStyle) -> None:
        TextBreakWriter(self.parent, TextBreak(paragraph_style)).write()


class ContainerWriter(AbstractWriter):
    """
    Writes the content of a container (section or cell) element by element.

    A cell must end with a paragraph, so an empty cell gets an empty w:p.
    """

    def __init__(self, parent: ET.Element, container: Models, redistribute_margins: bool = True):
        super().__init__(parent)
        self.container = container
        self.redistribute_margins = redistribute_margins

    def write(self) -> None:
        container = self.container
        elements = container.content if isinstance(container, TableCell) else container.children

        for element in elements:
            self._write_element(element)

        if isinstance(container, TableCell) and not elements:
            self._sub(self.parent, 'p')

    def _write_element(self, element: Models) -> Optional[ET.Element]:
        if isinstance(element, Table):
            writer = TableWriter(self.parent, element, self.redistribute_margins)
        elif isinstance(element, Paragraph):
            writer = ParagraphWriter(self.parent, element)
        elif isinstance(element, TextBreak):
            writer = TextBreakWriter(self.parent, element)
        else:
            logger.warning(f"Unsupported element type skipped: {type(element).__name__}")
            return None
        return writer.write()
