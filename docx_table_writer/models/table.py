"""
Table model for WordprocessingML tables.

Rows may subdivide the table differently (merged cells); the helpers at
the bottom of Table describe how row widths relate to each other and are
what the grid resolver builds on.
"""

import math
from typing import List, Dict, Any, Optional, Tuple, Union
import logging

from .base import Models
from .paragraph import Paragraph, TextBreak
from ..styles.table_style import TableStyle, RowStyle, CellStyle
from ..styles.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)

Width = Optional[Union[int, float]]


class Table(Models):
    """
    Represents a table with rows and cells.

    Widths are in twips. A cell width of None means "no explicit width".
    """

    def __init__(self, width: Width = None, style: Optional[TableStyle] = None):
        """
        Initialize table.

        Args:
            width: Declared table width in twips
            style: Table style (margins, alignment, borders)
        """
        super().__init__()
        self.rows: List['TableRow'] = []
        self.width = width
        self.style = style
        # Set once margin redistribution has rewritten the cell widths
        self.margins_applied = False

    def add_row(self, row: Optional['TableRow'] = None, height: Width = None,
                style: Optional[RowStyle] = None) -> 'TableRow':
        """Add row to table. Creates a new row unless one is given."""
        if row is None:
            row = TableRow(height=height, style=style)
        elif not isinstance(row, TableRow):
            raise TypeError(f"Table rows must be TableRow instances, got {type(row)!r}")
        self.rows.append(row)
        self.add_child(row)
        logger.debug(f"Added row to table. Total rows: {len(self.rows)}")
        return row

    def set_style(self, style: TableStyle):
        """Set table style."""
        self.style = style
        logger.debug("Table style set")

    def set_width(self, width: Width):
        """Set declared table width."""
        self.width = width
        logger.debug(f"Table width set to: {width}")

    def get_rows(self) -> List['TableRow']:
        """Get all rows in table."""
        return self.rows.copy()

    def get_row_count(self) -> int:
        return len(self.rows)

    def get_cell(self, row_index: int, col_index: int) -> Optional['TableCell']:
        """Get cell at specific position."""
        if 0 <= row_index < len(self.rows):
            row = self.rows[row_index]
            if 0 <= col_index < len(row.cells):
                return row.cells[col_index]
        return None

    def get_dimensions(self) -> Tuple[int, int]:
        """Get table dimensions (rows, columns)."""
        if not self.rows:
            return (0, 0)

        max_cols = max(len(row.cells) for row in self.rows)
        return (len(self.rows), max_cols)

    def get_parent_container(self):
        """Return the section containing this table, or None."""
        from ..layout.section import Section

        return self.find_ancestor(Section)

    def get_text(self) -> str:
        """Get text content from all cells."""
        text_parts = []
        for row in self.rows:
            row_text = row.get_text()
            if row_text:
                text_parts.append(row_text)
        return '\n'.join(text_parts)

    # ------------------------------------------------------------------
    # Width helpers
    # ------------------------------------------------------------------
    def get_width_by_cells(self) -> Width:
        """Widest row, measured as the sum of its cell widths."""
        table_width = None
        for row in self.rows:
            width = row.get_width()
            if table_width is None or width > table_width:
                table_width = width
        return table_width

    def find_first_defined_cell_widths(self) -> List[Width]:
        """
        Widths of the first row whose cells all declare a width.

        Falls back to the row with the most cells when no row is fully
        specified, so the grid still gets one column per cell.
        """
        for row in self.rows:
            if row.cells and row.has_defined_widths():
                return row.get_cell_widths()

        cell_widths: List[Width] = []
        for row in self.rows:
            if len(row.cells) > len(cell_widths):
                cell_widths = row.get_cell_widths()
        return cell_widths

    def has_different_cell_widths(self) -> bool:
        """
        Check whether fully specified rows split the table differently.

        Widths are compared after ceiling rounding to whole twips; rows
        that contain an undefined width are left out of the comparison.
        """
        reference = None
        for row in self.rows:
            if not row.cells or not row.has_defined_widths():
                continue
            widths = [math.ceil(width) for width in row.get_cell_widths()]
            if reference is None:
                reference = widths
            elif widths != reference:
                return True
        return False

    def clone(self) -> 'Table':
        """
        Copy the table with its rows, cells, styles and content.

        Cells get their nominal widths back, so the copy is not fitted to
        its right margin yet and can be emitted again. The copy keeps a
        reference to the same parent container (for page geometry) without
        being registered as one of its children.
        """
        cloned = Table(width=self.width, style=self.style.copy() if self.style else None)
        for row in self.rows:
            cloned.add_row(row.clone())
        cloned.parent = self.parent
        return cloned

    def to_dict(self) -> Dict[str, Any]:
        """Convert table to dictionary representation."""
        return {
            'type': 'table',
            'id': self.id,
            'width': self.width,
            'style': self.style.to_dict() if self.style else None,
            'rows': [row.to_dict() for row in self.rows],
            'dimensions': self.get_dimensions()
        }


class TableRow(Models):
    """Represents a table row."""

    def __init__(self, height: Width = None, style: Optional[RowStyle] = None):
        """Initialize table row."""
        super().__init__()
        self.cells: List['TableCell'] = []
        self.height = height
        self.style = style

    def add_cell(self, cell: Optional['TableCell'] = None, width: Width = None,
                 style: Optional[CellStyle] = None) -> 'TableCell':
        """Add cell to row. Creates a new cell unless one is given."""
        if cell is None:
            cell = TableCell(width=width, style=style)
        elif not isinstance(cell, TableCell):
            raise TypeError(f"Row cells must be TableCell instances, got {type(cell)!r}")
        self.cells.append(cell)
        self.add_child(cell)
        logger.debug(f"Added cell to row. Total cells: {len(self.cells)}")
        return cell

    def set_height(self, height: Width):
        """Set row height."""
        self.height = height
        logger.debug(f"Row height set to: {height}")

    def get_cells(self) -> List['TableCell']:
        """Get all cells in row."""
        return self.cells.copy()

    def get_cell_widths(self) -> List[Width]:
        return [cell.width for cell in self.cells]

    def has_defined_widths(self) -> bool:
        return all(cell.width is not None for cell in self.cells)

    def get_width(self) -> Union[int, float]:
        """Sum of cell widths; undefined widths count as zero."""
        return sum(cell.width or 0 for cell in self.cells)

    def get_text(self) -> str:
        """Get text content from all cells."""
        text_parts = []
        for cell in self.cells:
            cell_text = cell.get_text()
            if cell_text:
                text_parts.append(cell_text)
        return '\t'.join(text_parts)  # Tab-separated for row text

    def clone(self) -> 'TableRow':
        cloned = TableRow(height=self.height, style=self.style.copy() if self.style else None)
        for cell in self.cells:
            cloned.add_cell(cell.clone())
        return cloned

    def to_dict(self) -> Dict[str, Any]:
        """Convert row to dictionary representation."""
        return {
            'type': 'table_row',
            'cells': [cell.to_dict() for cell in self.cells],
            'height': self.height,
            'style': self.style.to_dict() if self.style else None,
        }


class TableCell(Models):
    """
    Represents a table cell.

    The width is mutable: margin redistribution rewrites it in place
    before the table grid is resolved. The width the cell had before the
    first rewrite is kept as ``nominal_width`` so copies can start over.
    """

    def __init__(self, width: Width = None, style: Optional[CellStyle] = None):
        """Initialize table cell."""
        super().__init__()
        self.width = width
        self.style = style if style is not None else CellStyle()
        self.content: List[Models] = []
        self.nominal_width: Width = None
        self.fitted = False

    @property
    def grid_span(self) -> int:
        """Number of grid columns covered by the cell."""
        return self.style.grid_span or 1

    def set_width(self, width: Width):
        """Set cell width. The new width also becomes the nominal one."""
        self.width = width
        self.nominal_width = None
        self.fitted = False
        logger.debug(f"Cell width set to: {width}")

    def shrink_width(self, amount: Union[int, float]) -> None:
        """
        Take twips off the cell width.

        The first call records the current width as the nominal width;
        an undefined width counts as zero.
        """
        if not self.fitted:
            self.nominal_width = self.width
            self.fitted = True
        self.width = (self.width or 0) - amount

    def get_nominal_width(self) -> Width:
        """Width before margin redistribution."""
        return self.nominal_width if self.fitted else self.width

    def add_paragraph(self, paragraph: Union[Paragraph, TextBreak]) -> Union[Paragraph, TextBreak]:
        """Add paragraph (or text break) to cell."""
        if not isinstance(paragraph, (Paragraph, TextBreak)):
            raise TypeError(f"Unsupported cell content {type(paragraph).__name__}; allowed: Paragraph, TextBreak")
        self.content.append(paragraph)
        self.add_child(paragraph)
        logger.debug(f"Added content to cell: {type(paragraph).__name__}")
        return paragraph

    def add_text(self, text: str, style: Optional[ParagraphStyle] = None) -> Paragraph:
        """Add a paragraph of text to cell."""
        return self.add_paragraph(Paragraph(text, style))

    def add_text_break(self, count: int = 1, style: Optional[ParagraphStyle] = None) -> None:
        """Add empty paragraphs to cell."""
        for _ in range(count):
            self.add_paragraph(TextBreak(style))

    def get_content(self) -> List[Models]:
        """Get all content in cell."""
        return self.content.copy()

    def get_text(self) -> str:
        """Get text content from cell."""
        text_parts = []
        for content in self.content:
            text = content.get_text()
            if text:
                text_parts.append(text)
        return '\n'.join(text_parts)

    def clone(self) -> 'TableCell':
        cloned = TableCell(width=self.get_nominal_width(), style=self.style.copy())
        for content in self.content:
            style = content.style.copy() if content.style else None
            if isinstance(content, Paragraph):
                cloned.add_paragraph(Paragraph(content.text, style))
            else:
                cloned.add_paragraph(TextBreak(style))
        return cloned

    def to_dict(self) -> Dict[str, Any]:
        """Convert cell to dictionary representation."""
        return {
            'type': 'table_cell',
            'width': self.width,
            'grid_span': self.grid_span,
            'style': self.style.to_dict(),
            'content': [content.to_dict() for content in self.content],
        }
