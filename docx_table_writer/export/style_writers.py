"""
Style block writers: w:tblPr, w:trPr, w:tcPr and w:pPr.

Each writer receives fully resolved values (widths after margin
redistribution, spans from the grid resolver) and performs no layout
computation of its own. Child elements are written in schema order.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Union
import logging

from .base_writer import AbstractWriter, qn
from ..styles.table_style import TableStyle, RowStyle, CellStyle
from ..styles.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)

Length = Optional[Union[int, float]]

# Default line height for w:lineRule="auto" (single spacing)
SINGLE_LINE = 240


class TableStyleWriter(AbstractWriter):
    """Writes w:tblPr for a table."""

    def __init__(self, parent: ET.Element, style: Optional[TableStyle]):
        super().__init__(parent)
        self.style = style
        self.width: Length = None

    def set_width(self, width: Length) -> 'TableStyleWriter':
        """Table width taking precedence over the style's explicit width."""
        self.width = width
        return self

    def write(self) -> ET.Element:
        style = self.style
        tbl_pr = self._sub(self.parent, 'tblPr')

        if style is not None and style.style_id:
            self._sub(tbl_pr, 'tblStyle', val=style.style_id)

        self._write_width(tbl_pr)

        if style is None:
            return tbl_pr

        if style.alignment:
            self._sub(tbl_pr, 'jc', val=style.alignment)

        if style.indent is not None:
            tbl_ind = self._sub(tbl_pr, 'tblInd', type='dxa')
            self._set_length(tbl_ind, 'w', style.indent)

        if style.borders:
            write_borders(self, tbl_pr, 'tblBorders', style.borders,
                          ('top', 'left', 'bottom', 'right', 'insideH', 'insideV'))

        if style.layout:
            self._sub(tbl_pr, 'tblLayout', type=style.layout)

        if style.cell_margins:
            tbl_cell_mar = self._sub(tbl_pr, 'tblCellMar')
            for side in ('top', 'left', 'bottom', 'right'):
                if side in style.cell_margins:
                    margin = self._sub(tbl_cell_mar, side, type='dxa')
                    self._set_length(margin, 'w', style.cell_margins[side])

        return tbl_pr

    def _write_width(self, tbl_pr: ET.Element) -> None:
        width = self.width
        width_type = 'dxa'
        if self.style is not None:
            if width is None:
                width = self.style.width
            width_type = self.style.width_type

        if width is None:
            self._sub(tbl_pr, 'tblW', w=0, type='auto')
            return

        tbl_w = self._sub(tbl_pr, 'tblW', type=width_type)
        self._set_length(tbl_w, 'w', width)


class RowStyleWriter(AbstractWriter):
    """Writes w:trPr for a row; nothing when there is nothing to say."""

    def __init__(self, parent: ET.Element, style: Optional[RowStyle]):
        super().__init__(parent)
        self.style = style
        self.height: Length = None

    def set_height(self, height: Length) -> 'RowStyleWriter':
        self.height = height
        return self

    def write(self) -> Optional[ET.Element]:
        style = self.style or RowStyle()
        height = self.height if self.height is not None else style.height

        if not (style.cant_split or height is not None or style.is_header):
            return None

        tr_pr = self._sub(self.parent, 'trPr')
        if style.cant_split:
            self._sub(tr_pr, 'cantSplit')
        if height is not None:
            tr_height = ET.SubElement(tr_pr, qn('trHeight'))
            self._set_length(tr_height, 'val', height)
            self._set_attr(tr_height, 'hRule', style.height_rule)
        if style.is_header:
            self._sub(tr_pr, 'tblHeader')
        return tr_pr


class CellStyleWriter(AbstractWriter):
    """Writes w:tcPr for a cell with its resolved width and grid span."""

    def __init__(self, parent: ET.Element, style: Optional[CellStyle]):
        super().__init__(parent)
        self.style = style or CellStyle()
        self.width: Length = None
        self.grid_span: Optional[int] = None

    def set_width(self, width: Length) -> 'CellStyleWriter':
        self.width = width
        return self

    def set_grid_span(self, span: Optional[int]) -> 'CellStyleWriter':
        """Span resolved for the table grid, overriding the style's span."""
        self.grid_span = span
        return self

    def write(self) -> Optional[ET.Element]:
        style = self.style
        grid_span = self.grid_span if self.grid_span is not None else style.grid_span

        has_props = any((
            self.width is not None,
            grid_span is not None and grid_span > 1,
            style.v_merge,
            style.borders,
            style.shading,
            style.text_direction,
            style.v_align,
        ))
        if not has_props:
            return None

        tc_pr = self._sub(self.parent, 'tcPr')
        if self.width is not None:
            tc_w = self._sub(tc_pr, 'tcW', type='dxa')
            self._set_length(tc_w, 'w', self.width)
        if grid_span is not None and grid_span > 1:
            self._sub(tc_pr, 'gridSpan', val=grid_span)
        if style.v_merge:
            self._sub(tc_pr, 'vMerge', val=style.v_merge)
        if style.borders:
            write_borders(self, tc_pr, 'tcBorders', style.borders, ('top', 'left', 'bottom', 'right'))
        if style.shading:
            self._sub(tc_pr, 'shd', val='clear', color='auto', fill=style.shading)
        if style.text_direction:
            self._sub(tc_pr, 'textDirection', val=style.text_direction)
        if style.v_align:
            self._sub(tc_pr, 'vAlign', val=style.v_align)
        return tc_pr


class ParagraphStyleWriter(AbstractWriter):
    """Writes w:pPr for a paragraph."""

    def __init__(self, parent: ET.Element, style: Optional[ParagraphStyle]):
        super().__init__(parent)
        self.style = style

    def write(self) -> Optional[ET.Element]:
        style = self.style
        if style is None or not (style.style_id or style.alignment or style.has_spacing()):
            return None

        p_pr = self._sub(self.parent, 'pPr')
        if style.style_id:
            self._sub(p_pr, 'pStyle', val=style.style_id)

        if style.has_spacing():
            spacing = self._sub(p_pr, 'spacing')
            self._set_length(spacing, 'before', style.space_before)
            self._set_length(spacing, 'after', style.space_after)
            if style.line_height is not None:
                self._set_length(spacing, 'line', style.line_height)
                self._set_attr(spacing, 'lineRule', 'exact')
            elif style.spacing is not None:
                self._set_length(spacing, 'line', SINGLE_LINE + style.spacing)
                self._set_attr(spacing, 'lineRule', 'auto')

        if style.alignment:
            self._sub(p_pr, 'jc', val=style.alignment)
        return p_pr


def write_borders(writer: AbstractWriter, parent: ET.Element, tag: str,
                  borders: Dict[str, Dict[str, Any]], sides) -> ET.Element:
    """Write a border container (w:tblBorders or w:tcBorders)."""
    container = writer._sub(parent, tag)
    for side in sides:
        border = borders.get(side)
        if border is None:
            continue
        writer._sub(
            container, side,
            val=border.get('val', 'single'),
            sz=border.get('sz'),
            space=border.get('space', 0),
            color=border.get('color'),
        )
    return container
