"""
Table, row and cell styles for WordprocessingML tables.

Handles table margins and width, alignment, borders, cell margins,
row height rules and the cell properties written into w:tcPr.
"""

from typing import Dict, Any, Optional, Union
import copy
import logging

from ..exceptions import StyleError

logger = logging.getLogger(__name__)

Length = Union[int, float]

BORDER_SIDES = ('top', 'left', 'bottom', 'right', 'insideH', 'insideV')
CELL_BORDER_SIDES = ('top', 'left', 'bottom', 'right')
MARGIN_SIDES = ('top', 'left', 'bottom', 'right')


def _check_choice(name: str, value: Optional[str], choices) -> Optional[str]:
    if value is not None and value not in choices:
        raise StyleError(f"Invalid {name}: {value}", f"must be one of {list(choices)}")
    return value


def _check_borders(borders: Optional[Dict[str, Any]], sides) -> Dict[str, Dict[str, Any]]:
    if borders is None:
        return {}
    if not isinstance(borders, dict):
        raise StyleError("Borders must be a dictionary")
    for side, border in borders.items():
        if side not in sides:
            raise StyleError(f"Invalid border side: {side}", f"must be one of {list(sides)}")
        if not isinstance(border, dict):
            raise StyleError(f"Border '{side}' must be a dictionary")
    return copy.deepcopy(borders)


class TableStyle:
    """
    Represents table-level style: margins, width, alignment, borders.

    Margins are nullable; None means the feature is not requested.
    The top and bottom margins are emitted as spacer paragraphs around the
    table, the left and right margins drive cell width redistribution.
    """

    ALIGNMENTS = ('left', 'center', 'right', 'start', 'end', 'both')
    WIDTH_TYPES = ('dxa', 'pct', 'auto', 'nil')
    LAYOUTS = ('fixed', 'autofit')

    def __init__(self, margin_top: Optional[Length] = None,
                 margin_bottom: Optional[Length] = None,
                 margin_left: Optional[Length] = None,
                 margin_right: Optional[Length] = None,
                 width: Optional[Length] = None,
                 width_type: str = 'dxa',
                 alignment: Optional[str] = None,
                 style_id: Optional[str] = None,
                 borders: Optional[Dict[str, Any]] = None,
                 cell_margins: Optional[Dict[str, Length]] = None,
                 layout: Optional[str] = None,
                 indent: Optional[Length] = None):
        """
        Initialize table style.

        Args:
            margin_top: Space above the table in twips
            margin_bottom: Space below the table in twips
            margin_left: Table offset from the left page margin in twips
            margin_right: Minimum gap to the right page margin in twips
            width: Explicit table width
            width_type: Unit of the explicit width (dxa, pct, auto, nil)
            alignment: Table alignment (w:jc)
            style_id: Table style identifier (w:tblStyle)
            borders: Border definitions per side
            cell_margins: Default cell margins per side in twips
            layout: Table layout algorithm (fixed or autofit)
            indent: Table indentation from the leading margin in twips
        """
        self.margin_top = margin_top
        self.margin_bottom = margin_bottom
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.width = width
        self.width_type = _check_choice('width type', width_type, self.WIDTH_TYPES)
        self.alignment = _check_choice('table alignment', alignment, self.ALIGNMENTS)
        self.style_id = style_id
        self.borders = _check_borders(borders, BORDER_SIDES)
        self.cell_margins = self._check_cell_margins(cell_margins)
        self.layout = _check_choice('table layout', layout, self.LAYOUTS)
        self.indent = indent

    @staticmethod
    def _check_cell_margins(margins: Optional[Dict[str, Length]]) -> Dict[str, Length]:
        if margins is None:
            return {}
        if not isinstance(margins, dict):
            raise StyleError("Cell margins must be a dictionary")
        for side in margins:
            if side not in MARGIN_SIDES:
                raise StyleError(f"Invalid cell margin side: {side}", f"must be one of {list(MARGIN_SIDES)}")
        return dict(margins)

    def set_margins(self, top: Optional[Length] = None, bottom: Optional[Length] = None,
                    left: Optional[Length] = None, right: Optional[Length] = None) -> None:
        """Set the four table margins at once."""
        self.margin_top = top
        self.margin_bottom = bottom
        self.margin_left = left
        self.margin_right = right
        logger.debug(f"Table margins set: top={top}, bottom={bottom}, left={left}, right={right}")

    def set_alignment(self, alignment: Optional[str]) -> None:
        """Set table alignment."""
        self.alignment = _check_choice('table alignment', alignment, self.ALIGNMENTS)
        logger.debug(f"Table alignment set to: {alignment}")

    def set_width(self, width: Optional[Length], width_type: str = 'dxa') -> None:
        """Set explicit table width."""
        self.width_type = _check_choice('width type', width_type, self.WIDTH_TYPES)
        self.width = width
        logger.debug(f"Table width set to: {width} ({width_type})")

    def set_borders(self, borders: Dict[str, Any]) -> None:
        """Set table borders."""
        self.borders = _check_borders(borders, BORDER_SIDES)
        logger.debug(f"Table borders set: {borders}")

    def set_cell_margins(self, margins: Dict[str, Length]) -> None:
        """Set default cell margins."""
        self.cell_margins = self._check_cell_margins(margins)
        logger.debug(f"Table cell margins set: {margins}")

    def set_layout(self, layout: Optional[str]) -> None:
        """Set table layout algorithm."""
        self.layout = _check_choice('table layout', layout, self.LAYOUTS)

    def copy(self) -> 'TableStyle':
        """Return an independent copy of this style."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'margin_top': self.margin_top,
            'margin_bottom': self.margin_bottom,
            'margin_left': self.margin_left,
            'margin_right': self.margin_right,
            'width': self.width,
            'width_type': self.width_type,
            'alignment': self.alignment,
            'style_id': self.style_id,
            'borders': self.borders,
            'cell_margins': self.cell_margins,
            'layout': self.layout,
            'indent': self.indent,
        }


class RowStyle:
    """Row properties written into w:trPr."""

    HEIGHT_RULES = ('atLeast', 'exact', 'auto')

    def __init__(self, height: Optional[Length] = None, height_rule: Optional[str] = None,
                 is_header: bool = False, cant_split: bool = False):
        self.height = height
        self.height_rule = _check_choice('height rule', height_rule, self.HEIGHT_RULES)
        self.is_header = is_header
        self.cant_split = cant_split

    def set_height_rule(self, rule: Optional[str]) -> None:
        """Set row height rule (w:hRule)."""
        self.height_rule = _check_choice('height rule', rule, self.HEIGHT_RULES)

    def copy(self) -> 'RowStyle':
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'height': self.height,
            'height_rule': self.height_rule,
            'is_header': self.is_header,
            'cant_split': self.cant_split,
        }


class CellStyle:
    """
    Cell properties written into w:tcPr.

    grid_span is the merge-span count: the number of grid columns the cell
    covers. None means the default of one column, in which case no
    w:gridSpan element is written.
    """

    V_MERGES = ('restart', 'continue')
    V_ALIGNS = ('top', 'center', 'bottom')
    TEXT_DIRECTIONS = ('lrTb', 'tbRl', 'btLr', 'lrTbV', 'tbRlV', 'tbLrV')

    def __init__(self, grid_span: Optional[int] = None, v_merge: Optional[str] = None,
                 v_align: Optional[str] = None, shading: Optional[str] = None,
                 borders: Optional[Dict[str, Any]] = None,
                 text_direction: Optional[str] = None):
        self.grid_span: Optional[int] = None
        if grid_span is not None:
            self.set_grid_span(grid_span)
        self.v_merge = _check_choice('vertical merge', v_merge, self.V_MERGES)
        self.v_align = _check_choice('vertical alignment', v_align, self.V_ALIGNS)
        self.shading = shading
        self.borders = _check_borders(borders, CELL_BORDER_SIDES)
        self.text_direction = _check_choice('text direction', text_direction, self.TEXT_DIRECTIONS)

    def set_grid_span(self, span: int) -> None:
        """Set grid span (number of grid columns covered by the cell)."""
        if not isinstance(span, int) or isinstance(span, bool) or span < 1:
            raise StyleError(f"Invalid grid span: {span!r}", "must be a positive integer")
        self.grid_span = span
        logger.debug(f"Grid span set to: {span}")

    def set_v_merge(self, merge: Optional[str]) -> None:
        """Set vertical merge (w:vMerge)."""
        self.v_merge = _check_choice('vertical merge', merge, self.V_MERGES)

    def set_v_align(self, align: Optional[str]) -> None:
        """Set vertical alignment (w:vAlign)."""
        self.v_align = _check_choice('vertical alignment', align, self.V_ALIGNS)

    def set_borders(self, borders: Dict[str, Any]) -> None:
        """Set cell borders."""
        self.borders = _check_borders(borders, CELL_BORDER_SIDES)

    def copy(self) -> 'CellStyle':
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'grid_span': self.grid_span,
            'v_merge': self.v_merge,
            'v_align': self.v_align,
            'shading': self.shading,
            'borders': self.borders,
            'text_direction': self.text_direction,
        }
