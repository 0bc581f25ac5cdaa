"""
Table grid resolution.

WordprocessingML tables declare one column grid (w:tblGrid) shared by all
rows; a cell covering several grid columns says so with w:gridSpan. Tables
built row by row do not have such a grid: each row lists its own cell
widths, and merged cells make rows cut the table at different places.

This module turns per-row widths into a single grid:

* MarginRedistributor shrinks cell widths so the table keeps its declared
  right margin inside the usable page width.
* TableGridResolver computes the grid columns and the span of every cell.

Widths are twips. Every comparison is done on ceiling-rounded integers so
that widths coming out of a division (equal-split merges) never produce
grid columns a fraction of a twip narrower than the cell that covers them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union
import logging

from ..models.table import Table, TableCell, TableRow
from .geometry import usable_width_for

logger = logging.getLogger(__name__)

Width = Optional[Union[int, float]]

UNIFORM = "uniform"
HETEROGENEOUS = "heterogeneous"


class MarginRedistributor:
    """
    Fits a table with an explicit right margin into the usable page width.

    When the gap between the table's right edge and the usable width is
    smaller than the declared right margin, the missing space is taken
    from the cells: every row gives it up in equal parts per cell.
    """

    def calc_margin_right(self, table: Table) -> float:
        """
        Space still missing on the right of the table.

        Returns:
            0 when the table already keeps its right margin, otherwise the
            amount to remove from each row
        """
        style = table.style
        if style is None or style.margin_right is None:
            return 0

        page_inner_width = usable_width_for(table)

        table_width = table.width
        if table_width is None:
            table_width = table.get_width_by_cells() or 0

        table_margin_left = style.margin_left or 0
        page_margin_right = abs(page_inner_width - (table_margin_left + table_width))
        if page_margin_right >= style.margin_right:
            return 0

        return style.margin_right - page_margin_right

    def redistribute(self, table: Table) -> bool:
        """
        Shrink cell widths so the table honours its right margin.

        Returns:
            True if any cell width was changed
        """
        needed_margin = self.calc_margin_right(table)
        if needed_margin <= 0:
            return False

        for row in table.rows:
            cells = row.cells
            if not cells:
                continue
            width_part = needed_margin / len(cells)
            for cell in cells:
                cell.shrink_width(width_part)

        logger.debug(f"Redistributed {needed_margin} twips of right margin over {len(table.rows)} rows")
        return True


@dataclass
class GridResolution:
    """
    Resolved table grid.

    Attributes:
        columns: Grid column widths; entries may be None in uniform mode
            when the table declares no width for a column
        spans: Span of every cell, indexed [row][cell], each >= 1
        mode: UNIFORM when all rows share the same cell widths,
            HETEROGENEOUS when the grid had to be unified
    """

    columns: List[Width] = field(default_factory=list)
    spans: List[List[int]] = field(default_factory=list)
    mode: str = UNIFORM

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def span_for(self, row_index: int, cell_index: int) -> int:
        """Span of a cell; 1 for positions outside the resolved table."""
        if 0 <= row_index < len(self.spans):
            row_spans = self.spans[row_index]
            if 0 <= cell_index < len(row_spans):
                return row_spans[cell_index]
        return 1

    def iter_cells(self, table: Table) -> Iterator[Tuple[TableRow, TableCell, int]]:
        """Yield (row, cell, span) for every cell of the table."""
        for row_index, row in enumerate(table.rows):
            for cell_index, cell in enumerate(row.cells):
                yield row, cell, self.span_for(row_index, cell_index)


class TableGridResolver:
    """
    Computes the column grid of a table and the span of each cell.

    The table is not modified; the emitter applies the spans it gets back.
    """

    def resolve(self, table: Table) -> GridResolution:
        if table.has_different_cell_widths():
            columns = self._unify_columns(table)
            spans = [self._assign_spans(row, columns) for row in table.rows]
            mode = HETEROGENEOUS
        else:
            columns = table.find_first_defined_cell_widths()
            spans = [[1] * len(row.cells) for row in table.rows]
            mode = UNIFORM

        logger.debug(f"Resolved {mode} grid with {len(columns)} columns")
        return GridResolution(columns=columns, spans=spans, mode=mode)

    @staticmethod
    def _unify_columns(table: Table) -> List[int]:
        """
        Least common refinement of all rows' cell boundaries.

        Every cumulative right edge of every row is a cut point; the gaps
        between consecutive distinct cut points are the grid columns.
        Rows without any positive width still get one zero-width column.
        """
        boundaries = set()
        for row in table.rows:
            row_width = 0
            for cell in row.cells:
                row_width += cell.width or 0
                boundaries.add(math.ceil(row_width))

        columns = []
        previous = 0
        for boundary in sorted(boundaries):
            if boundary > previous:
                columns.append(boundary - previous)
                previous = boundary
        return columns or [0]

    @staticmethod
    def _assign_spans(row: TableRow, columns: List[int]) -> List[int]:
        """
        Greedily give each cell of a row the grid columns it covers.

        A cell takes columns from the row's current column index while
        their total stays within the cell width.
        """
        spans = []
        index = 0
        column_count = len(columns)
        for cell in row.cells:
            cell_width = math.ceil(cell.width or 0)
            grid_span = 0
            total_width = 0
            for i in range(index, column_count):
                total_width += columns[i]
                if total_width > cell_width:
                    break
                grid_span += 1
            index += grid_span
            spans.append(max(grid_span, 1))
        return spans


def redistribute(table: Table) -> bool:
    """Apply right-margin redistribution to a table."""
    return MarginRedistributor().redistribute(table)


def resolve_columns(table: Table) -> List[Width]:
    """Column grid widths of a table."""
    return TableGridResolver().resolve(table).columns
