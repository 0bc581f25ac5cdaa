"""
Tests for table grid resolution and right margin redistribution.
"""

import pytest

from docx_table_writer.engine.table_grid import (
    GridResolution,
    MarginRedistributor,
    TableGridResolver,
    redistribute,
    resolve_columns,
    UNIFORM,
    HETEROGENEOUS,
)
from docx_table_writer.layout.section import Section, SectionStyle
from docx_table_writer.styles.table_style import TableStyle


def assert_grid_covers_rows(table, resolution):
    """Spanned grid widths add up to each row's width, within 1 twip per cell."""
    for row_index, row in enumerate(table.rows):
        index = 0
        covered = 0
        for cell_index in range(len(row.cells)):
            span = resolution.span_for(row_index, cell_index)
            covered += sum(resolution.columns[index:index + span])
            index += span
        assert abs(covered - row.get_width()) <= len(row.cells)


class TestUniformGrid:
    """Tables whose rows all split the width the same way."""

    def test_identical_rows(self, uniform_table):
        """Identical rows keep their widths as the grid, every span 1."""
        resolution = TableGridResolver().resolve(uniform_table)

        assert resolution.mode == UNIFORM
        assert resolution.columns == [3000, 3000]
        assert resolution.spans == [[1, 1], [1, 1]]

    def test_single_row(self, table_factory):
        table = table_factory([[1500, 2500, 1000]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == UNIFORM
        assert resolution.columns == [1500, 2500, 1000]
        assert resolution.spans == [[1, 1, 1]]

    def test_widths_equal_after_ceiling(self, table_factory):
        """Fractional widths rounding up to the same twip count as equal."""
        table = table_factory([[1000.4, 2000], [1001, 2000]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == UNIFORM
        assert resolution.columns == [1000.4, 2000]

    def test_undefined_widths(self, table_factory):
        """Without any width the grid has one undefined column per cell."""
        table = table_factory([[None, None, None], [None, None]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == UNIFORM
        assert resolution.columns == [None, None, None]
        assert resolution.spans == [[1, 1, 1], [1, 1]]

    def test_partially_defined_row_is_not_compared(self, table_factory):
        table = table_factory([[1000, 1000], [None, 2000]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == UNIFORM
        assert resolution.columns == [1000, 1000]

    def test_first_fully_defined_row_wins(self, table_factory):
        table = table_factory([[None, 3000], [2000, 4000]])

        assert resolve_columns(table) == [2000, 4000]

    def test_empty_table(self, table_factory):
        resolution = TableGridResolver().resolve(table_factory([]))

        assert resolution.columns == []
        assert resolution.spans == []
        assert resolution.column_count == 0


class TestHeterogeneousGrid:
    """Tables whose rows cut the width at different places."""

    def test_merged_cells(self, merged_table):
        """Three cells over two merged cells give the common refinement."""
        resolution = TableGridResolver().resolve(merged_table)

        assert resolution.mode == HETEROGENEOUS
        assert resolution.columns == [2000, 1000, 1000, 2000]
        assert resolution.spans == [[1, 2, 1], [2, 2]]

    def test_span_bounds(self, merged_table):
        resolution = TableGridResolver().resolve(merged_table)

        for row in resolution.spans:
            for span in row:
                assert 1 <= span <= resolution.column_count

    def test_coverage(self, merged_table):
        resolution = TableGridResolver().resolve(merged_table)

        assert_grid_covers_rows(merged_table, resolution)

    def test_fractional_widths_are_ceiled(self, table_factory):
        """Boundaries and cell widths are compared as ceiled integers."""
        table = table_factory([[1000.5, 1000.5], [2001]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == HETEROGENEOUS
        assert resolution.columns == [1001, 1000]
        assert resolution.spans == [[1, 1], [2]]
        assert all(isinstance(width, int) for width in resolution.columns)

    def test_rows_of_different_total_width(self, table_factory):
        table = table_factory([[1000, 1000], [2000, 500]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.columns == [1000, 1000, 500]
        assert resolution.spans == [[1, 1], [2, 1]]
        assert_grid_covers_rows(table, resolution)

    def test_many_rows(self, table_factory):
        table = table_factory([
            [1200, 1200, 1200, 1200, 1200],
            [2000, 4000],
            [3000, 3000],
            [6000],
        ])

        resolution = TableGridResolver().resolve(table)

        assert resolution.columns == [1200, 800, 400, 600, 600, 1200, 1200]
        assert resolution.spans[3] == [7]
        assert_grid_covers_rows(table, resolution)
        for row in resolution.spans:
            for span in row:
                assert 1 <= span <= resolution.column_count

    def test_zero_width_cell_gets_span_one(self, table_factory):
        """A cell narrower than the current grid column still spans one column."""
        table = table_factory([[0, 1000], [1000]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.columns == [1000]
        assert resolution.spans == [[1, 1], [1]]

    def test_zero_width_rows_get_one_column(self, table_factory):
        """Rows without any positive width still resolve to a one-column grid."""
        table = table_factory([[0, 0], [0]])

        resolution = TableGridResolver().resolve(table)

        assert resolution.mode == HETEROGENEOUS
        assert resolution.columns == [0]
        assert resolution.spans == [[1, 1], [1]]
        for row in resolution.spans:
            for span in row:
                assert 1 <= span <= resolution.column_count

    def test_table_is_not_modified(self, merged_table):
        TableGridResolver().resolve(merged_table)

        assert [row.get_cell_widths() for row in merged_table.rows] == [[2000, 2000, 2000], [3000, 3000]]
        assert all(cell.style.grid_span is None for row in merged_table.rows for cell in row.cells)

    def test_resolution_is_repeatable(self, merged_table):
        first = TableGridResolver().resolve(merged_table)
        second = TableGridResolver().resolve(merged_table)

        assert first == second


class TestGridResolution:
    """Test cases for GridResolution accessors."""

    def test_span_for_out_of_range(self):
        resolution = GridResolution(columns=[1000], spans=[[1]], mode=UNIFORM)

        assert resolution.span_for(0, 0) == 1
        assert resolution.span_for(5, 0) == 1
        assert resolution.span_for(0, 3) == 1
        assert resolution.span_for(-1, 0) == 1

    def test_iter_cells(self, merged_table):
        resolution = TableGridResolver().resolve(merged_table)

        spans = [span for _, _, span in resolution.iter_cells(merged_table)]

        assert spans == [1, 2, 1, 2, 2]


class TestMarginRedistributor:
    """Test cases for right margin redistribution."""

    def test_fits_table_into_page(self, fitted_table):
        """A 300 twip gap against a 500 twip margin takes 200 twips from every row."""
        redistributor = MarginRedistributor()

        assert redistributor.calc_margin_right(fitted_table) == 200
        assert redistributor.redistribute(fitted_table) is True

        first, second = fitted_table.rows
        for cell in first.cells:
            assert cell.width == pytest.approx(2000 - 200 / 3)
        assert second.get_cell_widths() == [2900, 2900]
        assert first.get_width() == pytest.approx(5800)
        assert second.get_width() == pytest.approx(5800)

    def test_no_style(self, table_factory, section):
        table = section.add_table(table_factory([[3000, 3000]], width=6000))

        assert redistribute(table) is False
        assert table.rows[0].get_cell_widths() == [3000, 3000]

    def test_no_right_margin(self, table_factory, section):
        table = section.add_table(table_factory([[3000, 3000]], width=6000,
                                                style=TableStyle(margin_left=100)))

        assert redistribute(table) is False
        assert table.rows[0].get_cell_widths() == [3000, 3000]

    def test_gap_already_large_enough(self, table_factory, section):
        """Widths stay untouched when the table keeps its right margin."""
        table = section.add_table(table_factory([[2000, 2000]], width=4000,
                                                style=TableStyle(margin_right=500)))

        assert MarginRedistributor().calc_margin_right(table) == 0
        assert redistribute(table) is False
        assert table.rows[0].get_cell_widths() == [2000, 2000]

    def test_gap_equal_to_margin(self, table_factory, section):
        table = section.add_table(table_factory([[2650, 2650]], width=5300,
                                                style=TableStyle(margin_right=500)))

        assert redistribute(table) is False

    def test_table_outside_section(self, table_factory):
        """Outside a section the usable width is 0, so the gap is the table extent."""
        table = table_factory([[3000, 3000]], width=6000,
                              style=TableStyle(margin_left=100, margin_right=500))

        assert MarginRedistributor().calc_margin_right(table) == 0
        assert redistribute(table) is False

    def test_width_from_cells(self, table_factory, section):
        """Without a declared width the widest row is the table width."""
        table = section.add_table(table_factory([[3000, 3000], [2000]],
                                                style=TableStyle(margin_right=500)))

        assert redistribute(table) is True
        assert table.rows[0].get_cell_widths() == [2850, 2850]
        assert table.rows[1].get_cell_widths() == [1700]

    def test_undefined_cell_widths_count_as_zero(self, table_factory, section):
        table = section.add_table(table_factory([[None, 6000]], width=6000,
                                                style=TableStyle(margin_right=500)))

        assert redistribute(table) is True
        assert table.rows[0].get_cell_widths() == [-150, 5850]

    def test_rows_without_cells_are_skipped(self, table_factory, section):
        table = section.add_table(table_factory([[], [3000, 3000]], width=6000,
                                                style=TableStyle(margin_right=500)))

        assert redistribute(table) is True
        assert table.rows[0].cells == []
        assert table.rows[1].get_cell_widths() == [2850, 2850]

    def test_nominal_widths_are_recorded(self, fitted_table):
        """The width before the first shrink is kept on every cell."""
        redistribute(fitted_table)
        redistribute(fitted_table)

        first, second = fitted_table.rows
        assert all(cell.fitted for cell in first.cells)
        assert [cell.get_nominal_width() for cell in first.cells] == [2000, 2000, 2000]
        assert [cell.get_nominal_width() for cell in second.cells] == [3000, 3000]
        assert second.get_cell_widths() == [2800, 2800]

    def test_undefined_nominal_width(self, table_factory, section):
        table = section.add_table(table_factory([[None, 6000]], width=6000,
                                                style=TableStyle(margin_right=500)))

        redistribute(table)

        assert table.rows[0].cells[0].get_nominal_width() is None
        assert table.clone().rows[0].get_cell_widths() == [None, 6000]

    def test_spans_are_not_touched(self, fitted_table):
        redistribute(fitted_table)

        assert all(cell.style.grid_span is None for row in fitted_table.rows for cell in row.cells)

    def test_grid_after_redistribution(self, fitted_table):
        redistribute(fitted_table)

        resolution = TableGridResolver().resolve(fitted_table)

        assert resolution.mode == HETEROGENEOUS
        assert_grid_covers_rows(fitted_table, resolution)

    def test_section_without_style(self, table_factory):
        section = Section()
        table = section.add_table(table_factory([[3000, 3000]], width=6000,
                                                style=TableStyle(margin_right=500)))

        # |0 - 6000| is far beyond the margin
        assert redistribute(table) is False

    def test_page_margins_reduce_usable_width(self, table_factory):
        section = Section(SectionStyle(page_size_w=10000, margin_left=1000, margin_right=1000))
        table = section.add_table(table_factory([[4000, 4000]], width=8000,
                                                style=TableStyle(margin_right=400)))

        assert MarginRedistributor().calc_margin_right(table) == 400
        assert redistribute(table) is True
        assert table.rows[0].get_cell_widths() == [3800, 3800]
