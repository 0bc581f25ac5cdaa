"""
Tests for the table emitter and the content writers.
"""

import logging
import xml.etree.ElementTree as ET

import pytest

from docx_table_writer.export.base_writer import XML_NS, qn
from docx_table_writer.export.element_writers import (
    ContainerWriter,
    ParagraphWriter,
    TableWriter,
    TextBreakWriter,
)
from docx_table_writer.models.base import Models
from docx_table_writer.models.paragraph import Paragraph, TextBreak
from docx_table_writer.models.table import Table
from docx_table_writer.styles.paragraph_style import ParagraphStyle
from docx_table_writer.styles.table_style import CellStyle, RowStyle, TableStyle


def local_names(element):
    return [child.tag.split('}')[1] for child in element]


def grid_widths(tbl):
    return [col.get(qn('w')) for col in tbl.find(qn('tblGrid'))]


def cell_spans(tbl):
    spans = []
    for tr in tbl.findall(qn('tr')):
        row = []
        for tc in tr.findall(qn('tc')):
            grid_span = tc.find(f"{qn('tcPr')}/{qn('gridSpan')}")
            row.append(int(grid_span.get(qn('val'))) if grid_span is not None else 1)
        spans.append(row)
    return spans


@pytest.fixture
def body():
    return ET.Element(qn('body'))


class TestTableWriter:
    """Test cases for TableWriter."""

    def test_empty_table_writes_nothing(self, body):
        """A table without rows produces no output at all."""
        table = Table(width=6000, style=TableStyle(margin_top=120, margin_bottom=120))

        result = TableWriter(body, table).write()

        assert result is None
        assert len(body) == 0

    def test_uniform_table(self, body, uniform_table):
        tbl = TableWriter(body, uniform_table).write()

        assert local_names(body) == ['tbl']
        assert grid_widths(tbl) == ['3000', '3000']
        assert all(col.get(qn('type')) == 'dxa' for col in tbl.find(qn('tblGrid')))
        assert cell_spans(tbl) == [[1, 1], [1, 1]]

    def test_merged_table(self, body, merged_table):
        tbl = TableWriter(body, merged_table).write()

        assert grid_widths(tbl) == ['2000', '1000', '1000', '2000']
        assert cell_spans(tbl) == [[1, 2, 1], [2, 2]]

    def test_resolution_is_kept(self, body, merged_table):
        writer = TableWriter(body, merged_table)
        writer.write()

        assert writer.resolution.columns == [2000, 1000, 1000, 2000]

    def test_element_order(self, body, uniform_table):
        tbl = TableWriter(body, uniform_table).write()

        assert local_names(tbl) == ['tblPr', 'tblGrid', 'tr', 'tr']
        assert local_names(tbl.find(qn('tr'))) == ['tc', 'tc']
        assert local_names(tbl.find(qn('tr')).find(qn('tc'))) == ['tcPr', 'p']

    def test_undefined_grid_columns(self, body, table_factory):
        tbl = TableWriter(body, table_factory([[None, None]])).write()

        columns = list(tbl.find(qn('tblGrid')))
        assert len(columns) == 2
        assert all(col.get(qn('w')) is None and col.get(qn('type')) is None for col in columns)
        assert tbl.find(f"{qn('tr')}/{qn('tc')}/{qn('tcPr')}") is None

    def test_table_width(self, body, table_factory):
        tbl = TableWriter(body, table_factory([[3000, 3000]], width=6000)).write()

        tbl_w = tbl.find(f"{qn('tblPr')}/{qn('tblW')}")
        assert tbl_w.get(qn('w')) == '6000'
        assert tbl_w.get(qn('type')) == 'dxa'

    def test_table_without_width(self, body, uniform_table):
        tbl = TableWriter(body, uniform_table).write()

        tbl_w = tbl.find(f"{qn('tblPr')}/{qn('tblW')}")
        assert tbl_w.get(qn('w')) == '0'
        assert tbl_w.get(qn('type')) == 'auto'

    def test_margin_spacers(self, body, table_factory):
        """Top and bottom margins become spacer paragraphs around the table."""
        table = table_factory([[3000]], style=TableStyle(margin_top=120, margin_bottom=240))

        TableWriter(body, table).write()

        assert local_names(body) == ['p', 'tbl', 'p']
        top = body[0].find(f"{qn('pPr')}/{qn('spacing')}")
        assert top.get(qn('before')) == '0'
        assert top.get(qn('after')) == '120'
        assert top.get(qn('line')) == '120'
        assert top.get(qn('lineRule')) == 'exact'

        bottom = body[2].find(f"{qn('pPr')}/{qn('spacing')}")
        assert bottom.get(qn('before')) == '240'
        assert bottom.get(qn('after')) == '0'
        assert bottom.get(qn('line')) == '240'

    def test_only_top_margin(self, body, table_factory):
        table = table_factory([[3000]], style=TableStyle(margin_top=0))

        TableWriter(body, table).write()

        assert local_names(body) == ['p', 'tbl']

    def test_no_spacers_without_style(self, body, uniform_table):
        TableWriter(body, uniform_table).write()

        assert local_names(body) == ['tbl']

    def test_margin_redistribution(self, body, fitted_table):
        tbl = TableWriter(body, fitted_table).write()

        assert fitted_table.margins_applied is True
        widths = [tc.find(f"{qn('tcPr')}/{qn('tcW')}").get(qn('w'))
                  for tc in tbl.find(qn('tr')).findall(qn('tc'))]
        assert widths == ['1933', '1933', '1933']
        assert fitted_table.rows[1].get_cell_widths() == [2900, 2900]

    def test_redistribution_disabled(self, body, fitted_table):
        TableWriter(body, fitted_table, redistribute_margins=False).write()

        assert fitted_table.margins_applied is False
        assert fitted_table.rows[1].get_cell_widths() == [3000, 3000]

    def test_redistribution_runs_once(self, body, fitted_table, caplog):
        """Writing the same table twice does not shrink its cells twice."""
        TableWriter(body, fitted_table).write()

        with caplog.at_level(logging.WARNING):
            TableWriter(body, fitted_table).write()

        assert fitted_table.rows[1].get_cell_widths() == [2900, 2900]
        assert "already fitted" in caplog.text

    def test_clone_can_be_written_again(self, body, fitted_table):
        """A copy of a written table is fitted from the nominal widths, not twice."""
        TableWriter(body, fitted_table).write()
        clone = fitted_table.clone()

        assert clone.margins_applied is False
        assert clone.rows[1].get_cell_widths() == [3000, 3000]

        tbl = TableWriter(body, clone).write()

        assert clone.margins_applied is True
        for cell in clone.rows[0].cells:
            assert cell.width == pytest.approx(2000 - 200 / 3)
        assert clone.rows[1].get_cell_widths() == [2900, 2900]
        widths = [tc.find(f"{qn('tcPr')}/{qn('tcW')}").get(qn('w'))
                  for tc in tbl.find(qn('tr')).findall(qn('tc'))]
        assert widths == ['1933', '1933', '1933']
        assert fitted_table.rows[1].get_cell_widths() == [2900, 2900]

    def test_zero_width_table_has_one_grid_column(self, body, table_factory):
        tbl = TableWriter(body, table_factory([[0, 0], [0]])).write()

        assert grid_widths(tbl) == ['0']
        assert cell_spans(tbl) == [[1, 1], [1]]

    def test_row_height_and_style(self, body, table_factory):
        table = table_factory([])
        row = table.add_row(height=400, style=RowStyle(height_rule='exact', is_header=True))
        row.add_cell(width=3000)

        tbl = TableWriter(body, table).write()

        tr_pr = tbl.find(f"{qn('tr')}/{qn('trPr')}")
        assert local_names(tr_pr) == ['trHeight', 'tblHeader']
        assert tr_pr.find(qn('trHeight')).get(qn('val')) == '400'
        assert tr_pr.find(qn('trHeight')).get(qn('hRule')) == 'exact'

    def test_row_without_height_or_style(self, body, uniform_table):
        tbl = TableWriter(body, uniform_table).write()

        assert tbl.find(f"{qn('tr')}/{qn('trPr')}") is None

    def test_cell_style_is_written(self, body, table_factory):
        table = table_factory([])
        table.add_row().add_cell(width=3000, style=CellStyle(v_align='center', shading='D9D9D9'))

        tbl = TableWriter(body, table).write()

        tc_pr = tbl.find(f"{qn('tr')}/{qn('tc')}/{qn('tcPr')}")
        assert local_names(tc_pr) == ['tcW', 'shd', 'vAlign']

    def test_cell_content(self, body, table_factory):
        table = table_factory([[3000]])
        cell = table.rows[0].cells[0]
        cell.add_text("first")
        cell.add_text_break()
        cell.add_text("second")

        tbl = TableWriter(body, table).write()

        tc = tbl.find(f"{qn('tr')}/{qn('tc')}")
        assert local_names(tc) == ['tcPr', 'p', 'p', 'p']
        texts = [t.text for t in tc.iter(qn('t'))]
        assert texts == ['first', 'second']

    def test_empty_cell_gets_paragraph(self, body, uniform_table):
        tbl = TableWriter(body, uniform_table).write()

        for tc in tbl.iter(qn('tc')):
            assert len(tc.findall(qn('p'))) == 1

    def test_spans_are_not_stored_on_cells(self, body, merged_table):
        TableWriter(body, merged_table).write()

        assert all(cell.style.grid_span is None for row in merged_table.rows for cell in row.cells)


class TestParagraphWriters:
    """Test cases for paragraph and text break writers."""

    def test_paragraph(self, body):
        p = ParagraphWriter(body, Paragraph("Hello", ParagraphStyle(alignment='center'))).write()

        assert local_names(p) == ['pPr', 'r']
        assert p.find(f"{qn('pPr')}/{qn('jc')}").get(qn('val')) == 'center'
        assert p.find(f"{qn('r')}/{qn('t')}").text == 'Hello'

    def test_preserve_outer_whitespace(self, body):
        p = ParagraphWriter(body, Paragraph(" padded ")).write()

        t = p.find(f"{qn('r')}/{qn('t')}")
        assert t.get(f'{{{XML_NS}}}space') == 'preserve'

    def test_plain_text_has_no_space_attribute(self, body):
        p = ParagraphWriter(body, Paragraph("plain")).write()

        assert p.find(f"{qn('r')}/{qn('t')}").get(f'{{{XML_NS}}}space') is None

    def test_empty_paragraph(self, body):
        p = ParagraphWriter(body, Paragraph()).write()

        assert len(p) == 0

    def test_text_break(self, body):
        p = TextBreakWriter(body, TextBreak(ParagraphStyle(space_after=100))).write()

        assert local_names(p) == ['pPr']
        assert p.find(f"{qn('pPr')}/{qn('spacing')}").get(qn('after')) == '100'


class UnknownElement(Models):
    pass


class TestContainerWriter:
    """Test cases for ContainerWriter."""

    def test_unknown_elements_are_skipped(self, body, section, caplog):
        section.add_paragraph("before")
        section.add_child(UnknownElement())
        section.add_paragraph("after")

        with caplog.at_level(logging.WARNING):
            ContainerWriter(body, section).write()

        assert local_names(body) == ['p', 'p']
        assert "UnknownElement" in caplog.text

    def test_section_tables(self, body, section, uniform_table):
        section.add_paragraph("Title")
        section.add_table(uniform_table)

        ContainerWriter(body, section).write()

        assert local_names(body) == ['p', 'tbl']
