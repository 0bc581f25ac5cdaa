"""
JSON importer for table documents.

Builds Section and Table models from plain dictionaries, typically loaded
from a JSON file:

    {"section": {"page_size_w": 11906, "margin_left": 1440, "margin_right": 1440},
     "tables": [{"width": 6000,
                 "style": {"margin_left": 100, "margin_right": 500},
                 "rows": [{"height": 300,
                           "cells": [{"width": 2000, "text": "a"}]}]}]}

A document may also list several of these under "sections". Lengths are
twips, either numbers or strings with a unit ("2.5cm", "12pt", "1in").
Unknown keys are ignored.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..exceptions import DocumentImportError
from ..layout.section import Orientation, Section, SectionStyle
from ..models.table import Table, TableCell, TableRow
from ..styles.paragraph_style import ParagraphStyle
from ..styles.table_style import CellStyle, RowStyle, TableStyle
from ..utils.units import parse_length

logger = logging.getLogger(__name__)

SECTION_LENGTHS = ('page_size_w', 'page_size_h', 'margin_top', 'margin_right',
                   'margin_bottom', 'margin_left')
TABLE_STYLE_LENGTHS = ('margin_top', 'margin_bottom', 'margin_left', 'margin_right',
                       'width', 'indent')
TABLE_STYLE_OPTIONS = ('width_type', 'alignment', 'style_id', 'borders', 'layout')
ROW_STYLE_OPTIONS = ('height_rule', 'is_header', 'cant_split')
CELL_STYLE_OPTIONS = ('grid_span', 'v_merge', 'v_align', 'shading', 'borders', 'text_direction')
PARAGRAPH_STYLE_LENGTHS = ('space_before', 'space_after', 'line_height', 'spacing')
PARAGRAPH_STYLE_OPTIONS = ('alignment', 'style_id')


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DocumentImportError(f"{what} must be a mapping", f"got {type(value).__name__}")
    return value


def _sequence(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise DocumentImportError(f"{what} must be a list", f"got {type(value).__name__}")
    return value


def _length(data: Dict[str, Any], key: str, what: str):
    try:
        return parse_length(data.get(key))
    except ValueError as e:
        raise DocumentImportError(f"Invalid {what} {key}", str(e)) from e


class JSONTableImporter:
    """
    Imports sections and tables from JSON data.

    Args:
        json_data: Parsed JSON document; takes precedence over json_path
        json_path: Path of a JSON file to read
    """

    def __init__(self, json_data: Optional[Dict[str, Any]] = None,
                 json_path: Optional[Union[str, Path]] = None):
        if json_data is not None:
            self.json_data = json_data
        elif json_path:
            self.json_data = self._read(Path(json_path))
        else:
            raise ValueError("Either json_data or json_path must be given")

    @staticmethod
    def _read(path: Path) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except OSError as e:
            raise DocumentImportError(f"Cannot read {path}", str(e)) from e
        except json.JSONDecodeError as e:
            raise DocumentImportError(f"Invalid JSON in {path}", str(e)) from e

    def to_sections(self) -> List[Section]:
        """Build every section of the document."""
        data = _mapping(self.json_data, "Document")
        if 'sections' in data:
            sections = [self.load_section(item) for item in _sequence(data['sections'], "sections")]
        else:
            sections = [self.load_section(data)]
        logger.debug(f"Imported {len(sections)} section(s)")
        return sections

    def load_section(self, data: Dict[str, Any]) -> Section:
        """Build a section with its tables from a section mapping."""
        data = _mapping(data, "Section")

        style = None
        if data.get('section') is not None:
            style = self.load_section_style(data['section'])

        section = Section(style)
        for table_data in _sequence(data.get('tables', []), "tables"):
            section.add_table(self.load_table(table_data))
        return section

    def load_section_style(self, data: Dict[str, Any]) -> SectionStyle:
        data = _mapping(data, "Section style")
        kwargs = {}
        for key in SECTION_LENGTHS:
            value = _length(data, key, "section")
            if value is not None:
                kwargs[key] = value

        orientation = data.get('orientation')
        if orientation is not None:
            try:
                kwargs['orientation'] = Orientation(orientation)
            except ValueError as e:
                raise DocumentImportError(f"Invalid orientation: {orientation}") from e
        return SectionStyle(**kwargs)

    def load_table(self, data: Dict[str, Any]) -> Table:
        """Build a table, its rows and cells from a table mapping."""
        data = _mapping(data, "Table")

        style = None
        if data.get('style') is not None:
            style = self._table_style(data['style'])

        table = Table(width=_length(data, 'width', "table"), style=style)
        for row_data in _sequence(data.get('rows', []), "rows"):
            table.add_row(self._row(row_data))

        logger.debug(f"Imported table with {table.get_row_count()} rows")
        return table

    def _table_style(self, data: Dict[str, Any]) -> TableStyle:
        data = _mapping(data, "Table style")
        kwargs = {key: _length(data, key, "table style") for key in TABLE_STYLE_LENGTHS}
        kwargs.update({key: data[key] for key in TABLE_STYLE_OPTIONS if key in data})

        cell_margins = data.get('cell_margins')
        if cell_margins is not None:
            cell_margins = _mapping(cell_margins, "cell_margins")
            kwargs['cell_margins'] = {side: _length(cell_margins, side, "cell margin")
                                      for side in cell_margins}
        return TableStyle(**kwargs)

    def _row(self, data: Dict[str, Any]) -> TableRow:
        data = _mapping(data, "Row")

        style = None
        if data.get('style') is not None:
            style_data = _mapping(data['style'], "Row style")
            style = RowStyle(**{key: style_data[key] for key in ROW_STYLE_OPTIONS if key in style_data})

        row = TableRow(height=_length(data, 'height', "row"), style=style)
        for cell_data in _sequence(data.get('cells', []), "cells"):
            row.add_cell(self._cell(cell_data))
        return row

    def _cell(self, data: Dict[str, Any]) -> TableCell:
        data = _mapping(data, "Cell")

        style_data = dict(_mapping(data.get('style') or {}, "Cell style"))
        if 'grid_span' in data:
            style_data['grid_span'] = data['grid_span']
        style = CellStyle(**{key: style_data[key] for key in CELL_STYLE_OPTIONS if key in style_data})

        cell = TableCell(width=_length(data, 'width', "cell"), style=style)

        paragraph_style = None
        if data.get('paragraph_style') is not None:
            paragraph_style = self._paragraph_style(data['paragraph_style'])

        text = data.get('text')
        if isinstance(text, str):
            cell.add_text(text, paragraph_style)
        elif isinstance(text, list):
            for line in text:
                if not isinstance(line, str):
                    raise DocumentImportError("Cell text lines must be strings", repr(line))
                cell.add_text(line, paragraph_style)
        elif text is not None:
            raise DocumentImportError("Cell text must be a string or a list of strings", repr(text))
        return cell

    def _paragraph_style(self, data: Dict[str, Any]) -> ParagraphStyle:
        data = _mapping(data, "Paragraph style")
        kwargs = {key: _length(data, key, "paragraph style") for key in PARAGRAPH_STYLE_LENGTHS}
        kwargs.update({key: data[key] for key in PARAGRAPH_STYLE_OPTIONS if key in data})
        return ParagraphStyle(**kwargs)


def load_section(data: Dict[str, Any]) -> Section:
    """Build a section from a mapping."""
    return JSONTableImporter(json_data=data).load_section(data)


def load_table(data: Dict[str, Any]) -> Table:
    """Build a table from a mapping."""
    return JSONTableImporter(json_data=data).load_table(data)
