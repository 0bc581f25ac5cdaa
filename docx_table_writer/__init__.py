"""
DOCX Table Writer - WordprocessingML tables with unified column grids.

Tables are built row by row, and each row may split the table width
differently (merged cells). On export every table gets a single w:tblGrid,
the least common refinement of all rows' cell boundaries, and each cell is
given the w:gridSpan covering its width. Tables with a right margin are
fitted into the usable page width first.

Quick Start:
    from docx_table_writer import Section, SectionStyle, TableStyle, XMLExporter

    section = Section(SectionStyle())
    table = section.add_table(style=TableStyle(margin_top=120))
    row = table.add_row()
    row.add_cell(width=3000).add_text("a")
    row.add_cell(width=3000).add_text("b")

    xml = XMLExporter(section).regenerate_wordml()
"""

from .version import __version__, __version_info__

from .exceptions import (
    DocxTableWriterError,
    StyleError,
    GeometryError,
    ExportError,
    DocumentImportError,
    ConfigError,
)

from .config import ExportConfig
from .models import Models, Paragraph, TextBreak, Table, TableRow, TableCell
from .styles import TableStyle, RowStyle, CellStyle, ParagraphStyle
from .layout import Section, SectionStyle, Orientation
from .engine import (
    GridResolution,
    MarginRedistributor,
    TableGridResolver,
    redistribute,
    resolve_columns,
)
from .export import XMLExporter, TableWriter
from .importers import JSONTableImporter, load_section, load_table

__all__ = [
    "__version__",
    "__version_info__",
    # Exceptions
    "DocxTableWriterError",
    "StyleError",
    "GeometryError",
    "ExportError",
    "DocumentImportError",
    "ConfigError",
    # Configuration
    "ExportConfig",
    # Models
    "Models",
    "Paragraph",
    "TextBreak",
    "Table",
    "TableRow",
    "TableCell",
    # Styles
    "TableStyle",
    "RowStyle",
    "CellStyle",
    "ParagraphStyle",
    # Layout
    "Section",
    "SectionStyle",
    "Orientation",
    # Grid resolution
    "GridResolution",
    "MarginRedistributor",
    "TableGridResolver",
    "redistribute",
    "resolve_columns",
    # Export / import
    "XMLExporter",
    "TableWriter",
    "JSONTableImporter",
    "load_section",
    "load_table",
]
