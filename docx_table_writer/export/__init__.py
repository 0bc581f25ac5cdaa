"""
Export module.

WordprocessingML writers for tables and the document-level XML exporter.
"""

from .xml_exporter import XMLExporter
from .element_writers import TableWriter, ParagraphWriter, TextBreakWriter, ContainerWriter
from .style_writers import TableStyleWriter, RowStyleWriter, CellStyleWriter, ParagraphStyleWriter
from .base_writer import W_NS, qn

__all__ = [
    "XMLExporter",
    "TableWriter",
    "ParagraphWriter",
    "TextBreakWriter",
    "ContainerWriter",
    "TableStyleWriter",
    "RowStyleWriter",
    "CellStyleWriter",
    "ParagraphStyleWriter",
    "W_NS",
    "qn",
]
