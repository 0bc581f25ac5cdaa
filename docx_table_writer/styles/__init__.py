"""
Styles module.

Style value objects attached to tables, rows, cells and paragraphs.
"""

from .table_style import TableStyle, RowStyle, CellStyle
from .paragraph_style import ParagraphStyle

__all__ = [
    "TableStyle",
    "RowStyle",
    "CellStyle",
    "ParagraphStyle",
]
