"""
Models module for table documents.

This module contains the model classes that represent tables, rows,
cells and their paragraph content as Python objects.
"""

from .base import Models
from .paragraph import Paragraph, TextBreak
from .table import Table, TableRow, TableCell

__all__ = [
    "Models",
    "Paragraph",
    "TextBreak",
    "Table",
    "TableRow",
    "TableCell",
]
