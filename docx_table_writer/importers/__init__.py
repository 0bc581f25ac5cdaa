"""
Importers building table documents from plain data.
"""

from .json_importer import JSONTableImporter, load_section, load_table

__all__ = [
    "JSONTableImporter",
    "load_section",
    "load_table",
]
