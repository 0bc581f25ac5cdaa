"""
Entry point for running DOCX Table Writer as a module.

Usage:
    python -m docx_table_writer render tables.json --output document.xml
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
