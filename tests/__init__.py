"""
Test suite for docx_table_writer project.

This module contains all unit tests for the docx_table_writer package.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
