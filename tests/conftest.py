"""
Pytest configuration for DOCX Table Writer
"""

import pytest
import logging
import sys
from pathlib import Path

from docx_table_writer.layout.section import Section, SectionStyle
from docx_table_writer.models.table import Table
from docx_table_writer.styles.table_style import TableStyle


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    # Cleanup after test
    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def build_table(rows, width=None, style=None):
    """Table with one row per list of cell widths."""
    table = Table(width=width, style=style)
    for widths in rows:
        row = table.add_row()
        for cell_width in widths:
            row.add_cell(width=cell_width)
    return table


@pytest.fixture
def table_factory():
    """Build tables from lists of row cell widths."""
    return build_table


@pytest.fixture
def uniform_table():
    """Two identical rows of two 3000 twip cells."""
    return build_table([[3000, 3000], [3000, 3000]])


@pytest.fixture
def merged_table():
    """Three cells over two merged cells of the same total width."""
    return build_table([[2000, 2000, 2000], [3000, 3000]])


@pytest.fixture
def section():
    """Section whose usable width is 5800 twips."""
    return Section(SectionStyle(page_size_w=8680, margin_left=1440, margin_right=1440))


@pytest.fixture
def fitted_table(section):
    """Table that needs 200 twips of right margin redistribution in `section`."""
    table = build_table(
        [[2000, 2000, 2000], [3000, 3000]],
        width=6000,
        style=TableStyle(margin_left=100, margin_right=500),
    )
    section.add_table(table)
    return table
