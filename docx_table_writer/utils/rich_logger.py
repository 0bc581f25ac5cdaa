"""
Rich logging and console reports.

Provides colourful logging and the grid report printed by the command line,
using the rich library.
"""

import logging
from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table as RichTable

from ..engine.table_grid import GridResolution
from ..models.table import Table
from .logger import LOG_LEVELS


def setup_rich_logging(level: str = "INFO", console: Optional[Console] = None) -> RichHandler:
    """
    Route the root logger through a RichHandler.

    Args:
        level: Log level
        console: Console to log to (stderr console when omitted)

    Returns:
        The installed handler
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)
    return rich_handler


def build_grid_table(title: str, table: Table, resolution: GridResolution) -> RichTable:
    """Rich table listing the grid columns and every row's cell spans."""
    columns = ", ".join("auto" if width is None else f"{width:g}" for width in resolution.columns)
    report = RichTable(title=title, caption=f"{resolution.mode} grid: {columns}", expand=True)
    report.add_column("Row", style="cyan", justify="right")
    report.add_column("Cell widths", style="magenta")
    report.add_column("Spans", style="green")

    for row_index, row in enumerate(table.rows):
        widths = ", ".join("auto" if cell.width is None else f"{cell.width:g}" for cell in row.cells)
        spans = ", ".join(str(resolution.span_for(row_index, i)) for i in range(len(row.cells)))
        report.add_row(str(row_index + 1), widths, spans)
    return report


def print_grid_report(resolutions: Iterable[Tuple[str, Table, GridResolution]],
                      console: Optional[Console] = None) -> None:
    """Print one grid table per resolved table."""
    console = console or Console()
    for title, table, resolution in resolutions:
        console.print(build_grid_table(title, table, resolution))
