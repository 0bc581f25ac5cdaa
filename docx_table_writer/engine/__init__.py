"""Table grid resolution and page geometry."""

from .geometry import PageGeometry, get_page_geometry, usable_width_for
from .table_grid import (
    GridResolution,
    MarginRedistributor,
    TableGridResolver,
    redistribute,
    resolve_columns,
    UNIFORM,
    HETEROGENEOUS,
)

__all__ = [
    "PageGeometry",
    "get_page_geometry",
    "usable_width_for",
    "GridResolution",
    "MarginRedistributor",
    "TableGridResolver",
    "redistribute",
    "resolve_columns",
    "UNIFORM",
    "HETEROGENEOUS",
]
