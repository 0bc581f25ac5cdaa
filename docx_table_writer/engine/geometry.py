"""Page geometry lookups for tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..layout.section import Section


@dataclass(slots=True)
class PageGeometry:
    page_width: float
    margin_left: float
    margin_right: float

    @property
    def usable_width(self) -> float:
        """Page width minus left and right page margins."""
        return self.page_width - self.margin_left - self.margin_right

    @classmethod
    def from_section(cls, section: Section) -> Optional["PageGeometry"]:
        style = section.style
        if style is None:
            return None
        return cls(
            page_width=style.page_size_w,
            margin_left=style.margin_left,
            margin_right=style.margin_right,
        )


def get_page_geometry(table) -> Optional[PageGeometry]:
    """Geometry of the section containing the table, None when unavailable."""
    section = table.get_parent_container()
    if section is None:
        return None
    return PageGeometry.from_section(section)


def usable_width_for(table) -> float:
    """Usable page width around the table, 0 outside a section."""
    geometry = get_page_geometry(table)
    if geometry is None:
        return 0
    return geometry.usable_width
