"""Page layout containers."""

from .section import Section, SectionStyle, Orientation

__all__ = [
    "Section",
    "SectionStyle",
    "Orientation",
]
