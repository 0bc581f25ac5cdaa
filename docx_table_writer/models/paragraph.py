"""Paragraph and text break models."""

from typing import Dict, Any, Optional
import logging

from .base import Models
from ..styles.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)


class Paragraph(Models):
    """A single-run paragraph of plain text."""

    def __init__(self, text: str = "", style: Optional[ParagraphStyle] = None):
        """Initialize paragraph."""
        super().__init__()
        self.text = text
        self.style = style

    def set_text(self, text: str):
        """Replace paragraph text."""
        self.text = text
        logger.debug(f"Paragraph text set ({len(text)} chars)")

    def get_text(self) -> str:
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'paragraph',
            'text': self.text,
            'style': self.style.to_dict() if self.style else None,
        }


class TextBreak(Models):
    """
    An empty paragraph.

    Carries only paragraph formatting, which makes it usable as a vertical
    spacer (the table top/bottom margins are written this way).
    """

    def __init__(self, style: Optional[ParagraphStyle] = None):
        super().__init__()
        self.style = style

    def get_text(self) -> str:
        return ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'text_break',
            'style': self.style.to_dict() if self.style else None,
        }
