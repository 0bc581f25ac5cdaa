"""
Section model for WordprocessingML documents.

Handles page size and page margins, the geometry tables are fitted into.
"""

from typing import Dict, Any, Optional, List, Union
import logging
from enum import Enum

from ..exceptions import GeometryError
from ..models.base import Models
from ..models.paragraph import Paragraph, TextBreak
from ..models.table import Table
from ..styles.paragraph_style import ParagraphStyle
from ..styles.table_style import TableStyle

logger = logging.getLogger(__name__)

Length = Union[int, float]

# A4 portrait in twips
A4_WIDTH_TWIPS = 11906
A4_HEIGHT_TWIPS = 16838
DEFAULT_MARGIN_TWIPS = 1440


class Orientation(Enum):
    """Page orientation options."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class SectionStyle:
    """
    Page geometry of a section, in twips.
    """

    def __init__(self, page_size_w: Length = A4_WIDTH_TWIPS,
                 page_size_h: Length = A4_HEIGHT_TWIPS,
                 margin_top: Length = DEFAULT_MARGIN_TWIPS,
                 margin_right: Length = DEFAULT_MARGIN_TWIPS,
                 margin_bottom: Length = DEFAULT_MARGIN_TWIPS,
                 margin_left: Length = DEFAULT_MARGIN_TWIPS,
                 orientation: Orientation = Orientation.PORTRAIT):
        """
        Initialize section style.

        Args:
            page_size_w: Page width
            page_size_h: Page height
            margin_top: Top page margin
            margin_right: Right page margin
            margin_bottom: Bottom page margin
            margin_left: Left page margin
            orientation: Page orientation
        """
        self.page_size_w = page_size_w
        self.page_size_h = page_size_h
        self.margin_top = margin_top
        self.margin_right = margin_right
        self.margin_bottom = margin_bottom
        self.margin_left = margin_left
        self.orientation = orientation
        self._validate()

    def _validate(self) -> None:
        if self.page_size_w <= 0 or self.page_size_h <= 0:
            raise GeometryError("Page size must be positive",
                                f"{self.page_size_w}x{self.page_size_h}")
        for name in ('margin_top', 'margin_right', 'margin_bottom', 'margin_left'):
            if getattr(self, name) < 0:
                raise GeometryError(f"Page {name.replace('_', ' ')} must not be negative")

    def set_orientation(self, orientation: Orientation) -> None:
        """Switch orientation, swapping page width and height when it changes."""
        if orientation != self.orientation:
            self.page_size_w, self.page_size_h = self.page_size_h, self.page_size_w
            self.orientation = orientation
            logger.debug(f"Section orientation set to: {orientation.value}")

    @property
    def usable_width(self) -> Length:
        """Page width minus left and right page margins."""
        return self.page_size_w - self.margin_left - self.margin_right

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page_size_w': self.page_size_w,
            'page_size_h': self.page_size_h,
            'margin_top': self.margin_top,
            'margin_right': self.margin_right,
            'margin_bottom': self.margin_bottom,
            'margin_left': self.margin_left,
            'orientation': self.orientation.value,
        }


class Section(Models):
    """
    Represents a section in the document.

    Container for tables and paragraphs laid out on the same page geometry.
    """

    def __init__(self, style: Optional[SectionStyle] = None):
        super().__init__()
        self.style = style
        logger.debug("Section initialized")

    def add_table(self, table: Optional[Table] = None, width: Optional[Length] = None,
                  style: Optional[TableStyle] = None) -> Table:
        """Add table to section. Creates a new table unless one is given."""
        if table is None:
            table = Table(width=width, style=style)
        self.add_child(table)
        return table

    def add_paragraph(self, paragraph: Union[str, Paragraph],
                      style: Optional[ParagraphStyle] = None) -> Paragraph:
        """Add paragraph (or plain text) to section."""
        if isinstance(paragraph, str):
            paragraph = Paragraph(paragraph, style)
        self.add_child(paragraph)
        return paragraph

    def add_text_break(self, count: int = 1, style: Optional[ParagraphStyle] = None) -> None:
        for _ in range(count):
            self.add_child(TextBreak(style))

    def get_tables(self) -> List[Table]:
        return list(self.iter_children(Table))

    def get_elements(self) -> List[Models]:
        return self.children.copy()

    def get_usable_width(self) -> Length:
        """Usable page width, 0 when the section declares no geometry."""
        if self.style is None:
            return 0
        return self.style.usable_width

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'section',
            'style': self.style.to_dict() if self.style else None,
            'elements': [child.to_dict() for child in self.children],
        }
