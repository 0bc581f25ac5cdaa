"""Paragraph style for cell content and spacer paragraphs."""

from typing import Dict, Any, Optional, Union
import copy

from ..exceptions import StyleError

Length = Union[int, float]


class ParagraphStyle:
    """
    Paragraph spacing and alignment written into w:pPr.

    line_height is an exact line height in twips. spacing is extra space
    added to the automatic line height; 0 disables it.
    """

    ALIGNMENTS = ('left', 'center', 'right', 'both', 'start', 'end', 'distribute')

    def __init__(self, space_before: Optional[Length] = None,
                 space_after: Optional[Length] = None,
                 line_height: Optional[Length] = None,
                 spacing: Optional[Length] = None,
                 alignment: Optional[str] = None,
                 style_id: Optional[str] = None):
        if alignment is not None and alignment not in self.ALIGNMENTS:
            raise StyleError(f"Invalid paragraph alignment: {alignment}",
                             f"must be one of {list(self.ALIGNMENTS)}")
        self.space_before = space_before
        self.space_after = space_after
        self.line_height = line_height
        self.spacing = spacing
        self.alignment = alignment
        self.style_id = style_id

    @classmethod
    def spacer(cls, height: Length, above: bool) -> 'ParagraphStyle':
        """
        Build the style of an empty paragraph standing in for a table margin.

        Args:
            height: Margin height in twips
            above: True for the paragraph before the table (space goes after it),
                False for the paragraph after the table (space goes before it)
        """
        return cls(
            line_height=height,
            space_before=0 if above else height,
            space_after=height if above else 0,
            spacing=0,
        )

    def has_spacing(self) -> bool:
        return any(value is not None for value in
                   (self.space_before, self.space_after, self.line_height, self.spacing))

    def copy(self) -> 'ParagraphStyle':
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'space_before': self.space_before,
            'space_after': self.space_after,
            'line_height': self.line_height,
            'spacing': self.spacing,
            'alignment': self.alignment,
            'style_id': self.style_id,
        }
