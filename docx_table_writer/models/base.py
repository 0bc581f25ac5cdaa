"""
Base model class for table document models.

Provides the parent/children tree shared by sections, tables, rows,
cells and paragraphs.
"""

from typing import Dict, Any, Optional, List, Type
from abc import ABC
import uuid
import logging

logger = logging.getLogger(__name__)

class Models(ABC):
    """Abstract base class for document models with tree helpers."""

    def __init__(self):
        """Initialize base model."""
        self.parent: Optional['Models'] = None
        self.children: List['Models'] = []
        self.id: str = str(uuid.uuid4())
        self._path: Optional[str] = None  # Hierarchical path like "section.table[0].tablerow[1]"

    def add_child(self, model: 'Models'):
        """Add child model to this model."""
        if model not in self.children:
            self.children.append(model)
            model.parent = self
            model._path = None

    def iter_children(self, type_filter: Optional[Type['Models']] = None):
        """Iterate over children, optionally filtered by type."""
        for child in self.children:
            if type_filter is None or isinstance(child, type_filter):
                yield child

    def find_ancestor(self, type_filter: Type['Models']) -> Optional['Models']:
        """Return the nearest ancestor of the given type."""
        current = self.parent
        while current is not None:
            if isinstance(current, type_filter):
                return current
            current = current.parent
        return None

    def get_text(self) -> str:
        """Get text content from model."""
        text_parts = []
        for child in self.children:
            child_text = child.get_text()
            if child_text:
                text_parts.append(child_text)
        return ' '.join(text_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return {
            'type': self.__class__.__name__,
            'id': self.id,
            'children': [child.to_dict() for child in self.children]
        }

    def __repr__(self) -> str:
        """String representation of model."""
        return f"{self.__class__.__name__}(id={self.id[:8]}..., children={len(self.children)})"

    def get_path(self) -> str:
        """Get hierarchical path of this model."""
        if self._path:
            return self._path

        path_parts = []
        current = self

        while current.parent:
            siblings = [c for c in current.parent.children if type(c) is type(current)]
            index = siblings.index(current)
            path_parts.append(f"{current.__class__.__name__.lower()}[{index}]")
            current = current.parent

        path_parts.append(current.__class__.__name__.lower())

        self._path = ".".join(reversed(path_parts))
        return self._path
