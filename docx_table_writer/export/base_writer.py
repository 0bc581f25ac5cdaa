"""
Shared helpers for WordprocessingML writers.

Writers append to an xml.etree parent element; tags and attributes use
Clark notation in the main WordprocessingML namespace, the prefix is
chosen at serialization time.
"""

import math
import xml.etree.ElementTree as ET
from typing import Any, Optional

W_NS = 'http://schemas.openxmlformats.org/wordprocessingml/2006/main'
XML_NS = 'http://www.w3.org/XML/1998/namespace'


def qn(local_name: str) -> str:
    """Qualified WordprocessingML name, e.g. qn('tbl') -> '{...main}tbl'."""
    return f'{{{W_NS}}}{local_name}'


def coerce_attr_value(value: Any) -> Optional[str]:
    """Convert attribute value to a safe string for XML serialization."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            return str(int(value))
        return format(value, ".10g")
    return str(value)


def twips_attr_value(value: Any) -> Optional[str]:
    """Length attribute in whole twips (ST_TwipsMeasure takes integers)."""
    if isinstance(value, float) and not (math.isnan(value) or math.isinf(value)):
        value = round(value)
    return coerce_attr_value(value)


class AbstractWriter:
    """Base class for writers appending WordprocessingML to a parent element."""

    def __init__(self, parent: ET.Element):
        self.parent = parent

    def write(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @staticmethod
    def _set_attr(element: ET.Element, key: str, value: Any) -> None:
        """Set a w: attribute, skipping values that cannot be serialized."""
        coerced = coerce_attr_value(value)
        if coerced is None:
            return
        element.set(qn(key), coerced)

    @staticmethod
    def _set_length(element: ET.Element, key: str, value: Any) -> None:
        coerced = twips_attr_value(value)
        if coerced is None:
            return
        element.set(qn(key), coerced)

    def _sub(self, parent: ET.Element, local_name: str, **attrs: Any) -> ET.Element:
        """Append a w: child element with the given w: attributes."""
        element = ET.SubElement(parent, qn(local_name))
        for key, value in attrs.items():
            self._set_attr(element, key, value)
        return element
