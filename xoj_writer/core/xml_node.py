from __future__ import annotations

"""Generic XML node tree used as the intermediate save representation.

Attributes are kept as an ordered list of ``(key, value)`` pairs. The legacy
Xournal reader scans some elements positionally, so the serialized attribute
order must be the insertion order. Rendering goes through ``lxml`` which
preserves that order and takes care of escaping.
"""

import logging
import re
from numbers import Number
from typing import Any, List, Optional, Sequence, Tuple, Union

from lxml import etree as ET

from xoj_writer.core.encoders import format_number

__all__ = ["XmlNode", "XmlTextNode", "XmlPointNode", "xml_safe"]

logger = logging.getLogger(__name__)

AttribValue = Union[str, int, float, Sequence[float]]

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def xml_safe(text: str) -> str:
    """Drop characters XML cannot hold (NUL, form feed, lone surrogates, ...)."""
    cleaned, count = _INVALID_XML_CHARS.subn("", text)
    if count:
        logger.warning("Removed %d character(s) not allowed in XML from %r", count, cleaned[:40])
    return cleaned


def _render_value(value: Any, precision: int) -> str:
    if isinstance(value, str):
        return xml_safe(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Number):
        return format_number(float(value), precision)
    # numeric sequence
    return " ".join(_render_value(v, precision) for v in value)


class XmlNode:
    """A named element with ordered attributes and ordered children."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.attributes: List[Tuple[str, AttribValue]] = []
        self.children: List["XmlNode"] = []

    def add_child(self, node: "XmlNode") -> "XmlNode":
        self.children.append(node)
        return node

    def set_attrib(self, key: str, value: AttribValue) -> None:
        """Set *key* to *value*, keeping the position of an existing key."""
        if not isinstance(value, (str, Number)):
            value = list(value)
        for i, (existing, _) in enumerate(self.attributes):
            if existing == key:
                self.attributes[i] = (key, value)
                return
        self.attributes.append((key, value))

    def get_attrib(self, key: str) -> Optional[AttribValue]:
        for existing, value in self.attributes:
            if existing == key:
                return value
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _content(self, precision: int) -> Optional[str]:
        return None

    def to_element(self, precision: int = 2) -> ET._Element:
        """Build the ``lxml`` element for this node and its subtree."""
        element = ET.Element(self.name)
        for key, value in self.attributes:
            element.set(key, _render_value(value, precision))
        element.text = self._content(precision)
        for child in self.children:
            element.append(child.to_element(precision))
        return element

    def to_bytes(self, precision: int = 2, *, pretty: bool = False) -> bytes:
        return ET.tostring(
            self.to_element(precision),
            encoding="UTF-8",
            xml_declaration=False,
            pretty_print=pretty,
        )

    def write_out(self, sink: Any, precision: int = 2, *, pretty: bool = False) -> None:
        """Serialize the subtree and hand the bytes to ``sink.write``."""
        data = self.to_bytes(precision, pretty=pretty)
        sink.write(data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote <%s> subtree bytes=%d", self.name, len(data))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} attribs={len(self.attributes)} children={len(self.children)}>"


class XmlTextNode(XmlNode):
    """Node whose payload is literal text content."""

    def __init__(self, name: str, text: str = "") -> None:
        super().__init__(name)
        self.text = text

    def _content(self, precision: int) -> Optional[str]:
        return xml_safe(self.text)


class XmlPointNode(XmlNode):
    """Node carrying an ordered list of ``(x, y)`` points as its content.

    Points render as ``"x1 y1 x2 y2 ..."`` on a single line.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.points: List[Tuple[float, float]] = []

    def set_points(self, points: Sequence[Tuple[float, float]]) -> None:
        self.points = [(x, y) for x, y in points]

    def _content(self, precision: int) -> Optional[str]:
        return " ".join(
            f"{format_number(x, precision)} {format_number(y, precision)}"
            for x, y in self.points
        )
