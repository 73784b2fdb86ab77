from __future__ import annotations

"""Builds the Xournal XML tree for a document and writes it to a sink.

A save pass is two steps: :meth:`SaveHandler.prepare_save` walks the
document depth-first (page -> background + layers -> elements) and builds an
:class:`~xoj_writer.core.xml_node.XmlNode` tree, then
:meth:`SaveHandler.save_to` writes the XML declaration followed by that tree.
The tree can be written any number of times until the next
``prepare_save``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from xoj_writer.config import ConfigManager
from xoj_writer.core.encoders import (
    color_str,
    resolve_pdf_filename,
    solid_background_style,
    tool_str,
)
from xoj_writer.core.exceptions import SaveError
from xoj_writer.core.fonts import FontFormatter, format_font_description
from xoj_writer.core.models import (
    BackgroundType,
    Document,
    Layer,
    Page,
    Stroke,
    Text,
)
from xoj_writer.core.streams import BytesOutputStream
from xoj_writer.core.xml_node import XmlNode, XmlPointNode, XmlTextNode

__all__ = ["SaveHandler", "SaveSettings", "XML_DECLARATION"]

logger = logging.getLogger(__name__)

XML_DECLARATION = b'<?xml version="1.0" standalone="no"?>\n'


@dataclass(frozen=True)
class SaveSettings:
    """Fixed values written into every document."""

    format_version: str = "0.4.5"
    title: str = "Xournal document - see http://math.mit.edu/~auroux/software/xournal/"
    number_precision: int = 2
    pretty_print: bool = False
    compress: bool = True

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "SaveSettings":
        defaults = cls()
        return cls(
            format_version=str(data.get("format_version", defaults.format_version)),
            title=str(data.get("title", defaults.title)),
            number_precision=int(data.get("number_precision", defaults.number_precision)),
            pretty_print=bool(data.get("pretty_print", defaults.pretty_print)),
            compress=bool(data.get("compress", defaults.compress)),
        )

    @classmethod
    def from_config(cls) -> "SaveSettings":
        return cls.from_mapping(ConfigManager().get_save_format())


class SaveHandler:
    """Converts a :class:`~xoj_writer.core.models.Document` to Xournal XML."""

    def __init__(self, settings: Optional[SaveSettings] = None,
                 font_formatter: Optional[FontFormatter] = None) -> None:
        self.settings = settings if settings is not None else SaveSettings.from_config()
        self.font_formatter: FontFormatter = font_formatter or format_font_description
        self._root: Optional[XmlNode] = None

    @property
    def root(self) -> Optional[XmlNode]:
        """Tree built by the last :meth:`prepare_save`, or ``None``."""
        return self._root

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def prepare_save(self, doc: Document) -> XmlNode:
        """Build a fresh tree for *doc*, replacing any previous one."""
        self._root = None

        root = XmlNode("xournal")
        root.set_attrib("version", self.settings.format_version)
        root.set_attrib("extended", "true")
        root.add_child(XmlTextNode("title", self.settings.title))

        first_pdf_page_visited = False
        for page in doc.pages:
            first_pdf_page_visited = self.visit_page(root, page, doc, first_pdf_page_visited)

        logger.debug("Prepared save tree: pages=%d", len(doc.pages))
        self._root = root
        return root

    def save_to(self, out: Any) -> None:
        """Write the XML declaration and the prepared tree to *out*.

        The whole document is serialized before anything reaches *out*, so a
        tree lxml rejects raises :class:`SaveError` with nothing written.
        Errors raised by ``out.write`` propagate; the tree is left intact.
        """
        if self._root is None:
            raise SaveError("prepare_save() must be called before save_to()")
        try:
            data = self._root.to_bytes(self.settings.number_precision, pretty=self.settings.pretty_print)
        except ValueError as e:
            raise SaveError(f"Document cannot be serialized: {e}", cause=e) from e
        out.write(XML_DECLARATION + data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote document bytes=%d", len(XML_DECLARATION) + len(data))

    def to_bytes(self) -> bytes:
        """Return what :meth:`save_to` would write."""
        sink = BytesOutputStream()
        self.save_to(sink)
        return sink.getvalue()

    # ---------------------------------------------------------------------
    # Visitors
    # ---------------------------------------------------------------------
    def visit_page(self, root: XmlNode, page: Page, doc: Document,
                   first_pdf_page_visited: bool) -> bool:
        """Append a ``page`` node for *page*.

        Returns the updated "first PDF page visited" flag.
        """
        page_node = root.add_child(XmlNode("page"))
        page_node.set_attrib("width", page.width)
        page_node.set_attrib("height", page.height)

        background = page_node.add_child(XmlNode("background"))
        bg = page.background

        if bg.type is BackgroundType.PDF:
            # The original Xournal reader depends on this attribute order.
            background.set_attrib("type", "pdf")
            if not first_pdf_page_visited:
                first_pdf_page_visited = True
                background.set_attrib("domain", "absolute")
                background.set_attrib("filename", resolve_pdf_filename(doc.get_pdf_filename(page) or ""))
            background.set_attrib("pageno", bg.pdf_page_no + 1)
        elif bg.type.is_solid:
            background.set_attrib("type", "solid")
            background.set_attrib("color", color_str(bg.color))
            background.set_attrib("style", solid_background_style(bg.type))
        elif bg.type is BackgroundType.IMAGE:
            # TODO: write type="pixmap" once image backgrounds are attached to the save bundle
            pass

        for layer in page.layers:
            self.visit_layer(page_node, layer)

        return first_pdf_page_visited

    def visit_layer(self, page_node: XmlNode, layer: Layer) -> XmlNode:
        layer_node = page_node.add_child(XmlNode("layer"))
        for element in layer.elements:
            if isinstance(element, Stroke):
                layer_node.add_child(self.visit_stroke(element))
            elif isinstance(element, Text):
                layer_node.add_child(self.visit_text(element))
            else:
                logger.debug("Skipping unsupported element type: %s", type(element).__name__)
        return layer_node

    def visit_stroke(self, s: Stroke) -> XmlPointNode:
        stroke = XmlPointNode("stroke")
        stroke.set_attrib("tool", tool_str(s.tool))
        stroke.set_attrib("color", color_str(s.color))

        width = int(s.width * 100)
        has_pressure_sensitivity = any(int(w * 100) != width for w in s.widths)

        if has_pressure_sensitivity:
            stroke.set_attrib("width", [s.width, *s.widths])
        else:
            stroke.set_attrib("width", s.width)

        stroke.set_points(s.points)
        return stroke

    def visit_text(self, t: Text) -> XmlTextNode:
        text = XmlTextNode("text", t.text)
        f = t.font
        text.set_attrib("font", self.font_formatter(f.name, f.italic, f.bold))
        text.set_attrib("size", f.size)
        text.set_attrib("x", t.x)
        text.set_attrib("y", t.y)
        text.set_attrib("color", color_str(t.color))
        return text
