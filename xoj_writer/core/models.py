from __future__ import annotations

"""Read-only document snapshot consumed by the save pipeline.

These dataclasses mirror the structure the writer queries: a document is an
ordered list of pages, a page an ordered list of layers, a layer an ordered
list of elements. They carry no behaviour beyond trivial accessors so that
any host model can be adapted to them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

__all__ = [
    "BackgroundType",
    "StrokeTool",
    "Background",
    "Font",
    "Element",
    "Stroke",
    "Text",
    "Layer",
    "Page",
    "Document",
]

Point = Tuple[float, float]


class BackgroundType(Enum):
    NONE = "none"
    LINED = "lined"
    RULED = "ruled"
    GRAPH = "graph"
    PDF = "pdf"
    IMAGE = "image"

    @property
    def is_solid(self) -> bool:
        return self in _SOLID_TYPES


_SOLID_TYPES = frozenset({
    BackgroundType.NONE,
    BackgroundType.LINED,
    BackgroundType.RULED,
    BackgroundType.GRAPH,
})


class StrokeTool(Enum):
    PEN = "pen"
    ERASER = "eraser"
    HIGHLIGHTER = "highlighter"


@dataclass
class Background:
    """Page backdrop.

    Attributes
    ----------
    type
        Background classification.
    color
        24-bit packed RGB integer (``0xRRGGBB``).
    pdf_page_no
        0-based page index in the source PDF, only meaningful for PDF pages.
    pdf_filename
        Source PDF path or ``file://`` URI. When unset the document-level
        filename is used.
    """

    type: BackgroundType = BackgroundType.NONE
    color: int = 0xffffff
    pdf_page_no: int = 0
    pdf_filename: Optional[str] = None


@dataclass
class Font:
    name: str = "Sans"
    size: float = 12.0
    italic: bool = False
    bold: bool = False


class Element:
    """Base class for everything a layer can hold."""


@dataclass
class Stroke(Element):
    """A freehand stroke.

    ``widths`` holds one width per segment when the stroke was drawn with
    pressure sensitivity; it is empty otherwise.
    """

    tool: StrokeTool = StrokeTool.PEN
    color: int = 0x000000
    width: float = 1.0
    widths: List[float] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)


@dataclass
class Text(Element):
    text: str = ""
    font: Font = field(default_factory=Font)
    x: float = 0.0
    y: float = 0.0
    color: int = 0x000000


@dataclass
class Layer:
    elements: List[Element] = field(default_factory=list)


@dataclass
class Page:
    width: float = 595.27559
    height: float = 841.88976
    background: Background = field(default_factory=Background)
    layers: List[Layer] = field(default_factory=list)


@dataclass
class Document:
    pages: List[Page] = field(default_factory=list)
    pdf_filename: Optional[str] = None

    def get_pdf_filename(self, page: Page) -> Optional[str]:
        """Return the PDF source backing *page*, falling back to the document's."""
        return page.background.pdf_filename or self.pdf_filename
