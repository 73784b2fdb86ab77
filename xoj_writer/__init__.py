"""xoj_writer: writes hand-drawn notes in the Xournal ``.xoj`` XML format."""

from xoj_writer.core.models import (
    Background,
    BackgroundType,
    Document,
    Font,
    Layer,
    Page,
    Stroke,
    StrokeTool,
    Text,
)
from xoj_writer.core.exceptions import SaveError, XojWriterError
from xoj_writer.core.save_handler import SaveHandler, SaveSettings
from xoj_writer.core.services import SaveService

__all__ = [
    "Background",
    "BackgroundType",
    "Document",
    "Font",
    "Layer",
    "Page",
    "Stroke",
    "StrokeTool",
    "Text",
    "SaveError",
    "XojWriterError",
    "SaveHandler",
    "SaveSettings",
    "SaveService",
]

__version__ = "0.1.0"
