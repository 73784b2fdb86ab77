from __future__ import annotations

"""Attribute encoders.

Pure functions turning domain values into the string tokens the Xournal
format expects. They contain no I/O and can be used on their own.
"""

import logging
from typing import Any

from xoj_writer.core.models import BackgroundType, StrokeTool

__all__ = [
    "color_str",
    "solid_background_style",
    "tool_str",
    "format_number",
    "resolve_pdf_filename",
    "LOCAL_FILE_PREFIX",
]

logger = logging.getLogger(__name__)

LOCAL_FILE_PREFIX = "file://"

_SOLID_STYLES = {
    BackgroundType.NONE: "plain",
    BackgroundType.LINED: "lined",
    BackgroundType.RULED: "ruled",
    BackgroundType.GRAPH: "graph",
}

_TOOL_NAMES = {
    StrokeTool.PEN: "pen",
    StrokeTool.ERASER: "eraser",
    StrokeTool.HIGHLIGHTER: "highlighter",
}


def color_str(rgb: int) -> str:
    """Return *rgb* (``0xRRGGBB``) as ``#rrggbbff``.

    The alpha byte is always ``ff``; bits above the low 24 are ignored.

    Examples:
        >>> color_str(0xff0000)
        '#ff0000ff'
        >>> color_str(0)
        '#000000ff'
    """
    return "#%08x" % (((rgb & 0xffffff) << 8) | 0xff)


def solid_background_style(background_type: Any) -> str:
    """Map a solid background type to its ``style`` token (default ``plain``)."""
    return _SOLID_STYLES.get(background_type, "plain")


def tool_str(tool: Any) -> str:
    """Return the ``tool`` token for *tool*; unknown tools are written as pens."""
    try:
        return _TOOL_NAMES[tool]
    except (KeyError, TypeError):
        logger.warning("Unknown stroke tool type: %r", tool)
        return "pen"


def format_number(value: float, precision: int = 2) -> str:
    """Render *value* with *precision* decimals, dropping trailing zeros.

    Examples:
        >>> format_number(1.5)
        '1.5'
        >>> format_number(10.0)
        '10'
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def resolve_pdf_filename(path: str) -> str:
    """Strip the local-file scheme from *path*.

    Other locations are returned unchanged; copying remote PDFs next to the
    saved document is not supported.
    """
    if path.startswith(LOCAL_FILE_PREFIX):
        return path[len(LOCAL_FILE_PREFIX):]
    return path
