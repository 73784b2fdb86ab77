from __future__ import annotations

"""Font description formatting.

Xournal stores a text element's font as a Pango font description string
such as ``"Sans Bold Italic"``. The writer only supplies the family and the
style flags; this module turns them into the canonical token.
"""

from typing import Callable, Optional

from xoj_writer.core.encoders import format_number

__all__ = ["FontFormatter", "format_font_description"]

FontFormatter = Callable[[str, bool, bool], str]


def format_font_description(family: str, italic: bool = False, bold: bool = False,
                            size: Optional[float] = None) -> str:
    """Return a Pango-style font description.

    Examples:
        >>> format_font_description("Sans", italic=True, bold=True)
        'Sans Bold Italic'
        >>> format_font_description("DejaVu Serif", size=12)
        'DejaVu Serif 12'
    """
    parts = [family.strip()] if family and family.strip() else []
    if bold:
        parts.append("Bold")
    if italic:
        parts.append("Italic")
    if size is not None:
        parts.append(format_number(size))
    if not parts:
        # Pango's rendering of an empty description
        return "Normal"
    return " ".join(parts)
