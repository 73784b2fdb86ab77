import logging
import re

import pytest

from xoj_writer.core.encoders import (
    color_str,
    format_number,
    resolve_pdf_filename,
    solid_background_style,
    tool_str,
)
from xoj_writer.core.models import BackgroundType, StrokeTool

COLOR_RE = re.compile(r"^#[0-9a-f]{6}ff$")


class TestColorStr:
    """Test cases for color_str."""

    def test_known_values(self):
        assert color_str(0x000000) == "#000000ff"
        assert color_str(0xff0000) == "#ff0000ff"
        assert color_str(0x00ff00) == "#00ff00ff"
        assert color_str(0x0000ff) == "#0000ffff"
        assert color_str(0xffffff) == "#ffffffff"
        assert color_str(0x1) == "#000001ff"

    def test_fixed_width_lowercase_opaque(self):
        """Every 24-bit value encodes to 8 lower-case hex digits ending in ff."""
        for rgb in list(range(0, 0x1000000, 0x10101)) + [0xabcdef, 0x123456, 0xfedcba]:
            encoded = color_str(rgb)
            assert COLOR_RE.match(encoded), encoded
            assert int(encoded[1:7], 16) == rgb

    def test_injective_on_sample(self):
        samples = range(0, 0x1000000, 0x3f1)
        encoded = {color_str(rgb) for rgb in samples}
        assert len(encoded) == len(samples)

    def test_high_bits_ignored(self):
        assert color_str(0x7fff0000) == "#ff0000ff"


class TestSolidBackgroundStyle:
    """Test cases for solid_background_style."""

    @pytest.mark.parametrize("bg_type, token", [
        (BackgroundType.NONE, "plain"),
        (BackgroundType.LINED, "lined"),
        (BackgroundType.RULED, "ruled"),
        (BackgroundType.GRAPH, "graph"),
    ])
    def test_solid_types(self, bg_type, token):
        assert solid_background_style(bg_type) == token

    def test_other_types_default_to_plain(self):
        assert solid_background_style(BackgroundType.PDF) == "plain"
        assert solid_background_style(BackgroundType.IMAGE) == "plain"
        assert solid_background_style("dotted") == "plain"


class TestToolStr:
    """Test cases for tool_str."""

    def test_known_tools(self):
        assert tool_str(StrokeTool.PEN) == "pen"
        assert tool_str(StrokeTool.ERASER) == "eraser"
        assert tool_str(StrokeTool.HIGHLIGHTER) == "highlighter"

    def test_unknown_tool_falls_back_to_pen_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="xoj_writer.core.encoders"):
            assert tool_str(42) == "pen"
        assert "Unknown stroke tool type" in caplog.text

    def test_unhashable_tool_falls_back_to_pen(self):
        assert tool_str(["pen"]) == "pen"


class TestFormatNumber:
    """Test cases for format_number."""

    def test_trailing_zeros_removed(self):
        assert format_number(1.5) == "1.5"
        assert format_number(10.0) == "10"
        assert format_number(0.0) == "0"
        assert format_number(841.89) == "841.89"

    def test_precision_rounds(self):
        assert format_number(1.239) == "1.24"
        assert format_number(1.23456, 4) == "1.2346"
        assert format_number(2.0, 0) == "2"

    def test_negative_values(self):
        assert format_number(-3.25) == "-3.25"
        assert format_number(-0.001) == "0"


class TestResolvePdfFilename:
    """Test cases for resolve_pdf_filename."""

    def test_local_file_prefix_stripped(self):
        assert resolve_pdf_filename("file:///home/u/doc.pdf") == "/home/u/doc.pdf"

    def test_other_paths_unchanged(self):
        assert resolve_pdf_filename("/home/u/doc.pdf") == "/home/u/doc.pdf"
        assert resolve_pdf_filename("http://example.com/doc.pdf") == "http://example.com/doc.pdf"
        assert resolve_pdf_filename("") == ""
