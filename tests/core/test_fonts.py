from xoj_writer.core.fonts import format_font_description


class TestFormatFontDescription:
    """Test cases for format_font_description."""

    def test_plain_family(self):
        assert format_font_description("Sans") == "Sans"

    def test_style_flags(self):
        assert format_font_description("Sans", bold=True) == "Sans Bold"
        assert format_font_description("Sans", italic=True) == "Sans Italic"
        assert format_font_description("Sans", italic=True, bold=True) == "Sans Bold Italic"

    def test_positional_call_matches_handler_usage(self):
        # SaveHandler calls the formatter as (family, italic, bold)
        assert format_font_description("Serif", True, False) == "Serif Italic"

    def test_size_appended(self):
        assert format_font_description("DejaVu Serif", size=12) == "DejaVu Serif 12"
        assert format_font_description("Mono", bold=True, size=10.5) == "Mono Bold 10.5"

    def test_empty_family(self):
        assert format_font_description("") == "Normal"
        assert format_font_description("  ", bold=True) == "Bold"
