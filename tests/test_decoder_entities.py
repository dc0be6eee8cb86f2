"""
Normalization tests - entities and whitespace clean-up

Tests the post-pass applied to the assembled output: joined alternatives,
entity unescaping without double decoding, and folding of marker-only lines.
"""

import pytest

from wikiterm.lib.decoder import MarkupDecoder, decode
from wikiterm.models.markup import StyleMarker


B = StyleMarker.BOLD.value
R = StyleMarker.RESET.value


class TestEntities:
    """Test the supported entity set"""

    def test_quotes(self):
        assert decode("&quot;hi&quot; &#39;x&#39;") == "\"hi\" 'x'"

    def test_angle_brackets_not_tags(self):
        """Escaped brackets become literal text after the tag pass"""
        assert decode("&lt;b&gt;bold&lt;/b&gt;") == "<b>bold</b>"

    def test_ampersand(self):
        assert decode("Salt &amp; Pepper") == "Salt & Pepper"

    def test_spaces(self):
        """&#32; and the non-breaking &#160; both become plain spaces"""
        assert decode("a&#32;b&#160;c") == "a b c"

    def test_no_double_decoding(self):
        """An escaped ampersand is unescaped once and never rescanned"""
        assert decode("&amp;quot;") == "&quot;"
        assert decode("&amp;lt;") == "&lt;"
        assert decode("&amp;#160;") == "&#160;"
        assert decode("&amp;amp;") == "&amp;"

    def test_unknown_entities_kept(self):
        assert decode("&copy; &nbsp;") == "&copy; &nbsp;"

    def test_entities_inside_styles(self):
        assert decode("<b>&lt;tag&gt;</b>") == f"{B}<tag>{R}"

    def test_unescape_directly(self):
        decoder = MarkupDecoder()
        assert decoder.entities_unescape("&lt;b&gt; &amp;quot;") == "<b> &quot;"


class TestAlternatives:
    """Test joining of wrapped alternatives"""

    def test_or_joined(self):
        assert decode("Stone&#160;or\nCobblestone") == "Stone or Cobblestone"

    def test_plus_joined(self):
        assert decode("Bow&#160;+\nArrow") == "Bow + Arrow"

    def test_alternative_after_line_break_tag(self):
        """The newline may come from a <br>"""
        assert decode("Stone&#160;or<br>Cobblestone") == "Stone or Cobblestone"

    def test_or_without_newline(self):
        """Without a line break only the entity is replaced"""
        assert decode("a&#160;or b") == "a or b"


class TestMarkerLines:
    """Test folding of lines that only hold a style marker"""

    def test_marker_only_line_folded(self):
        """The marker joins the previous line and the blank line disappears"""
        assert decode("Line\n  </b>\nNext") == f"Line{R}\nNext"

    def test_marker_followed_by_text_kept(self):
        assert decode("Line\n</b>Next") == f"Line\n{R}Next"

    def test_closing_paragraph_after_bold(self):
        """A reset between two line breaks does not create an empty line"""
        assert decode("<b>Title\n</b>\nBody") == f"{B}Title{R}\nBody"
