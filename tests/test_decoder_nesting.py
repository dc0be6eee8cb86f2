"""
Nesting decoder tests - verify style restoration

Closing a style must return to the innermost still-open context: code colour
if <code> is still open, a reset otherwise, followed by every other style
that is still open in the order bold, italic, underline.
"""

import pytest

from wikiterm.lib.decoder import MarkupDecoder, decode, tokens_split
from wikiterm.lib.tags import style_open, style_close, TagRegistry
from wikiterm.models.markup import DecoderState, ListKind, StyleFlag, StyleMarker
from wikiterm.models.tags import TagSpec


B = StyleMarker.BOLD.value
I = StyleMarker.ITALIC.value
U = StyleMarker.UNDERLINE.value
C = StyleMarker.CODE.value
R = StyleMarker.RESET.value


class TestCodeNesting:
    """Test styles combined with <code>"""

    def test_bold_inside_code(self):
        """Leaving bold inside code returns to the code colour, not a reset"""
        decoded = decode("<code><b>X</b></code>")

        assert decoded == f"{C}{B}X{C}{R}"
        assert tokens_split(decoded) == [
            StyleMarker.CODE,
            StyleMarker.BOLD,
            "X",
            StyleMarker.CODE,
            StyleMarker.RESET,
        ]

    def test_code_inside_bold(self):
        """Entering code re-applies bold; leaving code resets then re-applies bold"""
        assert decode("<b><code>x</code></b>") == f"{B}{C}{B}x{R}{B}{R}"

    def test_code_inside_all_styles(self):
        """Code re-emits bold, italic, underline in fixed order"""
        decoded = decode("<u><i><b><code>x</code></b></i></u>")
        assert decoded.startswith(f"{U}{I}{B}{C}{B}{I}{U}x{R}{B}{I}{U}")

    def test_italic_underline_inside_code(self):
        """Each close inside code goes back to code colour"""
        decoded = decode("<code><i><u>x</u></i></code>")
        assert decoded == f"{C}{I}{U}x{C}{I}{C}{R}"


class TestStyleNesting:
    """Test styles combined without code"""

    def test_italic_inside_bold(self):
        assert decode("<b><i>x</i>y</b>") == f"{B}{I}x{R}{B}y{R}"

    def test_bold_inside_italic(self):
        assert decode("<i><b>x</b></i>") == f"{I}{B}x{R}{I}{R}"

    def test_three_levels(self):
        """Closing underline re-applies bold then italic"""
        decoded = decode("<b><i><u>x</u></i></b>")
        assert decoded == f"{B}{I}{U}x{R}{B}{I}{R}{B}{R}"

    def test_interleaved_close(self):
        """Misnested tags still restore from the current flags"""
        assert decode("<b>a<i>b</b>c</i>") == f"{B}a{I}b{R}{I}c{R}"


class TestStrayCloses:
    """Closing tags that were never opened must not fail"""

    def test_stray_bold_close(self):
        assert decode("x</b>y") == f"x{R}y"

    def test_stray_code_close(self):
        assert decode("</code>") == R

    def test_stray_close_inside_code(self):
        """A stray </i> inside code restores the code colour"""
        assert decode("<code>a</i>b</code>") == f"{C}a{C}b{R}"

    def test_stray_list_close(self):
        assert decode("</ul></ol>x") == "x"


class TestTransitions:
    """Test the pure open/close transitions in isolation"""

    def test_close_bold_with_code_active(self):
        state = DecoderState(bold=True, code=True)
        new_state, tokens = style_close(state, StyleFlag.BOLD)

        assert tokens == [StyleMarker.CODE]
        assert new_state.bold is False
        assert new_state.code is True

    def test_close_italic_reapplies_others(self):
        state = DecoderState(bold=True, italic=True, underline=True)
        new_state, tokens = style_close(state, StyleFlag.ITALIC)

        assert tokens == [StyleMarker.RESET, StyleMarker.BOLD, StyleMarker.UNDERLINE]
        assert new_state == DecoderState(bold=True, underline=True)

    def test_close_code(self):
        state = DecoderState(italic=True, code=True)
        new_state, tokens = style_close(state, StyleFlag.CODE)

        assert tokens == [StyleMarker.RESET, StyleMarker.ITALIC]
        assert new_state == DecoderState(italic=True)

    def test_open_code_reapplies(self):
        state = DecoderState(bold=True, underline=True)
        new_state, tokens = style_open(state, StyleFlag.CODE)

        assert tokens == [StyleMarker.CODE, StyleMarker.BOLD, StyleMarker.UNDERLINE]
        assert new_state.code is True

    def test_open_bold_emits_only_bold(self):
        state = DecoderState(italic=True)
        new_state, tokens = style_open(state, StyleFlag.BOLD)

        assert tokens == [StyleMarker.BOLD]
        assert new_state == DecoderState(bold=True, italic=True)

    def test_input_state_unchanged(self):
        """Transitions return a new state"""
        state = DecoderState(bold=True)
        style_close(state, StyleFlag.BOLD)
        assert state.bold is True

    def test_list_transitions(self):
        state = DecoderState().list_enter(ListKind.ORDERED)
        assert state.list_counter == 1
        assert state.list_advance().list_counter == 2
        assert state.list_exit().list_kind is ListKind.NONE


class TestRegistry:
    """Test tag registry lookup"""

    def test_unknown_tag_has_no_handler(self):
        registry = TagRegistry()
        assert registry.get("span", closing=False) is None
        assert registry.spec_get("span") is None

    def test_paragraph_has_no_opening_effect(self):
        registry = TagRegistry()
        assert registry.get("p", closing=False) is None
        assert registry.get("p", closing=True) is not None

    def test_builtin_tags(self):
        registry = TagRegistry()
        assert set(registry.specs) == {
            "b", "th", "i", "u", "dt", "code", "ul", "ol", "li", "dd", "br", "p",
        }

    def test_custom_alias(self):
        """Extra tags can be registered, with aliases sharing handlers"""
        registry = TagRegistry()
        registry.register(TagSpec(
            name="strong",
            opening=lambda state: style_open(state, StyleFlag.BOLD),
            closing=lambda state: style_close(state, StyleFlag.BOLD),
            aliases=["em"],
        ))

        decoded = MarkupDecoder(registry=registry).decode("<strong>a</strong><em>b</em>")
        assert decoded == f"{B}a{R}{B}b{R}"
