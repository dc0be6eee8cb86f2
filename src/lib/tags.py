"""
Tag implementations for the markup decoder

Each tag maps to a pair of pure transitions (DecoderState) -> (DecoderState,
tokens). Uses TagSpec for metadata and dispatch.

Style tags follow the restore rule: closing a style returns to code colour
if <code> is still open, otherwise to a full reset, and then re-applies every
style that is still open in the fixed order bold, italic, underline.
"""

from typing import Dict, List, Optional

from ..models.markup import (
    DecoderState,
    DecodedToken,
    FLAG_MARKERS,
    ListKind,
    REAPPLY_ORDER,
    StyleFlag,
    StyleMarker,
    Transition,
)
from ..models.tags import TagSpec, TagHandler


BULLET: str = "•"
INDENT: str = "  "


def markers_reapply(state: DecoderState) -> List[DecodedToken]:
    """Markers for every still-active bold/italic/underline flag, in fixed order"""
    return [FLAG_MARKERS[flag] for flag in REAPPLY_ORDER if state.flag_get(flag)]


def style_open(state: DecoderState, flag: StyleFlag) -> Transition:
    """
    Enter a style.

    Emits the style's marker and sets its flag. Entering code also re-emits
    the active bold/italic/underline markers after the code colour.

    Args:
        state: Current decoder state
        flag: Style being entered

    Returns:
        (next state, tokens to emit)
    """
    tokens: List[DecodedToken] = [FLAG_MARKERS[flag]]
    if flag is StyleFlag.CODE:
        tokens.extend(markers_reapply(state))
    return state.flag_set(flag, True), tokens


def style_close(state: DecoderState, flag: StyleFlag) -> Transition:
    """
    Leave a style, restoring the parent style context.

    The flag is cleared first. Then CODE is emitted if code is still active,
    RESET otherwise, followed by the remaining bold/italic/underline
    markers. Closing code itself therefore always emits RESET.

    Closing a style that was never opened is harmless: it emits the restore
    markers for the current state.

    Args:
        state: Current decoder state
        flag: Style being left

    Returns:
        (next state, tokens to emit)

    Example:
        >>> state = DecoderState(bold=True, code=True)
        >>> style_close(state, StyleFlag.BOLD)[1]
        [<StyleMarker.CODE: '\\x00c'>]
    """
    state = state.flag_set(flag, False)
    tokens: List[DecodedToken] = [StyleMarker.CODE if state.code else StyleMarker.RESET]
    tokens.extend(markers_reapply(state))
    return state, tokens


def text_emit(text: str) -> TagHandler:
    """Handler that emits fixed text and leaves the state alone"""
    def handler(state: DecoderState) -> Transition:
        return state, [text]
    return handler


def text_before(text: str, handler: TagHandler) -> TagHandler:
    """Handler that emits fixed text, then runs another handler"""
    def composed(state: DecoderState) -> Transition:
        state, tokens = handler(state)
        return state, [text] + tokens
    return composed


class TagRegistry:
    """
    Registry of tag specifications and handlers

    Maps lower-cased tag names to TagSpec objects. Tags without a spec are
    dropped by the decoder with no effect.
    """

    def __init__(self) -> None:
        """Initialize the tag registry and register all built-in tags"""
        self.specs: Dict[str, TagSpec] = {}
        self.styleTags_register()
        self.listTags_register()
        self.layoutTags_register()

    def register(self, spec: TagSpec) -> None:
        """Register a tag specification"""
        self.specs[spec.name] = spec
        for alias in spec.aliases:
            self.specs[alias] = spec

    def spec_get(self, name: str) -> Optional[TagSpec]:
        """Get full tag specification by name"""
        return self.specs.get(name)

    def get(self, name: str, closing: bool) -> Optional[TagHandler]:
        """
        Get the handler for an opening or closing tag

        Args:
            name: Lower-cased tag name
            closing: True for </name>

        Returns:
            Handler function or None if the tag has no effect
        """
        spec = self.spec_get(name)
        if spec is None:
            return None
        return spec.handler_get(closing)

    def styleTags_register(self) -> None:
        """Register bold/italic/underline/code and the tags styled like them"""

        def opener(flag: StyleFlag) -> TagHandler:
            return lambda state: style_open(state, flag)

        def closer(flag: StyleFlag) -> TagHandler:
            return lambda state: style_close(state, flag)

        self.register(TagSpec(
            name="b",
            opening=opener(StyleFlag.BOLD),
            closing=closer(StyleFlag.BOLD),
        ))

        self.register(TagSpec(
            name="th",
            opening=opener(StyleFlag.BOLD),
            closing=text_before(" ", closer(StyleFlag.BOLD)),
        ))

        self.register(TagSpec(
            name="i",
            opening=opener(StyleFlag.ITALIC),
            closing=closer(StyleFlag.ITALIC),
        ))

        self.register(TagSpec(
            name="u",
            opening=opener(StyleFlag.UNDERLINE),
            closing=closer(StyleFlag.UNDERLINE),
        ))

        self.register(TagSpec(
            name="dt",
            opening=opener(StyleFlag.UNDERLINE),
            closing=text_before("\n", closer(StyleFlag.UNDERLINE)),
        ))

        self.register(TagSpec(
            name="code",
            opening=opener(StyleFlag.CODE),
            closing=closer(StyleFlag.CODE),
        ))

    def listTags_register(self) -> None:
        """Register <ul>, <ol> and <li>"""

        def item_open(state: DecoderState) -> Transition:
            if state.list_kind is ListKind.ORDERED:
                return state.list_advance(), [f"{INDENT}{state.list_counter}. "]
            return state, [INDENT + BULLET]

        self.register(TagSpec(
            name="ul",
            opening=lambda state: (state.list_enter(ListKind.UNORDERED), []),
            closing=lambda state: (state.list_exit(), []),
        ))

        self.register(TagSpec(
            name="ol",
            opening=lambda state: (state.list_enter(ListKind.ORDERED), []),
            closing=lambda state: (state.list_exit(), []),
        ))

        self.register(TagSpec(
            name="li",
            opening=item_open,
            closing=text_emit("\n"),
        ))

    def layoutTags_register(self) -> None:
        """Register line and paragraph breaks"""

        self.register(TagSpec(
            name="dd",
            opening=text_emit(INDENT),
            closing=text_emit("\n"),
        ))

        self.register(TagSpec(
            name="br",
            opening=text_emit("\n"),
            closing=text_emit("\n"),
        ))

        self.register(TagSpec(
            name="p",
            closing=text_emit("\n"),
        ))
