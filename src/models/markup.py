"""
Markup decoder data models

Style markers, decoder state and scanner tokens used by the markup decoder.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple, Union


class StyleMarker(Enum):
    """
    Inline formatting instruction emitted into decoded text

    Each marker is a two-character sequence: a null byte followed by a code
    letter. The null byte never appears in wiki HTML, so markers can be
    recovered unambiguously from the flat decoded string.
    """
    BOLD = "\x00b"
    ITALIC = "\x00i"
    UNDERLINE = "\x00u"
    CODE = "\x00c"
    RESET = "\x00r"


MARKER_PREFIX: str = "\x00"


class StyleFlag(Enum):
    """Independent style flags tracked while decoding"""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    CODE = "code"


# Order in which still-active flags are re-applied after a restore
REAPPLY_ORDER: Tuple[StyleFlag, ...] = (StyleFlag.BOLD, StyleFlag.ITALIC, StyleFlag.UNDERLINE)

FLAG_MARKERS = {
    StyleFlag.BOLD: StyleMarker.BOLD,
    StyleFlag.ITALIC: StyleMarker.ITALIC,
    StyleFlag.UNDERLINE: StyleMarker.UNDERLINE,
    StyleFlag.CODE: StyleMarker.CODE,
}


class ListKind(Enum):
    """Current list context; lists do not stack"""
    NONE = "none"
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(frozen=True)
class DecoderState:
    """
    Transient state of one decode call

    Created at the start of MarkupDecoder.decode() and replaced (never
    mutated) on every tag transition.

    Attributes:
        bold: Inside <b> or <th>
        italic: Inside <i>
        underline: Inside <u> or <dt>
        code: Inside <code>
        list_kind: Current list context
        list_counter: Next number of an ordered list (>= 1 when ordered)

    Example:
        >>> state = DecoderState().flag_set(StyleFlag.BOLD, True)
        >>> state.flag_get(StyleFlag.BOLD)
        True
    """
    bold: bool = False
    italic: bool = False
    underline: bool = False
    code: bool = False
    list_kind: ListKind = ListKind.NONE
    list_counter: int = 0

    def flag_get(self, flag: StyleFlag) -> bool:
        """Read a style flag"""
        return getattr(self, flag.value)

    def flag_set(self, flag: StyleFlag, value: bool) -> "DecoderState":
        """Return a copy with one style flag changed"""
        return replace(self, **{flag.value: value})

    def list_enter(self, kind: ListKind) -> "DecoderState":
        """Return a copy with a fresh list context (ordered lists count from 1)"""
        return replace(self, list_kind=kind, list_counter=1 if kind is ListKind.ORDERED else 0)

    def list_advance(self) -> "DecoderState":
        """Return a copy with the ordered-list counter moved to the next item"""
        return replace(self, list_counter=self.list_counter + 1)

    def list_exit(self) -> "DecoderState":
        """Return a copy with no list context"""
        return replace(self, list_kind=ListKind.NONE, list_counter=0)


@dataclass
class TagToken:
    """
    One tag recognised by the scanner

    Attributes:
        name: Lower-cased tag name (e.g., "b", "code", "li")
        closing: True for </tag>
        raw: Original tag text as it appeared in the source

    Example:
        For source "<B class='x'>":
        TagToken(name="b", closing=False, raw="<B class='x'>")
    """
    name: str
    closing: bool
    raw: str


# A scanner yields literal text runs and tags in document order
ScanToken = Union[str, TagToken]

# A decoded token stream holds literal text runs and markers
DecodedToken = Union[str, StyleMarker]

# Result of a tag transition: the next state plus what to emit
Transition = Tuple[DecoderState, List[DecodedToken]]
