"""
Markup decoder for wiki HTML

Transforms the HTML produced by the wiki renderer into flat console text
interleaved with style markers.

The decoder operates in three phases:
1. Sprites: inventory sprite spans become "[Title] " before scanning
2. Tags: a single pass over text runs and tags, driving a DecoderState
   through the TagRegistry transitions
3. Normalization: entity unescaping and whitespace clean-up on the
   assembled output

Key features:
- Stateful style restoration (bold inside code returns to code colour)
- Bulleted and numbered list items
- Unknown tags dropped, never an error

Example:
    >>> decode("<b>Diamond</b> is a rare mineral.")
    '\\x00bDiamond\\x00r is a rare mineral.'
"""

import re
from typing import Dict, List, Optional

from ..models.markup import DecoderState, DecodedToken, MARKER_PREFIX, StyleMarker, TagToken
from .scanner import tokens_scan
from .tags import TagRegistry
from .log import LOG


SPRITE_PATTERN: re.Pattern[str] = re.compile(
    r'<span class="sprite inv-sprite" title="(.*?)".*?</span>'
)

# A non-breaking space before "or"/"+" at a line end joins wrapped alternatives
ALTERNATIVE_PATTERN: re.Pattern[str] = re.compile(r"&#160;(or|\+)\n")

ENTITIES: Dict[str, str] = {
    "&quot;": '"',
    "&#39;": "'",
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&#32;": " ",
    "&#160;": " ",
}

ENTITY_PATTERN: re.Pattern[str] = re.compile("|".join(re.escape(entity) for entity in ENTITIES))

MARKER_CODES: str = "".join(marker.value[len(MARKER_PREFIX):] for marker in StyleMarker)

MARKER_PATTERN: re.Pattern[str] = re.compile(f"({MARKER_PREFIX}[{MARKER_CODES}])")

# A line holding nothing but one marker is folded into the next line break
MARKER_LINE_PATTERN: re.Pattern[str] = re.compile(
    rf"\n\s*?({MARKER_PREFIX}[{MARKER_CODES}])(?=\n)"
)


class MarkupDecoder:
    """
    Decoder for wiki HTML to marker-annotated console text

    Handles:
    - <b>, <i>, <u>, <code> and the tags styled like them (<th>, <dt>)
    - <ul>/<ol>/<li> lists (not nested)
    - <br>, <p>, <dd> line layout
    - A fixed set of HTML entities

    The decoder itself is stateless; every decode() call starts from a fresh
    DecoderState, so one instance can be shared between threads.
    """

    def __init__(self, registry: Optional[TagRegistry] = None):
        """
        Initialize decoder

        Args:
            registry: Optional TagRegistry; the built-in tag set by default
        """
        self.registry = registry if registry is not None else TagRegistry()

    def decode(self, html: str) -> str:
        """
        Decode HTML into text with inline style markers

        Args:
            html: Raw HTML from the wiki API

        Returns:
            Decoded text; never fails, unknown markup is dropped or kept
            as literal text
        """
        html = self.sprites_replace(html)
        tokens = self.tokens_decode(html)
        raw = "".join(
            token.value if isinstance(token, StyleMarker) else token for token in tokens
        )
        return self.text_normalize(raw)

    def sprites_replace(self, html: str) -> str:
        """
        Replace inventory sprite spans with their bracketed title

        Example:
            Input: '<span class="sprite inv-sprite" title="Stick"></span>x'
            Output: '[Stick] x'
        """
        return SPRITE_PATTERN.sub(r"[\1] ", html)

    def tokens_decode(self, html: str) -> List[DecodedToken]:
        """
        Run the tag pass, producing text runs and style markers

        Args:
            html: HTML with sprites already replaced

        Returns:
            Token stream in document order, before entity normalization
        """
        state = DecoderState()
        output: List[DecodedToken] = []
        tag_count = 0

        for token in tokens_scan(html):
            if not isinstance(token, TagToken):
                output.append(token)
                continue

            tag_count += 1
            handler = self.registry.get(token.name, token.closing)
            if handler is None:
                continue

            state, emitted = handler(state)
            output.extend(emitted)

        LOG(f"Decoded {tag_count} tags into {len(output)} tokens", level=3)
        return output

    def text_normalize(self, raw: str) -> str:
        """
        Apply the post-pass normalizations in order

        1. Wrapped alternatives ("&#160;or\\n", "&#160;+\\n") are joined
        2. Entities are unescaped in one pass (no double decoding)
        3. Marker-only lines are folded onto the next line break
        """
        text = ALTERNATIVE_PATTERN.sub(r" \1 ", raw)
        text = self.entities_unescape(text)
        return MARKER_LINE_PATTERN.sub(r"\1", text)

    def entities_unescape(self, text: str) -> str:
        """
        Unescape the supported HTML entities

        Example:
            Input: "&lt;b&gt; &amp;quot;"
            Output: '<b> &quot;'
        """
        return ENTITY_PATTERN.sub(lambda match: ENTITIES[match.group(0)], text)


def tokens_split(decoded: str) -> List[DecodedToken]:
    """
    Split decoded text back into text runs and style markers.

    Args:
        decoded: Output of decode()

    Returns:
        Non-empty text runs (str) and StyleMarker members, in order

    Example:
        >>> tokens_split("\\x00bDiamond\\x00r is")
        [<StyleMarker.BOLD: '\\x00b'>, 'Diamond', <StyleMarker.RESET: '\\x00r'>, ' is']
    """
    tokens: List[DecodedToken] = []
    for piece in MARKER_PATTERN.split(decoded):
        if not piece:
            continue
        if MARKER_PATTERN.fullmatch(piece):
            tokens.append(StyleMarker(piece))
        else:
            tokens.append(piece)
    return tokens


def markers_strip(decoded: str) -> str:
    """Remove every style marker, leaving plain text"""
    return MARKER_PATTERN.sub("", decoded)


_decoder = MarkupDecoder()


def decode(html: str) -> str:
    """
    Decode wiki HTML with the built-in tag set.

    Args:
        html: Raw HTML from the wiki API

    Returns:
        Decoded text with inline style markers
    """
    return _decoder.decode(html)
