"""
Tag scanner for wiki HTML

Splits HTML into a lazy sequence of literal text runs and tag tokens.

Only the tag name and the closing slash are extracted; attributes are skipped.
Constructs without a tag name (comments, "<!DOCTYPE", a bare "<") are not
tags and stay in the literal text.

Example:
    >>> list(tokens_scan("a<B>b</b>"))
    ['a', TagToken(name='b', closing=False, raw='<B>'), 'b',
     TagToken(name='b', closing=True, raw='</b>')]
"""

import re
from typing import Iterator

from ..models.markup import ScanToken, TagToken


TAG_PATTERN: re.Pattern[str] = re.compile(r"<\s*(/)?\s*(\w+).*?>", re.DOTALL)


def tokens_scan(html: str) -> Iterator[ScanToken]:
    """
    Scan HTML into text runs and tags, in document order.

    Args:
        html: Raw HTML

    Yields:
        Non-empty literal text runs (str) and TagToken objects
    """
    position = 0
    for match in TAG_PATTERN.finditer(html):
        if match.start() > position:
            yield html[position:match.start()]
        yield TagToken(
            name=match.group(2).lower(),
            closing=match.group(1) is not None,
            raw=match.group(0),
        )
        position = match.end()

    if position < len(html):
        yield html[position:]
