"""
Console presentation of decoded wiki content

Splits decoded text into display lines, formats tables of contents and
renders style markers as terminal escape sequences through a Theme.
"""

import re
import sys
from typing import List, Optional, Sequence, TextIO

from ..models.markup import StyleMarker
from ..models.wiki import TOCEntry
from .decoder import MarkupDecoder, tokens_split
from .theme import Theme


BLANK_LINES_PATTERN: re.Pattern[str] = re.compile(r"\n{2,}")


def lines_split(decoded: str) -> List[str]:
    """
    Split decoded content into display lines.

    Leading and trailing line breaks are dropped (indentation of the first
    line is kept) and runs of blank lines collapse to a single blank line.

    Args:
        decoded: Output of the markup decoder

    Returns:
        Display lines, in order

    Example:
        >>> lines_split("\\nOne\\n\\n\\n\\nTwo\\nThree\\n")
        ['One', '', 'Two', 'Three']
    """
    content = BLANK_LINES_PATTERN.sub("\n\n", decoded.strip("\n"))
    return content.split("\n")


def toc_format(toc: Sequence[TOCEntry], decoder: Optional[MarkupDecoder] = None) -> List[str]:
    """
    Format a table of contents, one line per section.

    Each line is indented by one space per level below the top and shows
    the section number followed by its title. Titles may carry inline
    markup and are decoded.

    Example:
        level 1, number "1", title "History"      -> "1 History"
        level 2, number "1.1", title "<i>Java</i>" -> " 1.1 \\x00iJava\\x00r"
    """
    decoder = decoder or MarkupDecoder()
    return [
        " " * (entry.level - 1) + f"{entry.number} {decoder.decode(entry.title)}"
        for entry in toc
    ]


def tocAffordance_make(page: str) -> str:
    """Trailing line pointing at the full table of contents of a page"""
    return f'View full table of contents: wikiterm "{page}" toc'


class ConsoleRenderer:
    """
    Renders marker-annotated lines for a terminal

    Markers become the escape sequences chosen by the theme. A line left in
    a non-reset style gets a trailing reset if the theme asks for it.
    """

    def __init__(self, theme: Theme) -> None:
        self.theme = theme

    def line_render(self, line: str) -> str:
        """
        Replace style markers in one line with console escape sequences

        Args:
            line: One display line from lines_split()

        Returns:
            Printable line
        """
        rendered: List[str] = []
        styled = False
        for token in tokens_split(line):
            if isinstance(token, StyleMarker):
                rendered.append(self.theme.markerCode_get(token))
                styled = token is not StyleMarker.RESET
            else:
                rendered.append(token)

        if styled and self.theme.lineReset_get():
            rendered.append(self.theme.markerCode_get(StyleMarker.RESET))
        return "".join(rendered)

    def lines_write(self, lines: Sequence[str], stream: Optional[TextIO] = None) -> int:
        """
        Render and write lines, one per display line

        Args:
            lines: Display lines
            stream: Output stream (default: sys.stdout)

        Returns:
            Number of lines written
        """
        stream = stream or sys.stdout
        for line in lines:
            stream.write(self.line_render(line) + "\n")
        return len(lines)
