"""
wikiterm - Wiki articles as styled console text

Fetches summaries, tables of contents and sections from a MediaWiki API and
decodes their HTML into marker-annotated text for the terminal.
"""

__version__ = "1.0.0"

from .decoder import MarkupDecoder, decode, tokens_split, markers_strip
from .resolver import sectionIndex_resolve, LEAD_SECTION_INDEX
from .fetcher import WikiFetcher
from .retriever import WikiRetriever, WikiContentUnavailable
from .console import ConsoleRenderer, lines_split, toc_format, tocAffordance_make
from .theme import Theme, ThemeError, themes_listAvailable
from .tags import TagRegistry
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "MarkupDecoder",
    "decode",
    "tokens_split",
    "markers_strip",
    "sectionIndex_resolve",
    "LEAD_SECTION_INDEX",
    "WikiFetcher",
    "WikiRetriever",
    "WikiContentUnavailable",
    "ConsoleRenderer",
    "lines_split",
    "toc_format",
    "tocAffordance_make",
    "Theme",
    "ThemeError",
    "themes_listAvailable",
    "TagRegistry",
    "LOG",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
