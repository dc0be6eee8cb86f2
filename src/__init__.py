"""
wikiterm - Wiki articles as styled console text

Retrieves the summary, table of contents or a named section of a wiki
article and renders its HTML as styled plain text for the terminal.
"""

__version__ = "1.0.0"

from .lib import (
    MarkupDecoder,
    decode,
    sectionIndex_resolve,
    WikiRetriever,
    WikiContentUnavailable,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "MarkupDecoder",
    "decode",
    "sectionIndex_resolve",
    "WikiRetriever",
    "WikiContentUnavailable",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
