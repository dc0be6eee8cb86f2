"""
Models package for wikiterm

Contains data structures and type definitions for the retrieval pipeline.
"""

from .state import ProgramState, pipeline
from .tags import TagSpec
from .markup import StyleMarker, StyleFlag, ListKind, DecoderState, TagToken
from .wiki import (
    TOCEntry,
    SectionQuery,
    Summary,
    TOC,
    BySectionIdentifier,
    sectionQuery_parse,
    SummaryQueryResult,
    ParseTOCResult,
    ParseSectionResult,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "TagSpec",
    "StyleMarker",
    "StyleFlag",
    "ListKind",
    "DecoderState",
    "TagToken",
    "TOCEntry",
    "SectionQuery",
    "Summary",
    "TOC",
    "BySectionIdentifier",
    "sectionQuery_parse",
    "SummaryQueryResult",
    "ParseTOCResult",
    "ParseSectionResult",
]
