"""
Section index resolution

Maps a user-supplied section identifier (anchor or dotted number) to the
section index the wiki API expects.
"""

from typing import Sequence

from ..models.wiki import TOCEntry
from .log import LOG


# Index of the lead section, also used when nothing matches
LEAD_SECTION_INDEX: str = "0"


def sectionIndex_resolve(toc: Sequence[TOCEntry], identifier: str) -> str:
    """
    Find the index of the section named by an anchor or number.

    Entries are scanned in document order and the first whose anchor or
    number equals the identifier exactly (case-sensitive) wins.

    An unmatched identifier resolves to the lead section rather than an
    error, so it cannot be told apart from an explicit request for
    section "0".

    Args:
        toc: Table of contents in document order
        identifier: Section anchor (e.g., "Usage") or number (e.g., "2.1")

    Returns:
        Section index, or LEAD_SECTION_INDEX if no entry matches

    Example:
        >>> toc = [TOCEntry(level=1, index="1", anchor="History", number="1", title="History")]
        >>> sectionIndex_resolve(toc, "History")
        '1'
        >>> sectionIndex_resolve(toc, "nope")
        '0'
    """
    for entry in toc:
        if entry.anchor == identifier or entry.number == identifier:
            LOG(f"Section '{identifier}' resolved to index {entry.index}", level=2)
            return entry.index

    LOG(f"Section '{identifier}' not in TOC, using lead section", level=2)
    return LEAD_SECTION_INDEX
