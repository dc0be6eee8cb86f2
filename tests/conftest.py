"""
Shared fixtures

StubFetcher stands in for WikiFetcher so retrieval can be tested without
network access.
"""

from typing import Dict, List, Optional, Tuple

import pytest

from wikiterm.models.wiki import TOCEntry


class StubFetcher:
    """WikiFetcher replacement serving canned HTML and TOCs"""

    def __init__(
        self,
        summaries: Optional[Dict[str, str]] = None,
        tocs: Optional[Dict[str, List[TOCEntry]]] = None,
        sections: Optional[Dict[Tuple[str, str], str]] = None,
    ) -> None:
        self.summaries = summaries or {}
        self.tocs = tocs or {}
        self.sections = sections or {}
        self.calls: List[Tuple[str, ...]] = []

    def summary_fetch(self, page: str) -> Optional[str]:
        self.calls.append(("summary", page))
        return self.summaries.get(page)

    def toc_fetch(self, page: str) -> Optional[List[TOCEntry]]:
        self.calls.append(("toc", page))
        return self.tocs.get(page)

    def section_fetch(self, page: str, index: str) -> Optional[str]:
        self.calls.append(("section", page, index))
        return self.sections.get((page, index))


@pytest.fixture
def diamond_toc() -> List[TOCEntry]:
    """Two top-level sections and one subsection"""
    return [
        TOCEntry(level=1, index="1", anchor="Obtaining", number="1", title="Obtaining"),
        TOCEntry(level=2, index="2", anchor="Mining", number="1.1", title="Mining"),
        TOCEntry(level=1, index="3", anchor="Usage", number="2", title="<i>Usage</i>"),
    ]


@pytest.fixture
def diamond_fetcher(diamond_toc: List[TOCEntry]) -> StubFetcher:
    """Fetcher knowing a summary, a TOC and some sections of "Diamond" """
    return StubFetcher(
        summaries={"Diamond": "<b>Diamond</b> is a rare mineral."},
        tocs={"Diamond": diamond_toc},
        sections={
            ("Diamond", "0"): "<p>Lead section.</p>",
            ("Diamond", "1"): "<p>Found deep underground.</p>",
            ("Diamond", "2"): "<p>Requires an <b>iron pickaxe</b>.</p>",
            ("Diamond", "3"): "<ul><li>Tools</li><li>Armor</li></ul>",
        },
    )
