"""
Retrieval orchestration

Combines the fetcher, section resolver and markup decoder into the three
user-facing requests: summary, table of contents and named section.

Any failed fetch is terminal for the request and surfaces as
WikiContentUnavailable, without transport detail.
"""

from typing import List, Optional

from ..models.wiki import BySectionIdentifier, SectionQuery, Summary, TOC, TOCEntry
from .decoder import MarkupDecoder
from .fetcher import WikiFetcher
from .resolver import sectionIndex_resolve
from .log import LOG


class WikiContentUnavailable(Exception):
    """Raised when wiki content could not be retrieved"""
    pass


class WikiRetriever:
    """
    Retrieves and decodes wiki content for one page at a time

    Responsibilities:
    - Dispatch a SectionQuery to the right fetches
    - Resolve section identifiers through the page TOC
    - Decode fetched HTML
    """

    def __init__(
        self,
        fetcher: Optional[WikiFetcher] = None,
        decoder: Optional[MarkupDecoder] = None,
    ) -> None:
        """
        Initialize retriever

        Args:
            fetcher: WikiFetcher to use; one built from appsettings by default
            decoder: MarkupDecoder to use; the built-in tag set by default
        """
        self.fetcher = fetcher or WikiFetcher()
        self.decoder = decoder or MarkupDecoder()

    def content_retrieve(self, page: str, query: SectionQuery) -> str:
        """
        Retrieve decoded summary or section content

        Args:
            page: Page title
            query: Summary() or BySectionIdentifier(...)

        Returns:
            Decoded text with inline style markers

        Raises:
            WikiContentUnavailable: If any fetch failed
            ValueError: For a TOC query (use toc_retrieve)
        """
        if isinstance(query, Summary):
            return self.summary_retrieve(page)
        if isinstance(query, BySectionIdentifier):
            return self.section_retrieve(page, query.identifier)
        if isinstance(query, TOC):
            raise ValueError("TOC queries are served by toc_retrieve()")
        raise ValueError(f"Unknown section query: {query!r}")

    def summary_retrieve(self, page: str) -> str:
        """Retrieve and decode the lead summary of a page"""
        LOG(f"Fetching summary of '{page}'", level=2)
        html = self.fetcher.summary_fetch(page)
        if not html:
            raise WikiContentUnavailable(page)
        return self.decoder.decode(html)

    def toc_retrieve(self, page: str) -> List[TOCEntry]:
        """
        Retrieve the table of contents of a page

        Raises:
            WikiContentUnavailable: If the TOC could not be fetched or is empty
        """
        LOG(f"Fetching TOC of '{page}'", level=2)
        toc = self.fetcher.toc_fetch(page)
        if not toc:
            raise WikiContentUnavailable(page)
        return toc

    def sectionIndex_get(self, page: str, identifier: str) -> str:
        """
        Resolve a section anchor or number to its index via the page TOC

        Returns:
            Section index ("0" when the identifier matches nothing)

        Raises:
            WikiContentUnavailable: If the TOC could not be fetched
        """
        return sectionIndex_resolve(self.toc_retrieve(page), identifier)

    def section_retrieve(self, page: str, identifier: str) -> str:
        """
        Retrieve and decode one named section

        Args:
            page: Page title
            identifier: Section anchor or number

        Raises:
            WikiContentUnavailable: If the TOC or the section could not be fetched
        """
        index = self.sectionIndex_get(page, identifier)
        LOG(f"Fetching section {index} of '{page}'", level=2)
        html = self.fetcher.section_fetch(page, index)
        if not html:
            raise WikiContentUnavailable(page)
        return self.decoder.decode(html)
