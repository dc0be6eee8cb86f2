"""
Wiki API data models

Pydantic models for the JSON envelopes returned by the MediaWiki action API,
plus the table-of-contents entry and section query types used by the
retriever.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TOCEntry(BaseModel):
    """
    One section heading of a page's table of contents

    Decoded from an entry of ``parse.sections`` in an ``action=parse``
    response. Field names follow the API keys through aliases.

    Attributes:
        level: Nesting level, 1 for top-level headings
        index: Section index used to fetch the section's HTML ("0" is the lead)
        anchor: HTML anchor of the heading (e.g., "Obtaining")
        number: Dotted display number (e.g., "2.1")
        title: Heading text, may contain inline markup

    Example:
        >>> TOCEntry.model_validate(
        ...     {"toclevel": 1, "index": "1", "line": "History",
        ...      "number": "1", "anchor": "History"})
        TOCEntry(level=1, index='1', anchor='History', number='1', title='History')
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    level: int = Field(alias="toclevel", ge=1)
    index: str
    anchor: str
    number: str
    title: str = Field(alias="line", default="")


class SummaryPage(BaseModel):
    """Page object of an ``action=query&prop=extracts`` response"""
    model_config = ConfigDict(extra="ignore")

    pageid: Optional[int] = None
    title: Optional[str] = None
    extract: Optional[str] = None
    missing: Optional[Any] = None


class SummaryQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pages: Dict[str, SummaryPage] = Field(default_factory=dict)


class SummaryQueryResult(BaseModel):
    """Envelope of a summary request"""
    model_config = ConfigDict(extra="ignore")

    batchcomplete: Optional[Any] = None
    query: Optional[SummaryQuery] = None

    def extract_get(self) -> Optional[str]:
        """
        Get the extract HTML of the first page.

        Returns:
            Extract HTML, or None if there is no page, the page is missing,
            or it has no extract
        """
        if self.query is None or not self.query.pages:
            return None
        page = next(iter(self.query.pages.values()))
        if page.missing is not None or page.extract is None:
            return None
        return page.extract


class ParseSections(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sections: List[TOCEntry] = Field(default_factory=list)


class ParseTOCResult(BaseModel):
    """Envelope of an ``action=parse&prop=sections`` request"""
    model_config = ConfigDict(extra="ignore")

    error: Optional[Any] = None
    parse: Optional[ParseSections] = None

    def sections_get(self) -> Optional[List[TOCEntry]]:
        """Get the TOC entries, or None on error or an empty TOC"""
        if self.error is not None or self.parse is None or not self.parse.sections:
            return None
        return self.parse.sections


class ParseText(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    section: Optional[str] = Field(alias="*", default=None)


class ParseSection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    text: Optional[ParseText] = None


class ParseSectionResult(BaseModel):
    """Envelope of an ``action=parse&prop=text`` request"""
    model_config = ConfigDict(extra="ignore")

    error: Optional[Any] = None
    parse: Optional[ParseSection] = None

    def html_get(self) -> Optional[str]:
        """Get the section HTML, or None on error or missing text"""
        if self.error is not None or self.parse is None or self.parse.text is None:
            return None
        return self.parse.text.section


@dataclass(frozen=True)
class Summary:
    """Request for the lead summary of a page"""


@dataclass(frozen=True)
class TOC:
    """Request for the table of contents of a page"""


@dataclass(frozen=True)
class BySectionIdentifier:
    """
    Request for one named section

    Attributes:
        identifier: Section anchor (e.g., "Usage") or number (e.g., "2.1")
    """
    identifier: str


SectionQuery = Union[Summary, TOC, BySectionIdentifier]


def sectionQuery_parse(section: str) -> SectionQuery:
    """
    Interpret a command-line section argument.

    "summary" and "toc" are keywords (case-insensitive); anything else names
    a section by anchor or number.

    Args:
        section: Raw argument

    Returns:
        The matching SectionQuery

    Example:
        >>> sectionQuery_parse("TOC")
        TOC()
        >>> sectionQuery_parse("2.1")
        BySectionIdentifier(identifier='2.1')
    """
    lowered = section.lower()
    if lowered == "summary":
        return Summary()
    if lowered == "toc":
        return TOC()
    return BySectionIdentifier(section)
