"""
Wiki API fetcher

Issues GET requests against the MediaWiki action API and decodes the JSON
envelopes into pydantic result models.

Every failure (transport error, HTTP error status, invalid JSON, unexpected
envelope shape, missing page) is logged and reported as None. Callers decide
what absence means.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..config import appsettings, AppSettings
from ..models.wiki import (
    ParseSectionResult,
    ParseTOCResult,
    SummaryQueryResult,
    TOCEntry,
)
from .log import LOG, WARN


M = TypeVar("M", bound=BaseModel)


class WikiFetcher:
    """
    Client for the three API requests wikiterm needs

    - summary: lead section extract (action=query&prop=extracts&exintro)
    - toc: section list (action=parse&prop=sections)
    - section: one section's HTML (action=parse&prop=text&section=N)

    Page titles are passed as query parameters, so requests takes care of
    percent-encoding.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize fetcher

        Args:
            settings: Application settings (API location, timeout, User-Agent);
                      the global appsettings by default
            session: Optional requests.Session to reuse connections or to
                     substitute in tests
        """
        self.settings = settings or appsettings
        self.session = session or requests.Session()
        self.api_url = self.settings.apiUrl_make()
        self.headers = {"User-Agent": self.settings.user_agent}

    def json_get(self, params: Dict[str, Any], model: Type[M]) -> Optional[M]:
        """
        GET the API with params and validate the JSON body against a model

        Args:
            params: Query parameters (format=json is added)
            model: Pydantic model of the expected envelope

        Returns:
            Validated model, or None on any failure
        """
        try:
            response = self.session.get(
                self.api_url,
                params={**params, "format": "json"},
                headers=self.headers,
                timeout=self.settings.request_timeout,
            )
            LOG(f"GET {response.url}", level=2)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            WARN(f"request to {self.api_url} failed: {e}")
            return None
        except ValueError as e:
            WARN(f"response from {self.api_url} is not JSON: {e}")
            return None

        try:
            return model.model_validate(data)
        except ValidationError as e:
            WARN(f"unexpected {model.__name__} payload: {e}")
            return None

    def summary_fetch(self, page: str) -> Optional[str]:
        """
        Fetch the lead summary HTML of a page

        Args:
            page: Page title

        Returns:
            Extract HTML, or None if the page is missing or the request failed
        """
        result = self.json_get(
            {"action": "query", "prop": "extracts", "exintro": "true", "titles": page},
            SummaryQueryResult,
        )
        if result is None:
            return None
        return result.extract_get()

    def toc_fetch(self, page: str) -> Optional[List[TOCEntry]]:
        """
        Fetch the table of contents of a page

        Args:
            page: Page title

        Returns:
            TOC entries in document order, or None on error or an empty TOC
        """
        result = self.json_get(
            {"action": "parse", "prop": "sections", "page": page},
            ParseTOCResult,
        )
        if result is None:
            return None
        return result.sections_get()

    def section_fetch(self, page: str, index: str) -> Optional[str]:
        """
        Fetch the HTML of one section

        Args:
            page: Page title
            index: Section index ("0" for the lead section)

        Returns:
            Section HTML, or None on error
        """
        result = self.json_get(
            {
                "action": "parse",
                "prop": "text",
                "page": page,
                "section": index,
                "disablelimitreport": "true",
                "disableeditsection": "true",
            },
            ParseSectionResult,
        )
        if result is None:
            return None
        return result.html_get()
