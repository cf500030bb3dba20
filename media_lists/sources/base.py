"""
Abstract base class for list sources and the shared pagination loop.

A source describes one site: how to prepare the start URL, how to find
the next page, and how to read entries off a page. `ListSource.extract`
drives every source through the same explicit state machine:

    FETCHING -> EXTRACTING -> HAS_NEXT -> FETCHING ...
                           \\-> TERMINAL

A page's entries are merged into the result before the next fetch, so an
error part-way through still carries everything gathered so far (see
`InvalidListPage.partial`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import ClassVar, Iterable

from bs4 import Tag

from ..core.types import Entry
from ..errors import InvalidListPage
from ..fetch.document import Page, PageFetcher
from ..logging_utils import log_event


class PageState(Enum):
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    HAS_NEXT = "has_next"
    TERMINAL = "terminal"


@dataclass
class PaginationCursor:
    """Mutable state of one pagination run.

    Attributes:
        url: URL of the page being (or about to be) fetched
        page: Most recently fetched page
        next_url: Next page URL; None or "" once the last page is reached
        pages: Number of pages fetched so far
        visited: URLs already fetched in this run
    """
    url: str
    page: Page | None = None
    next_url: str | None = None
    pages: int = 0
    visited: set[str] = field(default_factory=set)


class ListSource(ABC):
    """Base class for a site-specific list scraper.

    Subclasses implement `next_url` and `entries`; they may override
    `start_url` to rewrite the URL given by the user and `is_interstitial`
    to stop early on a block page.
    """

    name: ClassVar[str] = "base"

    def __init__(
        self,
        fetcher: PageFetcher,
        max_pages: int = 500,
        logger: logging.Logger | None = None,
    ):
        self.fetcher = fetcher
        self.max_pages = max_pages
        self.logger = logger or logging.getLogger("media_lists")

    def start_url(self, url: str) -> str:
        return url

    def is_interstitial(self, page: Page) -> bool:
        return False

    @abstractmethod
    def next_url(self, page: Page) -> str | None:
        """Return the next page URL, or None/"" when `page` is the last one."""
        raise NotImplementedError

    @abstractmethod
    def entries(self, page: Page) -> Iterable[Entry]:
        """Read the entries listed on `page`.

        Raises:
            InvalidListPage: When a listed item lacks a required element
        """
        raise NotImplementedError

    def extract(self, url: str) -> set[Entry]:
        """Follow the list from `url` to its last page and collect entries.

        Args:
            url: The list URL as given by the user

        Returns:
            Set of entries, unique by link

        Raises:
            InvalidListPage: If a page cannot be fetched or parsed. The
                entries gathered before the failure are on `exc.partial`.
        """
        results: set[Entry] = set()
        cursor = PaginationCursor(url=self.start_url(url))
        state = PageState.FETCHING

        try:
            while state is not PageState.TERMINAL:
                if state is PageState.FETCHING:
                    cursor.page = self.fetcher.fetch(cursor.url)
                    cursor.pages += 1
                    cursor.visited.add(cursor.url)
                    log_event(
                        self.logger,
                        "Page fetched",
                        level=logging.DEBUG,
                        event="page_fetched",
                        source=self.name,
                        url=cursor.url,
                        page=cursor.pages,
                    )
                    if self.is_interstitial(cursor.page):
                        log_event(
                            self.logger,
                            "Interstitial page detected, stopping early",
                            level=logging.WARNING,
                            event="captcha_detected",
                            source=self.name,
                            url=cursor.url,
                        )
                        state = PageState.TERMINAL
                        continue
                    cursor.next_url = self.next_url(cursor.page)
                    state = PageState.EXTRACTING

                elif state is PageState.EXTRACTING:
                    found = set(self.entries(cursor.page))
                    results |= found
                    log_event(
                        self.logger,
                        "Page extracted",
                        level=logging.DEBUG,
                        event="page_extracted",
                        source=self.name,
                        url=cursor.url,
                        count=len(found),
                        total=len(results),
                    )
                    state = PageState.HAS_NEXT if cursor.next_url else PageState.TERMINAL

                elif state is PageState.HAS_NEXT:
                    if cursor.next_url in cursor.visited:
                        log_event(
                            self.logger,
                            "Next page already visited, stopping",
                            level=logging.WARNING,
                            event="pagination_loop_detected",
                            source=self.name,
                            url=cursor.next_url,
                        )
                        state = PageState.TERMINAL
                    elif cursor.pages >= self.max_pages:
                        log_event(
                            self.logger,
                            "Page limit reached, stopping",
                            level=logging.WARNING,
                            event="page_limit_reached",
                            source=self.name,
                            max_pages=self.max_pages,
                        )
                        state = PageState.TERMINAL
                    else:
                        cursor.url = cursor.next_url
                        state = PageState.FETCHING
        except InvalidListPage as exc:
            exc.partial = results
            raise

        log_event(
            self.logger,
            "Pagination done",
            event="pagination_done",
            source=self.name,
            pages=cursor.pages,
            total=len(results),
        )
        return results

    def require(self, element: Tag | None, what: str, page: Page) -> Tag:
        """Return `element`, or fail the page when it is missing."""
        if element is None:
            raise InvalidListPage(f"{self.name}: missing {what} on {page.url}")
        return element

    def require_link(self, element: Tag, page: Page, attr: str = "href") -> str:
        """Return the absolute URL in `element[attr]`, or fail the page when it is blank."""
        link = page.abs_url(element, attr)
        if not link:
            raise InvalidListPage(f"{self.name}: listed item without {attr} on {page.url}")
        return link
