"""
Page fetching and markup access.

This module is the only place that talks HTTP or touches BeautifulSoup
directly. List sources receive a `Page` and use its small query surface:
- select_class / first_class: elements by CSS class (or exact class string)
- abs_url: an href-like attribute resolved against the page URL
- has_class: "disabled"-style marker checks
- text_of: whitespace-normalized element text
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
import httpx

from ..config import FetchConfig
from ..errors import InvalidListPage

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """A fetched (or locally parsed) HTML document.

    Attributes:
        url: Final URL of the document, used to resolve relative links
        soup: Parsed document tree
    """
    url: str
    soup: BeautifulSoup

    @property
    def title(self) -> str:
        tag = self.soup.title
        return text_of(tag) if tag is not None else ""

    def select_class(self, name: str, root: Tag | None = None) -> list[Tag]:
        """Return elements carrying class `name`, in document order.

        A name containing spaces matches the whole class attribute exactly.
        """
        return list((root or self.soup).find_all(class_=name))

    def first_class(self, name: str, root: Tag | None = None) -> Tag | None:
        return (root or self.soup).find(class_=name)

    def abs_url(self, element: Tag, attr: str = "href") -> str:
        """Resolve an attribute value against the page URL.

        Returns an empty string when the attribute is missing or blank.
        """
        value = (element.get(attr) or "").strip()
        if not value:
            return ""
        return urljoin(self.url, value)


def text_of(element: Tag) -> str:
    return " ".join(element.get_text(" ").split())


def has_class(element: Tag, name: str) -> bool:
    return name in (element.get("class") or [])


def parse_markup(data: bytes | str, encoding: str = "utf-8", base_url: str = "") -> Page:
    """Parse raw HTML into a Page.

    Args:
        data: HTML as bytes (decoded with `encoding`) or text
        encoding: Character encoding used when `data` is bytes
        base_url: URL that relative links are resolved against

    Returns:
        Page wrapping the parsed tree
    """
    if isinstance(data, bytes):
        soup = BeautifulSoup(data, "html.parser", from_encoding=encoding)
    else:
        soup = BeautifulSoup(data, "html.parser")
    return Page(url=base_url, soup=soup)


class PageFetcher:
    """Fetches list pages over HTTP using a shared httpx client.

    Every transport or HTTP status failure is raised as InvalidListPage.
    Use as a context manager, or call close() when done.
    """

    def __init__(self, cfg: FetchConfig | None = None, client: httpx.Client | None = None):
        self.cfg = cfg or FetchConfig()
        self._client = client or httpx.Client(
            timeout=self.cfg.timeout_seconds,
            headers={"User-Agent": self.cfg.user_agent},
            follow_redirects=True,
            trust_env=self.cfg.trust_env,
        )

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> Page:
        """Fetch `url` and parse the response body.

        Args:
            url: Absolute page URL

        Returns:
            Page whose url is the final URL after redirects

        Raises:
            InvalidListPage: On network errors or a non-2xx response
        """
        last_error: Exception | None = None

        for attempt in range(self.cfg.retries + 1):
            try:
                resp = self._client.get(url)
                resp.raise_for_status()
                break
            except httpx.HTTPError as exc:
                last_error = exc
                logger.debug("Fetch failed (attempt %d): %s: %s", attempt + 1, url, exc)
                if attempt < self.cfg.retries:
                    # Linear backoff: 0.5s, 1.0s, 1.5s...
                    time.sleep(0.5 * (attempt + 1))
        else:
            raise InvalidListPage(f"{type(last_error).__name__}: {last_error}") from last_error

        return parse_markup(resp.content, resp.encoding or "utf-8", base_url=str(resp.url))
