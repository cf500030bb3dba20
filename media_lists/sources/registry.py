"""Source registry: pick the list source for a URL by its registrable domain."""

from __future__ import annotations

from enum import Enum
import logging
from urllib.parse import urlsplit

import tldextract

from ..config import FetchConfig
from ..core.types import Entry
from ..errors import InvalidListPage, InvalidListType
from ..fetch.document import PageFetcher
from ..logging_utils import log_event
from .base import ListSource
from .goodreads import GoodreadsSource
from .imdb import ImdbSource
from .kinopoisk import KinopoiskSource
from .letterboxd import LetterboxdSource
from .myanimelist import MyAnimeListSource
from .shikimori import ShikimoriSource
from .trakt import TraktSource


class ListType(Enum):
    IMDB = "imdb"
    KINOPOISK = "kinopoisk"
    MYANIMELIST = "myanimelist"
    LETTERBOXD = "letterboxd"
    SHIKIMORI = "shikimori"
    TRAKT = "trakt"
    GOODREADS = "goodreads"
    # Watch history is read from an export file, never scraped
    YOUTUBE = "youtube"


SourceBuilder = type[ListSource]

_SOURCE_REGISTRY: dict[ListType, SourceBuilder] = {
    ListType.IMDB: ImdbSource,
    ListType.KINOPOISK: KinopoiskSource,
    ListType.MYANIMELIST: MyAnimeListSource,
    ListType.LETTERBOXD: LetterboxdSource,
    ListType.SHIKIMORI: ShikimoriSource,
    ListType.TRAKT: TraktSource,
    ListType.GOODREADS: GoodreadsSource,
}

# Offline extractor: uses the public suffix snapshot bundled with tldextract
_extract_domain = tldextract.TLDExtract(suffix_list_urls=())


def available_sources() -> list[str]:
    """Return the names of the sites that can be scraped."""
    return sorted(list_type.value for list_type in _SOURCE_REGISTRY)


def list_type_for(url: str) -> ListType:
    """Identify the site a list URL belongs to.

    The host's registrable domain (e.g. "imdb.com" for "m.imdb.com")
    without its public suffix is matched against ListType names, so the
    path and query never affect the result.

    Raises:
        InvalidListPage: If the URL has no host or no registrable domain
        InvalidListType: If the domain is not a known site
    """
    try:
        host = urlsplit(url).hostname
    except ValueError as exc:
        raise InvalidListPage(f"Malformed URL {url!r}: {exc}") from exc
    if not host:
        raise InvalidListPage(f"URL has no host: {url!r}")

    parts = _extract_domain(host)
    if not parts.domain or not parts.suffix:
        raise InvalidListPage(f"Cannot find a registrable domain in host {host!r}")

    try:
        return ListType[parts.domain.upper()]
    except KeyError:
        raise InvalidListType(f"Unexpected list type: {parts.domain}.{parts.suffix}") from None


def resolve(
    url: str,
    fetcher: PageFetcher,
    max_pages: int = 500,
    logger: logging.Logger | None = None,
) -> ListSource:
    """Build the list source that handles `url`.

    Raises:
        InvalidListPage: If the URL cannot be parsed into a domain
        InvalidListType: If the site is unknown or cannot be scraped
    """
    list_type = list_type_for(url)
    builder = _SOURCE_REGISTRY.get(list_type)
    if builder is None:
        supported = ", ".join(available_sources())
        raise InvalidListType(f"Unexpected list type: {list_type.name}. Supported: {supported}")
    return builder(fetcher, max_pages=max_pages, logger=logger)


def parse_list(
    url: str,
    cfg: FetchConfig | None = None,
    fetcher: PageFetcher | None = None,
    logger: logging.Logger | None = None,
) -> set[Entry]:
    """Scrape every entry of the list at `url`.

    Args:
        url: Any page of a supported list
        cfg: Fetch settings (defaults used when omitted)
        fetcher: Page fetcher to use; a new one is created and closed if omitted
        logger: Logger for progress events

    Returns:
        Set of entries, unique by link
    """
    cfg = cfg or FetchConfig()
    logger = logger or logging.getLogger("media_lists")
    owns_fetcher = fetcher is None
    fetcher = fetcher or PageFetcher(cfg)
    try:
        source = resolve(url, fetcher, max_pages=cfg.max_pages, logger=logger)
        log_event(logger, "List resolved", event="list_resolved", source=source.name, url=url)
        return source.extract(url)
    finally:
        if owns_fetcher:
            fetcher.close()
