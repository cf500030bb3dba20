"""Kinopoisk user lists."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page, text_of
from .base import ListSource


# Titles of the captcha page served instead of a list (ru / en)
INTERSTITIAL_TITLES = frozenset({"Ой!", "Oops!"})
NEXT_PAGE_LABEL = "»"


class KinopoiskSource(ListSource):
    """Paginates via the "»" link in the page navigator.

    Stops, keeping what was collected, when the captcha page is served.
    """

    name = "kinopoisk"

    def start_url(self, url: str) -> str:
        return url.split("#")[0].rstrip("/") + "/perpage/200"

    def is_interstitial(self, page: Page) -> bool:
        return page.title in INTERSTITIAL_TITLES

    def next_url(self, page: Page) -> str | None:
        navigator = page.first_class("navigator")
        if navigator is None:
            return None
        for link in navigator.find_all("a"):
            if text_of(link) == NEXT_PAGE_LABEL:
                return page.abs_url(link) or None
        return None

    def entries(self, page: Page) -> Iterable[Entry]:
        for name in page.select_class("nameRus"):
            link = self.require(name.find("a"), "title link", page)
            yield Entry(title=text_of(link), link=self.require_link(link, page))
