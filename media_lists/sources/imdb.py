"""IMDb lists and watchlists (lister-style pages)."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page, has_class, text_of
from .base import ListSource


class ImdbSource(ListSource):
    """Paginates until the "next-page" control is absent or disabled."""

    name = "imdb"

    def next_url(self, page: Page) -> str | None:
        button = page.first_class("next-page")
        if button is None or has_class(button, "disabled"):
            return None
        return page.abs_url(button) or None

    def entries(self, page: Page) -> Iterable[Entry]:
        for header in page.select_class("lister-item-header"):
            link = self.require(header.find("a"), "title link", page)
            # Drop tracking parameters so the same title always has one link
            href = self.require_link(link, page).split("?")[0]
            yield Entry(title=text_of(link), link=href)
