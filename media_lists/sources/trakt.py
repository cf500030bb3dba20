"""Trakt lists and watchlists."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page, has_class, text_of
from .base import ListSource


class TraktSource(ListSource):
    """Paginates until the "next" control is disabled."""

    name = "trakt"

    def next_url(self, page: Page) -> str | None:
        button = page.first_class("next")
        if button is None or has_class(button, "disabled"):
            return None
        link = button.find("a")
        if link is None:
            return None
        return page.abs_url(link) or None

    def entries(self, page: Page) -> Iterable[Entry]:
        for block in page.select_class("titles"):
            link = self.require(block.find("a"), "title link", page)
            heading = self.require(link.find("h3"), "title heading", page)
            yield Entry(title=text_of(heading), link=self.require_link(link, page))
