"""Goodreads shelves."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page, has_class, text_of
from .base import ListSource


class GoodreadsSource(ListSource):
    """Paginates until the "next_page" control is disabled."""

    name = "goodreads"

    def next_url(self, page: Page) -> str | None:
        button = page.first_class("next_page")
        if button is None or has_class(button, "disabled"):
            return None
        return page.abs_url(button) or None

    def entries(self, page: Page) -> Iterable[Entry]:
        for link in page.select_class("bookTitle"):
            label = self.require(link.find("span"), "title span", page)
            yield Entry(title=text_of(label), link=self.require_link(link, page))
