"""Shikimori anime lists (single page)."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page, text_of
from .base import ListSource


class ShikimoriSource(ListSource):
    name = "shikimori"

    def next_url(self, page: Page) -> str | None:
        return None

    def entries(self, page: Page) -> Iterable[Entry]:
        for link in page.select_class("tooltipped"):
            english = self.require(page.first_class("name-en", link), "English name", page)
            yield Entry(title=text_of(english), link=self.require_link(link, page))
