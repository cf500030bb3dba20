"""Letterboxd film lists, watchlists and diaries."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry
from ..fetch.document import Page
from .base import ListSource


class LetterboxdSource(ListSource):
    """Paginates until the "next" control has an empty href."""

    name = "letterboxd"

    def next_url(self, page: Page) -> str:
        button = page.first_class("next")
        if button is None:
            return ""
        return page.abs_url(button)

    def entries(self, page: Page) -> Iterable[Entry]:
        for poster in page.select_class("linked-film-poster"):
            # The title only appears as the poster image's alt text
            image = self.require(poster.find("img"), "poster image", page)
            yield Entry(
                title=image.get("alt", ""),
                link=self.require_link(poster, page, "data-target-link"),
            )
