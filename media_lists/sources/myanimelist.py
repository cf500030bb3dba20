"""MyAnimeList anime and manga lists.

The list is not paginated markup: the whole list is embedded as JSON in
the `data-items` attribute of a table. Records use MyAnimeList's own
field names (`anime_title`, `manga_url`, ...), which are folded onto the
canonical Entry fields.
"""

from __future__ import annotations

import json
from typing import Iterable

from ..core.types import Entry
from ..errors import InvalidListPage
from ..fetch.document import Page
from .base import ListSource


BASE_URL = "https://myanimelist.net"


class MyAnimeListSource(ListSource):
    name = "myanimelist"

    def next_url(self, page: Page) -> str | None:
        return None

    def entries(self, page: Page) -> Iterable[Entry]:
        table = self.require(page.soup.find("table", attrs={"data-items": True}), "data-items table", page)
        try:
            records = json.loads(table["data-items"])
        except json.JSONDecodeError as exc:
            raise InvalidListPage(f"{self.name}: malformed data-items on {page.url}: {exc}") from exc
        if not isinstance(records, list):
            raise InvalidListPage(f"{self.name}: data-items is not a list on {page.url}")

        for record in records:
            if not isinstance(record, dict):
                raise InvalidListPage(f"{self.name}: unusable record in data-items on {page.url}")
            try:
                entry = Entry.from_dict(record)
            except ValueError as exc:
                raise InvalidListPage(f"{self.name}: unusable record in data-items on {page.url}") from exc
            if not isinstance(entry.link, str):
                raise InvalidListPage(f"{self.name}: unusable record in data-items on {page.url}")
            yield Entry(title=entry.title, link=BASE_URL + entry.link)
