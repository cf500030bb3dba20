"""Shared fixtures: an in-memory page fetcher for offline source tests."""

from __future__ import annotations

import pytest

from media_lists.errors import InvalidListPage
from media_lists.fetch.document import Page, parse_markup


class FakeFetcher:
    """Serves HTML from a dict keyed by URL and records every fetch."""

    def __init__(self, pages: dict[str, str]):
        self.pages = pages
        self.fetched: list[str] = []

    def fetch(self, url: str) -> Page:
        self.fetched.append(url)
        if url not in self.pages:
            raise InvalidListPage(f"HTTPStatusError: 404 for {url}")
        return parse_markup(self.pages[url], base_url=url)

    def close(self) -> None:
        pass


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
