"""Tests for PageFetcher using httpx's mock transport."""

from __future__ import annotations

import httpx
import pytest

from media_lists.config import FetchConfig
from media_lists.errors import InvalidListPage
from media_lists.fetch.document import PageFetcher, has_class, parse_markup, text_of


def _fetcher(handler, **cfg_overrides) -> PageFetcher:
    cfg = FetchConfig(**cfg_overrides)
    client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
    return PageFetcher(cfg, client=client)


def test_fetch_parses_page_and_resolves_against_final_url():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new/list"})
        return httpx.Response(200, html='<title>List</title><a class="item" href="../item/1">One</a>')

    with _fetcher(handler) as fetcher:
        page = fetcher.fetch("https://example.com/old")

    assert page.url == "https://example.com/new/list"
    assert page.title == "List"
    link = page.first_class("item")
    assert page.abs_url(link) == "https://example.com/item/1"


def test_fetch_raises_invalid_list_page_on_http_error():
    with _fetcher(lambda request: httpx.Response(404, text="missing")) as fetcher:
        with pytest.raises(InvalidListPage, match="404"):
            fetcher.fetch("https://example.com/list")


def test_fetch_retries_then_succeeds(monkeypatch):
    monkeypatch.setattr("media_lists.fetch.document.time.sleep", lambda seconds: None)
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        if len(calls) == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, html="<title>ok</title>")

    with _fetcher(handler, retries=1) as fetcher:
        page = fetcher.fetch("https://example.com/list")

    assert page.title == "ok"
    assert len(calls) == 2


def test_fetch_without_retries_fails_on_first_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _fetcher(handler) as fetcher:
        with pytest.raises(InvalidListPage, match="ConnectError"):
            fetcher.fetch("https://example.com/list")


def test_page_helpers():
    page = parse_markup(
        '<li class="next disabled"><a href="/p/2">  Next\n page </a></li><a class="x">no href</a>',
        base_url="https://example.com/p/1",
    )
    button = page.first_class("next")

    assert has_class(button, "disabled")
    assert text_of(button) == "Next page"
    assert page.abs_url(button.find("a")) == "https://example.com/p/2"
    assert page.abs_url(page.first_class("x")) == ""
    assert page.first_class("missing") is None


def test_fetch_parses_whole_body_of_large_page():
    items = "".join(f'<a class="item" href="/film/{n}/">Фильм {n}</a>' for n in range(20000))

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, html=f"<title>Список</title>{items}")

    with _fetcher(handler) as fetcher:
        page = fetcher.fetch("https://example.com/list")

    links = page.select_class("item")
    assert len(links) == 20000
    assert text_of(links[-1]) == "Фильм 19999"
