"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from media_lists import cli
from media_lists.core.types import Entry
from media_lists.errors import InvalidListPage, InvalidListType
from media_lists.storage import save_entries

runner = CliRunner()

CELL = "content-cell mdl-cell mdl-cell--6-col mdl-typography--body-1"


def _read(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_scrape_saves_entries(tmp_path: Path, monkeypatch):
    def fake_parse_list(url, cfg):
        assert url == "https://www.imdb.com/list/ls1/"
        return {Entry("Movie A", "https://www.imdb.com/title/tt1/")}

    monkeypatch.setattr(cli, "parse_list", fake_parse_list)
    output = tmp_path / "titles.json"

    result = runner.invoke(cli.app, ["scrape", "https://www.imdb.com/list/ls1/", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert _read(output) == [{"title": "Movie A", "link": "https://www.imdb.com/title/tt1/"}]


def test_scrape_unknown_site_exits_with_error(tmp_path: Path, monkeypatch):
    def fake_parse_list(url, cfg):
        raise InvalidListType("Unexpected list type: example.com")

    monkeypatch.setattr(cli, "parse_list", fake_parse_list)
    output = tmp_path / "titles.json"

    result = runner.invoke(cli.app, ["scrape", "https://example.com/", "-o", str(output)])

    assert result.exit_code == 1
    assert "Unexpected list type" in result.output
    assert not output.exists()


def test_scrape_keep_partial_saves_collected_entries(tmp_path: Path, monkeypatch):
    def fake_parse_list(url, cfg):
        exc = InvalidListPage("ConnectError: connection reset")
        exc.partial = {Entry("Movie A", "https://www.imdb.com/title/tt1/")}
        raise exc

    monkeypatch.setattr(cli, "parse_list", fake_parse_list)
    output = tmp_path / "partial.json"

    result = runner.invoke(
        cli.app, ["scrape", "https://www.imdb.com/list/ls1/", "-o", str(output), "--keep-partial"]
    )

    assert result.exit_code == 1
    assert len(_read(output)) == 1


def test_history_saves_adapted_entries(tmp_path: Path):
    history = tmp_path / "watch-history.html"
    history.write_text(
        f'<div class="{CELL}">Watched <a href="https://yt/1">Song</a><br>'
        f'<a href="https://yt/channel/band">Band</a></div>',
        encoding="utf-8",
    )
    output = tmp_path / "entries.json"

    result = runner.invoke(cli.app, ["history", str(history), "--entries", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert _read(output) == [{"title": "Song (Band)", "link": "https://yt/1"}]


def test_history_rejects_unknown_extension(tmp_path: Path):
    history = tmp_path / "watch-history.txt"
    history.write_text("irrelevant", encoding="utf-8")

    result = runner.invoke(cli.app, ["history", str(history)])

    assert result.exit_code == 1
    assert ".html or .json" in result.output


def test_merge_unions_files(tmp_path: Path):
    first = save_entries({Entry("A", "https://a.example")}, tmp_path / "a.json")
    second = save_entries({Entry("A again", "https://a.example"), Entry("B", "https://b.example")}, tmp_path / "b.json")
    output = tmp_path / "merged.json"

    result = runner.invoke(cli.app, ["merge", str(first), str(second), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert [record["link"] for record in _read(output)] == ["https://a.example", "https://b.example"]
