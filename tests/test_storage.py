"""Tests for JSON persistence of entries and watch-history videos."""

from __future__ import annotations

from datetime import datetime
import io
import json
from pathlib import Path

from media_lists.config import OutputConfig
from media_lists.core.types import Entry, WatchEvent
from media_lists.storage import (
    default_filename,
    load_entries,
    load_videos,
    merge_entries,
    save_entries,
    save_videos,
)


def test_save_and_load_entries_round_trip(tmp_path: Path) -> None:
    entries = {
        Entry("Movie A", "https://www.imdb.com/title/tt1/"),
        Entry("Фильм", "https://www.kinopoisk.ru/film/1/"),
    }
    path = save_entries(entries, tmp_path / "titles.json")

    loaded = load_entries(path)

    assert loaded == entries
    assert {e.link: e.title for e in loaded} == {e.link: e.title for e in entries}


def test_save_and_load_videos_round_trip(tmp_path: Path) -> None:
    videos = {WatchEvent("Song", "Band", "https://yt/1"), WatchEvent("Talk", "Conf", "https://yt/2")}
    path = save_videos(videos, tmp_path / "videos.json")

    loaded = load_videos(path)

    assert loaded == videos
    assert {v.link: v.channel_name for v in loaded} == {"https://yt/1": "Band", "https://yt/2": "Conf"}


def test_saved_file_is_pretty_sorted_and_canonical(tmp_path: Path) -> None:
    path = save_entries({Entry("B", "https://b.example"), Entry("A", "https://a.example")}, tmp_path / "out.json")
    text = path.read_text(encoding="utf-8")

    assert json.loads(text) == [
        {"title": "A", "link": "https://a.example"},
        {"title": "B", "link": "https://b.example"},
    ]
    assert "\n  {" in text


def test_saved_videos_use_channel_name_key(tmp_path: Path) -> None:
    path = save_videos({WatchEvent("Song", "Band", "https://yt/1")}, tmp_path / "v.json")
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"title": "Song", "channelName": "Band", "link": "https://yt/1"}
    ]


def test_default_filename_uses_prefix_and_timestamp(tmp_path: Path) -> None:
    cfg = OutputConfig(directory=str(tmp_path))
    now = datetime(2026, 10, 18, 14, 3, 59)

    assert default_filename(cfg.entries_prefix, cfg, now).name == "my_titles_18-10-2026_14-03-59.json"
    assert default_filename(cfg.videos_prefix, cfg, now) == tmp_path / "yt_videos_18-10-2026_14-03-59.json"


def test_save_without_filename_writes_to_output_directory(tmp_path: Path) -> None:
    cfg = OutputConfig(directory=str(tmp_path / "out"))

    path = save_entries({Entry("A", "https://a.example")}, cfg=cfg)

    assert path.parent == tmp_path / "out"
    assert path.name.startswith("my_titles_")
    assert path.exists()


def test_load_entries_accepts_alias_fields_from_stream() -> None:
    stream = io.StringIO(json.dumps([{"anime_title": "X", "anime_url": "/anime/1/x"}]))

    assert {(e.title, e.link) for e in load_entries(stream)} == {("X", "/anime/1/x")}


def test_merge_entries_keeps_first_title() -> None:
    first = {Entry("From IMDb", "https://www.imdb.com/title/tt1/")}
    second = {Entry("Renamed", "https://www.imdb.com/title/tt1/"), Entry("B", "https://b.example")}

    merged = merge_entries(first, second)

    assert len(merged) == 2
    assert {e.link: e.title for e in merged}["https://www.imdb.com/title/tt1/"] == "From IMDb"
