"""
JSON persistence for entry and watch-history sets.

Files are pretty-printed JSON arrays of flat objects, sorted by link so
that saving the same set twice produces identical files. When no
filename is given one is generated from a prefix and the current time,
e.g. "my_titles_18-10-2026_14-03-59.json". Two saves within the same
second get the same name and the later one overwrites the earlier.
"""

from __future__ import annotations

from datetime import datetime
import json
import logging
from pathlib import Path
from typing import IO, Iterable

from .config import OutputConfig
from .core.types import Entry, WatchEvent
from .logging_utils import log_event

logger = logging.getLogger(__name__)


def default_filename(prefix: str, cfg: OutputConfig | None = None, now: datetime | None = None) -> Path:
    """Build "<directory>/<prefix><timestamp>.json" for an unnamed save."""
    cfg = cfg or OutputConfig()
    stamp = (now or datetime.now()).strftime(cfg.timestamp_format)
    return Path(cfg.directory) / f"{prefix}{stamp}.json"


def load_entries(source: str | Path | IO) -> set[Entry]:
    """Load entries from a JSON file path or an open stream.

    Records may use the MyAnimeList field spellings as well as
    "title"/"link".
    """
    return {Entry.from_dict(record) for record in _read_json(source)}


def save_entries(entries: Iterable[Entry], filename: str | Path | None = None, cfg: OutputConfig | None = None) -> Path:
    """Write entries to `filename`, or to a generated name if omitted.

    Returns:
        Path of the written file
    """
    cfg = cfg or OutputConfig()
    path = Path(filename) if filename else default_filename(cfg.entries_prefix, cfg)
    _write_json(path, [entry.to_dict() for entry in sorted(entries)])
    return path


def load_videos(source: str | Path | IO) -> set[WatchEvent]:
    return {WatchEvent.from_dict(record) for record in _read_json(source)}


def save_videos(videos: Iterable[WatchEvent], filename: str | Path | None = None, cfg: OutputConfig | None = None) -> Path:
    cfg = cfg or OutputConfig()
    path = Path(filename) if filename else default_filename(cfg.videos_prefix, cfg)
    _write_json(path, [video.to_dict() for video in sorted(videos)])
    return path


def merge_entries(*entry_sets: Iterable[Entry]) -> set[Entry]:
    """Union entry sets; for a link present in several, the first one's title wins."""
    merged: set[Entry] = set()
    for entries in entry_sets:
        merged |= set(entries)
    return merged


def _read_json(source: str | Path | IO) -> list:
    if hasattr(source, "read"):
        records = json.load(source)
        origin = getattr(source, "name", "<stream>")
    else:
        with open(source, "r", encoding="utf-8") as f:
            records = json.load(f)
        origin = str(source)
    log_event(logger, "Loaded", event="loaded", path=str(origin), total=len(records))
    return records


def _write_json(path: Path, records: list[dict[str, str]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
        f.write("\n")
    log_event(logger, "Saved", event="saved", path=str(path), total=len(records))
