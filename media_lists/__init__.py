"""
Media Lists - collect personal title lists into one deduplicated set.

This package scrapes paginated list pages from tracking sites (IMDb,
Kinopoisk, MyAnimeList, Letterboxd, Shikimori, Trakt, Goodreads) and
reads YouTube watch-history exports, producing `Entry` sets that can be
merged and saved as JSON.

Main entry point is the CLI via the `media-lists` command.

Example:
    $ media-lists scrape https://www.imdb.com/user/ur000000/watchlist
"""

__all__ = [
    "__version__",
    "Entry",
    "WatchEvent",
    "parse_list",
    "resolve",
    "parse_history_file",
    "videos_to_entries",
    "load_entries",
    "save_entries",
]
__version__ = "0.1.0"

from .core.types import Entry, WatchEvent
from .history.adapter import videos_to_entries
from .history.parser import parse_history_file
from .sources.registry import parse_list, resolve
from .storage import load_entries, save_entries
