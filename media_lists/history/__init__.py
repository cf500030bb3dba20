"""
YouTube watch-history import.

Reads a Google Takeout history export (HTML or JSON) into WatchEvents
and adapts them to Entries so they can be merged with scraped lists.
"""

from .adapter import video_to_entry, videos_to_entries
from .parser import FileType, file_type_for, parse_history, parse_history_file

__all__ = [
    "FileType",
    "file_type_for",
    "parse_history",
    "parse_history_file",
    "video_to_entry",
    "videos_to_entries",
]
