"""
Core domain models.

This package contains the value types shared by the web-list sources,
the history reader and persistence.
"""

from .types import Entry, WatchEvent, normalize_record

__all__ = [
    "Entry",
    "WatchEvent",
    "normalize_record",
]
