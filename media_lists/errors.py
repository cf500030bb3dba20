"""Exception types raised by list sources and the history reader."""

from __future__ import annotations


class MediaListsError(Exception):
    """Base class for all errors surfaced to callers."""


class InvalidListType(MediaListsError):
    """The URL's site is not one of the supported list sources."""


class InvalidListPage(MediaListsError):
    """The URL is malformed, a page could not be fetched, or its markup is unusable.

    When raised during pagination, `partial` holds the entries collected
    from the pages before the failure.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.partial: set = set()


class InvalidFileExtension(MediaListsError):
    """A history file has an extension other than .html or .json."""
