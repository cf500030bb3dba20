"""
Page fetching and markup access.

This package wraps the HTTP client and the HTML parser behind the small
`Page` interface the list sources are written against.
"""

from .document import Page, PageFetcher, has_class, parse_markup, text_of

__all__ = [
    "Page",
    "PageFetcher",
    "has_class",
    "parse_markup",
    "text_of",
]
