"""
List sources.

One module per supported site plus the registry that picks a source
from a URL's domain.
"""

from .base import ListSource, PageState, PaginationCursor
from .registry import ListType, available_sources, list_type_for, parse_list, resolve

__all__ = [
    "ListSource",
    "ListType",
    "PageState",
    "PaginationCursor",
    "available_sources",
    "list_type_for",
    "parse_list",
    "resolve",
]
