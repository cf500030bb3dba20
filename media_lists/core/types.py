"""
Core data types for Media Lists.

This module defines the two records that flow through the system:
- Entry: a title scraped from a list page (or adapted from history)
- WatchEvent: a single video from a YouTube watch-history export

Both types use `link` as their identity key. The display fields are
excluded from equality, hashing and ordering, so a set of either type
never holds two members with the same link.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


# Alternate spellings accepted for each canonical Entry field, in
# preference order after the canonical name itself.
ENTRY_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("anime_title", "manga_title"),
    "link": ("anime_url", "manga_url"),
}


@dataclass(frozen=True, order=True)
class Entry:
    """A titled link collected from a list.

    Attributes:
        title: Display title (not part of identity)
        link: Canonical absolute URL, the identity key
    """
    title: str = field(compare=False)
    link: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "link": self.link}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        """Build an Entry from a raw record, resolving field aliases."""
        record = normalize_record(data, ENTRY_FIELD_ALIASES)
        if not record["link"]:
            raise ValueError(f"Entry record has no link: {dict(data)!r}")
        return cls(title=record["title"] or "", link=record["link"])


@dataclass(frozen=True, order=True)
class WatchEvent:
    """A watched video taken from a YouTube history export.

    Attributes:
        title: Video title (not part of identity)
        channel_name: Uploading channel name (not part of identity)
        link: Video URL, the identity key
    """
    title: str = field(compare=False)
    channel_name: str = field(compare=False)
    link: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "channelName": self.channel_name, "link": self.link}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WatchEvent":
        return cls(
            title=data.get("title") or "",
            channel_name=data.get("channelName") or "",
            link=data["link"],
        )


def normalize_record(
    data: Mapping[str, Any],
    aliases: Mapping[str, tuple[str, ...]],
) -> dict[str, Any]:
    """Map aliased field names onto their canonical names.

    For each canonical field the canonical key wins when present and not
    null, otherwise the first alias with a value is used. Fields not listed
    in `aliases` are dropped. Missing fields come back as None.

    Args:
        data: Raw decoded JSON object
        aliases: Canonical field name -> accepted alternate names

    Returns:
        A dict holding exactly the canonical field names

    Examples:
        >>> normalize_record({"anime_title": "X", "anime_url": "/a"}, ENTRY_FIELD_ALIASES)
        {'title': 'X', 'link': '/a'}
    """
    record: dict[str, Any] = {}
    for name, alternates in aliases.items():
        value = None
        for key in (name, *alternates):
            if data.get(key) is not None:
                value = data[key]
                break
        record[name] = value
    return record
