"""Adapt watch-history videos into list entries."""

from __future__ import annotations

from typing import Iterable

from ..core.types import Entry, WatchEvent


def video_to_entry(video: WatchEvent) -> Entry:
    """Title the entry "<video title> (<channel name>)", keeping the video link."""
    return Entry(title=f"{video.title} ({video.channel_name})", link=video.link)


def videos_to_entries(videos: Iterable[WatchEvent]) -> set[Entry]:
    return {video_to_entry(video) for video in videos}
