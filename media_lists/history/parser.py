"""
YouTube watch-history parser.

Takeout exports history either as HTML ("watch-history.html") or JSON.
The HTML form lists each watched video in an outer-cell whose content
cell holds two links: the video, then its channel. Videos that were
deleted or made private keep only one link and are skipped.

The JSON form read here is the one written by `save_videos`: an array
of {"title", "channelName", "link"} objects.
"""

from __future__ import annotations

from enum import Enum
import json
import logging
from pathlib import Path
from typing import BinaryIO

from ..core.types import WatchEvent
from ..errors import InvalidFileExtension
from ..fetch.document import parse_markup, text_of
from ..logging_utils import log_event

logger = logging.getLogger(__name__)

# Exact class attribute of a history entry's content cell
HISTORY_CELL_CLASS = "content-cell mdl-cell mdl-cell--6-col mdl-typography--body-1"


class FileType(Enum):
    JSON = "json"
    HTML = "html"


def file_type_for(path: str | Path) -> FileType:
    """Map a history file's extension to its FileType (case-insensitive).

    Raises:
        InvalidFileExtension: For anything but .html or .json
    """
    suffix = Path(path).suffix.lstrip(".").upper()
    try:
        return FileType[suffix]
    except KeyError:
        raise InvalidFileExtension("The file must have .html or .json extension!") from None


def parse_history_file(path: str | Path) -> set[WatchEvent]:
    """Parse a history export, choosing the format from its extension.

    The extension is checked before the file is opened.
    """
    file_type = file_type_for(path)
    with open(path, "rb") as handle:
        return parse_history(handle, file_type)


def parse_history(source: BinaryIO | bytes | str, file_type: FileType) -> set[WatchEvent]:
    """Parse watch history from a stream or raw content.

    Args:
        source: Binary stream, bytes or text of the export
        file_type: Format of the content

    Returns:
        Set of watched videos, unique by link
    """
    data = source.read() if hasattr(source, "read") else source
    if file_type is FileType.HTML:
        videos = _parse_html(data)
    else:
        videos = _parse_json(data)
    log_event(logger, "History parsed", event="history_parsed", format=file_type.value, total=len(videos))
    return videos


def _parse_html(data: bytes | str) -> set[WatchEvent]:
    page = parse_markup(data, "utf-8")
    videos: set[WatchEvent] = set()

    for cell in page.select_class(HISTORY_CELL_CLASS):
        links = cell.find_all("a")
        # Removed videos keep only their title text or a single link
        if len(links) < 2:
            log_event(logger, "Skipping unavailable video", level=logging.DEBUG, event="history_entry_skipped")
            continue
        video_link, channel_link = links[0], links[1]
        videos.add(
            WatchEvent(
                title=text_of(video_link),
                channel_name=text_of(channel_link),
                link=video_link.get("href", ""),
            )
        )
    return videos


def _parse_json(data: bytes | str) -> set[WatchEvent]:
    records = json.loads(data)
    return {WatchEvent.from_dict(record) for record in records}
