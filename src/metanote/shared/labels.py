"""Display labels for tag records.

Where: src/metanote/shared/labels.py
What: Build the "Artist - Title" heading and file-name subtitle shown for each track.
Why: Keep list rendering consistent between the CLI and any other caller.
"""

from __future__ import annotations

from typing import Final

from .tag_record import TagRecord

UNKNOWN_LABEL: Final[str] = "Unknown"


def record_title(record: TagRecord) -> str:
    """Return ``"<artist> - <title>"`` with ``Unknown`` for missing parts."""

    artist = record.artist if record.artist is not None else UNKNOWN_LABEL
    title = record.title if record.title is not None else UNKNOWN_LABEL
    return f"{artist} - {title}"


def record_subtitle(record: TagRecord) -> str:
    """Return the file name of the record, or an empty string when unaddressed."""

    return record.path.name if record.path is not None else ""


__all__ = ["UNKNOWN_LABEL", "record_title", "record_subtitle"]
