# Where: metanote.shared.tag_record
# What: Canonical TagRecord and ArtImage dataclasses shared across features.
# Why: Centralize the per-file tag snapshot so the engine and adapters agree on one shape.

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Final


@dataclass(frozen=True, slots=True)
class ArtImage:
    """Embedded artwork image compared by value."""

    mime_type: str
    data: bytes = field(repr=False)
    description: str | None = None

    def __repr__(self) -> str:
        return (
            f"ArtImage(mime_type={self.mime_type!r}, description={self.description!r}, "
            f"size={len(self.data)})"
        )


@dataclass(slots=True)
class TagRecord:
    """Metadata snapshot for a single audio file.

    ``path`` addresses the file for write-back and takes no part in equality.
    """

    title: str | None = None
    artist: str | None = None
    album_artist: str | None = None
    album: str | None = None
    genre: str | None = None
    year: str | None = None
    composer: str | None = None
    comment: str | None = None
    copyright: str | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    art: tuple[ArtImage, ...] | None = None
    path: Path | None = field(default=None, compare=False)


TEXT_FIELDS: Final[tuple[str, ...]] = (
    "title",
    "artist",
    "album_artist",
    "album",
    "genre",
    "year",
    "composer",
    "comment",
    "copyright",
)

NUMBER_FIELDS: Final[tuple[str, ...]] = (
    "track_number",
    "track_total",
    "disc_number",
    "disc_total",
)

SCALAR_FIELDS: Final[tuple[str, ...]] = TEXT_FIELDS + NUMBER_FIELDS

ART_FIELD: Final[str] = "art"

TAG_FIELDS: Final[tuple[str, ...]] = tuple(
    f.name for f in fields(TagRecord) if f.name != "path"
)


__all__ = [
    "ArtImage",
    "TagRecord",
    "TEXT_FIELDS",
    "NUMBER_FIELDS",
    "SCALAR_FIELDS",
    "ART_FIELD",
    "TAG_FIELDS",
]
