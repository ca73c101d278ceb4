"""Shared base classes for tag format handlers.

Where: src/metanote/features/tagging/adapters/_base_handlers.py
What: Define the handler interface and the Vorbis comment logic shared by FLAC and Ogg.
Why: Keep per-format modules down to key mappings and artwork storage.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, Final, override

from mutagen.flac import Picture
from mutagen.id3 import PictureType

from metanote.platform.logging import logger
from metanote.shared.tag_record import ArtImage, TagRecord

from ._tag_utils import first_text, format_number, parse_number, parse_slash_separated

__all__ = [
    "TagFormatHandler",
    "VorbisCommentHandler",
    "art_to_picture",
    "picture_to_art",
]

# (number key, number field, total field) for the slash-separated pairs.
NUMBER_KEYS: Final[tuple[tuple[str, str, str], ...]] = (
    ("tracknumber", "track_number", "track_total"),
    ("discnumber", "disc_number", "disc_total"),
)


def picture_to_art(picture: Picture) -> ArtImage:
    """Convert a FLAC picture block into an ArtImage."""
    return ArtImage(
        mime_type=picture.mime,
        data=bytes(picture.data),
        description=picture.desc or None,
    )


def art_to_picture(image: ArtImage) -> Picture:
    """Convert an ArtImage into a front-cover FLAC picture block."""
    picture = Picture()
    picture.type = PictureType.COVER_FRONT
    picture.mime = image.mime_type
    picture.desc = image.description or ""
    picture.data = image.data
    return picture


class TagFormatHandler(abc.ABC):
    """Abstract base class for reading and writing one container format."""

    @abc.abstractmethod
    def read(self, path: Path) -> TagRecord:
        """Read the tags stored in ``path``."""
        raise NotImplementedError

    @abc.abstractmethod
    def write(self, path: Path, record: TagRecord) -> None:
        """Replace the tags stored in ``path`` with ``record``."""
        raise NotImplementedError


class VorbisCommentHandler(TagFormatHandler, abc.ABC):
    """Base class for formats tagged with Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = None

    TEXT_KEYS: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album_artist": "albumartist",
        "album": "album",
        "genre": "genre",
        "year": "date",
        "composer": "composer",
        "comment": "comment",
        "copyright": "copyright",
    }

    # Accepted spellings for totals; the first is the one written.
    TOTAL_KEYS: ClassVar[dict[str, tuple[str, ...]]] = {
        "track_total": ("tracktotal", "totaltracks"),
        "disc_total": ("disctotal", "totaldiscs"),
    }

    def _open(self, path: Path) -> Any:
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        audio = self.FILE_CLASS(path)
        logger.debug("Opened %s with tags type: %s", path, type(audio.tags))
        return audio

    @abc.abstractmethod
    def _read_pictures(self, audio: Any) -> tuple[ArtImage, ...] | None:
        raise NotImplementedError

    @abc.abstractmethod
    def _write_pictures(self, audio: Any, art: tuple[ArtImage, ...] | None) -> None:
        raise NotImplementedError

    @staticmethod
    def _get(tags: Any, key: str) -> str | None:
        if tags is None or key not in tags:
            return None
        return first_text(tags[key])

    @staticmethod
    def _set(tags: Any, key: str, value: str | None) -> None:
        """Store ``value`` under ``key``; a key whose first value already matches is left as is."""
        if value is None:
            if key in tags:
                del tags[key]
        elif VorbisCommentHandler._get(tags, key) != value:
            tags[key] = [value]

    def _read_pair(
        self, tags: Any, number_key: str, total_name: str
    ) -> tuple[int | None, int | None]:
        number, total = parse_slash_separated(self._get(tags, number_key))
        for key in self.TOTAL_KEYS[total_name]:
            parsed = parse_number(self._get(tags, key))
            if parsed is not None:
                return number, parsed
        return number, total

    @override
    def read(self, path: Path) -> TagRecord:
        audio = self._open(path)
        tags = audio.tags

        values: dict[str, Any] = {
            name: self._get(tags, key) for name, key in self.TEXT_KEYS.items()
        }
        track_number, track_total = self._read_pair(tags, "tracknumber", "track_total")
        disc_number, disc_total = self._read_pair(tags, "discnumber", "disc_total")

        return TagRecord(
            **values,
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            art=self._read_pictures(audio),
            path=path,
        )

    @override
    def write(self, path: Path, record: TagRecord) -> None:
        audio = self._open(path)
        if audio.tags is None:
            audio.add_tags()
        tags = audio.tags

        for name, key in self.TEXT_KEYS.items():
            self._set(tags, key, getattr(record, name))

        for number_key, number_name, total_name in NUMBER_KEYS:
            number = getattr(record, number_name)
            total = getattr(record, total_name)
            if self._read_pair(tags, number_key, total_name) == (number, total):
                continue
            total_keys = self.TOTAL_KEYS[total_name]
            for key in total_keys[1:]:
                if key in tags:
                    del tags[key]
            self._set(tags, number_key, format_number(number_name, number))
            self._set(tags, total_keys[0], format_number(total_name, total))

        # Rewriting identical pictures would reset their picture types.
        if self._read_pictures(audio) != record.art:
            self._write_pictures(audio, record.art)
        audio.save()
        logger.debug("Saved Vorbis comments to %s", path)
