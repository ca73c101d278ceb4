"""Format-specific tag handlers.

Where: src/metanote/features/tagging/adapters/format_handlers.py
What: Define concrete handlers for MP3, FLAC, Ogg Vorbis, Opus and MP4 files.
Why: Separate format logic from the facade to simplify future maintenance and extensions.
"""

from __future__ import annotations

import base64
import binascii
from pathlib import Path
from typing import Any, ClassVar, Final, override

from mutagen.flac import FLAC, Picture
from mutagen.id3 import (
    APIC,
    COMM,
    ID3,
    TALB,
    TCOM,
    TCON,
    TCOP,
    TDRC,
    TIT2,
    TPE1,
    TPE2,
    TPOS,
    TRCK,
    Encoding,
    ID3NoHeaderError,
    PictureType,
)
from mutagen.mp4 import MP4, MP4Cover
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from metanote.platform.logging import logger
from metanote.shared.errors import CodecError
from metanote.shared.tag_record import ArtImage, TagRecord

from ._base_handlers import (
    TagFormatHandler,
    VorbisCommentHandler,
    art_to_picture,
    picture_to_art,
)
from ._tag_utils import (
    check_number,
    first_text,
    format_slash_separated,
    parse_slash_separated,
    parse_tuple_numbers,
)

__all__ = [
    "Mp3Handler",
    "FlacHandler",
    "OggVorbisHandler",
    "OpusHandler",
    "M4aHandler",
]


class Mp3Handler(TagFormatHandler):
    """Handler for MP3 files using ID3v2 frames."""

    TEXT_FRAMES: ClassVar[dict[str, type]] = {
        "title": TIT2,
        "artist": TPE1,
        "album_artist": TPE2,
        "album": TALB,
        "genre": TCON,
        "year": TDRC,
        "composer": TCOM,
        "copyright": TCOP,
    }

    def __init__(self, id3_version: int = 4) -> None:
        self.id3_version: int = id3_version

    @staticmethod
    def _load(path: Path) -> ID3:
        try:
            return ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3 header in %s; starting from empty tags", path)
            return ID3()

    @staticmethod
    def _text(tags: ID3, frame_id: str) -> str | None:
        frame = tags.get(frame_id)
        if frame is None:
            return None
        return first_text(frame.text)

    @staticmethod
    def _plain_comments(tags: ID3) -> list[COMM]:
        """COMM frames without a description; described ones (iTunNORM, ...) are not the comment."""
        return [frame for frame in tags.getall("COMM") if not frame.desc]

    @staticmethod
    def _read_art(tags: ID3) -> tuple[ArtImage, ...] | None:
        art = tuple(
            ArtImage(mime_type=frame.mime, data=bytes(frame.data), description=frame.desc or None)
            for frame in tags.getall("APIC")
        )
        return art or None

    @override
    def read(self, path: Path) -> TagRecord:
        tags = self._load(path)

        values: dict[str, Any] = {
            name: self._text(tags, frame_cls.__name__)
            for name, frame_cls in self.TEXT_FRAMES.items()
        }

        comments = self._plain_comments(tags)
        values["comment"] = first_text(comments[0].text) if comments else None

        track_number, track_total = parse_slash_separated(self._text(tags, "TRCK"))
        disc_number, disc_total = parse_slash_separated(self._text(tags, "TPOS"))

        return TagRecord(
            **values,
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            art=self._read_art(tags),
            path=path,
        )

    @override
    def write(self, path: Path, record: TagRecord) -> None:
        tags = self._load(path)

        for name, frame_cls in self.TEXT_FRAMES.items():
            self._set_text(tags, frame_cls, getattr(record, name))

        for frame_cls, number_name, number, total in (
            (TRCK, "track_number", record.track_number, record.track_total),
            (TPOS, "disc_number", record.disc_number, record.disc_total),
        ):
            if parse_slash_separated(self._text(tags, frame_cls.__name__)) != (number, total):
                self._set_text(tags, frame_cls, format_slash_separated(number_name, number, total))

        comments = self._plain_comments(tags)
        current_comment = first_text(comments[0].text) if comments else None
        if current_comment != record.comment:
            for frame in comments:
                del tags[frame.HashKey]
            if record.comment is not None:
                tags.add(COMM(encoding=Encoding.UTF8, lang="eng", desc="", text=[record.comment]))

        # Rewriting identical pictures would reset their picture types.
        if self._read_art(tags) != record.art:
            tags.delall("APIC")
            art = record.art or ()
            for desc, image in zip(_unique_descriptions(art), art, strict=True):
                tags.add(
                    APIC(
                        encoding=Encoding.UTF8,
                        mime=image.mime_type,
                        type=PictureType.COVER_FRONT,
                        desc=desc,
                        data=image.data,
                    )
                )

        if self.id3_version == 3:
            tags.update_to_v23()
        tags.save(path, v2_version=self.id3_version)
        logger.debug("Saved ID3v2.%d tags to %s", self.id3_version, path)

    @staticmethod
    def _set_text(tags: ID3, frame_cls: type, value: str | None) -> None:
        """Replace a text frame unless its first value already equals ``value``."""
        frame_id = frame_cls.__name__
        if value is None:
            tags.delall(frame_id)
        elif Mp3Handler._text(tags, frame_id) != value:
            tags.delall(frame_id)
            tags.add(frame_cls(encoding=Encoding.UTF8, text=[value]))


def _unique_descriptions(art: tuple[ArtImage, ...]) -> list[str]:
    """APIC frames are keyed by description; suffix repeats so no image is dropped."""
    seen: dict[str, int] = {}
    result: list[str] = []
    for image in art:
        desc = image.description or ""
        count = seen.get(desc, 0)
        seen[desc] = count + 1
        result.append(desc if count == 0 else f"{desc} ({count + 1})")
    return result


class FlacHandler(VorbisCommentHandler):
    """Handler for FLAC files."""

    FILE_CLASS: ClassVar[type | None] = FLAC

    @override
    def _read_pictures(self, audio: Any) -> tuple[ArtImage, ...] | None:
        art = tuple(picture_to_art(picture) for picture in audio.pictures)
        return art or None

    @override
    def _write_pictures(self, audio: Any, art: tuple[ArtImage, ...] | None) -> None:
        audio.clear_pictures()
        for image in art or ():
            audio.add_picture(art_to_picture(image))


class _OggHandler(VorbisCommentHandler):
    """Ogg containers embed pictures as base64 FLAC picture blocks."""

    PICTURE_KEY: ClassVar[str] = "metadata_block_picture"

    @override
    def _read_pictures(self, audio: Any) -> tuple[ArtImage, ...] | None:
        tags = audio.tags
        if tags is None or self.PICTURE_KEY not in tags:
            return None
        art: list[ArtImage] = []
        for encoded in tags[self.PICTURE_KEY]:
            try:
                art.append(picture_to_art(Picture(base64.b64decode(encoded))))
            except (binascii.Error, ValueError) as exc:
                raise CodecError(f"Malformed embedded picture: {exc}") from exc
        return tuple(art) or None

    @override
    def _write_pictures(self, audio: Any, art: tuple[ArtImage, ...] | None) -> None:
        tags = audio.tags
        if self.PICTURE_KEY in tags:
            del tags[self.PICTURE_KEY]
        if art:
            tags[self.PICTURE_KEY] = [
                base64.b64encode(art_to_picture(image).write()).decode("ascii") for image in art
            ]


class OggVorbisHandler(_OggHandler):
    """Handler for Ogg Vorbis (.ogg) files."""

    FILE_CLASS: ClassVar[type | None] = OggVorbis


class OpusHandler(_OggHandler):
    """Handler for Opus (.opus) files."""

    FILE_CLASS: ClassVar[type | None] = OggOpus


_MP4_IMAGE_FORMATS: Final[dict[str, int]] = {
    "image/jpeg": MP4Cover.FORMAT_JPEG,
    "image/png": MP4Cover.FORMAT_PNG,
}
_MP4_IMAGE_MIMES: Final[dict[int, str]] = {value: key for key, value in _MP4_IMAGE_FORMATS.items()}
_MP4_NUMBER_MAX: Final[int] = 0xFFFF


class M4aHandler(TagFormatHandler):
    """Handler for M4A/AAC files using MP4 atoms.

    MP4 cover art carries no description; descriptions are dropped on write.
    """

    TEXT_KEYS: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album_artist": "aART",
        "album": "\xa9alb",
        "genre": "\xa9gen",
        "year": "\xa9day",
        "composer": "\xa9wrt",
        "comment": "\xa9cmt",
        "copyright": "cprt",
    }

    @staticmethod
    def _read_art(tags: Any) -> tuple[ArtImage, ...] | None:
        art = tuple(
            ArtImage(
                mime_type=_MP4_IMAGE_MIMES.get(cover.imageformat, "image/jpeg"),
                data=bytes(cover),
            )
            for cover in tags.get("covr", [])
        )
        return art or None

    @override
    def read(self, path: Path) -> TagRecord:
        audio = MP4(path)
        tags = audio.tags or {}

        values: dict[str, Any] = {
            name: first_text(tags.get(key)) for name, key in self.TEXT_KEYS.items()
        }
        track_number, track_total = parse_tuple_numbers(tags.get("trkn"))
        disc_number, disc_total = parse_tuple_numbers(tags.get("disk"))

        return TagRecord(
            **values,
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            art=self._read_art(tags),
            path=path,
        )

    @override
    def write(self, path: Path, record: TagRecord) -> None:
        audio = MP4(path)
        if audio.tags is None:
            audio.add_tags()
        tags = audio.tags

        # Only atoms whose value changed are replaced; extra values of the others survive.
        changes: dict[str, Any] = {}
        for name, key in self.TEXT_KEYS.items():
            value = getattr(record, name)
            if first_text(tags.get(key)) != value:
                changes[key] = [value] if value is not None else None

        for key, number_name, number, total in (
            ("trkn", "track_number", record.track_number, record.track_total),
            ("disk", "disc_number", record.disc_number, record.disc_total),
        ):
            if parse_tuple_numbers(tags.get(key)) != (number, total):
                changes[key] = self._pair(number_name, number, total)

        if self._read_art(tags) != record.art:
            changes["covr"] = [self._cover(image) for image in record.art] if record.art else None

        for key, value in changes.items():
            if value is None:
                if key in tags:
                    del tags[key]
            else:
                tags[key] = value

        audio.save()
        logger.debug("Saved MP4 tags to %s", path)

    @staticmethod
    def _pair(field_name: str, number: int | None, total: int | None) -> list[tuple[int, int]] | None:
        if number is None and total is None:
            return None
        return [
            (
                check_number(field_name, number, _MP4_NUMBER_MAX) or 0,
                check_number(field_name, total, _MP4_NUMBER_MAX) or 0,
            )
        ]

    @staticmethod
    def _cover(image: ArtImage) -> MP4Cover:
        image_format = _MP4_IMAGE_FORMATS.get(image.mime_type)
        if image_format is None:
            raise CodecError(f"MP4 cover art must be JPEG or PNG, not {image.mime_type}")
        return MP4Cover(image.data, imageformat=image_format)
