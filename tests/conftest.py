"""Shared pytest fixtures: in-memory tag I/O and sample records."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from metanote.shared import ArtImage, CodecError, NotATrackFile, TagError, TagRecord


class FakeTagIO:
    """In-memory stand-in for a tag codec.

    Files live in ``files`` keyed by path; paths listed in ``fail_writes``
    raise the mapped error on write.
    """

    def __init__(self, files: dict[Path, TagRecord] | None = None) -> None:
        self.files: dict[Path, TagRecord] = dict(files or {})
        self.fail_reads: dict[Path, TagError] = {}
        self.fail_writes: dict[Path, TagError] = {}
        self.writes: list[tuple[Path, TagRecord]] = []

    def read(self, path: Path) -> TagRecord:
        if path in self.fail_reads:
            raise self.fail_reads[path]
        if path not in self.files:
            raise NotATrackFile("Not a regular file", path)
        return replace(self.files[path], path=path)

    def write(self, path: Path, record: TagRecord) -> None:
        if path in self.fail_writes:
            raise self.fail_writes[path]
        if path not in self.files:
            raise NotATrackFile("Not a regular file", path)
        self.writes.append((path, record))
        self.files[path] = replace(record, path=path)


@pytest.fixture
def cover() -> ArtImage:
    """A small front cover image."""
    return ArtImage(mime_type="image/png", data=b"\x89PNG\r\n\x1a\nfront", description="Cover")


@pytest.fixture
def back_cover() -> ArtImage:
    """A second, different image."""
    return ArtImage(mime_type="image/jpeg", data=b"\xff\xd8\xffback", description=None)


@pytest.fixture
def album_records(cover: ArtImage) -> list[TagRecord]:
    """Three tracks of one album that disagree on title, track number and comment."""
    shared = {
        "artist": "Pink Floyd",
        "album_artist": "Pink Floyd",
        "album": "The Wall",
        "year": "1979",
        "genre": "Rock",
        "track_total": 13,
        "disc_number": 2,
        "disc_total": 2,
        "art": (cover,),
    }
    return [
        TagRecord(
            title="Hey You",
            track_number=1,
            comment="first",
            path=Path("/music/wall/01.flac"),
            **shared,
        ),
        TagRecord(
            title="Is There Anybody Out There?",
            track_number=2,
            path=Path("/music/wall/02.flac"),
            **shared,
        ),
        TagRecord(
            title="Nobody Home",
            track_number=3,
            comment="",
            path=Path("/music/wall/03.flac"),
            **shared,
        ),
    ]


@pytest.fixture
def fake_io(album_records: list[TagRecord]) -> FakeTagIO:
    """Fake codec pre-loaded with the album records."""
    files = {record.path: record for record in album_records if record.path is not None}
    return FakeTagIO(files)


@pytest.fixture
def codec_error() -> CodecError:
    return CodecError("Tag container is read-only")


@pytest.fixture
def fake_io_factory() -> type[FakeTagIO]:
    """Expose the fake codec class for tests that build their own file sets."""
    return FakeTagIO
