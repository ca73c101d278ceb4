"""Tests for the runtime-checkable tag I/O ports."""

from __future__ import annotations

from typing import Any

from metanote.features.editing import TagIOPort, TagReaderPort, TagWriterPort


def test_fake_codec_satisfies_ports(fake_io: Any) -> None:
    assert isinstance(fake_io, TagReaderPort)
    assert isinstance(fake_io, TagWriterPort)
    assert isinstance(fake_io, TagIOPort)


def test_reader_only_is_not_a_writer() -> None:
    class ReaderOnly:
        def read(self, path: Any) -> Any:
            return None

    assert isinstance(ReaderOnly(), TagReaderPort)
    assert not isinstance(ReaderOnly(), TagWriterPort)
