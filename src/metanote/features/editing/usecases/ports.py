"""Summary: Ports defining the tag I/O the editing use cases depend on.
Why: Decouple the session from concrete codecs so tests can use in-memory fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from metanote.shared.tag_record import TagRecord


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading one file's tags."""

    def read(self, path: Path) -> TagRecord:
        """Return the tags stored at ``path``.

        Raises:
            NotATrackFile: If ``path`` is not a readable, supported regular file.
            CodecError: If the tag container cannot be parsed.
        """
        ...


@runtime_checkable
class TagWriterPort(Protocol):
    """Port for persisting one file's tags."""

    def write(self, path: Path, record: TagRecord) -> None:
        """Replace the tags stored at ``path`` with ``record``.

        Raises:
            NotATrackFile: If ``path`` is not a writable, supported regular file.
            CodecError: If ``record`` cannot be serialized into the container.
        """
        ...


@runtime_checkable
class TagIOPort(TagReaderPort, TagWriterPort, Protocol):
    """Combined read/write capability."""


__all__ = ["TagReaderPort", "TagWriterPort", "TagIOPort"]
