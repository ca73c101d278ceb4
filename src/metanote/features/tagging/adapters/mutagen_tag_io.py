"""Audio file tag I/O backed by mutagen.

Where: src/metanote/features/tagging/adapters/mutagen_tag_io.py
What: Provide the MutagenTagIO facade that routes reads and writes to format handlers.
Why: Satisfy the editing ports with real files while keeping codec errors typed.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from mutagen import MutagenError

from metanote.config.settings import ID3_VERSION
from metanote.platform.logging import logger
from metanote.shared.errors import CodecError, NotATrackFile, TagError
from metanote.shared.tag_record import TagRecord

from ._base_handlers import TagFormatHandler
from .format_handlers import (
    FlacHandler,
    M4aHandler,
    Mp3Handler,
    OggVorbisHandler,
    OpusHandler,
)

__all__ = ["MutagenTagIO"]

R = TypeVar("R")


class MutagenTagIO:
    """Read and write tags for supported audio files.

    This class selects the appropriate handler based on file extension.
    """

    def __init__(self, id3_version: int | None = None) -> None:
        if id3_version is None:
            id3_version = ID3_VERSION
        vorbis = OggVorbisHandler()
        mp4 = M4aHandler()
        self._format_map: dict[str, TagFormatHandler] = {
            ".mp3": Mp3Handler(id3_version=id3_version),
            ".flac": FlacHandler(),
            ".ogg": vorbis,
            ".oga": vorbis,
            ".opus": OpusHandler(),
            ".m4a": mp4,
            ".mp4": mp4,
            ".m4b": mp4,
        }

    def handler_for(self, path: Path) -> TagFormatHandler:
        """Return the handler for ``path``'s extension.

        Raises:
            NotATrackFile: If the extension is not supported.
        """
        ext = path.suffix.lower()
        handler = self._format_map.get(ext)
        if handler is None:
            raise NotATrackFile(f"Unsupported file format: {ext or '<none>'}", path)
        return handler

    def read(self, path: Path) -> TagRecord:
        """Read the tags stored at ``path``.

        Raises:
            NotATrackFile: If ``path`` is not a readable regular file of a supported format.
            CodecError: If the tag container cannot be parsed.
        """
        self._check_regular_file(path, os.R_OK)
        handler = self.handler_for(path)
        record = self._call("read", path, lambda: handler.read(path))
        logger.debug("Read tags from %s: %s", path, record)
        return record

    def write(self, path: Path, record: TagRecord) -> None:
        """Replace the tags stored at ``path`` with ``record``.

        Raises:
            NotATrackFile: If ``path`` is not a writable regular file of a supported format.
            CodecError: If ``record`` cannot be serialized into the container.
        """
        self._check_regular_file(path, os.R_OK | os.W_OK)
        handler = self.handler_for(path)
        self._call("write", path, lambda: handler.write(path, record))

    @staticmethod
    def _check_regular_file(path: Path, mode: int) -> None:
        if not path.is_file():
            raise NotATrackFile("Not a regular file", path)
        if not os.access(path, mode):
            raise NotATrackFile("File is not accessible", path)

    @staticmethod
    def _call(operation: str, path: Path, action: Callable[[], R]) -> R:
        try:
            return action()
        except TagError as exc:
            if exc.path is None:
                exc.path = path
            logger.error("Failed to %s tags for %s: %s", operation, path, exc)
            raise
        except (MutagenError, OSError) as exc:
            logger.error("Failed to %s tags for %s: %s", operation, path, exc)
            raise CodecError(f"Failed to {operation} tags: {exc}", path) from exc
