"""Read a batch of paths into tag records.

Where: src/metanote/features/editing/usecases/loading.py
What: Read each path through the reader port, splitting records from failures.
Why: Unreadable files must never reach a merge, yet the caller still hears about them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from metanote.shared.errors import TagError

from .ports import TagReaderPort
from .session_types import LoadResult, ReadFailure, SessionEvent

LOGGER = logging.getLogger(__name__)


def load_records(reader: TagReaderPort, paths: Iterable[Path]) -> LoadResult:
    """Read ``paths`` in order, keeping only the records that could be read."""

    result = LoadResult()
    for path in paths:
        try:
            record = reader.read(path)
        except TagError as exc:
            LOGGER.warning(
                "Skipping unreadable file %s: %s",
                path,
                exc,
                extra={"session_event": SessionEvent.READ_ERROR, "source_path": str(path)},
            )
            result.failures.append(ReadFailure(path=path, error=exc))
            continue
        if record.path is None:
            record.path = path
        result.records.append(record)
    return result


__all__ = ["load_records"]
