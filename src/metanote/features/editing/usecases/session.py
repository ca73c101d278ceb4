"""Selection session orchestration.

Where: src/metanote/features/editing/usecases/session.py
What: Hold the selected records, their merged EditView, and run the save loop.
Why: Give UI layers one object for select -> edit -> save with per-record results.
Assumptions:
- Calls arrive from a single thread; reads and writes block.
Trade-offs:
- Failed writes are reported, never retried or rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from metanote.shared.errors import NotATrackFile, TagError
from metanote.shared.tag_record import TagRecord

from ..domain.edit_view import EditView
from .input_codec import parse_input
from .loading import load_records
from .merge import merge_records
from .ports import TagReaderPort, TagWriterPort
from .session_types import (
    ReadFailure,
    SessionEvent,
    SessionState,
    SessionStateError,
    WriteResult,
)
from .write_back import resolve

LOGGER = logging.getLogger(__name__)


class SelectionSession:
    """Batch editing session over the currently selected records."""

    def __init__(self, *, writer: TagWriterPort, reader: TagReaderPort | None = None) -> None:
        self._writer: TagWriterPort = writer
        self._reader: TagReaderPort | None = reader
        self._records: list[TagRecord] = []
        self._edit_view: EditView | None = None
        self._state: SessionState = SessionState.EMPTY

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def records(self) -> tuple[TagRecord, ...]:
        """Selected records in selection order."""
        return tuple(self._records)

    @property
    def edit_view(self) -> EditView | None:
        """Current consolidated view, or ``None`` when nothing is selected."""
        return self._edit_view

    @edit_view.setter
    def edit_view(self, view: EditView) -> None:
        self._require_viewing("replace the edit view")
        self._edit_view = view

    def select(self, records: Iterable[TagRecord]) -> EditView | None:
        """Replace the selection and rebuild the consolidated view.

        Args:
            records: Records to edit together. An empty iterable clears the session.

        Returns:
            EditView | None: The fresh view, or ``None`` for an empty selection.
        """
        self._require_not_saving("select")
        self._records = list(records)
        self._edit_view = None

        if not self._records:
            self._state = SessionState.EMPTY
            LOGGER.debug(
                "Selection cleared",
                extra={"session_event": SessionEvent.SELECT_EMPTY},
            )
            return None

        self._edit_view = merge_records(self._records)
        self._state = SessionState.VIEWING
        LOGGER.debug(
            "Selected %d record(s); unresolved fields: %s",
            len(self._records),
            ", ".join(self._edit_view.unresolved_fields()) or "none",
            extra={"session_event": SessionEvent.SELECT, "total_files": len(self._records)},
        )
        return self._edit_view

    def open(self, paths: Iterable[Path]) -> list[ReadFailure]:
        """Read ``paths`` and select every record that could be read.

        Returns:
            list[ReadFailure]: Paths kept out of the selection, with their errors.

        Raises:
            SessionStateError: If the session has no reader.
        """
        if self._reader is None:
            raise SessionStateError("open paths without a reader", self._state)
        loaded = load_records(self._reader, paths)
        _ = self.select(loaded.records)
        return loaded.failures

    def clear(self) -> None:
        """Drop the selection and its view."""
        _ = self.select(())

    def apply_input(self, field_name: str, text: str) -> EditView:
        """Parse entry text for ``field_name`` and store it in the view.

        Raises:
            SessionStateError: If nothing is selected.
            ParseError: If a numeric field receives non-numeric text.
        """
        view = self._require_viewing("edit")
        value = parse_input(field_name, text, current=view.get(field_name))
        self._edit_view = view.with_changes(**{field_name: value})
        return self._edit_view

    def save(self) -> list[WriteResult]:
        """Resolve and write every selected record.

        Writes run sequentially in selection order and a failure never stops
        the loop. Records written successfully adopt their resolved state and
        the view is rebuilt from the updated selection.

        Returns:
            list[WriteResult]: One result per record, aligned with the selection.

        Raises:
            SessionStateError: If called without a selection.
        """
        view = self._require_viewing("save")
        self._state = SessionState.SAVING
        total = len(self._records)
        LOGGER.info(
            "Saving tags for %d file(s)",
            total,
            extra={"session_event": SessionEvent.SAVE_START, "total_files": total},
        )

        results: list[WriteResult] = []
        try:
            for sequence, original in enumerate(self._records, start=1):
                results.append(self._write_one(original, view, sequence, total))
        finally:
            self._state = SessionState.VIEWING

        self._records = [
            result.record if result.success else original
            for result, original in zip(results, self._records, strict=True)
        ]
        self._edit_view = merge_records(self._records)

        failed = sum(1 for result in results if not result.success)
        LOGGER.info(
            "Saved %d of %d file(s)",
            total - failed,
            total,
            extra={
                "session_event": SessionEvent.SAVE_COMPLETE,
                "total_files": total,
                "failed": failed,
            },
        )
        return results

    def _write_one(
        self,
        original: TagRecord,
        view: EditView,
        sequence: int,
        total: int,
    ) -> WriteResult:
        resolved = resolve(original, view)
        path = original.path
        try:
            if path is None:
                raise NotATrackFile("Record has no file path to write to")
            self._writer.write(path, resolved)
        except TagError as exc:
            LOGGER.error(
                "Failed to write tags [%d/%d] %s: %s",
                sequence,
                total,
                path,
                exc,
                extra={"session_event": SessionEvent.SAVE_ERROR, "source_path": str(path)},
            )
            return WriteResult(path=path, record=original, error=exc)

        LOGGER.debug(
            "Wrote tags [%d/%d] %s",
            sequence,
            total,
            path,
            extra={"session_event": SessionEvent.SAVE_SUCCESS, "source_path": str(path)},
        )
        return WriteResult(path=path, record=resolved)

    def _require_viewing(self, operation: str) -> EditView:
        if self._state is not SessionState.VIEWING or self._edit_view is None:
            raise SessionStateError(operation, self._state)
        return self._edit_view

    def _require_not_saving(self, operation: str) -> None:
        if self._state is SessionState.SAVING:
            raise SessionStateError(operation, self._state)


__all__ = ["SelectionSession"]
