"""src/metanote/features/editing/usecases/session_types.py
Where: Editing feature usecases layer.
What: Shared enums and dataclasses for the selection session flow.
Why: Keep the session lean by centralising result and state definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from metanote.shared.errors import TagError
from metanote.shared.tag_record import TagRecord


class SessionState(StrEnum):
    """Lifecycle states of a selection session."""

    EMPTY = "empty"
    VIEWING = "viewing"
    SAVING = "saving"


class SessionEvent(StrEnum):
    """Structured event identifiers for session logs."""

    SELECT = "session.select"
    SELECT_EMPTY = "session.select.empty"
    READ_ERROR = "session.read.error"
    SAVE_START = "session.save.start"
    SAVE_SUCCESS = "session.save.success"
    SAVE_ERROR = "session.save.error"
    SAVE_COMPLETE = "session.save.complete"


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in the wrong state."""

    def __init__(self, operation: str, state: SessionState) -> None:
        super().__init__(f"Cannot {operation} while session is {state.value}")
        self.operation: str = operation
        self.state: SessionState = state


@dataclass(slots=True)
class ReadFailure:
    """A path that could not be read and was kept out of the selection."""

    path: Path
    error: TagError


@dataclass(slots=True)
class LoadResult:
    """Outcome of reading a batch of paths."""

    records: list[TagRecord] = field(default_factory=list)
    failures: list[ReadFailure] = field(default_factory=list)


@dataclass(slots=True)
class WriteResult:
    """Result of writing one selected record."""

    path: Path | None
    record: TagRecord
    error: TagError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error is not None else None


__all__ = [
    "SessionState",
    "SessionEvent",
    "SessionStateError",
    "ReadFailure",
    "LoadResult",
    "WriteResult",
]
