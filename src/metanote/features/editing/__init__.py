# Where: metanote.features.editing.__init__
# What: Expose the batch editing engine: view model, merge, write-back and session.
# Why: Provide a cohesive import surface for UI and integration layers.

from .domain import (
    UNRESOLVED,
    UNRESOLVED_NUMBER,
    UNRESOLVED_TEXT,
    EditView,
    Unresolved,
    is_unresolved,
)
from .usecases import (
    LoadResult,
    ReadFailure,
    SelectionSession,
    SessionEvent,
    SessionState,
    SessionStateError,
    TagIOPort,
    TagReaderPort,
    TagWriterPort,
    WriteResult,
    display_text,
    load_records,
    merge_records,
    parse_input,
    parse_number,
    resolve,
)

__all__ = [
    "EditView",
    "Unresolved",
    "UNRESOLVED",
    "UNRESOLVED_TEXT",
    "UNRESOLVED_NUMBER",
    "is_unresolved",
    "merge_records",
    "resolve",
    "display_text",
    "parse_input",
    "parse_number",
    "load_records",
    "SelectionSession",
    "SessionState",
    "SessionEvent",
    "SessionStateError",
    "LoadResult",
    "ReadFailure",
    "WriteResult",
    "TagIOPort",
    "TagReaderPort",
    "TagWriterPort",
]
