# Where: metanote.features.editing.usecases.__init__
# What: Re-export merge, write-back, session orchestration and their ports.
# Why: Keep callers off the module layout of the use case layer.

from .input_codec import display_text, parse_input, parse_number
from .loading import load_records
from .merge import merge_records
from .ports import TagIOPort, TagReaderPort, TagWriterPort
from .session import SelectionSession
from .session_types import (
    LoadResult,
    ReadFailure,
    SessionEvent,
    SessionState,
    SessionStateError,
    WriteResult,
)
from .write_back import resolve

__all__ = [
    "display_text",
    "parse_input",
    "parse_number",
    "load_records",
    "merge_records",
    "resolve",
    "SelectionSession",
    "TagIOPort",
    "TagReaderPort",
    "TagWriterPort",
    "LoadResult",
    "ReadFailure",
    "SessionEvent",
    "SessionState",
    "SessionStateError",
    "WriteResult",
]
