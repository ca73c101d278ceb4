"""Metanote: batch tag editing for audio files.

Select several tracks, edit the tags they share, and write each file back
with every untouched field preserved.
"""

from metanote.features.editing import (
    UNRESOLVED,
    UNRESOLVED_NUMBER,
    UNRESOLVED_TEXT,
    EditView,
    SelectionSession,
    WriteResult,
    merge_records,
    resolve,
)
from metanote.shared import (
    ArtImage,
    CodecError,
    NotATrackFile,
    ParseError,
    TagError,
    TagRecord,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ArtImage",
    "TagRecord",
    "EditView",
    "UNRESOLVED",
    "UNRESOLVED_TEXT",
    "UNRESOLVED_NUMBER",
    "merge_records",
    "resolve",
    "SelectionSession",
    "WriteResult",
    "TagError",
    "NotATrackFile",
    "CodecError",
    "ParseError",
]
