"""Summary: Tag error hierarchy shared by ports, adapters and the editing session.
Why: Let callers handle read/write/parse failures per record without catching bare exceptions.
"""

from __future__ import annotations

from pathlib import Path


class TagError(Exception):
    """Base class for failures reading, writing or parsing tags."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{message} ({self.path})"


class NotATrackFile(TagError):
    """Raised when a path is missing, not a regular file, or not a supported track."""


class CodecError(TagError):
    """Raised when the tag container cannot be parsed or serialized."""


class ParseError(TagError):
    """Raised when numeric tag text cannot be parsed into an integer."""

    def __init__(self, field_name: str, text: str, path: Path | None = None) -> None:
        super().__init__(f"Cannot parse {field_name!r} value {text!r} as a number", path)
        self.field_name: str = field_name
        self.text: str = text


__all__ = ["TagError", "NotATrackFile", "CodecError", "ParseError"]
