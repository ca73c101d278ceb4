# Where: metanote.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of the record model across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import CodecError, NotATrackFile, ParseError, TagError
from .labels import record_subtitle, record_title
from .tag_record import (
    ART_FIELD,
    NUMBER_FIELDS,
    SCALAR_FIELDS,
    TAG_FIELDS,
    TEXT_FIELDS,
    ArtImage,
    TagRecord,
)

__all__ = [
    "ArtImage",
    "TagRecord",
    "TEXT_FIELDS",
    "NUMBER_FIELDS",
    "SCALAR_FIELDS",
    "ART_FIELD",
    "TAG_FIELDS",
    "TagError",
    "NotATrackFile",
    "CodecError",
    "ParseError",
    "record_title",
    "record_subtitle",
]
