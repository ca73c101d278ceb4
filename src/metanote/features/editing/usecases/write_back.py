"""Resolve an edited view against one original record.

Where: src/metanote/features/editing/usecases/write_back.py
What: Produce the record to persist from a record's own values and the shared edits.
Why: Broadcast what the user changed while every untouched field keeps its per-file value.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from metanote.shared.tag_record import ART_FIELD, SCALAR_FIELDS, TagRecord

from ..domain.edit_view import EditView
from ..domain.unresolved import UNRESOLVED


def resolve(original: TagRecord, edited: EditView) -> TagRecord:
    """Return the final state of ``original`` after applying ``edited``.

    Scalar fields left UNRESOLVED keep the original value; any other value,
    ``None`` included, overwrites it. Concrete artwork replaces the record's
    artwork as a whole list; only UNRESOLVED artwork keeps the original images.

    Args:
        original: Record as read from its file.
        edited: View shared by the whole selection.

    Returns:
        TagRecord: New record addressed at ``original.path``.
    """
    changes: dict[str, Any] = {}
    for name in SCALAR_FIELDS:
        value = getattr(edited, name)
        if value is not UNRESOLVED:
            changes[name] = value

    if edited.art is not UNRESOLVED:
        changes[ART_FIELD] = edited.art

    return replace(original, **changes)


__all__ = ["resolve"]
