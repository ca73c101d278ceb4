"""Fold a selection of tag records into one EditView.

Where: src/metanote/features/editing/usecases/merge.py
What: Keep values every record agrees on and mark the rest UNRESOLVED.
Why: Show users only what is truly shared so untouched conflicts survive a save.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from metanote.shared.tag_record import TAG_FIELDS, TagRecord

from ..domain.edit_view import EditView
from ..domain.unresolved import UNRESOLVED


def _shared_value(records: Sequence[TagRecord], field_name: str) -> Any:
    """Return the common value of ``field_name`` or UNRESOLVED when records differ."""

    first = getattr(records[0], field_name)
    for record in records[1:]:
        if getattr(record, field_name) != first:
            return UNRESOLVED
    return first


def merge_records(records: Sequence[TagRecord]) -> EditView:
    """Build the consolidated view of ``records``.

    Args:
        records: Non-empty selection of tag records.

    Returns:
        EditView: Agreed values per field, UNRESOLVED where records disagree.

    Raises:
        ValueError: If ``records`` is empty.
    """
    if not records:
        raise ValueError("Cannot merge an empty selection")

    return EditView(**{name: _shared_value(records, name) for name in TAG_FIELDS})


__all__ = ["merge_records"]
