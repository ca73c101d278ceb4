"""Consolidated, user-editable view over a selection of tag records.

Where: src/metanote/features/editing/domain/edit_view.py
What: Define EditView, the TagRecord-shaped value whose fields may hold UNRESOLVED.
Why: Give callers one value to render and mutate, then hand back for write-back.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from metanote.shared.tag_record import TAG_FIELDS, ArtImage

from .unresolved import UNRESOLVED, Unresolved


@dataclass(slots=True)
class EditView:
    """Tag fields shared by a selection.

    Every field defaults to :data:`UNRESOLVED`, so an untouched view never
    changes the records it is resolved against.
    """

    title: str | None | Unresolved = UNRESOLVED
    artist: str | None | Unresolved = UNRESOLVED
    album_artist: str | None | Unresolved = UNRESOLVED
    album: str | None | Unresolved = UNRESOLVED
    genre: str | None | Unresolved = UNRESOLVED
    year: str | None | Unresolved = UNRESOLVED
    composer: str | None | Unresolved = UNRESOLVED
    comment: str | None | Unresolved = UNRESOLVED
    copyright: str | None | Unresolved = UNRESOLVED
    track_number: int | None | Unresolved = UNRESOLVED
    track_total: int | None | Unresolved = UNRESOLVED
    disc_number: int | None | Unresolved = UNRESOLVED
    disc_total: int | None | Unresolved = UNRESOLVED
    art: tuple[ArtImage, ...] | None | Unresolved = UNRESOLVED

    def get(self, field_name: str) -> Any:
        """Return the value of ``field_name``, validating the name."""
        _check_field(field_name)
        return getattr(self, field_name)

    def with_changes(self, **changes: Any) -> EditView:
        """Return a copy with ``changes`` applied.

        Raises:
            KeyError: If a change names an unknown field.
        """
        for name in changes:
            _check_field(name)
        if "art" in changes and isinstance(changes["art"], list):
            changes["art"] = tuple(changes["art"])
        return replace(self, **changes)

    def unresolved_fields(self) -> tuple[str, ...]:
        """Names of the fields still holding the unresolved marker."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is UNRESOLVED)


def _check_field(field_name: str) -> None:
    if field_name not in TAG_FIELDS:
        raise KeyError(f"Unknown tag field: {field_name}")


__all__ = ["EditView"]
