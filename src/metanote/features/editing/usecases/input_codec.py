"""Edit input codec.

Where: src/metanote/features/editing/usecases/input_codec.py
What: Convert EditView values to display text and parse user-entered text back.
Why: UI layers speak text; the engine speaks typed values plus the UNRESOLVED marker.
"""

from __future__ import annotations

from typing import Any

from metanote.shared.errors import ParseError
from metanote.shared.tag_record import NUMBER_FIELDS, SCALAR_FIELDS, TEXT_FIELDS

from ..domain.unresolved import UNRESOLVED, UNRESOLVED_NUMBER, UNRESOLVED_TEXT, is_unresolved


def display_text(value: Any) -> str:
    """Render a scalar EditView value for a text entry.

    UNRESOLVED renders as :data:`UNRESOLVED_TEXT`; ``None`` renders empty.
    """
    if is_unresolved(value):
        return UNRESOLVED_TEXT
    if value is None:
        return ""
    return str(value)


def parse_number(field_name: str, text: str) -> int | None:
    """Parse numeric entry text.

    Blank text clears the field. :data:`UNRESOLVED_NUMBER` is not accepted
    here; :func:`parse_input` maps it to UNRESOLVED first.

    Raises:
        ParseError: If ``text`` is not a non-negative integer.
    """
    stripped = text.strip()
    if not stripped:
        return None
    try:
        number = int(stripped)
    except ValueError as exc:
        raise ParseError(field_name, text) from exc
    if number < 0:
        raise ParseError(field_name, text)
    return number


def parse_input(field_name: str, text: str, *, current: Any = None) -> Any:
    """Parse user-entered ``text`` for ``field_name``.

    Args:
        field_name: Scalar tag field being edited.
        text: Raw entry text.
        current: The field's value before the edit. Blank text over an
            UNRESOLVED field keeps it unresolved ("leave blank to keep");
            for numeric fields whitespace counts as blank.

    Returns:
        The typed value, ``None`` to clear, or UNRESOLVED.

    Raises:
        KeyError: If ``field_name`` is not a scalar tag field.
        ParseError: If a numeric field receives non-numeric text.
    """
    if field_name not in SCALAR_FIELDS:
        raise KeyError(f"Not a scalar tag field: {field_name}")

    if text == UNRESOLVED_TEXT:
        return UNRESOLVED

    if field_name in TEXT_FIELDS:
        if text == "" and is_unresolved(current):
            return UNRESOLVED
        return text if text else None

    assert field_name in NUMBER_FIELDS
    if text.strip() == "" and is_unresolved(current):
        return UNRESOLVED
    if text.strip() == str(UNRESOLVED_NUMBER):
        return UNRESOLVED
    return parse_number(field_name, text)


__all__ = ["display_text", "parse_number", "parse_input"]
