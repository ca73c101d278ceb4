"""Tag utility helpers.

Where: src/metanote/features/tagging/adapters/_tag_utils.py
What: Provide pure helper routines for parsing and formatting tag values.
Why: Share number/text conversions between the per-format handlers.
"""

from __future__ import annotations

from collections.abc import Sequence

from metanote.shared.errors import CodecError

__all__ = [
    "first_text",
    "parse_number",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "format_slash_separated",
    "format_number",
    "check_number",
]


def first_text(data: Sequence[object] | None) -> str | None:
    """Return the first element of a tag value list as text, or None."""
    if not data:
        return None
    return str(data[0])


def parse_number(value: str | None) -> int | None:
    """Parse a plain non-negative integer tag value, ignoring anything else."""
    if value is None:
        return None
    stripped = value.strip()
    return int(stripped) if stripped.isdigit() else None


def parse_slash_separated(value: str | None) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total); parts that are not digits become None.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = parse_number(parts[0]) if parts else None
    total: int | None = parse_number(parts[1]) if len(parts) > 1 else None
    return num, total


def parse_tuple_numbers(data: Sequence[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def check_number(field_name: str, value: int | None, maximum: int | None = None) -> int | None:
    """Validate that ``value`` can be stored as a tag number.

    Raises:
        CodecError: If ``value`` is negative or above ``maximum``.
    """
    if value is None:
        return None
    if value < 0 or (maximum is not None and value > maximum):
        raise CodecError(f"Cannot store {field_name}={value} in this tag format")
    return value


def format_number(field_name: str, value: int | None) -> str | None:
    """Format a single tag number as text."""
    checked = check_number(field_name, value)
    return str(checked) if checked is not None else None


def format_slash_separated(
    field_name: str,
    number: int | None,
    total: int | None,
) -> str | None:
    """Format a number/total pair as 'number/total', '/total', 'number', or None."""
    num_text = format_number(field_name, number)
    total_text = format_number(field_name, total)
    if num_text is None and total_text is None:
        return None
    if total_text is None:
        return num_text
    return f"{num_text or ''}/{total_text}"
