"""Summary: Explicit marker for fields that differ across a selection.
Why: Keep "left untouched" distinct from every legitimate tag value inside the engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Unresolved(Enum):
    """Singleton marker type; the only member is :data:`UNRESOLVED`."""

    TOKEN = "unresolved"

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Final = Unresolved.TOKEN

# Placeholder shown to users for a differing text field. Typing it back is
# indistinguishable from leaving the field untouched.
UNRESOLVED_TEXT: Final[str] = "<Multiple Values>"

# Out-of-domain integer standing in for a differing numeric field. Entering it
# as user input yields the unresolved marker, even for a real track number.
UNRESOLVED_NUMBER: Final[int] = -1


def is_unresolved(value: object) -> bool:
    """Return True when ``value`` is the unresolved marker."""

    return value is UNRESOLVED


__all__ = [
    "Unresolved",
    "UNRESOLVED",
    "UNRESOLVED_TEXT",
    "UNRESOLVED_NUMBER",
    "is_unresolved",
]
