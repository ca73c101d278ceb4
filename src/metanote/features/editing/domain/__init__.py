# Where: metanote.features.editing.domain.__init__
# What: Expose the EditView value and the unresolved marker.
# Why: Let use cases and UI layers share one import path for the view model.

from .edit_view import EditView
from .unresolved import (
    UNRESOLVED,
    UNRESOLVED_NUMBER,
    UNRESOLVED_TEXT,
    Unresolved,
    is_unresolved,
)

__all__ = [
    "EditView",
    "Unresolved",
    "UNRESOLVED",
    "UNRESOLVED_TEXT",
    "UNRESOLVED_NUMBER",
    "is_unresolved",
]
