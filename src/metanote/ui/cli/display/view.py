"""src/metanote/ui/cli/display/view.py
What: Render the selection and its consolidated tag view as Rich tables.
Why: Show shared values plainly and flag differing fields with the placeholder token.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from metanote.features.editing import (
    UNRESOLVED_TEXT,
    EditView,
    Unresolved,
    display_text,
    is_unresolved,
)
from metanote.shared import SCALAR_FIELDS, ArtImage, TagRecord, record_subtitle, record_title


def describe_art(art: tuple[ArtImage, ...] | None | Unresolved) -> str:
    """Summarize an artwork field for a table cell."""
    if is_unresolved(art):
        return UNRESOLVED_TEXT
    if not art:
        return ""
    parts = [
        f"{image.mime_type}, {len(image.data)} bytes"
        + (f", {image.description!r}" if image.description else "")
        for image in art
    ]
    return "; ".join(parts)


def _cell(text: str, *, unresolved: bool) -> Text:
    return Text(text, style="dim italic" if unresolved else "")


@final
class ViewDisplay:
    """Handles selection and edit view display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize view display."""
        self.console = console or Console()

    def show_selection(self, records: Sequence[TagRecord], quiet: bool = False) -> None:
        """List the selected tracks as "Artist - Title" with their file names."""
        if quiet:
            return

        table = Table(title=f"Selection ({len(records)} file(s))")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Track")
        table.add_column("File", style="cyan")
        for index, record in enumerate(records, start=1):
            table.add_row(str(index), Text(record_title(record)), Text(record_subtitle(record)))
        self.console.print(table)

    def show_view(self, view: EditView, title: str = "Shared tags", quiet: bool = False) -> None:
        """Render every field of ``view``; differing fields show the placeholder."""
        if quiet:
            return

        table = Table(title=title)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for name in SCALAR_FIELDS:
            value = view.get(name)
            text = display_text(value)
            table.add_row(name.replace("_", "-"), _cell(text, unresolved=is_unresolved(value)))
        art_text = describe_art(view.art)
        table.add_row("art", _cell(art_text, unresolved=is_unresolved(view.art)))
        self.console.print(table)


__all__ = ["ViewDisplay", "describe_art"]
