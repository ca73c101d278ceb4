"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    paths: list[Path]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    paths: list[Path]
    verbose: bool
    quiet: bool
    dry_run: bool
    assignments: list[tuple[str, str]] = field(default_factory=list)
    clear_fields: list[str] = field(default_factory=list)
    art_paths: list[Path] = field(default_factory=list)
    remove_art: bool = False


CLIArgs = ShowArgs | EditArgs

__all__ = ["CLIArgs", "EditArgs", "ShowArgs"]
