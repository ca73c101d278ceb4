"""Command execution package for CLI."""

from metanote.ui.cli.commands.edit import EditCommand
from metanote.ui.cli.commands.executor import CommandExecutor
from metanote.ui.cli.commands.show import ShowCommand

__all__ = ["CommandExecutor", "EditCommand", "ShowCommand"]
