"""Command line interface for Metanote."""

import sys
from typing import final

from metanote.features.editing import WriteResult
from metanote.platform.logging import logger
from metanote.shared.errors import TagError
from metanote.ui.cli.args import ArgumentParser
from metanote.ui.cli.args.options import CLIArgs, EditArgs
from metanote.ui.cli.commands import CommandExecutor, EditCommand, ShowCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                EditCommand(args) if isinstance(args, EditArgs) else ShowCommand(args)
            )
            results = command.execute()
            if CommandProcessor._has_failures(command, results):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (TagError, OSError) as e:
            logger.error("%s", e)
            sys.exit(1)

    @staticmethod
    def _has_failures(command: CommandExecutor, results: list[WriteResult]) -> bool:
        """Unreadable inputs or any failed write make the run unsuccessful."""

        if command.read_failures or command.session.edit_view is None:
            return True
        return any(not result.success for result in results)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
