"""src/metanote/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse session setup and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from metanote.features.editing import ReadFailure, SelectionSession, TagIOPort, WriteResult
from metanote.features.tagging import MutagenTagIO
from metanote.platform.logging import logger
from metanote.ui.cli.args.options import CLIArgs
from metanote.ui.cli.display.result import ResultDisplay
from metanote.ui.cli.display.view import ViewDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    session: SelectionSession
    read_failures: list[ReadFailure]
    view_display: ViewDisplay
    result_display: ResultDisplay

    def __init__(
        self,
        args: CLIArgs,
        tag_io: TagIOPort | None = None,
        view_display: ViewDisplay | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            tag_io: Tag codec; defaults to the mutagen adapter.
            view_display: Renderer for the selection and its tags.
            result_display: Renderer for failures and save summaries.
        """
        self.args = args
        io = tag_io or MutagenTagIO()
        self.session = SelectionSession(reader=io, writer=io)
        self.read_failures = []
        self.view_display = view_display or ViewDisplay()
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def execute(self) -> list[WriteResult]:
        """Execute the command.

        Returns:
            List of write results (empty when nothing was written).
        """
        pass

    def open_selection(self) -> bool:
        """Read the requested files into the session.

        Returns:
            bool: True when at least one file could be read.
        """
        self.read_failures = self.session.open(self.args.paths)
        self.result_display.show_read_failures(self.read_failures)
        if self.session.edit_view is None:
            logger.error("None of the %d given file(s) could be read", len(self.args.paths))
            return False
        self.view_display.show_selection(self.session.records, quiet=self.args.quiet)
        return True
