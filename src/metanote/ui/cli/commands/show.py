"""src/metanote/ui/cli/commands/show.py
What: Display the consolidated tags of the given files.
Why: Let users see which fields are shared before editing.
"""

from typing import override

from metanote.features.editing import WriteResult
from metanote.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor):
    """Command for showing the shared tags of a selection."""

    @override
    def execute(self) -> list[WriteResult]:
        if not self.open_selection():
            return []
        view = self.session.edit_view
        assert view is not None
        self.view_display.show_view(view, quiet=self.args.quiet)
        return []
