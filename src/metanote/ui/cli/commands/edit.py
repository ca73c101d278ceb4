"""src/metanote/ui/cli/commands/edit.py
What: Apply field edits to the given files and save them.
Why: Broadcast the requested changes while every other field keeps its per-file value.
"""

from typing import override

from metanote.config.settings import ART_DESCRIPTION
from metanote.features.editing import EditView, WriteResult, merge_records, resolve
from metanote.features.tagging import load_art_image
from metanote.platform.logging import logger
from metanote.ui.cli.args.options import EditArgs
from metanote.ui.cli.commands.executor import CommandExecutor


class EditCommand(CommandExecutor):
    """Command for batch-editing the tags of a selection."""

    args: EditArgs

    @override
    def execute(self) -> list[WriteResult]:
        """Execute the edit command.

        Returns:
            List of write results, empty on a dry run.

        Raises:
            ParseError: If a numeric field is set to non-numeric text.
            CodecError: If an artwork file is not an image.
        """
        if not self.open_selection():
            return []

        for field_name, text in self.args.assignments:
            _ = self.session.apply_input(field_name, text)

        view = self.session.edit_view
        assert view is not None
        changes: dict[str, object] = {name: None for name in self.args.clear_fields}
        if self.args.art_paths:
            changes["art"] = tuple(
                load_art_image(path, description=ART_DESCRIPTION) for path in self.args.art_paths
            )
        elif self.args.remove_art:
            changes["art"] = None
        if changes:
            view = view.with_changes(**changes)
            self.session.edit_view = view

        if self.args.dry_run:
            self._show_dry_run(view)
            return []

        if not self.args.quiet:
            self.view_display.show_view(view, title="Tags to apply")
        results = self.session.save()
        self.result_display.show_results(results, quiet=self.args.quiet)
        return results

    def _show_dry_run(self, view: EditView) -> None:
        logger.info("Dry run: no files will be written")
        for record in self.session.records:
            self.view_display.show_view(
                merge_records([resolve(record, view)]),
                title=str(record.path),
                quiet=self.args.quiet,
            )
