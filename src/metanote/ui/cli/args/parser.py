"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from metanote.config.config import Config
from metanote.platform.logging import DEFAULT_LOG_FILE, setup_logger
from metanote.shared.tag_record import SCALAR_FIELDS
from metanote.ui.cli.args.options import CLIArgs, EditArgs, ShowArgs


def normalize_field_name(name: str) -> str:
    """Map ``album-artist`` style names onto tag field names."""
    return name.strip().lower().replace("-", "_")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="metanote",
            description="Metanote - view and batch-edit tags across audio files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Fields: " + ", ".join(name.replace("_", "-") for name in SCALAR_FIELDS),
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser(
            "show",
            help="Show the tags shared by the given files",
        )
        ArgumentParser._configure_common(show_parser)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Change tags on every given file, keeping fields you do not touch",
        )
        ArgumentParser._configure_common(edit_parser)
        _ = edit_parser.add_argument(
            "--set",
            action="append",
            default=[],
            dest="assignments",
            metavar="FIELD=VALUE",
            help="Set FIELD to VALUE on every file (repeatable)",
        )
        _ = edit_parser.add_argument(
            "--clear",
            action="append",
            default=[],
            dest="clear_fields",
            metavar="FIELD",
            help="Remove FIELD from every file (repeatable)",
        )
        art_group = edit_parser.add_mutually_exclusive_group()
        _ = art_group.add_argument(
            "--art",
            action="append",
            default=[],
            dest="art_paths",
            metavar="IMAGE",
            help="Replace the artwork of every file with IMAGE (repeatable, kept in order)",
        )
        _ = art_group.add_argument(
            "--no-art",
            action="store_true",
            dest="remove_art",
            help="Remove all artwork from every file",
        )
        _ = edit_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show the resulting tags without writing any file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        paths = [Path(raw) for raw in parsed_args.paths]

        if parsed_args.command == "show":
            return ShowArgs(
                command="show",
                paths=paths,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        return ArgumentParser._process_edit(parser, parsed_args, paths)

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for every subparser."""

        _ = parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Audio files to edit together",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _process_edit(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
        paths: list[Path],
    ) -> EditArgs:
        assignments: list[tuple[str, str]] = []
        for raw in parsed_args.assignments:
            name, separator, value = raw.partition("=")
            field_name = normalize_field_name(name)
            if not separator or field_name not in SCALAR_FIELDS:
                parser.error(f"--set expects FIELD=VALUE with a known field, got {raw!r}")
            assignments.append((field_name, value))

        clear_fields: list[str] = []
        for raw in parsed_args.clear_fields:
            field_name = normalize_field_name(raw)
            if field_name not in SCALAR_FIELDS:
                parser.error(f"--clear expects a known field, got {raw!r}")
            clear_fields.append(field_name)

        overlap = {name for name, _ in assignments} & set(clear_fields)
        if overlap:
            parser.error(f"Fields both set and cleared: {', '.join(sorted(overlap))}")

        return EditArgs(
            command="edit",
            paths=paths,
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
            dry_run=bool(parsed_args.dry_run),
            assignments=assignments,
            clear_fields=clear_fields,
            art_paths=[Path(raw) for raw in parsed_args.art_paths],
            remove_art=bool(parsed_args.remove_art),
        )
