"""Command line argument parsing for Metanote."""

from metanote.ui.cli.args.options import CLIArgs, EditArgs, ShowArgs
from metanote.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "EditArgs", "ShowArgs"]
