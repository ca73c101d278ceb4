"""Command line interface package for Metanote."""

from metanote.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
