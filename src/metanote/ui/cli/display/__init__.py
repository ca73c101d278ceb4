"""Rich display helpers for the Metanote CLI."""

from metanote.ui.cli.display.result import ResultDisplay
from metanote.ui.cli.display.view import ViewDisplay, describe_art

__all__ = ["ResultDisplay", "ViewDisplay", "describe_art"]
