"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterator
from types import ModuleType

import pytest

import metanote.config.config as config_module
import metanote.config.settings as settings
from metanote.config.config import Config


@pytest.fixture
def reload_with() -> Iterator[Callable[[Config], ModuleType]]:
    """Reload settings against a substituted configuration, restoring it afterwards."""

    original = config_module.config

    def _reload(replacement: Config) -> ModuleType:
        config_module.config = replacement
        return importlib.reload(settings)

    try:
        yield _reload
    finally:
        config_module.config = original
        _ = importlib.reload(settings)


def test_defaults(reload_with: Callable[[Config], ModuleType]) -> None:
    reloaded = reload_with(Config())

    assert reloaded.ID3_VERSION == 4
    assert reloaded.ART_DESCRIPTION == "Cover"


def test_id3v23_is_accepted(reload_with: Callable[[Config], ModuleType]) -> None:
    assert reload_with(Config(id3_version=3)).ID3_VERSION == 3


def test_unsupported_id3_version_falls_back(reload_with: Callable[[Config], ModuleType]) -> None:
    assert reload_with(Config(id3_version=2)).ID3_VERSION == 4


@pytest.mark.parametrize("description", [None, ""])
def test_empty_art_description_is_none(
    reload_with: Callable[[Config], ModuleType], description: str | None
) -> None:
    assert reload_with(Config(art_description=description)).ART_DESCRIPTION is None
