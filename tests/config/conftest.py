"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point portable path detection at a temporary repository root.

    The cached configuration singleton is reset around the test.
    """

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import metanote.config.paths as paths
    from metanote.config.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("METANOTE_CONFIG", raising=False)

    Config.reset()
    try:
        yield tmp_path
    finally:
        Config.reset()
