"""Fixtures producing minimal real audio files for codec tests."""

from __future__ import annotations

import struct
from pathlib import Path

import pytest

# Sample rate 44100 Hz, 2 channels, 16 bits per sample, no audio frames.
_STREAMINFO_BITS = (44100 << 44) | (1 << 41) | (15 << 36)


def _minimal_flac() -> bytes:
    streaminfo = (
        struct.pack(">HH", 4096, 4096)
        + b"\x00\x00\x00"
        + b"\x00\x00\x00"
        + struct.pack(">Q", _STREAMINFO_BITS)
        + b"\x00" * 16
    )
    # Last-metadata-block flag, block type 0 (STREAMINFO), length 34.
    return b"fLaC" + b"\x80\x00\x00\x22" + streaminfo


@pytest.fixture
def flac_file(tmp_path: Path) -> Path:
    """A tagless FLAC file with a valid STREAMINFO block."""
    path = tmp_path / "track.flac"
    _ = path.write_bytes(_minimal_flac())
    return path


@pytest.fixture
def mp3_file(tmp_path: Path) -> Path:
    """An empty file with an .mp3 extension and no ID3 header."""
    path = tmp_path / "track.mp3"
    _ = path.write_bytes(b"")
    return path
