"""Load artwork images from disk.

Where: src/metanote/features/tagging/usecases/artwork.py
What: Build ArtImage values from image files chosen by the user.
Why: Artwork edits arrive as file paths; the engine stores raw bytes plus a MIME type.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Final

from metanote.platform.logging import logger
from metanote.shared.errors import CodecError
from metanote.shared.tag_record import ArtImage

# Leading bytes of the image formats tag containers accept.
_SIGNATURES: Final[tuple[tuple[bytes, str], ...]] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
)


def detect_mime_type(path: Path, data: bytes) -> str | None:
    """Return the image MIME type from its signature, falling back to the extension."""

    for signature, mime_type in _SIGNATURES:
        if data.startswith(signature):
            return mime_type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"

    guessed, _ = mimetypes.guess_type(path.name)
    if guessed is not None and guessed.startswith("image/"):
        return guessed
    return None


def load_art_image(path: Path, description: str | None = None) -> ArtImage:
    """Read ``path`` into an ArtImage.

    Args:
        path: Image file to embed.
        description: Optional description stored with the image.

    Returns:
        ArtImage: The image bytes with their detected MIME type.

    Raises:
        OSError: If the file cannot be read.
        CodecError: If the file is not a recognizable image.
    """
    data = path.read_bytes()
    mime_type = detect_mime_type(path, data)
    if mime_type is None:
        raise CodecError("Not a recognizable image file", path)
    logger.debug("Loaded %s artwork from %s (%d bytes)", mime_type, path, len(data))
    return ArtImage(mime_type=mime_type, data=data, description=description)


__all__ = ["detect_mime_type", "load_art_image"]
