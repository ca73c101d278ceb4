# Where: metanote.features.tagging.__init__
# What: Expose the concrete tag codec adapter and artwork loading.
# Why: Provide a cohesive import surface for composition roots.

from .adapters import MutagenTagIO
from .usecases import detect_mime_type, load_art_image

__all__ = ["MutagenTagIO", "detect_mime_type", "load_art_image"]
