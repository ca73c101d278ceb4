# Where: metanote.features.tagging.usecases.__init__
# What: Expose artwork loading helpers.
# Why: Keep callers off the module layout of the tagging use cases.

from .artwork import detect_mime_type, load_art_image

__all__ = ["detect_mime_type", "load_art_image"]
