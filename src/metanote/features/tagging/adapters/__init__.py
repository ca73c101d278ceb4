# Where: metanote.features.tagging.adapters.__init__
# What: Expose the mutagen-backed tag I/O adapter.
# Why: Let composition roots wire a concrete codec into the editing session.

from .mutagen_tag_io import MutagenTagIO

__all__ = ["MutagenTagIO"]
