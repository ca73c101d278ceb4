"""Where: src/metanote/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple membership checks.
"""

from __future__ import annotations

from metanote.config.config import (
    ART_DESCRIPTION_DEFAULT,
    ID3_VERSION_DEFAULT,
    SUPPORTED_ID3_VERSIONS,
    config as app_config,
)

# Tag writing ----------------------------------------------------------------

_id3_version = getattr(app_config, "id3_version", ID3_VERSION_DEFAULT)
ID3_VERSION: int = (
    _id3_version if _id3_version in SUPPORTED_ID3_VERSIONS else ID3_VERSION_DEFAULT
)

_art_description = getattr(app_config, "art_description", ART_DESCRIPTION_DEFAULT)
ART_DESCRIPTION: str | None = (
    _art_description if isinstance(_art_description, str) and _art_description else None
)


__all__ = ["ID3_VERSION", "ART_DESCRIPTION"]
