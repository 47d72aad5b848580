"""Numeric defaults and limits - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_build() -> bool:
    """Check whether verbose debug logging should be enabled by default.

    Enabled when GLYPHTYPE_DEBUG is "1" or "true", disabled for "0" or "false".
    Otherwise pre-release package versions (dev, alpha, beta, rc) enable it.
    """
    env_debug = os.environ.get("GLYPHTYPE_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False

    from glyphtype.version import get_glyphtype_version

    version_lower = get_glyphtype_version().lower()
    return any(indicator in version_lower for indicator in ("dev", "a", "b", "rc"))


DEBUG_BUILD: bool = _is_debug_build()
"""True for pre-release builds or when GLYPHTYPE_DEBUG is set."""


DEFAULT_KEY_DISTANCE = 1.0


MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
