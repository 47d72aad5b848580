"""XDG-compliant path helpers for glyphtype settings."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory, honouring GLYPHTYPE_CONFIG_DIR."""
    override = os.environ.get("GLYPHTYPE_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("glyphtype"))


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"
