"""Configuration path resolution for caat.

The config directory is resolved in this order:
- $CAAT_CONFIG_DIR
- $XDG_CONFIG_HOME/caat
- ~/.config/caat
"""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "caat"
CONFIG_FILENAME = "config.json"


def resolve_config_dir() -> Path:
    """Resolve the directory holding the caat config file.

    Returns:
        Path to the config directory. The directory may not exist yet.
    """
    override = os.environ.get("CAAT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home).expanduser() / APP_NAME

    return Path.home() / ".config" / APP_NAME


def resolve_config_path() -> Path:
    """Resolve the full path of the config file."""
    return resolve_config_dir() / CONFIG_FILENAME
