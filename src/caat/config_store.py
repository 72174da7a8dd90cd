"""Persisted user configuration for caat.

Settings are stored as JSON in the config directory (see config.py).
A missing file yields defaults; a malformed file is reported and ignored.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .config import CONFIG_FILENAME, resolve_config_dir

logger = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")


@dataclass
class Config:
    """User preferences for rendering."""

    color: str = "auto"
    hyperlinks: bool = True
    allow_html: bool = True
    theme: dict[str, str] = field(default_factory=dict)


_config_cache: Config | None = None


def _get_config_dir() -> Path:
    return resolve_config_dir()


def _config_path() -> Path:
    return _get_config_dir() / CONFIG_FILENAME


def _config_from_dict(data: dict[str, object]) -> Config:
    """Build a Config from decoded JSON, skipping invalid values."""
    config = Config()

    color = data.get("color")
    if isinstance(color, str) and color in COLOR_MODES:
        config.color = color
    elif color is not None:
        logger.warning("Ignoring invalid color mode in config: %r", color)

    for name in ("hyperlinks", "allow_html"):
        value = data.get(name)
        if isinstance(value, bool):
            setattr(config, name, value)
        elif value is not None:
            logger.warning("Ignoring non-boolean %s in config: %r", name, value)

    theme = data.get("theme")
    if isinstance(theme, dict):
        config.theme = {str(k): str(v) for k, v in theme.items()}
    elif theme is not None:
        logger.warning("Ignoring theme in config: expected an object")

    return config


def load_config() -> Config:
    """Load the config file, caching the result.

    Returns:
        The stored Config, or defaults when the file is missing or unreadable.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    path = _config_path()
    if not path.exists():
        _config_cache = Config()
        return _config_cache

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read config file %s: %s", path, exc)
        _config_cache = Config()
        return _config_cache

    if not isinstance(data, dict):
        logger.warning("Config file %s does not contain a JSON object", path)
        _config_cache = Config()
        return _config_cache

    _config_cache = _config_from_dict(data)
    logger.debug("Loaded config from %s", path)
    return _config_cache


def save_config(config: Config) -> Path:
    """Write the config file atomically and refresh the cache.

    Args:
        config: Settings to persist.

    Returns:
        Path of the written config file.
    """
    global _config_cache
    config_dir = _get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / CONFIG_FILENAME

    payload = json.dumps(asdict(config), indent=2, sort_keys=True)
    fd, tmp_name = tempfile.mkstemp(dir=config_dir, prefix=".config-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload + "\n")
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    _config_cache = config
    logger.debug("Saved config to %s", path)
    return path


def clear_config_cache() -> None:
    """Forget the cached config so the next load reads from disk."""
    global _config_cache
    _config_cache = None
