"""
fontconfirm – config.py
=======================

Search configuration: which directories are scanned for font files.

Optional JSON file format::

    {
        "directories": ["/system/fonts", "/system/font", "/data/fonts"]
    }

A missing ``directories`` key keeps the defaults.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fontconfirm.errors import ConfigError

#: Conventional font directories, in scan order: the system font directory,
#: its legacy name, and the user/data font directory.
DEFAULT_FONT_DIRS: tuple[str, ...] = (
    "/system/fonts",
    "/system/font",
    "/data/fonts",
)


@dataclass(frozen=True)
class FontSearchConfig:
    directories: tuple[str, ...] = DEFAULT_FONT_DIRS


def load_config(path: Path | None = None) -> FontSearchConfig:
    """Load a :class:`FontSearchConfig`, falling back to the defaults.

    Args:
        path: Optional JSON configuration file. ``None`` means defaults only.

    Returns:
        The resulting configuration.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or has a
            ``directories`` value that is not a list of strings.
    """
    if path is None:
        return FontSearchConfig()

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path}: root is not a JSON object")

    if "directories" not in data:
        return FontSearchConfig()

    directories = data["directories"]
    if not isinstance(directories, list) or not all(
        isinstance(d, str) for d in directories
    ):
        raise ConfigError(
            f"config file {path}: 'directories' must be a list of strings"
        )

    return FontSearchConfig(directories=tuple(directories))


def resolve_directories(
    explicit: Sequence[str] | None, config_path: Path | None
) -> tuple[str, ...]:
    """Pick the directories to scan: explicit arguments win over the config."""
    if explicit:
        return tuple(explicit)
    return load_config(config_path).directories
