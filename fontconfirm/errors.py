"""Exception types raised by fontconfirm."""

from __future__ import annotations

from pathlib import Path


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


class FontParseError(Exception):
    """A font file could not be turned into metadata records.

    Attributes:
        path: The file that failed, exactly as given by the caller.
        reason: Short human-readable cause.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FontReadError(FontParseError):
    """The file could not be opened or read."""


class FontFormatError(FontParseError):
    """The bytes were read but are not a font of the expected kind."""
