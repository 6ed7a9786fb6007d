"""
fontconfirm – scan_fonts.py
===========================

Discover font files in a fixed list of font directories.

Behavior
--------
- **Non-recursive**: only the immediate entries of each directory are listed.
- **Files only**: sub-directories and dangling links are not reported.
- **Absorbing**: a missing or unreadable directory is skipped, never raised.
- **Deterministic**: the merged result is sorted by absolute path.

No filtering by extension is done here; whatever lives in a font directory
is listed, and classification happens at extraction time.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fontconfirm.config import DEFAULT_FONT_DIRS
from fontconfirm.observer import Observer, notify


@dataclass(frozen=True)
class FontFileEntry:
    """A discovered font file.

    Attributes:
        path: Absolute path of the file.
        name: Base name shown in listings.
    """

    path: str
    name: str

    @classmethod
    def from_path(cls, path: Path) -> FontFileEntry:
        absolute = path.absolute()
        return cls(path=str(absolute), name=absolute.name)


def _list_directory(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory``.

    Raises:
        OSError: If the directory itself cannot be listed.
    """
    files: list[Path] = []
    for child in directory.iterdir():
        try:
            if child.is_file():
                files.append(child)
        except OSError:
            # unreadable entry: skip it, keep scanning
            continue
    return files


def scan_font_directories(
    directories: Iterable[str | os.PathLike[str]] = DEFAULT_FONT_DIRS,
    observer: Observer | None = None,
) -> list[FontFileEntry]:
    """List font files across ``directories``.

    Files from every readable directory are concatenated in the given
    directory order and the merged list is then sorted ascending by
    absolute path.

    Args:
        directories: Directories to scan, in order.
        observer: Optional event callback (see :mod:`fontconfirm.observer`).

    Returns:
        The discovered files as :class:`FontFileEntry` values.
    """
    dirs = [Path(d) for d in directories]
    found: list[Path] = []

    for directory in dirs:
        try:
            found.extend(_list_directory(directory))
        except OSError as e:
            notify(
                observer,
                "directory_skipped",
                directory=str(directory),
                reason=e.strerror or type(e).__name__,
            )
            continue

    entries = sorted(
        (FontFileEntry.from_path(p) for p in found), key=lambda entry: entry.path
    )

    notify(observer, "scan_complete", count=len(entries), directories=len(dirs))
    return entries
