"""
fontconfirm – present.py
========================

Text rendering for the two views: the file listing and the font detail.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from fontconfirm.extract_metadata import FontMetadataRecord
from fontconfirm.scan_fonts import FontFileEntry

# ============================================================
# Listing
# ============================================================


def render_listing(
    entries: Sequence[FontFileEntry], numbered: bool = False
) -> list[str]:
    """Return one display line per entry, in the order received.

    Args:
        entries: Scanned files.
        numbered: Prefix each line with its zero-based index.
    """
    if numbered:
        width = len(str(max(len(entries) - 1, 0)))
        return [f"{i:>{width}}  {entry.name}" for i, entry in enumerate(entries)]
    return [entry.name for entry in entries]


def select_font_path(entries: Sequence[FontFileEntry], index: int) -> str:
    """Map a listing selection back to the file's absolute path.

    Raises:
        IndexError: If ``index`` is outside ``0 .. len(entries) - 1``.
    """
    if not 0 <= index < len(entries):
        if not entries:
            raise IndexError(f"index {index} out of range: no font files found")
        raise IndexError(
            f"index {index} out of range: expected 0..{len(entries) - 1}"
        )
    return entries[index].path


# ============================================================
# Detail
# ============================================================


def format_family_names(names: Sequence[str]) -> str:
    """Stringify family names as ``[a, b]``."""
    return "[" + ", ".join(names) + "]"


def record_lines(record: FontMetadataRecord) -> list[str]:
    """Return the five labeled field lines of one record."""
    return [
        f"postScriptName: {record.post_script_name}",
        f"familyNames: {format_family_names(record.family_names)}",
        f"subFamilyName: {record.sub_family_name}",
        f"fullName: {record.full_name}",
        f"copyrightNotice: {record.copyright_notice}",
    ]


def render_detail(
    path: str | os.PathLike[str],
    records: Sequence[FontMetadataRecord],
    collection: bool | None = None,
) -> list[str]:
    """Render metadata records as a flat list of display lines.

    Layout::

        filePath: <absolute path>
        <5 field lines>          # per record
        <blank line>             # per record, collection mode only

    In collection mode a blank line follows every record, the last one
    included.

    Args:
        path: The file the records came from.
        records: Records in extraction order.
        collection: Force collection mode on or off. ``None`` enables it
            when there is more than one record.

    Returns:
        The display lines.
    """
    if collection is None:
        collection = len(records) > 1

    lines = [f"filePath: {Path(path).absolute()}"]
    for record in records:
        lines.extend(record_lines(record))
        if collection:
            lines.append("")
    return lines
