"""
fontconfirm – extract_metadata.py
=================================

Turn one font file into one metadata record per contained font program.

Key points
----------
- The container kind is decided by file extension only: ``ttc`` files are
  read as collections (one record per face), anything else as a single font.
  The extension is the text after the last dot of the file name, compared
  literally; content is never sniffed.
- All parsing is delegated to fontTools (``TTFont`` / ``TTCollection``).
- Every record carries the same five fields; values missing from the
  ``name`` table are reported as empty strings.
- Failures are raised as :class:`~fontconfirm.errors.FontParseError`
  subclasses carrying the offending path; nothing is retried.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

# fontTools does not ship type stubs.
from fontTools.ttLib import TTCollection, TTFont  # type: ignore[import]

from fontconfirm.errors import FontFormatError, FontParseError, FontReadError
from fontconfirm.observer import Observer, notify

# -----------------------
# Name table constants
# -----------------------
NAME_ID_COPYRIGHT = 0
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULLNAME = 4
NAME_ID_POSTSCRIPT = 6
NAME_ID_TYPOGRAPHIC_FAMILY = 16

PLATFORM_MAC = 1
PLATFORM_WINDOWS = 3
#: Mac Roman / Windows Symbol (0) and Unicode BMP (1).
SUPPORTED_ENCODINGS = (0, 1)
LANG_WINDOWS_EN_US = 0x409

#: Compared with the text after the last dot of the file name, so a file
#: named just ".ttc" counts too.
COLLECTION_EXTENSION = "ttc"


@dataclass(frozen=True)
class FontMetadataRecord:
    """Descriptive fields of one font program."""

    post_script_name: str = ""
    family_names: tuple[str, ...] = ()
    sub_family_name: str = ""
    full_name: str = ""
    copyright_notice: str = ""

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of the five fields."""
        return {
            "post_script_name": self.post_script_name,
            "family_names": list(self.family_names),
            "sub_family_name": self.sub_family_name,
            "full_name": self.full_name,
            "copyright_notice": self.copyright_notice,
        }


def is_collection(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` if ``path`` is handled as a font collection."""
    _, dot, extension = Path(path).name.rpartition(".")
    return bool(dot) and extension == COLLECTION_EXTENSION


# -----------------------
# Name table reading
# -----------------------
def _decode(rec: Any) -> str | None:
    """Decode a name record, or ``None`` if it holds no usable text."""
    try:
        s = rec.toUnicode()
    except UnicodeDecodeError:
        return None
    return s if s.strip() else None


def record_from_font(tt: TTFont) -> FontMetadataRecord:
    """Build a :class:`FontMetadataRecord` from an open ``TTFont``.

    Only Macintosh and Windows records with encoding 0 or 1 are used.
    Single-valued fields keep the first non-empty value, except the full
    name where a Windows US-English record takes precedence. Family names
    collect nameID 1 and 16 values, de-duplicated in first-seen order.

    Args:
        tt: An open font (a single face, possibly from a collection).

    Returns:
        The record; all fields empty if the font has no ``name`` table.
    """
    if "name" not in tt:
        return FontMetadataRecord()

    first: dict[int, str] = {}
    family_names: list[str] = []
    full_name_en_us: str | None = None

    for rec in tt["name"].names:
        if rec.platformID not in (PLATFORM_MAC, PLATFORM_WINDOWS):
            continue
        if rec.platEncID not in SUPPORTED_ENCODINGS:
            continue
        text = _decode(rec)
        if text is None:
            continue

        name_id = int(rec.nameID)
        first.setdefault(name_id, text)

        if name_id in (NAME_ID_FAMILY, NAME_ID_TYPOGRAPHIC_FAMILY):
            if text not in family_names:
                family_names.append(text)
        elif (
            name_id == NAME_ID_FULLNAME
            and full_name_en_us is None
            and rec.platformID == PLATFORM_WINDOWS
            and rec.langID == LANG_WINDOWS_EN_US
        ):
            full_name_en_us = text

    full_name = full_name_en_us or first.get(NAME_ID_FULLNAME, "")
    post_script_name = first.get(NAME_ID_POSTSCRIPT) or re.sub(r"\s+", "", full_name)

    return FontMetadataRecord(
        post_script_name=post_script_name,
        family_names=tuple(family_names),
        sub_family_name=first.get(NAME_ID_SUBFAMILY, ""),
        full_name=full_name,
        copyright_notice=first.get(NAME_ID_COPYRIGHT, ""),
    )


# -----------------------
# Extraction
# -----------------------
def _read_single_font(stream: BinaryIO) -> FontMetadataRecord:
    with TTFont(stream, recalcBBoxes=False, recalcTimestamp=False) as tt:
        return record_from_font(tt)


def _read_collection(stream: BinaryIO) -> list[FontMetadataRecord]:
    with TTCollection(stream, recalcBBoxes=False, recalcTimestamp=False) as col:
        return [record_from_font(tt) for tt in col.fonts]


def _report(error: FontParseError, observer: Observer | None) -> FontParseError:
    notify(observer, "parse_failed", path=error.path, error=error.reason)
    return error


def extract_font_metadata(
    path: str | os.PathLike[str], observer: Observer | None = None
) -> list[FontMetadataRecord]:
    """Extract metadata records from one font file.

    Behavior:
    - Collection files (see :func:`is_collection`) return one record per
      face, in the collection's order.
    - Any other file returns a one-element list.

    The file is opened once and closed before returning, on success and on
    failure alike.

    Args:
        path: Font file path.
        observer: Optional event callback, told about parse failures.

    Returns:
        The metadata records.

    Raises:
        FontReadError: The file could not be opened or read.
        FontFormatError: fontTools could not parse the file as the
            expected container kind.
    """
    font_path = Path(path)
    try:
        with font_path.open("rb") as stream:
            if is_collection(font_path):
                return _read_collection(stream)
            return [_read_single_font(stream)]
    except OSError as e:
        raise _report(FontReadError(path, e.strerror or str(e)), observer) from e
    except Exception as e:
        # fontTools raises TTLibError, struct.error, AssertionError, ...
        reason = str(e) or type(e).__name__
        raise _report(FontFormatError(path, reason), observer) from e
