from io import BytesIO
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont


def default_names(family: str = "Test Sans", style: str = "Regular") -> dict:
    return {
        "copyright": f"Copyright (c) {family} Authors",
        "familyName": family,
        "styleName": style,
        "uniqueFontIdentifier": f"{family}-{style};1.000",
        "fullName": f"{family} {style}",
        "psName": f"{family.replace(' ', '')}-{style}",
    }


def build_font(names: dict | None = None) -> TTFont:
    """Build a minimal TrueType font with the given name strings."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space"])
    fb.setupCharacterMap({0x20: "space"})
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in (".notdef", "space")})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "space": (250, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(default_names() if names is None else names)
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    # round-trip through bytes so the result behaves like a font read from disk
    buf = BytesIO()
    fb.save(buf)
    buf.seek(0)
    return TTFont(buf)


def write_font(path: Path, names: dict | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    build_font(names).save(path)
    return path


def write_collection(path: Path, names_list: list[dict]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    col = TTCollection()
    col.fonts = [build_font(names) for names in names_list]
    col.save(path)
    return path


class EventRecorder:
    """Observer collecting ``(event, fields)`` tuples."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def __call__(self, event, **fields):
        self.events.append((event, fields))

    def names(self) -> list[str]:
        return [event for event, _ in self.events]
