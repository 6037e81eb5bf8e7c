"""Parsing of the guifont option string."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

FLOAT32_EPSILON = 1.1920929e-07
DEFAULT_FONT_SIZE = 14.0


class FontEdging(Enum):
    ANTI_ALIAS = "antialias"
    SUBPIXEL_ANTI_ALIAS = "subpixelantialias"
    ALIAS = "alias"

    @classmethod
    def parse(cls, value: str) -> FontEdging:
        if value == "antialias":
            return cls.ANTI_ALIAS
        if value == "subpixelantialias":
            return cls.SUBPIXEL_ANTI_ALIAS
        return cls.ALIAS


class FontHinting(Enum):
    FULL = "full"
    NORMAL = "normal"
    SLIGHT = "slight"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> FontHinting:
        if value == "full":
            return cls.FULL
        if value == "normal":
            return cls.NORMAL
        if value == "slight":
            return cls.SLIGHT
        return cls.NONE


def points_to_pixels(value: float) -> float:
    """Convert a size in points to pixels; on macOS the two are equal."""
    if sys.platform == "darwin":
        return value
    pixels_per_inch = 96.0
    points_per_inch = 72.0
    return value * (pixels_per_inch / points_per_inch)


def parse_font_name(font_name: str) -> str:
    """Turn underscores into spaces; a backslash takes the next character literally."""
    chars = iter(font_name)
    result = []
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            result.append(escaped)
        elif ch == "_":
            result.append(" ")
        else:
            result.append(ch)
    return "".join(result)


def _parse_size(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass(eq=False)
class FontOptions:
    font_list: list[str] = field(default_factory=list)
    size: float = field(default_factory=lambda: points_to_pixels(DEFAULT_FONT_SIZE))
    bold: bool = False
    italic: bool = False
    allow_float_size: bool = False
    hinting: FontHinting = FontHinting.FULL
    edging: FontEdging = FontEdging.ANTI_ALIAS

    @classmethod
    def parse(cls, guifont_setting: str) -> FontOptions:
        options = cls()
        parts = [part for part in guifont_setting.split(":") if part]
        if not parts:
            return options

        font_list = [parse_font_name(name) for name in parts[0].split(",") if name]
        if font_list:
            options.font_list = font_list

        for part in parts[1:]:
            if part.startswith("#h-"):
                options.hinting = FontHinting.parse(part[3:])
            elif part.startswith("#e-"):
                options.edging = FontEdging.parse(part[3:])
            elif part.startswith("h") and len(part) > 1:
                if "." in part:
                    options.allow_float_size = True
                size = _parse_size(part[1:])
                if size is not None:
                    options.size = points_to_pixels(size)
            elif part == "b":
                options.bold = True
            elif part == "i":
                options.italic = True
        return options

    def primary_font(self) -> Optional[str]:
        return self.font_list[0] if self.font_list else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontOptions):
            return NotImplemented
        return (
            self.font_list == other.font_list
            and abs(self.size - other.size) < FLOAT32_EPSILON
            and self.bold == other.bold
            and self.italic == other.italic
            and self.edging == other.edging
            and self.hinting == other.hinting
        )