"""Byte classification shared by the hex and ASCII columns.

Every value 0..255 maps to exactly one category. The category decides the
theme role used to color the cell and, for non-printable bytes, the glyph
shown in the ASCII column.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexx.ui.style import colorize
from hexx.ui.theme import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class ByteCategory:
    name: str
    role: str
    glyph: str | None = None


ZERO = ByteCategory("zero", "zero", "⋄")
CONTROL = ByteCategory("control", "control", "×")
DIGIT = ByteCategory("digit", "digit")
PRINTABLE = ByteCategory("printable", "printable")
EXTENDED = ByteCategory("extended", "extended", "•")

CATEGORIES = (ZERO, CONTROL, DIGIT, PRINTABLE, EXTENDED)


def _category_for(value: int) -> ByteCategory:
    if value == 0:
        return ZERO
    if 1 <= value <= 32:
        return CONTROL
    if 48 <= value <= 57:
        return DIGIT
    if 127 <= value <= 255:
        return EXTENDED
    return PRINTABLE


_TABLE: tuple[ByteCategory, ...] = tuple(_category_for(value) for value in range(256))


def classify(value: int) -> ByteCategory:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return _TABLE[value]


def render_hex(value: int, theme: Theme = DEFAULT_THEME) -> str:
    category = classify(value)
    return colorize(f"{value:02x}", category.role, theme)


def render_ascii(value: int, theme: Theme = DEFAULT_THEME) -> str:
    category = classify(value)
    char = category.glyph if category.glyph is not None else chr(value)
    return colorize(char, category.role, theme)
