from __future__ import annotations

from typing import Iterator

from hexx.core.ranges import AlignedRange
from hexx.ui.hexdump import BORDER, HALF_ROW, MID_SEPARATOR, render_rows
from hexx.ui.style import colorize
from hexx.ui.text import pad_ansi
from hexx.ui.theme import DEFAULT_THEME, Theme

CAPTION = "hexx"
ASCII_CAPTION = "Ascii"
HEX_LABELS = "0123456789ABCDEF"

# Every line is 80 columns: offset 8, hex 50, ascii 17, plus borders.
_TOP = (
    "┌" + "─" * 8
    + "┬" + "─" * 25
    + "┬" + "─" * 25
    + "┬" + "─" * 8
    + "─" + "─" * 8
    + "┐"
)
_BOTTOM = (
    "└" + "─" * 8
    + "┴" + "─" * 25
    + "┴" + "─" * 25
    + "┴" + "─" * 8
    + "┴" + "─" * 8
    + "┘"
)


def header_lines(theme: Theme = DEFAULT_THEME) -> list[str]:
    border = colorize(BORDER, "border", theme)
    labels: list[str] = []
    for idx, label in enumerate(HEX_LABELS):
        labels.append(f"  {label}")
        if idx == HALF_ROW - 1:
            labels.append(" " + colorize(MID_SEPARATOR, "border", theme))
    caption_line = (
        f"{border}  {CAPTION}  {border}"
        f"{''.join(labels)} "
        f"{pad_ansi(border, 7)}{pad_ansi(ASCII_CAPTION, 11)}{border}"
    )
    return [colorize(_TOP, "border", theme), caption_line]


def footer_line(theme: Theme = DEFAULT_THEME) -> str:
    return colorize(_BOTTOM, "border", theme)


def render_table(
    data: bytes,
    rng: AlignedRange,
    theme: Theme = DEFAULT_THEME,
    show_header: bool = True,
) -> Iterator[str]:
    if show_header:
        yield from header_lines(theme)
    yield from render_rows(data, rng, theme)
    if show_header:
        yield footer_line(theme)
