from __future__ import annotations

from typing import Iterator

from hexx.core.classify import render_ascii, render_hex
from hexx.core.ranges import ROW_WIDTH, AlignedRange
from hexx.ui.style import colorize
from hexx.ui.theme import DEFAULT_THEME, Theme

BORDER = "│"
MID_SEPARATOR = "┆"
HALF_ROW = ROW_WIDTH // 2

HEX_PAD = "   "
ASCII_PAD = " "


def render_row(
    data: bytes,
    row_offset: int,
    rng: AlignedRange,
    theme: Theme = DEFAULT_THEME,
) -> str:
    border = colorize(BORDER, "border", theme)
    mid = colorize(MID_SEPARATOR, "border", theme)

    hex_cells: list[str] = []
    ascii_cells: list[str] = []
    for column in range(ROW_WIDTH):
        offset = row_offset + column
        if offset >= rng.end or offset < rng.start:
            hex_cells.append(HEX_PAD)
            ascii_cells.append(ASCII_PAD)
        else:
            value = data[offset]
            hex_cells.append(" " + render_hex(value, theme))
            ascii_cells.append(render_ascii(value, theme))
        if column == HALF_ROW - 1:
            hex_cells.append(" " + mid)
            ascii_cells.append(mid)

    addr_text = colorize(f"{row_offset:08x}", "addr", theme)
    return (
        f"{border}{addr_text}{border}"
        f"{''.join(hex_cells)} {border}"
        f"{''.join(ascii_cells)}{border}"
    )


def render_rows(
    data: bytes,
    rng: AlignedRange,
    theme: Theme = DEFAULT_THEME,
) -> Iterator[str]:
    for row_offset in rng.row_offsets():
        yield render_row(data, row_offset, rng, theme)
