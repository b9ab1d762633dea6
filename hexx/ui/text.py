from __future__ import annotations

from hexx.ui.ansi import strip_ansi


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad_ansi(text: str, width: int) -> str:
    length = visible_len(text)
    if length >= width:
        return text
    return text + (" " * (width - length))
