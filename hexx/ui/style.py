from __future__ import annotations

from hexx.ui.ansi import RESET, escape
from hexx.ui.theme import Theme


def colorize(text: str, role: str, theme: Theme) -> str:
    tokens = theme.colors.get(role)
    if not tokens:
        return text
    prefix = escape(tokens)
    if not prefix:
        return text
    return f"{prefix}{text}{RESET}"
