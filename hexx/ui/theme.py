from __future__ import annotations

from dataclasses import dataclass

from hexx.ui.ansi import AnsiToken, Color, Style


@dataclass(frozen=True)
class Theme:
    name: str
    colors: dict[str, tuple[AnsiToken, ...]]


def _t(*tokens: AnsiToken) -> tuple[AnsiToken, ...]:
    return tokens


BASE_THEME = Theme(
    name="base",
    colors={
        "addr": _t(Color.CYAN),
        "zero": _t(Color.RED),
        "control": _t(Color.YELLOW),
        "digit": _t(Color.MAGENTA),
        "extended": _t(Color.BLUE),
        "printable": _t(Color.GREEN),
        "border": _t(),
        "error": _t(Color.RED),
    },
)


BRIGHT = Theme(
    name="bright",
    colors={
        "addr": _t(Style.BOLD, Color.BRIGHT_CYAN),
        "zero": _t(Color.BRIGHT_RED),
        "control": _t(Color.BRIGHT_YELLOW),
        "digit": _t(Color.BRIGHT_MAGENTA),
        "extended": _t(Color.BRIGHT_BLUE),
        "printable": _t(Color.BRIGHT_GREEN),
        "border": _t(Color.BRIGHT_BLACK),
        "error": _t(Style.BOLD, Color.BRIGHT_RED),
    },
)


THEMES = {
    BASE_THEME.name: BASE_THEME,
    BRIGHT.name: BRIGHT,
}

DEFAULT_THEME = BASE_THEME


def get_theme(name: str) -> Theme:
    return THEMES.get(name, DEFAULT_THEME)
