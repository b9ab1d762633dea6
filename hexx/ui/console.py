from __future__ import annotations

import sys

from hexx.ui.style import colorize
from hexx.ui.theme import DEFAULT_THEME, Theme

PREFIX = "[hexx]"


def warn(msg: str) -> None:
    print(f"{PREFIX} warn: {msg}", file=sys.stderr)


def err(msg: str, theme: Theme = DEFAULT_THEME) -> None:
    print(colorize(f"ERROR: {msg}", "error", theme), file=sys.stderr)
