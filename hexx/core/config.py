from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Callable

from hexx.core.paths import config_path
from hexx.core.settings import Settings
from hexx.ui.theme import THEMES


@dataclass(frozen=True)
class SettingSpec:
    key: str
    attr: str
    validate: Callable[[object], bool]


_SPECS = (
    SettingSpec("theme", "theme", lambda value: isinstance(value, str) and value in THEMES),
    SettingSpec("show_header", "show_header", lambda value: isinstance(value, bool)),
)


def load_settings(settings: Settings, path: str | None = None) -> bool:
    """Apply the JSON config file on top of ``settings``.

    Returns False when there is no usable file; keys that are unknown or
    carry invalid values are skipped.
    """
    if path is None:
        path = config_path()
    if not path or not os.path.isfile(path):
        return False

    try:
        with open(path, "r") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return False

    if not isinstance(data, dict):
        return False

    _apply_settings(settings, data)
    return True


def _apply_settings(settings: Settings, data: dict[str, object]) -> None:
    for spec in _SPECS:
        if spec.key not in data:
            continue
        value = data[spec.key]
        if not spec.validate(value):
            continue
        setattr(settings, spec.attr, value)
