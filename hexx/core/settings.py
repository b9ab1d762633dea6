from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    theme: str = "base"
    show_header: bool = True
