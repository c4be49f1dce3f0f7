from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectKitConfig:
    strict_combinators: bool = False  # reject anything but " ", "+", "~", ">"
    json_indent: int | None = None
    json_ensure_ascii: bool = False
