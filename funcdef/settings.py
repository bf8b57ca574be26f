from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    # None means compact JSON.
    json_indent: int | None


def settings_from_env() -> Settings:
    return Settings(json_indent=_indent_from_env(os.environ.get("FUNCDEF_JSON_INDENT")))


def _indent_from_env(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        indent = int(raw)
    except ValueError as e:
        raise RuntimeError(f"FUNCDEF_JSON_INDENT must be an integer, got {raw!r}") from e
    if indent < 0:
        raise RuntimeError(f"FUNCDEF_JSON_INDENT must be >= 0, got {indent}")
    return indent
