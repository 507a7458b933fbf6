from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .diff import DIFF_SIZE


@dataclass(frozen=True, slots=True)
class ReportOptions:
    context: int = 2  # lines shown around the located line
    diff_size: int = DIFF_SIZE  # characters kept per side before truncating
    color: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportOptions":
        """Options from `NO_COLOR`, `FORCE_COLOR`, `ERRORFRAME_CONTEXT` and
        `ERRORFRAME_DIFF_SIZE`."""
        env = os.environ if environ is None else environ
        defaults = cls()
        color = defaults.color
        if env.get("FORCE_COLOR"):
            color = True
        if env.get("NO_COLOR"):
            color = False
        return cls(
            context=_int_from(env, "ERRORFRAME_CONTEXT", defaults.context),
            diff_size=_int_from(env, "ERRORFRAME_DIFF_SIZE", defaults.diff_size),
            color=color,
        )


def _int_from(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{key} must not be negative, got {value}")
    return value
