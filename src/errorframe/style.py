from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


_ESC = "\x1b["
_RESET = f"{_ESC}0m"


def _wrap(code: str) -> Callable[[str], str]:
    def paint(text: str) -> str:
        return f"{_ESC}{code}m{text}{_RESET}"

    return paint


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True, slots=True)
class Palette:
    """Text decorations applied on top of already formatted plain strings."""

    red: Callable[[str], str] = _identity
    green: Callable[[str], str] = _identity
    yellow: Callable[[str], str] = _identity
    gray: Callable[[str], str] = _identity
    bold: Callable[[str], str] = _identity


PLAIN = Palette()
ANSI = Palette(
    red=_wrap("31"),
    green=_wrap("32"),
    yellow=_wrap("33"),
    gray=_wrap("90"),
    bold=_wrap("1"),
)


def palette_for(color: bool) -> Palette:
    return ANSI if color else PLAIN
