from __future__ import annotations

import re

from .errors import OffsetOutOfRangeError
from .spans import Position


_SPLIT_RE = re.compile(r"\r?\n")


def split_lines(source: str) -> list[str]:
    return _SPLIT_RE.split(source)


def position_to_offset(source: str, pos: int | Position) -> int:
    """Absolute offset of `pos` in `source`.

    Every line before `pos.line` counts as its length plus one for the line
    break, whatever the break actually was. Columns past the end of the line
    are not checked.
    """
    if isinstance(pos, int):
        return pos
    lines = split_lines(source)
    start = 0
    for text in lines[: pos.line - 1]:
        start += len(text) + 1
    return start + pos.column


def offset_to_position(source: str, offset: int | Position) -> Position:
    if isinstance(offset, Position):
        return offset
    if offset > len(source):
        raise OffsetOutOfRangeError(offset=offset, length=len(source))

    lines = split_lines(source)
    counted = 0
    for line, text in enumerate(lines):
        line_length = len(text) + 1
        if counted + line_length >= offset:
            return Position(line=line + 1, column=offset - counted)
        counted += line_length

    # Only reachable when \r\n breaks make the text longer than the lines
    # account for; the remainder lands on the final line.
    last = len(lines) - 1
    return Position(line=last + 1, column=offset - (counted - len(lines[last]) - 1))
