from __future__ import annotations

from .positions import position_to_offset, split_lines
from .spans import Position
from .style import PLAIN, Palette


def generate_code_frame(
    source: str,
    start: int | Position = 0,
    end: int | Position | None = None,
    context: int = 2,
    *,
    palette: Palette = PLAIN,
) -> str:
    """Render the lines around `start` with `^` markers under [start, end).

    `context` lines are shown on either side of the line holding `start`. A
    span that runs past that line keeps the window open until it ends, and
    every continuation line gets its own marker row. Returns "" when `start`
    lies beyond the text.
    """
    start = position_to_offset(source, start)
    end = position_to_offset(source, end) if end is not None else start
    lines = split_lines(source)
    gutter = palette.gray("   |")

    count = 0
    res: list[str] = []
    for i, text in enumerate(lines):
        count += len(text) + 1
        if count <= start:
            continue

        j = i - context
        while j < len(lines) and (j <= i + context or end > count):
            if j >= 0:
                line_length = len(lines[j])
                res.append(f"{palette.gray(f'{j + 1:>3}|')}  {lines[j]}")
                if j == i:
                    pad = start - (count - line_length) + 1
                    length = max(1, line_length - pad if end > count else end - start)
                    res.append(f"{gutter}  {' ' * pad}{'^' * length}")
                elif j > i:
                    if end > count:
                        length = max(min(end - count, line_length), 1)
                        res.append(f"{gutter}  {'^' * length}")
                    count += line_length + 1
            j += 1
        break
    return "\n".join(res)
