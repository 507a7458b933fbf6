from __future__ import annotations

import difflib
import re

from .style import PLAIN, Palette


DIFF_SIZE = 2048
TRUNCATION_MARKER = " ... Lines skipped"
NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Patch lines before the first hunk body: Index, rule, ---, +++ and the
# first @@ marker.
_HEADER_LINES = 5
_INDENT = "  "
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def create_patch(name: str, old: str, new: str, *, context: int = 4) -> str:
    """Unified patch between two strings, in the classic `Index:` layout.

    Lines missing a trailing newline are followed by a
    `\\ No newline at end of file` marker.
    """
    a = _LINE_RE.findall(old)
    b = _LINE_RE.findall(new)
    patch = [f"Index: {name}", "=" * 67]
    for i, line in enumerate(difflib.unified_diff(a, b, name, name, n=context, lineterm="")):
        if i < 2 or line.startswith("@@"):
            patch.append(line)
            continue
        text = line.rstrip("\r\n")
        patch.append(text)
        if text == line:
            patch.append(NO_NEWLINE_MARKER)
    return "\n".join(patch) + "\n"


def truncate(text: str, size: int = DIFF_SIZE) -> str:
    if len(text) > size:
        return f"{text[:size]}{TRUNCATION_MARKER}"
    return text


def render_diff(actual: object, expected: object, *, size: int = DIFF_SIZE, palette: Palette = PLAIN) -> str:
    """Line diff of `actual` against `expected` with a legend on top.

    Both values go through `str()`; anything that raises there propagates.
    """
    return _unified_diff(truncate(str(actual), size), truncate(str(expected), size), palette)


def _unified_diff(actual: str, expected: str, palette: Palette) -> str:
    def clean_up(line: str) -> str | None:
        if line.startswith("+"):
            return _INDENT + palette.green(f"{line[0]} {line[1:]}")
        if line.startswith("-"):
            return _INDENT + palette.red(f"{line[0]} {line[1:]}")
        if "@@" in line:
            return "--"
        if NO_NEWLINE_MARKER in line:
            return None
        return _INDENT + line

    lines = create_patch("string", actual, expected).split("\n")[_HEADER_LINES:]
    body = [out for out in map(clean_up, lines) if out is not None]
    legend = f"\n{_INDENT}{palette.red('- actual')}\n{_INDENT}{palette.green('+ expected')}\n\n"
    return legend + "\n".join(body)
