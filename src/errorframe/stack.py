from __future__ import annotations

import re
import traceback

from .spans import StackFrame


_FN_CALL_RE = re.compile(r"at (.*) \((.+):(\d+):(\d+)\)$")
_BARE_PATH_RE = re.compile(r"at ()(.+):(\d+):(\d+)$")

_FILE_SCHEME = "file://"


def parse_stack(stack: str) -> list[StackFrame]:
    """Parse `at ...` lines of a stack trace, innermost frame first.

    Lines that look like neither `at fn (file:line:col)` nor
    `at file:line:col` are skipped.
    """
    frames: list[StackFrame] = []
    for raw in stack.split("\n"):
        line = raw.strip()
        m = _FN_CALL_RE.search(line) or _BARE_PATH_RE.search(line)
        if m is None:
            continue
        file = m.group(2)
        if file.startswith(_FILE_SCHEME):
            file = file[len(_FILE_SCHEME) :]
        frames.append(
            StackFrame(
                method=m.group(1),
                file=file,
                line=int(m.group(3)),
                column=int(m.group(4)),
            )
        )
    return frames


def format_stack(exc: BaseException) -> str:
    """Render a Python traceback in the `at fn (file:line:col)` grammar.

    Python lists frames outermost first; the output lists them innermost first
    so that `parse_stack` sees them in the same order as any other trace.
    """
    header = f"{type(exc).__name__}: {exc}"
    lines = [header]
    for fs in reversed(traceback.extract_tb(exc.__traceback__)):
        colno = getattr(fs, "colno", None)
        column = colno + 1 if colno is not None else 1
        lines.append(f"    at {fs.name} ({fs.filename}:{fs.lineno}:{column})")
    return "\n".join(lines)
