from __future__ import annotations

import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Any, TextIO

from .cache import ModuleCache
from .codeframe import generate_code_frame
from .diff import render_diff
from .errors import SourceMapError
from .fs import FileSystem, LocalFileSystem
from .options import ReportOptions
from .sourcemap import Resolver, resolve_original
from .spans import Position, StackFrame
from .stack import format_stack, parse_stack
from .style import Palette, palette_for


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ErrorDetails:
    """What the report needs from a raised exception."""

    error: BaseException
    name: str
    message: str
    stack: str
    show_diff: bool = False
    actual: Any = None
    expected: Any = None
    # Stack rendered from a Python traceback: columns are colno + 1.
    python_stack: bool = False


def describe_error(value: object) -> ErrorDetails | None:
    """Classify `value` once: exception details, or None for anything else.

    A string `stack` attribute wins over the Python traceback, so errors that
    carry a foreign stack trace (e.g. from an embedded JS runtime) keep it.
    """
    if not isinstance(value, BaseException):
        return None
    stack = getattr(value, "stack", None)
    python_stack = False
    if not isinstance(stack, str):
        python_stack = value.__traceback__ is not None
        stack = format_stack(value) if python_stack else ""
    return ErrorDetails(
        error=value,
        name=type(value).__name__,
        message=str(value),
        stack=stack,
        show_diff=bool(getattr(value, "show_diff", False)),
        actual=getattr(value, "actual", None),
        expected=getattr(value, "expected", None),
        python_stack=python_stack,
    )


async def render_error(
    value: object,
    *,
    modules: ModuleCache,
    fs: FileSystem | None = None,
    resolver: Resolver | None = None,
    options: ReportOptions | None = None,
) -> str:
    opts = options or ReportOptions()
    palette = palette_for(opts.color)
    details = describe_error(value)
    if details is None:
        return str(value)

    out: list[str] = []
    frame = await _located_frame(details, modules, fs or LocalFileSystem(), resolver, opts, palette)
    out.append(frame if frame is not None else _raw(details.error))
    if details.show_diff:
        diff = render_diff(details.actual, details.expected, size=opts.diff_size, palette=palette)
        out.append(palette.gray(diff))
    return "\n".join(out)


async def print_error(
    value: object,
    *,
    modules: ModuleCache,
    fs: FileSystem | None = None,
    resolver: Resolver | None = None,
    options: ReportOptions | None = None,
    stream: TextIO | None = None,
) -> None:
    report = await render_error(value, modules=modules, fs=fs, resolver=resolver, options=options)
    print(report, file=stream or sys.stderr)


async def _located_frame(
    details: ErrorDetails,
    modules: ModuleCache,
    fs: FileSystem,
    resolver: Resolver | None,
    opts: ReportOptions,
    palette: Palette,
) -> str | None:
    nearest = next((f for f in parse_stack(details.stack) if modules.has(f.file)), None)
    if nearest is None:
        logger.debug("no frame of %s is in the module cache", details.name)
        return None

    cached = modules.get(nearest.file)
    result = cached.transform_result if cached is not None else None
    payload = result.map if result is not None else None
    try:
        pos = await resolve_original(payload, _generated_position(details, nearest), resolver=resolver)
    except SourceMapError as e:
        logger.debug("unusable source map for %s: %s", nearest.file, e)
        return None
    if pos is None:
        logger.debug("no original position for %s", nearest.format())
        return None
    if not fs.exists(nearest.file):
        logger.debug("%s is not on disk", nearest.file)
        return None

    source = await fs.read_text(nearest.file)
    frame = generate_code_frame(source, pos, context=opts.context, palette=palette)
    return "\n".join(
        [
            palette.red(f"{palette.bold(details.name)}: {details.message}"),
            palette.gray(f"{nearest.file}:{pos.line}:{pos.column}"),
            palette.yellow(frame),
        ]
    )


def _raw(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")


def _generated_position(details: ErrorDetails, frame: StackFrame) -> Position:
    # Source maps take 0-based columns; Python frames were shifted by one.
    if details.python_stack:
        return Position(line=frame.line, column=max(frame.column - 1, 0))
    return frame.position
