from __future__ import annotations

from .cache import CachedModule, ModuleCache, ModuleRegistry, TransformResult
from .codeframe import generate_code_frame
from .diff import render_diff
from .errors import OffsetOutOfRangeError, SourceMapError
from .fs import FileSystem, LocalFileSystem
from .options import ReportOptions
from .positions import offset_to_position, position_to_offset
from .report import ErrorDetails, describe_error, print_error, render_error
from .sourcemap import OriginalPosition, load_source_map, resolve_original
from .spans import Position, StackFrame
from .stack import format_stack, parse_stack

__all__ = [
    "CachedModule",
    "ErrorDetails",
    "FileSystem",
    "LocalFileSystem",
    "ModuleCache",
    "ModuleRegistry",
    "OffsetOutOfRangeError",
    "OriginalPosition",
    "Position",
    "ReportOptions",
    "SourceMapError",
    "StackFrame",
    "TransformResult",
    "describe_error",
    "format_stack",
    "generate_code_frame",
    "load_source_map",
    "offset_to_position",
    "parse_stack",
    "position_to_offset",
    "print_error",
    "render_diff",
    "render_error",
    "resolve_original",
]
