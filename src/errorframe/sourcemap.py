from __future__ import annotations

import inspect
import json
import posixpath
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

import sourcemap

from .errors import SourceMapError
from .spans import Position


@dataclass(frozen=True, slots=True)
class OriginalPosition:
    """Where a generated position came from.

    `line` is 1-based and `column` 0-based, as in the source map format.
    """

    line: int | None
    column: int | None
    source: str | None = None
    name: str | None = None


def _normalize(payload: Mapping[str, Any]) -> dict[str, Any]:
    # `sources` may hold nulls; join `sourceRoot` here so they pass through.
    sources = payload.get("sources")
    if not isinstance(sources, list):
        raise SourceMapError("'sources' must be a list")
    for s in sources:
        if s is not None and not isinstance(s, str):
            raise SourceMapError(f"source entry {s!r} is not a string")
    out = dict(payload)
    out.setdefault("names", [])
    root = out.pop("sourceRoot", None)
    if root:
        out["sources"] = [s if s is None else posixpath.join(root, s) for s in sources]
    return out


def load_source_map(payload: Any) -> Any:
    """Decode a revision 3 payload (dict, JSON text or bytes) into a lookup index.

    Objects that already provide `lookup()` are returned unchanged.
    """
    if hasattr(payload, "lookup"):
        return payload
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise SourceMapError(f"payload is not JSON ({e})") from e
    if not isinstance(payload, Mapping):
        raise SourceMapError(f"unsupported payload type: {type(payload).__name__}")
    try:
        return sourcemap.loads(json.dumps(_normalize(payload)))
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise SourceMapError(f"cannot decode mappings ({e})", hint="is this a flat v3 map?") from e


def original_position_for(payload: Any, line: int, column: int) -> OriginalPosition | None:
    """Greatest-lower-bound lookup of generated `line` (1-based), `column` (0-based)."""
    if line < 1 or column < 0:
        return None
    index = load_source_map(payload)
    try:
        token = index.lookup(line - 1, column)
    except (IndexError, KeyError):
        return None
    if token.src is None:
        return None
    return OriginalPosition(line=token.src_line + 1, column=token.src_col, source=token.src, name=token.name)


ResolveResult = Union[OriginalPosition, Mapping[str, Any], None]
Resolver = Callable[[Any, int, int], Union[ResolveResult, Awaitable[ResolveResult]]]


async def resolve_original(
    map: Any, position: Position, *, resolver: Resolver | None = None
) -> Position | None:
    """Map a generated `position` back to the original source, or None.

    `resolver` may be synchronous or return an awaitable; it defaults to
    `original_position_for`.
    """
    if not map:
        return None
    resolve = resolver or original_position_for
    pos = resolve(map, position.line, position.column)
    if inspect.isawaitable(pos):
        pos = await pos
    if pos is None:
        return None
    if isinstance(pos, Mapping):
        line, column = pos.get("line"), pos.get("column")
    else:
        line, column = getattr(pos, "line", None), getattr(pos, "column", None)
    if line is None or column is None:
        return None
    return Position(line=line, column=column)
