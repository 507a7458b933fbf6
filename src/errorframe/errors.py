from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class OffsetOutOfRangeError(ValueError):
    offset: int
    length: int

    def __str__(self) -> str:
        return f"offset is longer than source length! offset {self.offset} > length {self.length}"


@dataclass(slots=True)
class SourceMapError(ValueError):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"invalid source map: {self.message}\nhint: {self.hint}"
        return f"invalid source map: {self.message}"
