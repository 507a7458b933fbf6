from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A (line, column) location in a source text.

    Lines are 1-based; columns are 0-based offsets into the line.
    """

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class StackFrame:
    """One parsed `at ...` line of a stack trace.

    `line` and `column` point into the *generated* (executed) file.
    """

    method: str
    file: str
    line: int
    column: int

    @property
    def position(self) -> Position:
        return Position(line=self.line, column=self.column)

    def format(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
