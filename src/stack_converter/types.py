"""Shared records and type aliases for stack conversion."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TypeAlias

MapPath: TypeAlias = str
MapPathLike: TypeAlias = str | os.PathLike[str]

UNKNOWN_METHOD = "<unknown>"


@dataclass(frozen=True)
class StackFrame:
    """One call-site parsed from stack text.

    Parameters
    ----------
    method : str | None
        Function or method name; ``None`` when the stack line has none.
        Rendered as ``"<unknown>"``.
    file : str
        File reference exactly as written in the stack line.
    line : int | None
        1-based generated line, when present.
    column : int | None
        Generated column as written in the stack line, when present.
    """

    method: str | None
    file: str
    line: int | None = None
    column: int | None = None

    @property
    def has_location(self) -> bool:
        """Whether the frame carries a line or a column."""
        return self.line is not None or self.column is not None


@dataclass(frozen=True)
class OriginalPosition:
    """Original source location returned by a position resolver."""

    source: str | None
    line: int | None
    column: int | None
    name: str | None = None
