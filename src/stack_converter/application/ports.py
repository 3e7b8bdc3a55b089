"""Application ports for the collaborators consumed by conversion."""

from __future__ import annotations

from typing import Protocol

from stack_converter.types import OriginalPosition, StackFrame


class StackParser(Protocol):
    """Split raw stack text into ordered frames."""

    def parse(self, stack: str) -> list[StackFrame]:
        """Return frames in input order; non-frame lines are skipped."""


class PositionResolver(Protocol):
    """Map a generated position back to its original position."""

    def resolve(self, line: int, column: int | None) -> OriginalPosition | None:
        """Return the original position or ``None`` when unmapped."""


class PositionResolverFactory(Protocol):
    """Build a resolver from the text of one source map document."""

    def __call__(self, source_map_text: str) -> PositionResolver:
        """Raise on malformed source map content."""


class FileSystem(Protocol):
    """File access needed to discover and read source maps."""

    def exists(self, path: str) -> bool:
        """Return whether ``path`` exists."""

    def is_dir(self, path: str) -> bool:
        """Return whether ``path`` is a directory."""

    def read_text(self, path: str) -> str:
        """Read the whole file as UTF-8 text."""

    def list_dir(self, path: str) -> list[str]:
        """Return entry names of a directory, non-recursively."""
