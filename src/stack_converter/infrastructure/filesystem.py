"""Local filesystem access for source map discovery and loading."""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """``FileSystem`` port backed by :mod:`pathlib`."""

    def exists(self, path: str) -> bool:
        """Return whether ``path`` exists, treating access errors as missing."""
        try:
            return Path(path).exists()
        except OSError:
            return False

    def is_dir(self, path: str) -> bool:
        """Return whether ``path`` is an existing directory."""
        try:
            return Path(path).is_dir()
        except OSError:
            return False

    def read_text(self, path: str) -> str:
        """Read ``path`` as UTF-8 text."""
        return Path(path).read_text(encoding="utf-8")

    def list_dir(self, path: str) -> list[str]:
        """Return entry names of ``path`` in listing order."""
        return [entry.name for entry in Path(path).iterdir()]
