#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/stack_converter"


def _module_imports(path: Path) -> list[str]:
    """Return unindented import lines, i.e. imports run at module load."""
    return [
        line
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.startswith(("import ", "from "))
    ]


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    for line in _module_imports(path):
        for token in banned:
            prefixes = (f"import {token}.", f"from {token} ", f"from {token}.")
            if line == f"import {token}" or line.startswith(prefixes):
                raise SystemExit(f"Architecture violation in {path}: found '{line}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(PACKAGE / "cli/cli.py", ["pyperclip", "sourcemap"])

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, ["typer", "pyperclip", "sourcemap"])

    for name in ("matching.py", "formatting.py", "map_cache.py", "types.py"):
        _assert_no_imports(PACKAGE / name, ["typer", "pyperclip", "sourcemap"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
