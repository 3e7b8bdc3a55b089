"""Shared pytest configuration, marker assignment and source map fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# Generated line 1: column 0 maps to src/hello.ts:1:0, column 10 maps to
# src/hello.ts:3:4, both named "hello".
VALID_SOURCE_MAP: dict[str, object] = {
    "version": 3,
    "file": "main.js",
    "sources": ["src/hello.ts"],
    "names": ["hello"],
    "mappings": "AAAAA,UAEIA",
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def source_map_text() -> str:
    """Text of a small, valid source map for ``main.js``."""
    return json.dumps(VALID_SOURCE_MAP)


@pytest.fixture
def source_map_dir(tmp_path: Path, source_map_text: str) -> Path:
    """Directory holding ``main.js.map`` and an unrelated file."""
    maps = tmp_path / "maps"
    maps.mkdir()
    (maps / "main.js.map").write_text(source_map_text, encoding="utf-8")
    (maps / "README.txt").write_text("not a map", encoding="utf-8")
    return maps
