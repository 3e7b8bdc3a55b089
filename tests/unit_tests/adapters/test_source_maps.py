"""Unit tests for the sourcemap-backed position resolver."""

from __future__ import annotations

import json

import pytest

from stack_converter.adapters.source_maps import create_position_resolver
from stack_converter.types import OriginalPosition


def test_resolves_exact_segment(source_map_text: str) -> None:
    resolver = create_position_resolver(source_map_text)
    assert resolver.resolve(1, 10) == OriginalPosition(
        source="src/hello.ts", line=3, column=4, name="hello"
    )


def test_resolves_closest_preceding_segment(source_map_text: str) -> None:
    resolver = create_position_resolver(source_map_text)
    assert resolver.resolve(1, 15) == OriginalPosition(
        source="src/hello.ts", line=3, column=4, name="hello"
    )
    assert resolver.resolve(1, 5) == OriginalPosition(
        source="src/hello.ts", line=1, column=0, name="hello"
    )


def test_missing_column_is_looked_up_at_zero(source_map_text: str) -> None:
    resolver = create_position_resolver(source_map_text)
    position = resolver.resolve(1, None)
    assert position is not None
    assert (position.line, position.column) == (1, 0)


@pytest.mark.parametrize(("line", "column"), [(2, 0), (40, 3), (0, 1)])
def test_unmapped_positions_resolve_to_none(
    source_map_text: str, line: int, column: int
) -> None:
    resolver = create_position_resolver(source_map_text)
    assert resolver.resolve(line, column) is None


@pytest.mark.parametrize("text", ["{not json", "[]", '{"version": 3}'])
def test_malformed_source_map_raises(text: str) -> None:
    with pytest.raises(Exception):
        create_position_resolver(text)


@pytest.fixture
def indexed_source_map_text(source_map_text: str) -> str:
    """Indexed map whose second section starts at generated line 2, column 5."""
    section_map = json.loads(source_map_text)
    return json.dumps(
        {
            "version": 3,
            "sections": [
                {"offset": {"line": 1, "column": 5}, "map": section_map},
                {"offset": {"line": 0, "column": 0}, "map": section_map},
            ],
        }
    )


def test_indexed_map_resolves_first_section(indexed_source_map_text: str) -> None:
    resolver = create_position_resolver(indexed_source_map_text)
    assert resolver.resolve(1, 10) == OriginalPosition(
        source="src/hello.ts", line=3, column=4, name="hello"
    )


def test_indexed_map_applies_section_offset(indexed_source_map_text: str) -> None:
    resolver = create_position_resolver(indexed_source_map_text)
    assert resolver.resolve(2, 15) == OriginalPosition(
        source="src/hello.ts", line=3, column=4, name="hello"
    )
    assert resolver.resolve(2, 8) == OriginalPosition(
        source="src/hello.ts", line=1, column=0, name="hello"
    )


def test_indexed_map_before_section_offset_is_unmapped(
    indexed_source_map_text: str,
) -> None:
    resolver = create_position_resolver(indexed_source_map_text)
    assert resolver.resolve(2, 3) is None
    assert resolver.resolve(0, 3) is None


def test_indexed_map_section_with_url_raises() -> None:
    text = json.dumps(
        {
            "version": 3,
            "sections": [{"offset": {"line": 0, "column": 0}, "url": "main.js.map"}],
        }
    )
    with pytest.raises(ValueError, match="must embed their map"):
        create_position_resolver(text)
