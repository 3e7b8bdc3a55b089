"""Unit tests for frame line rendering."""

from __future__ import annotations

from stack_converter.formatting import (
    bare_frame_line,
    could_not_convert_stack_frame_comment,
    error_loading_source_map_comment,
    frame_line,
)


def test_frame_line_with_location() -> None:
    assert frame_line("hello", "main.js", 1, 2) == "    at hello (main.js:1:2)"


def test_frame_line_falls_back_to_unknown_method() -> None:
    assert frame_line(None, "main.js", 1, 2) == "    at <unknown> (main.js:1:2)"


def test_frame_line_omits_location_without_line_and_column() -> None:
    assert frame_line("Array.forEach", "<anonymous>", None, None) == "    at Array.forEach"


def test_frame_line_appends_comment() -> None:
    comment = error_loading_source_map_comment("source map not found")
    assert frame_line("hello", "missing.js", 1, 1337, comment) == (
        "    at hello (missing.js:1:1337)"
        "  ***Error loading source map for frame (source map not found)"
    )


def test_comment_helpers() -> None:
    assert could_not_convert_stack_frame_comment("boom") == (
        "Could not convert stack frame (boom)"
    )
    assert error_loading_source_map_comment("previous error") == (
        "Error loading source map for frame (previous error)"
    )


def test_bare_frame_line_uses_empty_name() -> None:
    assert bare_frame_line(None) == "    at "
    assert bare_frame_line("hello") == "    at hello"
