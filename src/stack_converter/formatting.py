"""Render frames into the canonical stack line format."""

from __future__ import annotations

from stack_converter.types import UNKNOWN_METHOD

INDENT = "    "
COMMENT_DELIMITER = "  ***"


def frame_line(
    method: str | None,
    file: str | None,
    line: int | None,
    column: int | None,
    comment: str | None = None,
) -> str:
    """Format one frame as ``    at <method> (<file>:<line>:<column>)``.

    The location is dropped when both ``line`` and ``column`` are unknown,
    and ``comment`` is appended after a ``  ***`` delimiter.
    """
    text = f"{INDENT}at {method or UNKNOWN_METHOD}"
    if line is not None or column is not None:
        text += f" ({file}:{_part(line)}:{_part(column)})"
    if comment:
        text += f"{COMMENT_DELIMITER}{comment}"
    return text


def bare_frame_line(method: str | None) -> str:
    """Format a frame without location, using an empty name when absent."""
    return f"{INDENT}at {method or ''}"


def error_loading_source_map_comment(detail: str) -> str:
    """Comment for frames whose source map could not be used."""
    return f"Error loading source map for frame ({detail})"


def could_not_convert_stack_frame_comment(detail: str) -> str:
    """Comment for frames whose position could not be converted."""
    return f"Could not convert stack frame ({detail})"


def _part(value: int | None) -> str:
    return "" if value is None else str(value)
