"""Integration tests converting stacks with real source map files."""

from __future__ import annotations

import re
from pathlib import Path

from stack_converter.api import StackConverter


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_frame_without_configured_map(tmp_path: Path, source_map_text: str) -> None:
    converter = StackConverter([_write(tmp_path / "main.js.map", source_map_text)])

    result = converter.convert("    at hello (missing.js:1:1337)")

    assert result.error is None
    assert re.search(
        r"Error loading source map for frame \(source map not found\)", result.stack or ""
    )


def test_zero_byte_map(tmp_path: Path) -> None:
    converter = StackConverter([_write(tmp_path / "missing.js.map", "")])

    result = converter.convert("    at hello (missing.js:1:1337)")

    assert re.search(r"file .* was empty", result.stack or "")


def test_invalid_map(tmp_path: Path) -> None:
    converter = StackConverter([_write(tmp_path / "missing.js.map", "{not json")])

    result = converter.convert("    at hello (missing.js:1:1337)")

    assert re.search(r"could not parse source map", result.stack or "")


def test_map_that_is_not_utf8(tmp_path: Path) -> None:
    map_path = tmp_path / "main.js.map"
    map_path.write_bytes(b"\xff\xfe{not json")
    converter = StackConverter([map_path])

    result = converter.convert("    at a (dist/main.js:1:10)\n    at b (dist/main.js:2:10)")

    lines = (result.stack or "").splitlines()
    assert lines[0].endswith("(could not parse source map)")
    assert lines[1].endswith("(previous error)")


def test_configured_map_file_that_does_not_exist(tmp_path: Path) -> None:
    converter = StackConverter([tmp_path / "main.js.map"])

    result = converter.convert("    at a (dist/main.js:1:10)\n    at b (dist/main.js:1:12)")

    lines = (result.stack or "").splitlines()
    assert "does not exist or is inaccessible" in lines[0]
    assert lines[1].endswith("(previous error)")


def test_valid_map_resolves_frames(source_map_dir: Path) -> None:
    converter = StackConverter.create_from_directory(source_map_dir)
    stack = "\n".join(
        [
            "Error: boom",
            "    at a (https://cdn.example.com/dist/main.js:1:10)",
            "    at b (https://cdn.example.com/dist/main.js:1:5)",
            "    at Array.forEach (<anonymous>)",
            "    at c (https://cdn.example.com/dist/main.js:9:1)",
        ]
    )

    result = converter.convert(stack)

    assert result.error is None
    assert result.stack == "\n".join(
        [
            "Error: boom",
            "    at hello (src/hello.ts:3:4)",
            "    at hello (src/hello.ts:1:0)",
            "    at Array.forEach",
            "    at c (https://cdn.example.com/dist/main.js:9:1)"
            "  ***Could not convert stack frame (original position not found)",
        ]
    )


def test_windows_and_posix_paths_share_a_map(source_map_dir: Path) -> None:
    converter = StackConverter.create_from_directory(source_map_dir)

    result = converter.convert(
        "    at a (C:\\build\\dist\\main.js:1:10)\n    at b (dist\\main.js:1:10)"
    )

    assert result.stack == (
        "    at hello (src/hello.ts:3:4)\n    at hello (src/hello.ts:3:4)"
    )


def test_corrupt_map_only_degrades_its_frames(tmp_path: Path, source_map_text: str) -> None:
    good = _write(tmp_path / "main.js.map", source_map_text)
    bad = _write(tmp_path / "vendor.js.map", "{not json")
    converter = StackConverter([good, bad])

    result = converter.convert(
        "    at a (dist/vendor.js:1:1)\n"
        "    at b (dist/main.js:1:10)\n"
        "    at c (dist/vendor.js:4:2)"
    )

    assert (result.stack or "").splitlines() == [
        "    at a (dist/vendor.js:1:1)"
        "  ***Error loading source map for frame (could not parse source map)",
        "    at hello (src/hello.ts:3:4)",
        "    at c (dist/vendor.js:4:2)"
        "  ***Error loading source map for frame (previous error)",
    ]
