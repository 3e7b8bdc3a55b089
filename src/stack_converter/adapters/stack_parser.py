"""Regex-based parser for JavaScript engine stack traces.

Each input line is tried against the line grammars of the common engines,
in order: V8/Chrome, WinJS, Gecko/Safari, Node and JavaScriptCore. Lines
that match none of them (error headers, blank lines, log noise) are
skipped.
"""

from __future__ import annotations

import re

from stack_converter.types import StackFrame

_CHROME_RE = re.compile(
    r"^\s*at (.*?) ?\(((?:file|https?|blob|chrome-extension|native|eval|webpack|rsc"
    r"|<anonymous>|/|[a-z]:\\|\\\\).*?)(?::(\d+))?(?::(\d+))?\)?\s*$",
    re.IGNORECASE,
)
_CHROME_EVAL_RE = re.compile(r"\((\S*)(?::(\d+))(?::(\d+))\)")

_WINJS_RE = re.compile(
    r"^\s*at (?:((?:\[object object\])?.+) )?\(?((?:file|ms-appx|https?|webpack|rsc"
    r"|blob):.*?):(\d+)(?::(\d+))?\)?\s*$",
    re.IGNORECASE,
)

_GECKO_RE = re.compile(
    r"^\s*(.*?)(?:\((.*?)\))?(?:^|@)((?:file|https?|blob|chrome|webpack|rsc|resource"
    r"|\[native).*?|[^@]*bundle)(?::(\d+))?(?::(\d+))?\s*$",
    re.IGNORECASE,
)
_GECKO_EVAL_RE = re.compile(r"(\S+) line (\d+)(?: > eval line \d+)* > eval", re.IGNORECASE)

_NODE_RE = re.compile(
    r"^\s*at (?:((?:\[object object\])?[^\\/]+(?: \[as \S+\])?) )?\(?(.*?):(\d+)"
    r"(?::(\d+))?\)?\s*$",
    re.IGNORECASE,
)

_JSC_RE = re.compile(
    r"^\s*(?:([^@]*)(?:\((.*?)\))?@)?(\S.*?):(\d+)(?::(\d+))?\s*$",
    re.IGNORECASE,
)


def _int_or_none(value: str | None) -> int | None:
    return int(value) if value else None


def _parse_chrome(line: str) -> StackFrame | None:
    match = _CHROME_RE.match(line)
    if match is None:
        return None
    method, file, line_no, column = match.groups()
    if file.startswith("eval"):
        submatch = _CHROME_EVAL_RE.search(file)
        if submatch is not None:
            file, line_no, column = submatch.groups()
    return StackFrame(
        method=method or None,
        file=file,
        line=_int_or_none(line_no),
        column=_int_or_none(column),
    )


def _parse_winjs(line: str) -> StackFrame | None:
    match = _WINJS_RE.match(line)
    if match is None:
        return None
    method, file, line_no, column = match.groups()
    return StackFrame(
        method=method or None,
        file=file,
        line=int(line_no),
        column=_int_or_none(column),
    )


def _parse_gecko(line: str) -> StackFrame | None:
    match = _GECKO_RE.match(line)
    if match is None:
        return None
    method, _arguments, file, line_no, column = match.groups()
    if " > eval" in file:
        submatch = _GECKO_EVAL_RE.search(file)
        if submatch is not None:
            file, line_no = submatch.groups()
            column = None
    return StackFrame(
        method=method or None,
        file=file,
        line=_int_or_none(line_no),
        column=_int_or_none(column),
    )


def _parse_node(line: str) -> StackFrame | None:
    match = _NODE_RE.match(line)
    if match is None:
        return None
    method, file, line_no, column = match.groups()
    return StackFrame(
        method=method or None,
        file=file,
        line=int(line_no),
        column=_int_or_none(column),
    )


def _parse_jsc(line: str) -> StackFrame | None:
    match = _JSC_RE.match(line)
    if match is None:
        return None
    method, _arguments, file, line_no, column = match.groups()
    return StackFrame(
        method=method or None,
        file=file,
        line=int(line_no),
        column=_int_or_none(column),
    )


_LINE_PARSERS = (_parse_chrome, _parse_winjs, _parse_gecko, _parse_node, _parse_jsc)


def parse_stack_line(line: str) -> StackFrame | None:
    """Parse one stack line, or return ``None`` if it is not a frame."""
    for parser in _LINE_PARSERS:
        frame = parser(line)
        if frame is not None:
            return frame
    return None


class StacktraceParser:
    """Default ``StackParser`` implementation."""

    def parse(self, stack: str) -> list[StackFrame]:
        """Parse ``stack`` into frames, preserving input order."""
        frames: list[StackFrame] = []
        for line in stack.splitlines():
            frame = parse_stack_line(line)
            if frame is not None:
                frames.append(frame)
        return frames
