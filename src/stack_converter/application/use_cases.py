"""Application use-cases orchestrating stack conversion."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import ValidationError

from stack_converter.adapters.source_maps import create_position_resolver
from stack_converter.adapters.stack_parser import StacktraceParser
from stack_converter.application.ports import (
    FileSystem,
    PositionResolverFactory,
    StackParser,
)
from stack_converter.application.results import ConversionResult
from stack_converter.errors import ConfigurationError, DirectoryError, SourceMapLoadError
from stack_converter.formatting import (
    bare_frame_line,
    could_not_convert_stack_frame_comment,
    error_loading_source_map_comment,
    frame_line,
)
from stack_converter.infrastructure.filesystem import LocalFileSystem
from stack_converter.map_cache import MapCache
from stack_converter.matching import find_source_map_path
from stack_converter.schemas import ConverterConfig
from stack_converter.types import MapPath, MapPathLike, StackFrame

logger = logging.getLogger(__name__)

NO_FRAMES_ERROR = "No stack frames found in stack input"
ERROR_HEADER_PREFIX = "Error:"
SOURCE_MAP_SUFFIX = ".map"


@dataclass
class ConversionContext:
    """State shared by the frames of a single conversion call."""

    cache: MapCache
    failed_files: set[str] = field(default_factory=set)


def build_converter_config(map_paths: Sequence[MapPathLike] | None) -> ConverterConfig:
    """Validate the source map index for a converter.

    Raises
    ------
    ConfigurationError
        If no paths are given or an entry is invalid.
    """
    if not map_paths:
        raise ConfigurationError(
            "Could not create StackConverter: no source map file paths were provided!"
        )
    try:
        return ConverterConfig(map_paths=tuple(map_paths))
    except ValidationError as exc:
        raise ConfigurationError(
            f"Could not create StackConverter: invalid source map paths: {exc}"
        ) from exc


def discover_source_maps(
    directory: MapPathLike,
    *,
    file_system: FileSystem | None = None,
) -> list[MapPath]:
    """List ``.map`` files directly inside ``directory``.

    Raises
    ------
    DirectoryError
        If the directory does not exist or cannot be listed.
    """
    file_system = file_system or LocalFileSystem()
    directory = os.fspath(directory)
    inaccessible = (
        f"Could not create StackConverter: {directory} does not exist or is inaccessible!"
    )
    if not file_system.exists(directory):
        raise DirectoryError(inaccessible)
    try:
        names = file_system.list_dir(directory)
    except OSError as exc:
        raise DirectoryError(inaccessible) from exc

    map_paths = [
        os.path.join(directory, name)
        for name in names
        if name.endswith(SOURCE_MAP_SUFFIX)
    ]
    logger.debug("found %d source maps in %s", len(map_paths), directory)
    return map_paths


def convert_stack(
    *,
    stack: str,
    config: ConverterConfig,
    parser: StackParser | None = None,
    file_system: FileSystem | None = None,
    resolver_factory: PositionResolverFactory | None = None,
) -> ConversionResult:
    """Use-case: convert generated-code stack text to original locations.

    Per-frame problems never raise; they are reported as a comment on the
    affected line and the remaining frames are still converted.
    """
    if not stack:
        return ConversionResult(stack="")

    parser = parser or StacktraceParser()
    frames = parser.parse(stack)
    if not frames:
        return ConversionResult(error=NO_FRAMES_ERROR)

    context = ConversionContext(
        cache=MapCache(
            file_system or LocalFileSystem(),
            resolver_factory or create_position_resolver,
        )
    )

    lines: list[str] = []
    header = error_header_or_none(stack)
    if header is not None:
        lines.append(header)
    for frame in frames:
        lines.append(convert_frame(frame, config.map_paths, context))
    return ConversionResult(stack="\n".join(lines))


def error_header_or_none(stack: str) -> str | None:
    """Return the leading ``Error:`` line of ``stack``, if any."""
    first_line = stack.splitlines()[0] if stack else ""
    if first_line.startswith(ERROR_HEADER_PREFIX):
        return first_line
    return None


def convert_frame(
    frame: StackFrame,
    map_paths: Sequence[MapPath],
    context: ConversionContext,
) -> str:
    """Convert one frame into its output line."""
    if frame.file in context.failed_files:
        return _frame_comment_line(
            frame, error_loading_source_map_comment("previous error")
        )

    if not frame.has_location:
        return frame_line(frame.method, frame.file, None, None)

    map_path = find_source_map_path(frame.file, map_paths)
    if map_path is None:
        context.failed_files.add(frame.file)
        return _frame_comment_line(
            frame, error_loading_source_map_comment("source map not found")
        )

    try:
        if frame.line is None or frame.line < 1:
            return bare_frame_line(frame.method)

        try:
            resolver = context.cache.get(map_path)
        except SourceMapLoadError as exc:
            logger.debug("source map %s unusable for %s: %s", map_path, frame.file, exc)
            context.failed_files.add(frame.file)
            return _frame_comment_line(frame, error_loading_source_map_comment(str(exc)))

        position = resolver.resolve(frame.line, frame.column)
        if position is None or not position.line:
            return _frame_comment_line(
                frame,
                could_not_convert_stack_frame_comment("original position not found"),
            )
        return frame_line(
            position.name or frame.method,
            position.source,
            position.line,
            position.column,
        )
    except Exception as exc:
        logger.debug("unexpected error converting frame %s", frame, exc_info=True)
        return _frame_comment_line(frame, could_not_convert_stack_frame_comment(str(exc)))


def _frame_comment_line(frame: StackFrame, comment: str) -> str:
    return frame_line(frame.method, frame.file, frame.line, frame.column, comment)
