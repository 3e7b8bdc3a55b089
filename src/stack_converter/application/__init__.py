"""Application-layer use-cases and result objects."""

from __future__ import annotations

from collections.abc import Sequence

from stack_converter.application.ports import (
    FileSystem,
    PositionResolver,
    PositionResolverFactory,
    StackParser,
)
from stack_converter.application.results import ConversionResult
from stack_converter.schemas import ConverterConfig
from stack_converter.types import MapPath, MapPathLike


def build_converter_config(map_paths: Sequence[MapPathLike] | None) -> ConverterConfig:
    """Validate converter map paths via lazy use-case import."""
    from stack_converter.application.use_cases import build_converter_config as _impl

    return _impl(map_paths)


def discover_source_maps(
    directory: MapPathLike,
    *,
    file_system: FileSystem | None = None,
) -> list[MapPath]:
    """List source maps in a directory via lazy use-case import."""
    from stack_converter.application.use_cases import discover_source_maps as _impl

    return _impl(directory, file_system=file_system)


def convert_stack(
    *,
    stack: str,
    config: ConverterConfig,
    parser: StackParser | None = None,
    file_system: FileSystem | None = None,
    resolver_factory: PositionResolverFactory | None = None,
) -> ConversionResult:
    """Convert stack text via lazy use-case import."""
    from stack_converter.application.use_cases import convert_stack as _impl

    return _impl(
        stack=stack,
        config=config,
        parser=parser,
        file_system=file_system,
        resolver_factory=resolver_factory,
    )


__all__ = [
    "ConversionResult",
    "FileSystem",
    "PositionResolver",
    "PositionResolverFactory",
    "StackParser",
    "build_converter_config",
    "discover_source_maps",
    "convert_stack",
]
