"""Per-call cache of loaded source map resolvers."""

from __future__ import annotations

import logging

from stack_converter.application.ports import (
    FileSystem,
    PositionResolver,
    PositionResolverFactory,
)
from stack_converter.errors import (
    EmptySourceMapError,
    SourceMapNotFoundError,
    SourceMapParseError,
)
from stack_converter.types import MapPath

logger = logging.getLogger(__name__)


class MapCache:
    """Lazily load source maps and keep each resolver for one conversion.

    A map path is read and parsed at most once per cache instance. Failed
    loads are not cached here; the caller records them against the frame's
    generated file.
    """

    def __init__(
        self,
        file_system: FileSystem,
        resolver_factory: PositionResolverFactory,
    ) -> None:
        self._file_system = file_system
        self._resolver_factory = resolver_factory
        self._resolvers: dict[MapPath, PositionResolver] = {}

    def __contains__(self, map_path: object) -> bool:
        return map_path in self._resolvers

    def __len__(self) -> int:
        return len(self._resolvers)

    def get(self, map_path: MapPath) -> PositionResolver:
        """Return the resolver for ``map_path``, loading it on first use.

        Raises
        ------
        SourceMapNotFoundError
            If the path is empty, does not exist or cannot be read.
        EmptySourceMapError
            If the file has no content.
        SourceMapParseError
            If the content is not UTF-8 or cannot be turned into a resolver.
        """
        resolver = self._resolvers.get(map_path)
        if resolver is None:
            resolver = self._load(map_path)
            self._resolvers[map_path] = resolver
        return resolver

    def _load(self, map_path: MapPath) -> PositionResolver:
        if not map_path:
            raise SourceMapNotFoundError("file name was empty")
        if not self._file_system.exists(map_path):
            raise SourceMapNotFoundError(
                f"file {map_path} does not exist or is inaccessible"
            )

        try:
            text = self._file_system.read_text(map_path)
        except UnicodeDecodeError as exc:
            logger.debug("source map %s is not UTF-8 text", map_path, exc_info=True)
            raise SourceMapParseError("could not parse source map") from exc
        except OSError as exc:
            logger.debug("failed to read source map %s", map_path, exc_info=True)
            raise SourceMapNotFoundError(
                f"file {map_path} does not exist or is inaccessible"
            ) from exc

        if not text:
            raise EmptySourceMapError(f"file {map_path} was empty")

        try:
            resolver = self._resolver_factory(text)
        except Exception as exc:
            logger.debug("failed to parse source map %s", map_path, exc_info=True)
            raise SourceMapParseError("could not parse source map") from exc

        logger.debug("loaded source map %s", map_path)
        return resolver
