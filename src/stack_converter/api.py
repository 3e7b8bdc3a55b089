"""Public stack conversion API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Sequence

from stack_converter.application.ports import (
    FileSystem,
    PositionResolverFactory,
    StackParser,
)
from stack_converter.application.results import ConversionResult
from stack_converter.application.use_cases import (
    build_converter_config,
    convert_stack,
    discover_source_maps,
)
from stack_converter.types import MapPath, MapPathLike


class StackConverter:
    """Convert stacks mangled by bundling back to their original files.

    Usage::

        converter = StackConverter(["dist/main.js.map"])
        result = converter.convert(mangled_stack)
        print(result.stack if result.ok else result.error)

    The set of source maps is fixed at construction. Loaded maps are only
    kept for the duration of one :meth:`convert` call, so calls are
    independent of each other.
    """

    def __init__(
        self,
        map_paths: Sequence[MapPathLike],
        *,
        parser: StackParser | None = None,
        file_system: FileSystem | None = None,
        resolver_factory: PositionResolverFactory | None = None,
    ) -> None:
        """Create a converter from paths to source map files.

        Raises
        ------
        ConfigurationError
            If ``map_paths`` is empty or contains invalid entries.
        """
        self._config = build_converter_config(map_paths)
        self._parser = parser
        self._file_system = file_system
        self._resolver_factory = resolver_factory

    @classmethod
    def create_from_directory(
        cls,
        directory: MapPathLike,
        *,
        parser: StackParser | None = None,
        file_system: FileSystem | None = None,
        resolver_factory: PositionResolverFactory | None = None,
    ) -> StackConverter:
        """Create a converter from every ``.map`` file in ``directory``.

        Raises
        ------
        DirectoryError
            If the directory does not exist or is inaccessible.
        ConfigurationError
            If the directory holds no ``.map`` files.
        """
        map_paths = discover_source_maps(directory, file_system=file_system)
        return cls(
            map_paths,
            parser=parser,
            file_system=file_system,
            resolver_factory=resolver_factory,
        )

    @property
    def map_paths(self) -> tuple[MapPath, ...]:
        """Configured source map paths, in match order."""
        return self._config.map_paths

    def convert(self, stack: str) -> ConversionResult:
        """Convert file names and positions of ``stack`` using the source maps.

        Parameters
        ----------
        stack : str
            Text of an ``Error.stack``, optionally starting with its
            ``Error: <message>`` header line.

        Returns
        -------
        ConversionResult
            ``error`` when no frames were found, otherwise ``stack``.
        """
        return convert_stack(
            stack=stack,
            config=self._config,
            parser=self._parser,
            file_system=self._file_system,
            resolver_factory=self._resolver_factory,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(map_paths={list(self.map_paths)!r})"
