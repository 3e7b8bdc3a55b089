"""Top-level API for converting bundled JavaScript stacks with source maps."""

from __future__ import annotations

from collections.abc import Sequence

from stack_converter.application.results import ConversionResult
from stack_converter.types import MapPathLike

__version__ = "0.1.0"


def convert_stack(stack: str, map_paths: Sequence[MapPathLike]) -> ConversionResult:
    """Convert a stack using an explicit list of source map files.

    Parameters
    ----------
    stack : str
        Stack text from a deployed, build-transformed script.
    map_paths : Sequence[str | os.PathLike]
        Candidate source map files, matched to frames by file name.

    Returns
    -------
    ConversionResult
        Converted stack, or a global error when no frames were found.

    Raises
    ------
    ConfigurationError
        If ``map_paths`` is empty.
    """
    from .api import StackConverter

    return StackConverter(map_paths).convert(stack)


def convert_stack_from_directory(stack: str, directory: MapPathLike) -> ConversionResult:
    """Convert a stack using every ``.map`` file found in ``directory``.

    Raises
    ------
    DirectoryError
        If ``directory`` does not exist or is inaccessible.
    ConfigurationError
        If ``directory`` holds no ``.map`` files.
    """
    from .api import StackConverter

    return StackConverter.create_from_directory(directory).convert(stack)


__all__ = [
    "ConversionResult",
    "convert_stack",
    "convert_stack_from_directory",
]
