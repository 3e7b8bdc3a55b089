"""Match stack frame files to configured source map paths."""

from __future__ import annotations

import ntpath
import posixpath
from collections.abc import Sequence

from stack_converter.types import MapPath


def frame_base_names(file: str) -> tuple[str, str]:
    """Return the basename of ``file`` under POSIX and Windows conventions.

    Stack text can carry paths from a build host with a different OS than
    the one running the conversion, so both separators are considered.

    Examples
    --------
    >>> frame_base_names("dist/app.js")
    ('app.js', 'app.js')
    >>> frame_base_names("C:\\\\build\\\\app.js")
    ('C:\\\\build\\\\app.js', 'app.js')
    """
    return posixpath.basename(file), ntpath.basename(file)


def find_source_map_path(file: str, map_paths: Sequence[MapPath]) -> MapPath | None:
    """Find the first map path whose name contains ``<basename>.map``.

    Parameters
    ----------
    file : str
        File reference of a stack frame.
    map_paths : Sequence[str]
        Candidate map paths, searched in order.

    Returns
    -------
    str | None
        Matching map path, or ``None`` when no candidate matches.
    """
    posix_name, windows_name = frame_base_names(file)
    posix_map = f"{posix_name}.map"
    windows_map = f"{windows_name}.map"
    for map_path in map_paths:
        if posix_map in map_path or windows_map in map_path:
            return map_path
    return None
