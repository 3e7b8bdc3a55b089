"""Position resolver backed by the ``sourcemap`` library."""

from __future__ import annotations

import json

import sourcemap

from stack_converter.types import OriginalPosition


class SourcemapPositionResolver:
    """Resolve generated positions through a decoded ``SourceMapIndex``.

    Stack lines are 1-based while ``sourcemap`` tokens are 0-based, so the
    line is shifted on the way in and out. Columns are passed through and
    the original column is returned 0-based, as source map tooling reports
    it.
    """

    def __init__(self, index: sourcemap.objects.SourceMapIndex) -> None:
        self._index = index

    def resolve(self, line: int, column: int | None) -> OriginalPosition | None:
        """Return the closest mapped position at or before ``column``.

        Parameters
        ----------
        line : int
            1-based generated line.
        column : int | None
            Generated column; ``None`` is looked up as column 0.

        Returns
        -------
        OriginalPosition | None
            ``None`` when the generated line has no mapping at or before
            the column, or the mapping has no original source.
        """
        dst_line = line - 1
        dst_col = column or 0
        if dst_line < 0 or dst_col < 0:
            return None
        try:
            token = self._index.lookup(line=dst_line, column=dst_col)
        except IndexError:
            return None

        if token.dst_line != dst_line or token.dst_col > dst_col:
            return None
        if token.src is None:
            return None
        return OriginalPosition(
            source=token.src,
            line=token.src_line + 1,
            column=token.src_col,
            name=token.name,
        )


class IndexedPositionResolver:
    """Resolve positions in an indexed map made of offset sections.

    Each section covers the generated code from its offset up to the next
    section's offset. The column offset only applies on the section's
    first generated line.
    """

    def __init__(self, sections: list[tuple[int, int, SourcemapPositionResolver]]) -> None:
        self._sections = sorted(sections, key=lambda section: section[:2])

    def resolve(self, line: int, column: int | None) -> OriginalPosition | None:
        dst_line = line - 1
        dst_col = column or 0
        if dst_line < 0 or dst_col < 0:
            return None

        found = None
        for section in self._sections:
            if section[:2] > (dst_line, dst_col):
                break
            found = section
        if found is None:
            return None

        offset_line, offset_col, resolver = found
        if dst_line == offset_line:
            dst_col -= offset_col
        return resolver.resolve(dst_line - offset_line + 1, dst_col)


def create_position_resolver(
    source_map_text: str,
) -> SourcemapPositionResolver | IndexedPositionResolver:
    """Decode source map text into a resolver.

    Indexed maps are supported when every section embeds its map; sections
    that reference another file through ``url`` are rejected.

    Raises
    ------
    sourcemap.SourceMapDecodeError, ValueError, KeyError, TypeError
        If the text is not a decodable source map document.
    """
    sections = _indexed_sections(source_map_text)
    if sections is None:
        return SourcemapPositionResolver(sourcemap.loads(source_map_text))
    return IndexedPositionResolver(sections)


def _indexed_sections(
    source_map_text: str,
) -> list[tuple[int, int, SourcemapPositionResolver]] | None:
    try:
        document = json.loads(source_map_text)
    except ValueError:
        return None
    if not isinstance(document, dict) or "sections" not in document:
        return None

    sections = []
    for section in document["sections"]:
        if "map" not in section:
            raise ValueError("indexed source map sections must embed their map")
        offset = section["offset"]
        index = sourcemap.loads(json.dumps(section["map"]))
        sections.append(
            (int(offset["line"]), int(offset["column"]), SourcemapPositionResolver(index))
        )
    return sections
