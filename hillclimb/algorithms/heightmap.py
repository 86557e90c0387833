"""Text heightmap -> Grid.

The format is one row per line. Lowercase letters are elevations
(`a` = 0 ... `z` = 25). `S` marks the start and sits at elevation 0, `E` marks
the end and sits at elevation 25. Exactly one of each is required.
"""

from __future__ import annotations

from typing import List, Optional

from ..exceptions import HeightmapError
from .types import ELEVATION_MAX, ELEVATION_MIN, Grid, Point

START_MARKER = "S"
END_MARKER = "E"


def parse_heightmap(text: str) -> Grid:
    rows = [line.replace("\r", "") for line in text.strip().split("\n")]
    if not rows or not rows[0]:
        raise HeightmapError(code="EMPTY_HEIGHTMAP", message="Heightmap has no cells")

    width = len(rows[0])
    tiles: List[int] = []
    start: Optional[Point] = None
    end: Optional[Point] = None

    for y, row in enumerate(rows):
        if len(row) != width:
            raise HeightmapError(
                code="RAGGED_ROWS",
                message="All rows must have the same width",
                detail=f"row {y} has width {len(row)}, expected {width}",
            )
        for x, ch in enumerate(row):
            if "a" <= ch <= "z":
                tiles.append(ord(ch) - ord("a"))
            elif ch == START_MARKER:
                if start is not None:
                    raise _duplicate(START_MARKER, start, Point(x, y))
                start = Point(x, y)
                tiles.append(ELEVATION_MIN)
            elif ch == END_MARKER:
                if end is not None:
                    raise _duplicate(END_MARKER, end, Point(x, y))
                end = Point(x, y)
                tiles.append(ELEVATION_MAX)
            else:
                raise HeightmapError(
                    code="INVALID_CHARACTER",
                    message=f"Invalid character: `{ch}`",
                    detail=f"at row {y}, column {x}",
                )

    if start is None or end is None:
        missing = START_MARKER if start is None else END_MARKER
        raise HeightmapError(code="MISSING_MARKER", message=f"Heightmap has no `{missing}` marker")

    return Grid(tiles=tuple(tiles), width=width, height=len(rows), start=start, end=end)


def _duplicate(marker: str, first: Point, second: Point) -> HeightmapError:
    return HeightmapError(
        code="DUPLICATE_MARKER",
        message=f"Heightmap has more than one `{marker}` marker",
        detail=f"at ({first.x}, {first.y}) and ({second.x}, {second.y})",
    )
