"""Shared fixtures: the canonical example heightmap and a few hand-built grids."""

from __future__ import annotations

from typing import Callable

import pytest

from hillclimb.algorithms.heightmap import parse_heightmap
from hillclimb.algorithms.types import Grid, Point

EXAMPLE_HEIGHTMAP = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


@pytest.fixture
def example_heightmap() -> str:
    return EXAMPLE_HEIGHTMAP


@pytest.fixture
def example_grid() -> Grid:
    return parse_heightmap(EXAMPLE_HEIGHTMAP)


@pytest.fixture
def flat_grid() -> Callable[..., Grid]:
    """Build a grid where every cell has the same elevation."""

    def build(width: int, height: int, start: Point, end: Point, level: int = 0) -> Grid:
        return Grid(tiles=(level,) * (width * height), width=width, height=height, start=start, end=end)

    return build


@pytest.fixture
def walled_grid() -> Grid:
    # The end sits behind a ring of `z`, which nothing below `y` can climb.
    return parse_heightmap(
        "Sabcd\n"
        "bzzzc\n"
        "czEzb\n"
        "dzzza\n"
        "edcba\n"
    )
