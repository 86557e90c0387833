from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

ELEVATION_MIN = 0
ELEVATION_MAX = 25


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for an algorithm plugin."""

    id: str
    name: str
    description: str = ""


@dataclass(frozen=True, order=True)
class Point:
    """A grid coordinate. Column first, then row."""

    x: int
    y: int

    def neighbors(self) -> Tuple[Point, Point, Point, Point]:
        """Up, left, right, down.

        Near an edge some of these lie off the grid (e.g. x == -1); they are
        returned as-is so that `Grid.contains` rejects them.
        """
        x, y = self.x, self.y
        return (
            Point(x, y - 1),
            Point(x - 1, y),
            Point(x + 1, y),
            Point(x, y + 1),
        )

    def manhattan(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class RunOptions:
    return_visited: bool = False
    max_visited: int = 50000


@dataclass(frozen=True)
class Grid:
    """An immutable elevation field with a start and an end cell.

    Notes
    -----
    - Cell ids are row-major: id = y * width + x
    - The grid is 4-connected: up, left, right, down.
    - Every step costs 1. A step may descend any amount but climb at most
      one level.

    Dimensions and marker positions are checked by whoever builds the grid
    (the heightmap parser or the API layer), not here.
    """

    tiles: Tuple[int, ...]
    width: int
    height: int
    start: Point
    end: Point

    def size(self) -> int:
        return self.width * self.height

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def to_id(self, p: Point) -> int:
        return p.y * self.width + p.x

    def point_at(self, cell_id: int) -> Point:
        y = cell_id // self.width
        return Point(cell_id - y * self.width, y)

    def elevation(self, p: Point) -> int:
        return self.tiles[self.to_id(p)]

    def neighbors(self, p: Point) -> Tuple[Point, Point, Point, Point]:
        return p.neighbors()

    def can_step(self, frm: Point, to: Point, forward: bool = True) -> bool:
        """Whether a single step between two adjacent cells is legal.

        Forward: `to` may be at most one level above `frm`.
        Reverse: legal iff walking `to -> frm` would be legal forward, i.e. the
        same climbing limit applied to the search running backwards.
        """
        if not self.contains(frm) or not self.contains(to):
            return False
        if not forward:
            frm, to = to, frm
        return self.elevation(to) <= self.elevation(frm) + 1


class SearchState(NamedTuple):
    """A frontier entry.

    Plain tuple ordering keeps the heap cheap: lowest priority first, then
    the cheaper cost, then the lower cell id.
    """

    priority: int
    cost_so_far: int
    cell_id: int


@dataclass
class PathResult:
    """Outcome of one search.

    `steps` is None when no legal path exists. In that case `path` is empty.
    """

    steps: Optional[int]
    path: List[Point]
    visited: List[Point]
    expanded: int

    @property
    def reachable(self) -> bool:
        return self.steps is not None

    @classmethod
    def unreachable(cls, visited: List[Point], expanded: int) -> PathResult:
        return cls(steps=None, path=[], visited=visited, expanded=expanded)


def reconstruct_path(grid: Grid, came_from: List[int], start: int, goal: int) -> List[Point]:
    """Follow predecessor links from `goal` back to `start`, origin first.

    `goal == -1` means nothing was reached. A chain that dead-ends or runs
    longer than the grid never reached `start`; both give [].
    """
    if goal == -1:
        return []
    chain = [goal]
    while chain[-1] != start:
        prev = came_from[chain[-1]]
        if prev == -1 or len(chain) > len(came_from):
            return []
        chain.append(prev)
    return [grid.point_at(cell_id) for cell_id in reversed(chain)]
