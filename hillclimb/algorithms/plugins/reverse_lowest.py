from __future__ import annotations

from ..search import Traversal
from ..types import ELEVATION_MIN, AlgorithmSpec, Grid, Point

ALGORITHM = AlgorithmSpec(
    id="reverse_lowest",
    name="Dijkstra (end to nearest lowest cell)",
    description="Searches backwards from the end marker for the closest cell at elevation 0.",
)


class ReverseToLowestTraversal(Traversal):
    # Any lowest cell is acceptable, so there is no single target to aim at.
    forward = False
    stop_at_first_goal = False

    def origin(self, grid: Grid) -> Point:
        return grid.end

    def heuristic(self, grid: Grid, p: Point) -> int:
        return 0

    def is_goal(self, grid: Grid, p: Point) -> bool:
        return grid.elevation(p) == ELEVATION_MIN


TRAVERSAL = ReverseToLowestTraversal()
