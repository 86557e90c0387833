from __future__ import annotations

from ..search import Traversal
from ..types import AlgorithmSpec, Grid, Point

ALGORITHM = AlgorithmSpec(
    id="forward",
    name="A* (start to end)",
    description="A* from the start marker to the end marker with a Manhattan heuristic.",
)


class ForwardTraversal(Traversal):
    """Climb from `grid.start` to `grid.end`.

    Manhattan distance never overestimates on a 4-connected unit-cost grid
    and is exactly 1 next to the goal, so the first time the end is relaxed
    its distance is already final.
    """

    forward = True
    stop_at_first_goal = True

    def origin(self, grid: Grid) -> Point:
        return grid.start

    def heuristic(self, grid: Grid, p: Point) -> int:
        return p.manhattan(grid.end)

    def is_goal(self, grid: Grid, p: Point) -> bool:
        return p == grid.end


TRAVERSAL = ForwardTraversal()
