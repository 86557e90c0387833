"""Entry points for callers that just want an answer for a grid."""

from __future__ import annotations

from typing import Optional, Tuple

from .plugins import forward, reverse_lowest
from .search import best_first_search
from .types import Grid, PathResult, RunOptions


def shortest_path_forward(grid: Grid, options: Optional[RunOptions] = None) -> PathResult:
    """Shortest climb from `grid.start` to `grid.end`."""
    return best_first_search(grid, forward.TRAVERSAL, options)


def shortest_path_reverse_to_lowest(
    grid: Grid, options: Optional[RunOptions] = None
) -> PathResult:
    """Shortest climb to `grid.end` from whichever elevation-0 cell is closest.

    The returned path runs from the end down to that cell.
    """
    return best_first_search(grid, reverse_lowest.TRAVERSAL, options)


def solve(grid: Grid) -> Tuple[PathResult, PathResult]:
    return shortest_path_forward(grid), shortest_path_reverse_to_lowest(grid)
