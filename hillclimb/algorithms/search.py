"""Best-first search shared by every traversal mode.

A mode is a `Traversal`: where the search starts, which steps are legal,
how far a cell is estimated to be from the goal, and which cells count as a
goal. With a zero heuristic this is Dijkstra; with Manhattan distance it is A*.
"""

from __future__ import annotations

import heapq
import logging
from abc import ABC, abstractmethod
from math import inf
from typing import List, Optional

from .types import Grid, PathResult, Point, RunOptions, SearchState, reconstruct_path

logger = logging.getLogger(__name__)


class Traversal(ABC):
    forward: bool = True
    # Stop as soon as a goal cell is relaxed instead of waiting for the
    # frontier to rise above the best goal distance.
    stop_at_first_goal: bool = False

    @abstractmethod
    def origin(self, grid: Grid) -> Point:
        ...

    @abstractmethod
    def heuristic(self, grid: Grid, p: Point) -> int:
        ...

    @abstractmethod
    def is_goal(self, grid: Grid, p: Point) -> bool:
        ...

    def can_step(self, grid: Grid, frm: Point, to: Point) -> bool:
        return grid.can_step(frm, to, forward=self.forward)


def best_first_search(
    grid: Grid, traversal: Traversal, options: Optional[RunOptions] = None
) -> PathResult:
    options = options or RunOptions()
    n = grid.size()
    origin = traversal.origin(grid)
    start = grid.to_id(origin)

    dist = [inf] * n
    dist[start] = 0
    came_from = [-1] * n

    pq: List[SearchState] = [SearchState(traversal.heuristic(grid, origin), 0, start)]

    visited_out: List[Point] = []
    expanded = 0
    terminal = start if traversal.is_goal(grid, origin) else -1
    done = terminal == start

    while pq and not done:
        priority, cost, cur = heapq.heappop(pq)
        if cost != dist[cur]:
            continue
        if terminal != -1 and priority >= dist[terminal]:
            break

        cur_pos = grid.point_at(cur)
        expanded += 1
        if options.return_visited and len(visited_out) < options.max_visited:
            visited_out.append(cur_pos)

        for nxt_pos in grid.neighbors(cur_pos):
            if not grid.contains(nxt_pos):
                continue
            if not traversal.can_step(grid, cur_pos, nxt_pos):
                continue
            nxt = grid.to_id(nxt_pos)
            ng = cost + 1
            if ng >= dist[nxt]:
                continue
            dist[nxt] = ng
            came_from[nxt] = cur
            if traversal.is_goal(grid, nxt_pos) and (terminal == -1 or ng < dist[terminal]):
                terminal = nxt
                if traversal.stop_at_first_goal:
                    done = True
                    break
            heapq.heappush(pq, SearchState(ng + traversal.heuristic(grid, nxt_pos), ng, nxt))

    path = reconstruct_path(grid, came_from, start, terminal)
    if not path:
        logger.debug(
            "%s: no path from (%d, %d) after %d expansions",
            type(traversal).__name__, origin.x, origin.y, expanded,
        )
        return PathResult.unreachable(visited=visited_out, expanded=expanded)

    logger.debug(
        "%s: %d steps from (%d, %d), %d expansions",
        type(traversal).__name__, len(path) - 1, origin.x, origin.y, expanded,
    )
    return PathResult(steps=len(path) - 1, path=path, visited=visited_out, expanded=expanded)
