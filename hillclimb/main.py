from __future__ import annotations

import logging
import time
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .algorithms.heightmap import parse_heightmap
from .algorithms.loader import list_algorithms, load_plugins
from .algorithms.paths import solve as solve_grid
from .algorithms.types import ELEVATION_MAX, ELEVATION_MIN, Grid, PathResult, Point, RunOptions
from .exceptions import HillClimbError
from .logging_config import configure_logging
from .settings import settings

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Hill Climb Nav", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

REGISTRY = load_plugins()

Elevation = Annotated[int, Field(ge=ELEVATION_MIN, le=ELEVATION_MAX)]


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str = ""


class PointModel(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class GridModel(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    tiles: List[Elevation]
    start: PointModel
    end: PointModel


class RunOptionsModel(BaseModel):
    return_visited: bool = False
    max_visited: int = Field(default=50000, ge=0)


class RunRequestModel(BaseModel):
    algorithm_id: str
    heightmap: Optional[str] = None
    grid: Optional[GridModel] = None
    options: Optional[RunOptionsModel] = None


class RunResponseModel(BaseModel):
    steps: Optional[int]
    reachable: bool
    path: List[PointModel]
    visited: List[PointModel]
    expanded: int
    runtime_ms: float


class SolveRequestModel(BaseModel):
    heightmap: str


class SolveResponseModel(BaseModel):
    forward: Optional[int]
    reverse: Optional[int]
    runtime_ms: float


def _points(points: List[Point]) -> List[PointModel]:
    return [PointModel(x=p.x, y=p.y) for p in points]


def _parse(text: str) -> Grid:
    # every non-newline character of a valid heightmap is one cell
    body = text.strip()
    cells = len(body) - body.count("\n") - body.count("\r")
    if cells > settings.max_cells:
        raise HTTPException(
            status_code=400,
            detail=f"heightmap has {cells} cells, limit is {settings.max_cells}",
        )
    try:
        return parse_heightmap(text)
    except HillClimbError as e:
        logger.warning("Rejected heightmap: %s", e)
        raise HTTPException(status_code=400, detail=e.to_dict())


def _build_grid(req: RunRequestModel) -> Grid:
    if (req.heightmap is None) == (req.grid is None):
        raise HTTPException(status_code=400, detail="Provide exactly one of heightmap or grid")
    if req.heightmap is not None:
        return _parse(req.heightmap)

    g = req.grid
    n = g.width * g.height
    if len(g.tiles) != n:
        raise HTTPException(status_code=400, detail=f"tiles length {len(g.tiles)} != width*height {n}")
    grid = Grid(
        tiles=tuple(g.tiles),
        width=g.width,
        height=g.height,
        start=Point(g.start.x, g.start.y),
        end=Point(g.end.x, g.end.y),
    )
    if not grid.contains(grid.start) or not grid.contains(grid.end):
        raise HTTPException(status_code=400, detail="start/end out of bounds")
    return grid


def _check_size(grid: Grid) -> None:
    if grid.size() > settings.max_cells:
        raise HTTPException(
            status_code=400,
            detail=f"grid has {grid.size()} cells, limit is {settings.max_cells}",
        )


@app.get("/api/health")
def health():
    return {"ok": True, "algorithms": len(REGISTRY)}


@app.get("/api/algorithms", response_model=list[AlgorithmInfo])
def algorithms() -> list[AlgorithmInfo]:
    out: list[AlgorithmInfo] = []
    for spec in list_algorithms(REGISTRY):
        out.append(AlgorithmInfo(id=spec.id, name=spec.name, description=spec.description))
    return out


@app.post("/api/run", response_model=RunResponseModel)
def run(req: RunRequestModel) -> RunResponseModel:
    algo = REGISTRY.get(req.algorithm_id)
    if algo is None:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm_id: {req.algorithm_id}")

    grid = _build_grid(req)
    _check_size(grid)

    opts = req.options or RunOptionsModel()
    run_opts = RunOptions(
        return_visited=opts.return_visited,
        max_visited=min(opts.max_visited, settings.max_visited),
    )

    t0 = time.perf_counter()
    try:
        result: PathResult = algo.run(grid, run_opts)
    except Exception as e:
        logger.exception("Algorithm %s crashed", req.algorithm_id)
        raise HTTPException(status_code=500, detail=f"Algorithm crashed: {type(e).__name__}: {e}")
    t1 = time.perf_counter()

    runtime_ms = (t1 - t0) * 1000.0
    logger.info(
        "%s on %dx%d grid: steps=%s expanded=%d in %.2f ms",
        req.algorithm_id, grid.width, grid.height, result.steps, result.expanded, runtime_ms,
    )

    visited = result.visited if run_opts.return_visited else []

    return RunResponseModel(
        steps=result.steps,
        reachable=result.reachable,
        path=_points(result.path),
        visited=_points(visited),
        expanded=int(result.expanded),
        runtime_ms=runtime_ms,
    )


@app.post("/api/solve", response_model=SolveResponseModel)
def solve(req: SolveRequestModel) -> SolveResponseModel:
    grid = _parse(req.heightmap)
    _check_size(grid)

    t0 = time.perf_counter()
    forward, reverse = solve_grid(grid)
    runtime_ms = (time.perf_counter() - t0) * 1000.0

    logger.info(
        "solve on %dx%d grid: forward=%s reverse=%s in %.2f ms",
        grid.width, grid.height, forward.steps, reverse.steps, runtime_ms,
    )
    return SolveResponseModel(forward=forward.steps, reverse=reverse.steps, runtime_ms=runtime_ms)
