"""Registry of search modes.

A mode module under `hillclimb/algorithms/plugins/` exports:
  - ALGORITHM: AlgorithmSpec
  - TRAVERSAL: Traversal

The engine itself is shared; a mode only says where to start, which steps
are legal, how to estimate the remaining distance, and which cells count as
a goal. Modules whose names start with `_` are skipped.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, Iterator, List, Optional

from .search import Traversal, best_first_search
from .types import AlgorithmSpec, Grid, PathResult, RunOptions

logger = logging.getLogger(__name__)

PLUGIN_PACKAGE = f"{__package__}.plugins"


@dataclass(frozen=True)
class SearchMode:
    spec: AlgorithmSpec
    traversal: Traversal

    def run(self, grid: Grid, options: Optional[RunOptions] = None) -> PathResult:
        return best_first_search(grid, self.traversal, options)


def mode_from_module(module: ModuleType) -> Optional[SearchMode]:
    """Build a SearchMode from a module's exports, or None if it exports neither."""
    spec = getattr(module, "ALGORITHM", None)
    traversal = getattr(module, "TRAVERSAL", None)
    if spec is None and traversal is None:
        return None
    if not isinstance(spec, AlgorithmSpec):
        raise TypeError(f"{module.__name__}.ALGORITHM must be an AlgorithmSpec, got {type(spec).__name__}")
    if not isinstance(traversal, Traversal):
        raise TypeError(f"{module.__name__}.TRAVERSAL must be a Traversal, got {type(traversal).__name__}")
    return SearchMode(spec=spec, traversal=traversal)


def _plugin_modules(package_name: str) -> Iterator[ModuleType]:
    package = importlib.import_module(package_name)
    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if not info.name.startswith("_"):
            yield importlib.import_module(f"{package_name}.{info.name}")


def load_plugins(package_name: str = PLUGIN_PACKAGE) -> Dict[str, SearchMode]:
    registry: Dict[str, SearchMode] = {}
    for module in _plugin_modules(package_name):
        mode = mode_from_module(module)
        if mode is None:
            logger.debug("Skipping %s: no ALGORITHM/TRAVERSAL", module.__name__)
            continue
        if mode.spec.id in registry:
            raise ValueError(f"Duplicate algorithm id: {mode.spec.id}")
        registry[mode.spec.id] = mode

    logger.info("Loaded %d search modes: %s", len(registry), ", ".join(sorted(registry)))
    return registry


def list_algorithms(registry: Dict[str, SearchMode]) -> List[AlgorithmSpec]:
    return [mode.spec for _, mode in sorted(registry.items())]
