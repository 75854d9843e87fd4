"""
Caching pathfinding facade for game code.

Primary goals:
- Bind a caller's cost function, heuristic and blocked predicate once.
- Cache paths and visibility sets keyed by a caller-controlled version key,
  so terrain changes invalidate results without clearing everything.
- Plan moves against a movement budget and flood the reachable area.

Usage:
    pf = Pathfinder(cost=terrain_cost, is_blocked=blocks_sight)
    path = pf.path(Hex(0, 0), Hex(8, -3), budget_key=terrain.version)
    plan = pf.plan_move(Hex(0, 0), Hex(3, 0), budget=4)
"""

from __future__ import annotations

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple

from .config import PathfindingSettings
from .hexpath.astar import CostFunction, find_path, path_cost, reachable_hexes
from .hexpath.coords import Hex
from .hexpath.heuristics import Heuristic
from .hexpath.sight import BlockedPredicate, get_visible_hexes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovementPlan:
    """Outcome of planning a move under a movement budget."""

    hexes: Tuple[Hex, ...] = field(default_factory=tuple)
    total_cost: float = math.inf
    valid: bool = False

    @property
    def steps(self) -> int:
        return max(len(self.hexes) - 1, 0)


def _never_blocked(_hex: Hex) -> bool:
    return False


class Pathfinder:
    """
    Hex pathfinding facade.

    - Runs :func:`~hexkernel.hexpath.find_path` with the bound callbacks.
    - Caches results keyed on ``(start, goal, budget_key)``.
    - Not thread-safe; use one instance per worker.
    """

    def __init__(
        self,
        cost: CostFunction,
        *,
        heuristic: Heuristic | None = None,
        is_blocked: BlockedPredicate | None = None,
        settings: PathfindingSettings | None = None,
    ) -> None:
        self.cost = cost
        self.heuristic = heuristic
        self.is_blocked = is_blocked or _never_blocked
        self.settings = settings or PathfindingSettings()
        self._paths: OrderedDict[Tuple[Hex, Hex, Hashable], List[Hex]] = OrderedDict()
        self._visibility: OrderedDict[Tuple[Hex, int, Hashable], List[Hex]] = OrderedDict()

    # --------- Public API ---------

    def path(self, start: Hex, goal: Hex, *, budget_key: Hashable) -> List[Hex]:
        """
        Compute a path from start to goal. Returns a list of hexes, ``[]`` when unreachable.
        Cached by (start, goal, budget_key).
        """
        key = (start, goal, budget_key)
        cached = self._cache_get(self._paths, key)
        if cached is not None:
            logger.debug("Path cache hit %s -> %s (key=%r)", start, goal, budget_key)
            return list(cached)

        path = find_path(
            start,
            goal,
            self.cost,
            heuristic=self.heuristic,
            max_distance=self.settings.max_distance,
        )
        logger.debug(
            "Path search %s -> %s found %d hexes (key=%r)", start, goal, len(path), budget_key
        )
        self._cache_put(self._paths, key, path)
        return list(path)

    def plan_move(self, start: Hex, goal: Hex, budget: float) -> MovementPlan:
        """
        Plan a move whose total cost must fit within ``budget``.
        The search is capped at ``budget + search_slack``; a path found beyond
        the budget is returned with ``valid=False``.
        """
        hexes = find_path(
            start,
            goal,
            self.cost,
            heuristic=self.heuristic,
            max_distance=budget + self.settings.search_slack,
        )
        if not hexes:
            logger.debug("No route %s -> %s within budget %s", start, goal, budget)
            return MovementPlan()
        total = path_cost(hexes, self.cost)
        return MovementPlan(hexes=tuple(hexes), total_cost=total, valid=total <= budget)

    def reachable(self, start: Hex, budget: float) -> Dict[Hex, float]:
        """Every hex enterable from ``start`` within ``budget``, with its cheapest cost."""

        return reachable_hexes(start, budget, self.cost)

    def visible(self, origin: Hex, radius: int, *, budget_key: Hashable) -> List[Hex]:
        """Hexes within ``radius`` of ``origin`` that ``is_blocked`` does not hide."""

        key = (origin, radius, budget_key)
        cached = self._cache_get(self._visibility, key)
        if cached is not None:
            return list(cached)
        visible = get_visible_hexes(origin, radius, self.is_blocked)
        self._cache_put(self._visibility, key, visible)
        return list(visible)

    def invalidate(self) -> None:
        """
        Clear every cached result. Call after large updates.
        Prefer bumping the budget key for fine-grained control.
        """
        logger.debug(
            "Invalidating %d paths and %d visibility sets", len(self._paths), len(self._visibility)
        )
        self._paths.clear()
        self._visibility.clear()

    # --------- Internal helpers ---------

    def _cache_get(self, cache: OrderedDict, key: Tuple) -> List[Hex] | None:
        if key not in cache:
            return None
        cache.move_to_end(key)
        return cache[key]

    def _cache_put(self, cache: OrderedDict, key: Tuple, value: List[Hex]) -> None:
        limit = self.settings.cache_size
        if limit == 0:
            return
        cache[key] = list(value)
        cache.move_to_end(key)
        while len(cache) > limit:
            cache.popitem(last=False)


__all__ = ["MovementPlan", "Pathfinder"]
