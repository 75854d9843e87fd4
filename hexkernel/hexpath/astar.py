from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from itertools import count
from typing import Callable, Dict, List, Sequence, Tuple

from .coords import Hex
from .heuristics import Heuristic, hex_distance

CostFunction = Callable[[Hex, Hex], float]
HexKey = Tuple[int, int]

DEFAULT_MAX_DISTANCE = 50.0


@dataclass(slots=True)
class PathNode:
    """Search-tree node owned by a single :func:`find_path` call."""

    hex: Hex
    g: float  # cost from start
    h: float  # estimate to goal
    f: float  # g + h
    parent: HexKey | None = None


def is_passable(step_cost: float) -> bool:
    """Costs that are non-positive, NaN or infinite mark an impassable edge."""

    return math.isfinite(step_cost) and step_cost > 0


def find_path(
    start: Hex,
    goal: Hex,
    cost: CostFunction,
    *,
    heuristic: Heuristic | None = None,
    max_distance: float | None = DEFAULT_MAX_DISTANCE,
) -> List[Hex]:
    """A* shortest path from ``start`` to ``goal`` inclusive, or ``[]``.

    The frontier is ordered by ``(f, h, insertion order)`` so equal-cost
    candidates always resolve the same way. Nodes whose accumulated cost has
    reached ``max_distance`` are closed without being expanded.
    """

    if start == goal:
        return [start]

    estimate = heuristic or hex_distance
    sequence = count()

    start_key = start.to_key()
    h0 = float(estimate(start, goal))
    nodes: Dict[HexKey, PathNode] = {start_key: PathNode(start, 0.0, h0, h0)}
    open_heap: List[Tuple[float, float, int, HexKey]] = [(h0, h0, next(sequence), start_key)]
    closed: set[HexKey] = set()

    while open_heap:
        f, _, _, key = heapq.heappop(open_heap)
        if key in closed:
            continue
        current = nodes[key]
        if f != current.f:
            # superseded by a cheaper route pushed later
            continue
        closed.add(key)

        if current.hex == goal:
            return _reconstruct(nodes, key)

        if max_distance is not None and current.g >= max_distance:
            continue

        for neighbor in current.hex.neighbors():
            neighbor_key = neighbor.to_key()
            if neighbor_key in closed:
                continue
            step = float(cost(current.hex, neighbor))
            if not is_passable(step):
                continue
            tentative = current.g + step
            existing = nodes.get(neighbor_key)
            if existing is None or tentative < existing.g:
                h = float(estimate(neighbor, goal))
                node = PathNode(neighbor, tentative, h, tentative + h, key)
                nodes[neighbor_key] = node
                heapq.heappush(open_heap, (node.f, node.h, next(sequence), neighbor_key))

    return []


def _reconstruct(nodes: Dict[HexKey, PathNode], goal_key: HexKey) -> List[Hex]:
    out: List[Hex] = []
    key: HexKey | None = goal_key
    while key is not None:
        node = nodes[key]
        out.append(node.hex)
        key = node.parent
    out.reverse()
    return out


def path_cost(path: Sequence[Hex], cost: CostFunction) -> float:
    """Sum the step costs along ``path``; ``inf`` if any step is impassable."""

    total = 0.0
    for origin, destination in zip(path, path[1:]):
        step = float(cost(origin, destination))
        if not is_passable(step):
            return math.inf
        total += step
    return total


def reachable_hexes(start: Hex, budget: float, cost: CostFunction) -> Dict[Hex, float]:
    """Cheapest entry cost of every hex reachable from ``start`` within ``budget``.

    Uniform-cost flood; the result is ordered by increasing cost and always
    contains ``start`` at ``0.0`` unless the budget is negative.
    """

    if budget < 0:
        return {}

    best: Dict[Hex, float] = {start: 0.0}
    settled: Dict[Hex, float] = {}
    sequence = count()
    heap: List[Tuple[float, int, Hex]] = [(0.0, next(sequence), start)]

    while heap:
        g, _, current = heapq.heappop(heap)
        if current in settled or g > best[current]:
            continue
        settled[current] = g
        for neighbor in current.neighbors():
            if neighbor in settled:
                continue
            step = float(cost(current, neighbor))
            if not is_passable(step):
                continue
            tentative = g + step
            if tentative > budget:
                continue
            if tentative < best.get(neighbor, math.inf):
                best[neighbor] = tentative
                heapq.heappush(heap, (tentative, next(sequence), neighbor))

    return settled


__all__ = [
    "CostFunction",
    "DEFAULT_MAX_DISTANCE",
    "PathNode",
    "find_path",
    "is_passable",
    "path_cost",
    "reachable_hexes",
]
