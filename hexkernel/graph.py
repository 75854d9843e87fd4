"""networkx views of a hex region for callers that want general graph algorithms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Sequence, TypeAlias

import networkx as nx

from .hexpath.astar import CostFunction, is_passable
from .hexpath.coords import Hex

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[Hex]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def build_movement_graph(hexes: Iterable[Hex], cost: CostFunction) -> MovementGraph:
    """Return a directed graph of ``hexes`` with passable steps as weighted edges.

    Edges only join hexes that are both in ``hexes``; ``cost(a, b)`` becomes
    the ``weight`` of ``a -> b``.
    """

    graph: MovementGraph = nx.DiGraph()
    members = list(dict.fromkeys(hexes))
    graph.add_nodes_from(members)
    for origin in members:
        for neighbor in origin.neighbors():
            if neighbor not in graph:
                continue
            step = float(cost(origin, neighbor))
            if not is_passable(step):
                continue
            graph.add_edge(origin, neighbor, weight=step)
    return graph


def shortest_path_between(graph: MovementGraph, start: Hex, goal: Hex) -> List[Hex]:
    """Lowest-weight path using ``nx.astar_path``; ``[]`` when unreachable."""

    if start == goal:
        return [start]

    def heuristic(node_a: Any, node_b: Any) -> float:
        return node_a.distance_to(node_b)

    try:
        return list(nx.astar_path(graph, start, goal, heuristic=heuristic, weight="weight"))
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return []


def path_travel_cost(graph: MovementGraph, path: Sequence[Hex]) -> float:
    """Return the total travel cost for ``path`` within ``graph``."""

    if len(path) < 2:
        return 0.0
    total = 0.0
    for origin, destination in zip(path, path[1:]):
        data = graph.get_edge_data(origin, destination) or {}
        total += float(data.get("weight", 0.0))
    return total


__all__ = [
    "MovementGraph",
    "build_movement_graph",
    "path_travel_cost",
    "shortest_path_between",
]
