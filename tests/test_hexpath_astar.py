import math

import networkx as nx
import pytest

from hexkernel.graph import build_movement_graph
from hexkernel.hexpath import (
    Hex,
    PathNode,
    find_path,
    path_cost,
    reachable_hexes,
)


def uniform(_a: Hex, _b: Hex) -> float:
    return 1.0


def walled(blocked: set[Hex]):
    def cost(_a: Hex, b: Hex) -> float:
        return math.inf if b in blocked else 1.0

    return cost


def assert_connected(path: list[Hex]) -> None:
    for a, b in zip(path, path[1:]):
        assert a.distance_to(b) == 1


def test_astar_straight_line():
    start = Hex(0, 0)
    goal = Hex(2, 0)
    path = find_path(start, goal, uniform)
    assert path == [Hex(0, 0), Hex(1, 0), Hex(2, 0)]
    assert path_cost(path, uniform) == 2


def test_astar_adjacent():
    assert find_path(Hex(0, 0), Hex(1, 0, -1), uniform) == [Hex(0, 0), Hex(1, 0, -1)]


def test_astar_same_start_and_goal():
    calls = []

    def cost(a: Hex, b: Hex) -> float:
        calls.append((a, b))
        return 1.0

    assert find_path(Hex(3, -1), Hex(3, -1), cost) == [Hex(3, -1)]
    assert calls == []


def test_astar_everything_impassable():
    assert find_path(Hex(0, 0), Hex(1, 0), lambda a, b: math.inf) == []


@pytest.mark.parametrize("blocked_cost", [0, -1, math.inf, math.nan])
def test_astar_goal_unreachable_when_entry_is_impassable(blocked_cost):
    goal = Hex(3, 0)

    def cost(_a: Hex, b: Hex) -> float:
        return blocked_cost if b == goal else 1.0

    assert find_path(Hex(0, 0), goal, cost, max_distance=8) == []


def test_astar_goal_unreachable_with_default_cap():
    goal = Hex(2, 0)

    def cost(_a: Hex, b: Hex) -> float:
        return 0 if b == goal else 1.0

    assert find_path(Hex(0, 0), goal, cost) == []


def test_astar_blocked_detour_breaks_ties_deterministically():
    start = Hex(0, 0)
    goal = Hex(2, 0)
    cost = walled({Hex(1, 0)})

    path = find_path(start, goal, cost)
    # equal-f candidates resolve by lower h, then by insertion order
    assert path == [Hex(0, 0), Hex(1, -1), Hex(2, -1), Hex(2, 0)]
    assert path_cost(path, cost) == 3
    for _ in range(5):
        assert find_path(start, goal, cost) == path


def test_astar_prefers_cheap_long_route():
    expensive = Hex(1, 0)

    def cost(_a: Hex, b: Hex) -> float:
        return 5.0 if b == expensive else 1.0

    path = find_path(Hex(0, 0), Hex(2, 0), cost)
    assert expensive not in path
    assert path_cost(path, cost) == 3
    assert_connected(path)


def test_astar_max_distance_caps_expansion():
    start = Hex(0, 0)
    goal = Hex(5, 0)
    assert find_path(start, goal, uniform, max_distance=4) == []
    assert len(find_path(start, goal, uniform, max_distance=5)) == 6


def test_astar_default_cap_and_unbounded_search():
    start = Hex(0, 0)
    goal = Hex(60, 0)
    assert find_path(start, goal, uniform) == []
    path = find_path(start, goal, uniform, max_distance=None)
    assert len(path) == 61
    assert path[0] == start and path[-1] == goal


def test_astar_custom_heuristic_is_used():
    seen = []

    def heuristic(a: Hex, b: Hex) -> float:
        seen.append(a)
        return 0.0

    path = find_path(Hex(0, 0), Hex(2, 0), uniform, heuristic=heuristic)
    assert len(path) == 3
    assert seen


def test_astar_matches_networkx_shortest_path_cost():
    region = Hex(0, 0).range(4)
    members = set(region)

    def cost(_a: Hex, b: Hex) -> float:
        if b not in members:
            return math.inf
        return 1.0 + (b.q * 7 + b.r * 13) % 4

    graph = build_movement_graph(region, cost)
    start = Hex(-3, 1)
    for goal in (Hex(4, 0), Hex(0, -4), Hex(2, 2), Hex(-1, 4)):
        path = find_path(start, goal, cost)
        assert path[0] == start and path[-1] == goal
        assert_connected(path)
        expected = nx.shortest_path_length(graph, start, goal, weight="weight")
        assert path_cost(path, cost) == pytest.approx(expected)


def test_path_node_totals():
    node = PathNode(Hex(1, 0), g=2.0, h=3.0, f=5.0)
    assert node.f == node.g + node.h
    assert node.parent is None


def test_path_cost_edge_cases():
    assert path_cost([], uniform) == 0
    assert path_cost([Hex(0, 0)], uniform) == 0
    assert path_cost([Hex(0, 0), Hex(1, 0)], lambda a, b: -1) == math.inf


def test_reachable_hexes_uniform_cost():
    origin = Hex(1, -2)
    reachable = reachable_hexes(origin, 2, uniform)
    assert set(reachable) == set(origin.range(2))
    assert all(cost == origin.distance_to(h) for h, cost in reachable.items())
    assert list(reachable)[0] == origin


def test_reachable_hexes_respects_walls_and_budget():
    wall = {Hex(1, 0), Hex(1, -1), Hex(0, -1), Hex(-1, 0), Hex(-1, 1)}
    reachable = reachable_hexes(Hex(0, 0), 2, walled(wall))
    assert not wall & set(reachable)
    assert reachable[Hex(0, 1)] == 1
    assert reachable[Hex(1, 1)] == 2
    assert Hex(2, 0) not in reachable


def test_reachable_hexes_degenerate_budgets():
    assert reachable_hexes(Hex(0, 0), -1, uniform) == {}
    assert reachable_hexes(Hex(0, 0), 0, uniform) == {Hex(0, 0): 0.0}
