"""Line drawing and line-of-sight queries on the hex grid."""

from __future__ import annotations

from typing import Callable, List

from .conversions import cube_lerp
from .coords import Hex

BlockedPredicate = Callable[[Hex], bool]


def line_draw(start: Hex, end: Hex) -> List[Hex]:
    """Return the hexes crossed by the straight line from ``start`` to ``end``.

    Both endpoints are included and consecutive hexes are adjacent.
    """

    distance = int(start.distance_to(end))
    if distance == 0:
        return [start]
    cube_a = (float(start.q), float(start.r), float(start.s))
    cube_b = (float(end.q), float(end.r), float(end.s))
    results: List[Hex] = []
    for step in range(distance + 1):
        results.append(Hex.from_fractional(*cube_lerp(cube_a, cube_b, step / distance)))
    return results


def has_line_of_sight(start: Hex, end: Hex, is_blocked: BlockedPredicate) -> bool:
    """True when no hex strictly between ``start`` and ``end`` is blocked."""

    line = line_draw(start, end)
    for hex_ in line[1:-1]:
        if is_blocked(hex_):
            return False
    return True


def get_visible_hexes(origin: Hex, radius: int, is_blocked: BlockedPredicate) -> List[Hex]:
    return [
        target
        for target in origin.range(radius)
        if has_line_of_sight(origin, target, is_blocked)
    ]


__all__ = ["BlockedPredicate", "get_visible_hexes", "has_line_of_sight", "line_draw"]
