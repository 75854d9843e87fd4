from __future__ import annotations

from typing import Callable

from ..errors import InvalidArgument
from .coords import Hex

Heuristic = Callable[[Hex, Hex], float]


def hex_distance(a: Hex, b: Hex) -> int:
    return a.distance_to(b)


def scaled_hex_distance(min_step_cost: float) -> Heuristic:
    """Hex distance weighted by the cheapest possible step.

    Stays admissible as long as ``min_step_cost`` never exceeds the true
    minimum edge cost of the caller's terrain.
    """

    if min_step_cost <= 0:
        raise InvalidArgument("min_step_cost must be positive")

    def heuristic(a: Hex, b: Hex) -> float:
        return a.distance_to(b) * min_step_cost

    return heuristic


__all__ = ["Heuristic", "hex_distance", "scaled_hex_distance"]
