from .coords import CUBE_EPSILON, HEX_DIRECTIONS, Hex, HexDirection
from .conversions import Offset, OffsetLayout, axial_to_offset, offset_to_axial, cube_round
from .heuristics import Heuristic, hex_distance, scaled_hex_distance
from .astar import (
    DEFAULT_MAX_DISTANCE,
    CostFunction,
    PathNode,
    find_path,
    is_passable,
    path_cost,
    reachable_hexes,
)
from .sight import BlockedPredicate, get_visible_hexes, has_line_of_sight, line_draw

__all__ = [
    "CUBE_EPSILON",
    "HEX_DIRECTIONS",
    "Hex",
    "HexDirection",
    "Offset",
    "OffsetLayout",
    "axial_to_offset",
    "offset_to_axial",
    "cube_round",
    "Heuristic",
    "hex_distance",
    "scaled_hex_distance",
    "DEFAULT_MAX_DISTANCE",
    "CostFunction",
    "PathNode",
    "find_path",
    "is_passable",
    "path_cost",
    "reachable_hexes",
    "BlockedPredicate",
    "get_visible_hexes",
    "has_line_of_sight",
    "line_draw",
]
