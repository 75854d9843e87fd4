"""Hex-grid geometry and pathfinding kernel."""

import logging

from .errors import HexKernelError, InvalidArgument, InvariantViolation
from .hexpath import (
    HEX_DIRECTIONS,
    Hex,
    HexDirection,
    Offset,
    OffsetLayout,
    PathNode,
    find_path,
    get_visible_hexes,
    has_line_of_sight,
    line_draw,
    path_cost,
    reachable_hexes,
)
from .layout import Bounds, HexLayout, Orientation, Point, Size, orientation_flat, orientation_pointy
from .config import KernelConfig, LayoutSettings, PathfindingSettings
from .pathfinding import MovementPlan, Pathfinder

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bounds",
    "HEX_DIRECTIONS",
    "Hex",
    "HexDirection",
    "HexKernelError",
    "HexLayout",
    "InvalidArgument",
    "InvariantViolation",
    "KernelConfig",
    "LayoutSettings",
    "MovementPlan",
    "Offset",
    "OffsetLayout",
    "Orientation",
    "PathNode",
    "PathfindingSettings",
    "Pathfinder",
    "Point",
    "Size",
    "find_path",
    "get_visible_hexes",
    "has_line_of_sight",
    "line_draw",
    "orientation_flat",
    "orientation_pointy",
    "path_cost",
    "reachable_hexes",
]
