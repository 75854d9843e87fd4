"""Conversion between hex coordinates and screen pixels."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, pi, sin, sqrt
from typing import TYPE_CHECKING, Iterable, List

import numpy as np

from .errors import InvalidArgument
from .hexpath.coords import Hex

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import LayoutSettings


@dataclass(frozen=True)
class Orientation:
    """Forward (``f*``) and inverse (``b*``) 2x2 matrices for one hex shape.

    ``start_angle`` is the angle of corner 0 in sixths of a full turn.
    """

    f0: float
    f1: float
    f2: float
    f3: float
    b0: float
    b1: float
    b2: float
    b3: float
    start_angle: float

    @classmethod
    def by_name(cls, name: str) -> Orientation:
        try:
            return ORIENTATIONS[name]
        except KeyError:
            raise InvalidArgument(f"Unknown orientation: {name!r}") from None


_SQRT3 = sqrt(3.0)

# Each b-matrix is the inverse of its f-matrix.
orientation_pointy = Orientation(
    _SQRT3, _SQRT3 / 2.0, 0.0, 1.5,
    _SQRT3 / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0,
    0.5,
)
orientation_flat = Orientation(
    1.5, 0.0, _SQRT3 / 2.0, _SQRT3,
    2.0 / 3.0, 0.0, -1.0 / 3.0, _SQRT3 / 3.0,
    0.0,
)

ORIENTATIONS: dict[str, Orientation] = {
    "pointy": orientation_pointy,
    "flat": orientation_flat,
}


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Bounds:
    min: Point
    max: Point

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass(frozen=True)
class HexLayout:
    """Orientation, tile size and origin; shared read-only by render and picking code."""

    orientation: Orientation
    size: Size
    origin: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        if self.size.width == 0 or self.size.height == 0:
            raise InvalidArgument("layout size must be non-zero on both axes")

    @classmethod
    def from_settings(cls, settings: LayoutSettings) -> HexLayout:
        return cls(
            Orientation.by_name(settings.orientation),
            Size(settings.width, settings.height),
            Point(settings.origin_x, settings.origin_y),
        )

    def hex_to_pixel(self, hex_: Hex) -> Point:
        M = self.orientation
        x = (M.f0 * hex_.q + M.f1 * hex_.r) * self.size.width
        y = (M.f2 * hex_.q + M.f3 * hex_.r) * self.size.height
        return Point(x + self.origin.x, y + self.origin.y)

    def pixel_to_hex_fractional(self, point: Point) -> tuple[float, float, float]:
        M = self.orientation
        px = (point.x - self.origin.x) / self.size.width
        py = (point.y - self.origin.y) / self.size.height
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return q, r, -q - r

    def pixel_to_hex(self, point: Point) -> Hex:
        """Return the hex whose cell contains ``point``."""

        return Hex.from_fractional(*self.pixel_to_hex_fractional(point))

    def hex_corners(self, hex_: Hex) -> List[Point]:
        """Polygon outline of ``hex_`` in a fixed winding order."""

        center = self.hex_to_pixel(hex_)
        corners: List[Point] = []
        for i in range(6):
            angle = 2.0 * pi * (self.orientation.start_angle - i) / 6.0
            corners.append(
                Point(
                    center.x + self.size.width * cos(angle),
                    center.y + self.size.height * sin(angle),
                )
            )
        return corners

    def hexes_to_pixels(self, hexes: Iterable[Hex]) -> np.ndarray:
        """Vectorised :meth:`hex_to_pixel`; returns an ``(n, 2)`` float array."""

        axial = np.array([(h.q, h.r) for h in hexes], dtype=float).reshape(-1, 2)
        M = self.orientation
        forward = np.array([[M.f0, M.f1], [M.f2, M.f3]])
        scale = np.array([self.size.width, self.size.height])
        offset = np.array([self.origin.x, self.origin.y])
        return axial @ forward.T * scale + offset

    def get_bounds(self, hexes: Iterable[Hex]) -> Bounds:
        """Bounding box of the given hexes, padded so whole polygons fit.

        An empty collection yields a zero-sized box at ``(0, 0)``.
        """

        pixels = self.hexes_to_pixels(hexes)
        if len(pixels) == 0:
            return Bounds(Point(0.0, 0.0), Point(0.0, 0.0))
        low = pixels.min(axis=0)
        high = pixels.max(axis=0)
        margin = max(self.size.width, self.size.height)
        return Bounds(
            Point(float(low[0]) - margin, float(low[1]) - margin),
            Point(float(high[0]) + margin, float(high[1]) + margin),
        )


__all__ = [
    "Bounds",
    "HexLayout",
    "ORIENTATIONS",
    "Orientation",
    "Point",
    "Size",
    "orientation_flat",
    "orientation_pointy",
]
