"""Cube-coordinate hex values.

Coordinates follow the Red Blob Games conventions: every cell is a triple
``(q, r, s)`` with ``q + r + s == 0``. Identity only depends on ``(q, r)``;
``s`` is carried so distance and rotation stay cheap.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from ..errors import InvalidArgument, InvariantViolation
from .conversions import Offset, OffsetLayout, axial_to_offset, cube_round, offset_to_axial

# Tolerance for fractional coordinates produced by geometry code.
CUBE_EPSILON = 1e-9


class HexDirection(IntEnum):
    """Indices into :data:`HEX_DIRECTIONS`; the order drives ring walking."""

    EAST = 0
    NORTHEAST = 1
    NORTHWEST = 2
    WEST = 3
    SOUTHWEST = 4
    SOUTHEAST = 5


@dataclass(frozen=True, slots=True)
class Hex:
    q: int
    r: int
    s: int = field(default=None, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.s is None:
            object.__setattr__(self, "s", -self.q - self.r)
        if abs(self.q + self.r + self.s) > CUBE_EPSILON:
            raise InvariantViolation(
                f"Invalid hex coordinates: q={self.q}, r={self.r}, s={self.s}. "
                "Must satisfy q + r + s = 0"
            )

    # --- Construction ---------------------------------------------------------

    @classmethod
    def from_axial(cls, q: int, r: int) -> Hex:
        return cls(q, r, -q - r)

    @classmethod
    def from_offset(
        cls, col: int, row: int, layout: OffsetLayout = OffsetLayout.ODD_Q
    ) -> Hex:
        """Build a hex from ``(col, row)`` offset coordinates (odd-q by default)."""

        q, r = offset_to_axial(Offset(col, row, layout))
        return cls(q, r)

    @classmethod
    def from_fractional(cls, q: float, r: float, s: float) -> Hex:
        """Return the hex nearest to a fractional cube position."""

        return cls(*cube_round(q, r, s))

    def to_offset(self, layout: OffsetLayout = OffsetLayout.ODD_Q) -> Offset:
        return axial_to_offset(self.q, self.r, layout)

    def to_key(self) -> tuple[int, int]:
        """Composite key for dictionaries and sets."""

        return (self.q, self.r)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r, self.s - other.s)

    def scale(self, factor: int) -> Hex:
        return Hex(self.q * factor, self.r * factor, self.s * factor)

    def __add__(self, other: Hex) -> Hex:
        return self.add(other)

    def __sub__(self, other: Hex) -> Hex:
        return self.subtract(other)

    def __mul__(self, factor: int) -> Hex:
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Hex:
        return self.scale(-1)

    def rotate_left(self) -> Hex:
        """Rotate 60 degrees counter-clockwise about the origin."""

        return Hex(-self.s, -self.q, -self.r)

    def rotate_right(self) -> Hex:
        """Rotate 60 degrees clockwise about the origin."""

        return Hex(-self.r, -self.s, -self.q)

    # --- Metric ---------------------------------------------------------------

    def length(self) -> int:
        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_to(self, other: Hex) -> int:
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    # --- Adjacency ------------------------------------------------------------

    def neighbors(self) -> list[Hex]:
        return [self.add(direction) for direction in HEX_DIRECTIONS]

    def neighbor(self, direction: int) -> Hex:
        if isinstance(direction, bool):
            raise InvalidArgument(f"Invalid direction: {direction!r}. Must be 0-5")
        try:
            index = operator.index(direction)
        except TypeError:
            raise InvalidArgument(f"Invalid direction: {direction!r}. Must be 0-5") from None
        if index < 0 or index >= 6:
            raise InvalidArgument(f"Invalid direction: {direction}. Must be 0-5")
        return self.add(HEX_DIRECTIONS[index])

    def range(self, radius: int) -> list[Hex]:
        """All hexes within ``radius`` steps, this hex included."""

        results: list[Hex] = []
        for q in range(-radius, radius + 1):
            r1 = max(-radius, -q - radius)
            r2 = min(radius, -q + radius)
            for r in range(r1, r2 + 1):
                results.append(Hex(self.q + q, self.r + r))
        return results

    def ring(self, radius: int) -> list[Hex]:
        """Hexes at exactly ``radius`` steps, walked in direction order.

        The walk starts ``radius`` steps towards :attr:`HexDirection.SOUTHWEST`
        and then moves ``radius`` steps along each of the six directions.
        """

        if radius == 0:
            return [self]
        results: list[Hex] = []
        current = self.add(HEX_DIRECTIONS[HexDirection.SOUTHWEST].scale(radius))
        for direction in HexDirection:
            for _ in range(radius):
                results.append(current)
                current = current.neighbor(direction)
        return results

    def spiral(self, radius: int) -> Iterator[Hex]:
        """Yield this hex, then each ring out to ``radius``."""

        for step in range(radius + 1):
            yield from self.ring(step)

    def __str__(self) -> str:
        return f"Hex({self.q}, {self.r}, {self.s})"


HEX_DIRECTIONS: tuple[Hex, ...] = (
    Hex(1, 0, -1),
    Hex(1, -1, 0),
    Hex(0, -1, 1),
    Hex(-1, 0, 1),
    Hex(-1, 1, 0),
    Hex(0, 1, -1),
)


__all__ = ["CUBE_EPSILON", "HEX_DIRECTIONS", "Hex", "HexDirection"]
