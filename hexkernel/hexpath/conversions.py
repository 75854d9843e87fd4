from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidArgument


class OffsetLayout(Enum):
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"
    ODD_R = "odd_r"
    EVEN_R = "even_r"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int
    row: int
    layout: OffsetLayout = OffsetLayout.ODD_Q


def axial_to_offset(q: int, r: int, layout: OffsetLayout = OffsetLayout.ODD_Q) -> Offset:
    if layout == OffsetLayout.ODD_Q:
        col = q
        row = r + (q - (q & 1)) // 2
    elif layout == OffsetLayout.EVEN_Q:
        col = q
        row = r + (q + (q & 1)) // 2
    elif layout == OffsetLayout.ODD_R:
        col = q + (r - (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.EVEN_R:
        col = q + (r + (r & 1)) // 2
        row = r
    else:
        raise InvalidArgument(f"Unknown offset layout: {layout!r}")
    return Offset(col, row, layout)


def offset_to_axial(o: Offset) -> tuple[int, int]:
    col, row, layout = o.col, o.row, o.layout
    if layout == OffsetLayout.ODD_Q:
        q = col
        r = row - (col - (col & 1)) // 2
    elif layout == OffsetLayout.EVEN_Q:
        q = col
        r = row - (col + (col & 1)) // 2
    elif layout == OffsetLayout.ODD_R:
        q = col - (row - (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.EVEN_R:
        q = col - (row + (row & 1)) // 2
        r = row
    else:
        raise InvalidArgument(f"Unknown offset layout: {layout!r}")
    return q, r


def cube_lerp(
    a: tuple[float, float, float],
    b: tuple[float, float, float],
    t: float,
) -> tuple[float, float, float]:
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def cube_round(qf: float, rf: float, sf: float) -> tuple[int, int, int]:
    """Snap fractional cube coordinates to the nearest valid hex.

    Each axis is rounded on its own, then the axis that moved furthest is
    recomputed from the other two so the result sums to zero exactly.
    Halves round up (towards positive infinity), never to even.
    """

    qi, ri, si = _round_half_up(qf), _round_half_up(rf), _round_half_up(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return qi, ri, si


__all__ = [
    "Offset",
    "OffsetLayout",
    "axial_to_offset",
    "cube_lerp",
    "cube_round",
    "offset_to_axial",
]
