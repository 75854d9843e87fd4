"""Text preview of a rectangular hex region, for debugging searches."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from .hexpath.conversions import OffsetLayout
from .hexpath.coords import Hex

SymbolFunction = Callable[[Hex], str]


def path_highlights(path: Iterable[Hex], marker: str = "*") -> dict[Hex, str]:
    """Mark every hex of ``path``; start and goal get ``S`` and ``G``."""

    hexes = list(path)
    highlights = {hex_: marker for hex_ in hexes}
    if hexes:
        highlights[hexes[0]] = "S"
        highlights[hexes[-1]] = "G"
    return highlights


def render_lines(
    columns: int,
    rows: int,
    *,
    symbol_for: SymbolFunction,
    highlights: Mapping[Hex, str] | None = None,
    layout: OffsetLayout = OffsetLayout.ODD_R,
) -> list[str]:
    """One string per offset row; odd rows are indented by a single space."""

    marks = dict(highlights or {})
    lines: list[str] = []
    for row in range(rows):
        prefix = " " if row % 2 else ""
        cells: list[str] = []
        for col in range(columns):
            hex_ = Hex.from_offset(col, row, layout)
            cells.append(marks.get(hex_, symbol_for(hex_)))
        lines.append(prefix + " ".join(cells))
    return lines


def render_hex_map(
    columns: int,
    rows: int,
    *,
    symbol_for: SymbolFunction,
    highlights: Mapping[Hex, str] | None = None,
    title: str = "Hex Map",
    layout: OffsetLayout = OffsetLayout.ODD_R,
) -> RenderableType:
    lines = render_lines(
        columns, rows, symbol_for=symbol_for, highlights=highlights, layout=layout
    )
    if not lines:
        lines.append("(no map data)")
    return Panel(Text("\n".join(lines)), title=title, border_style="cyan")


__all__ = ["path_highlights", "render_hex_map", "render_lines"]
