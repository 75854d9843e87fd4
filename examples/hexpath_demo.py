from rich.console import Console

from hexkernel import Hex, OffsetLayout, Pathfinder, find_path
from hexkernel.render import path_highlights, render_hex_map

LAYOUT = OffsetLayout.ODD_R
columns, rows = 10, 8
start = Hex.from_offset(0, 0, LAYOUT)
goal = Hex.from_offset(8, 5, LAYOUT)

walls = {Hex.from_offset(3, row, LAYOUT) for row in range(0, 6)}
woods = {Hex.from_offset(6, 3, LAYOUT), Hex.from_offset(6, 4, LAYOUT), Hex.from_offset(7, 4, LAYOUT)}


def in_bounds(h: Hex) -> bool:
    offset = h.to_offset(LAYOUT)
    return 0 <= offset.col < columns and 0 <= offset.row < rows


def cost(_from: Hex, to: Hex) -> float:
    if not in_bounds(to) or to in walls:
        return float("inf")
    return 2.0 if to in woods else 1.0


def symbol(h: Hex) -> str:
    if h in walls:
        return "#"
    if h in woods:
        return "^"
    return "."


if __name__ == "__main__":
    console = Console()
    path = find_path(start, goal, cost)
    console.print(
        render_hex_map(
            columns,
            rows,
            symbol_for=symbol,
            highlights=path_highlights(path),
            title="A* path",
        )
    )

    pf = Pathfinder(cost, is_blocked=lambda h: h in walls)
    plan = pf.plan_move(start, goal, budget=12)
    console.print(f"cost: {plan.total_cost} valid: {plan.valid}")

    seen = set(pf.visible(start, 6, budget_key=0))
    console.print(
        render_hex_map(
            columns,
            rows,
            symbol_for=lambda h: symbol(h) if h in seen else " ",
            title="Visible from start",
        )
    )
