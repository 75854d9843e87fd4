from rich.console import Console
from rich.panel import Panel

from hexkernel.hexpath import Hex, OffsetLayout, find_path
from hexkernel.render import path_highlights, render_hex_map, render_lines


def dot(_hex: Hex) -> str:
    return "."


def test_render_lines_indent_odd_rows():
    assert render_lines(3, 2, symbol_for=dot) == [". . .", " . . ."]


def test_render_lines_apply_highlights():
    layout = OffsetLayout.ODD_R
    target = Hex.from_offset(1, 1, layout)
    lines = render_lines(3, 2, symbol_for=dot, highlights={target: "X"}, layout=layout)
    assert lines == [". . .", " . X ."]


def test_path_highlights_marks_start_and_goal():
    path = find_path(Hex(0, 0), Hex(3, 0), lambda a, b: 1.0)
    marks = path_highlights(path)
    assert marks[Hex(0, 0)] == "S"
    assert marks[Hex(3, 0)] == "G"
    assert marks[Hex(1, 0)] == "*"
    assert path_highlights([]) == {}


def test_render_hex_map_panel():
    panel = render_hex_map(2, 2, symbol_for=dot, title="Preview")
    assert isinstance(panel, Panel)
    assert panel.title == "Preview"
    console = Console(record=True, width=40)
    console.print(panel)
    text = console.export_text()
    assert ". ." in text
    assert "Preview" in text


def test_render_hex_map_empty():
    console = Console(record=True, width=40)
    console.print(render_hex_map(0, 0, symbol_for=dot))
    assert "(no map data)" in console.export_text()
