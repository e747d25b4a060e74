"""Pretty-print helpers for the crossword board."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Orientation

if TYPE_CHECKING:
    from ..engine.board import BoardEngine


BLACK = "#"
EMPTY = "."


def format_board(engine: BoardEngine) -> str:
    views = engine.cell_views()
    if not views:
        return ""
    width = len(views[0])
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + "  ".join(header_cells)]
    lines.append("    " + "-" * (4 * width - 2))
    for r, row in enumerate(views):
        rendered: List[str] = []
        for view in row:
            symbol = BLACK if view.is_black else (view.value or EMPTY)
            rendered.append(f"[{symbol}]" if view.active else f" {symbol} ")
        lines.append(f"{r:>2} |" + " ".join(rendered))
    return "\n".join(lines)


def format_clues(engine: BoardEngine) -> str:
    across = [entry for entry in engine.clues() if entry.orientation == Orientation.ACROSS]
    down = [entry for entry in engine.clues() if entry.orientation == Orientation.DOWN]
    lines: List[str] = []
    for title, entries in (("Across", across), ("Down", down)):
        if not entries:
            continue
        lines.append(title)
        for entry in entries:
            number = entry.number if entry.number is not None else "-"
            lines.append(f"  {number:>2}. {entry.clue} ({entry.word.length})")
    return "\n".join(lines)


def pretty_print_board(engine: BoardEngine, *, label: str | None = None, stream=None) -> None:
    """Print the board and the current clue in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(engine), file=stream)
    clue = engine.current_clue
    print(f"Clue: {clue}" if clue else "Clue: select a white cell to start", file=stream)
