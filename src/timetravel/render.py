"""Plain-text rendering of the board, status and move list.

Functions return strings; callers decide where to print them.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .game_basics import EMPTY, O, X, mark_symbol
from .view import GameView

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

_PIECE_COLORS = {X: FG_RED, O: FG_YELLOW}


def c(s: str, code: str, color: bool = True) -> str:
    if not color:
        return s
    return f"{code}{s}{RESET}"


def _cell(value: int, index: int, highlighted: bool, color: bool) -> str:
    if value == EMPTY:
        text = c(str(index), FG_GRAY, color)
    else:
        text = c(mark_symbol(value), _PIECE_COLORS[value], color)
    if not highlighted:
        return f" {text} "
    if color:
        return f"{REVERSE} {mark_symbol(value)} {RESET}"
    return f"[{mark_symbol(value)}]"


def render_board(board: Sequence[int], highlight: Optional[Iterable[int]] = None, color: bool = True) -> str:
    """Draw the 3x3 grid. Empty cells show their index so they can be typed."""
    hl = set(highlight) if highlight else set()
    rows: List[str] = []
    for r in range(3):
        parts = [_cell(board[r * 3 + col], r * 3 + col, r * 3 + col in hl, color) for col in range(3)]
        rows.append("|".join(parts))
    sep = c("---+---+---", DIM, color)
    return f"\n{sep}\n".join(rows)


def render_view(view: GameView, color: bool = True) -> str:
    lines = [
        c(view.status, FG_CYAN, color),
        render_board(view.board, view.winning_line, color),
        "",
        c(f"(s) {view.sort_label}", DIM, color),
    ]
    for entry in view.entries():
        if entry.is_current:
            lines.append(f"     {c(entry.label, BOLD, color)}")
        else:
            lines.append(f"[{entry.move_index:>2}] {entry.label}")
    return "\n".join(lines)
