"""Status line and move-list labels shown next to the board."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .game_basics import Draw, Winner, evaluate, mark_symbol, player_for_ply


def describe_status(board: Sequence[int], current_index: int) -> str:
    outcome = evaluate(board)
    if isinstance(outcome, Winner):
        return f"Winner: {outcome.symbol}"
    if isinstance(outcome, Draw):
        return "It's a draw!"
    return f"Next player: {mark_symbol(player_for_ply(current_index))}"


def move_label(move_index: int, location: Optional[Tuple[int, int]], current_index: int) -> str:
    if move_index == current_index:
        return f"You are at move #{move_index}"
    if move_index == 0 or location is None:
        return "Go to game start"
    row, col = location
    return f"Go to move #{move_index} ({row}, {col})"
