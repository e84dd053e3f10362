"""
View model: the interaction surface a front end talks to.
Teaching notes:
- Front ends pass the activated cell or move number as a plain argument.
- Everything exposed here is recomputed from the state machine on access;
  nothing is cached between calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import config
from .game import GameStateMachine
from .game_basics import Board, winning_line
from .status import describe_status, move_label


@dataclass(frozen=True)
class HistoryEntry:
    move_index: int
    is_current: bool
    label: str


class GameView:
    def __init__(self, game: Optional[GameStateMachine] = None, ascending: Optional[bool] = None) -> None:
        self.game = game if game is not None else GameStateMachine()
        self.ascending = config.default_ascending() if ascending is None else ascending

    # interaction surface

    def on_cell_activate(self, cell_index: int) -> bool:
        return self.game.apply_move(cell_index)

    def on_history_select(self, move_index: int) -> bool:
        return self.game.jump_to(move_index)

    def on_toggle_sort(self) -> None:
        self.ascending = not self.ascending

    # read-only state

    @property
    def board(self) -> Board:
        return self.game.current_board()

    @property
    def status(self) -> str:
        return describe_status(self.board, self.game.current_index)

    @property
    def winning_line(self) -> Tuple[int, ...]:
        return winning_line(self.board) or ()

    @property
    def sort_label(self) -> str:
        return "Sort Descending" if self.ascending else "Sort Ascending"

    def entries(self) -> List[HistoryEntry]:
        current = self.game.current_index
        rows = [
            HistoryEntry(
                move_index=i,
                is_current=i == current,
                label=move_label(i, mv.location, current),
            )
            for i, mv in enumerate(self.game.history)
        ]
        return rows if self.ascending else rows[::-1]
