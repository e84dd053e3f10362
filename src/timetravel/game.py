"""
Game state machine: the ordered list of board snapshots and the pointer into it.
Teaching notes:
- The side to move is never stored; it follows from the parity of the current index.
- Playing from a rewound position discards the "future" moves before appending,
  so the history always describes one line of play.
- Invalid actions leave the state untouched and return False instead of raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .game_basics import (
    EMPTY,
    EMPTY_BOARD,
    Board,
    Outcome,
    Winner,
    evaluate,
    index_to_location,
    place,
    player_for_ply,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    board: Board
    location: Optional[Tuple[int, int]] = None  # None for the game start


class GameStateMachine:
    def __init__(self) -> None:
        self._history: List[Move] = [Move(board=EMPTY_BOARD)]
        self._current = 0

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    @property
    def current_index(self) -> int:
        return self._current

    def current_move(self) -> Move:
        return self._history[self._current]

    def current_board(self) -> Board:
        return self._history[self._current].board

    def current_turn(self) -> int:
        return player_for_ply(self._current)

    def outcome(self) -> Outcome:
        return evaluate(self.current_board())

    def apply_move(self, cell_index: int) -> bool:
        """Place the side-to-move's mark on ``cell_index``.

        Returns False (and changes nothing) when the index is out of range,
        the cell is taken, or the current board already has a winner.
        """
        if not isinstance(cell_index, int) or isinstance(cell_index, bool) or not 0 <= cell_index <= 8:
            logger.debug("Ignoring move: cell index %r out of range", cell_index)
            return False
        board = self.current_board()
        if board[cell_index] != EMPTY:
            logger.debug("Ignoring move: cell %d is already filled", cell_index)
            return False
        if isinstance(evaluate(board), Winner):
            logger.debug("Ignoring move: game already won at move #%d", self._current)
            return False

        player = self.current_turn()
        nxt = Move(board=place(board, cell_index, player), location=index_to_location(cell_index))
        dropped = len(self._history) - (self._current + 1)
        if dropped:
            logger.debug("Branching at move #%d, discarding %d later move(s)", self._current, dropped)
        del self._history[self._current + 1:]
        self._history.append(nxt)
        self._current = len(self._history) - 1
        logger.debug("Move #%d: player %d at %s", self._current, player, nxt.location)
        return True

    def jump_to(self, index: int) -> bool:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._history):
            logger.debug("Ignoring jump: index %r outside history of %d", index, len(self._history))
            return False
        self._current = index
        return True
