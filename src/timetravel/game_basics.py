"""
Game basics: board representation, serialization, rules, winner/draw checks, validity.
Teaching notes:
- A board is a tuple of 9 cells: 0=empty, 1=X, 2=O. Index = row * 3 + col.
- X always starts, so the side to move follows from how many plies were played.
- Winning lines are checked in a fixed order so the reported line is deterministic
  even for (unreachable) boards with more than one complete line.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

EMPTY = 0
X = 1
O = 2

SYMBOLS = {X: "X", O: "O"}

Board = Tuple[int, ...]
Line = Tuple[int, int, int]

# rows top->bottom, columns left->right, then the two diagonals
WIN_PATTERNS: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD: Board = (EMPTY,) * 9


@dataclass(frozen=True)
class Winner:
    player: int
    line: Line

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.player]


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class InProgress:
    pass


Outcome = Union[Winner, Draw, InProgress]


def _check_board(board: Sequence[int]) -> None:
    if len(board) != 9:
        raise ValueError(f"Board must have 9 cells, got {len(board)}")
    for v in board:
        if type(v) is not int or v not in (EMPTY, X, O):
            raise ValueError(f"Invalid cell value: {v!r}")


def evaluate(board: Sequence[int]) -> Outcome:
    """Classify a board as won, drawn or still in progress.

    The first complete line in ``WIN_PATTERNS`` order decides the winner.
    """
    _check_board(board)
    for a, b, c in WIN_PATTERNS:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return Winner(player=v, line=(a, b, c))
    if EMPTY not in board:
        return Draw()
    return InProgress()


def get_winner(board: Sequence[int]) -> int:
    outcome = evaluate(board)
    return outcome.player if isinstance(outcome, Winner) else EMPTY


def serialize_board(board: Iterable[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> Board:
    return tuple(int(cell) for cell in board_str)


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def is_valid_state(board: Sequence[int]) -> bool:
    """True when the board can arise from alternating play starting with X."""
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    w = get_winner(board)
    if w == X and x_count != o_count + 1:
        return False
    if w == O and x_count != o_count:
        return False

    def count_wins(p: int) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))
    if count_wins(X) > 0 and count_wins(O) > 0:
        return False
    return True


def player_for_ply(ply: int) -> int:
    return X if ply % 2 == 0 else O


def mark_symbol(cell: int) -> str:
    return SYMBOLS.get(cell, " ")


def index_to_location(index: int) -> Tuple[int, int]:
    return divmod(index, 3)


def place(board: Board, index: int, player: int) -> Board:
    lst = list(board)
    lst[index] = player
    return tuple(lst)


def winning_line(board: Sequence[int]) -> Optional[Line]:
    outcome = evaluate(board)
    return outcome.line if isinstance(outcome, Winner) else None
