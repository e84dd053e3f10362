"""timetravel package.

Tic-tac-toe core with move history and time travel, a view model for
front ends, and a small terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .game import GameStateMachine, Move
from .game_basics import Draw, InProgress, Winner, evaluate
from .status import describe_status
from .view import GameView, HistoryEntry

__all__ = [
    "GameStateMachine",
    "Move",
    "evaluate",
    "Winner",
    "Draw",
    "InProgress",
    "describe_status",
    "GameView",
    "HistoryEntry",
]
