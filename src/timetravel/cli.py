from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import config
from .game import GameStateMachine
from .game_basics import deserialize_board, get_piece_counts, is_valid_state, serialize_board
from .render import render_view
from .status import describe_status
from .view import GameView

logger = logging.getLogger(__name__)

PLAY_HELP = "Commands: 0-8 or 'c <i>' play a cell, 'j <n>' jump to move n, 's' toggle sort, 'q' quit"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-play", description="Tic-tac-toe with move history")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--descending",
        action="store_true",
        default=None,
        help="List moves newest first (default from TTT_SORT_ORDER)",
    )
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colours (also TTT_COLOR=0)")

    sub.add_parser("play", help="Play interactively, reading commands from stdin")

    p_rep = sub.add_parser("replay", help="Apply a sequence of moves and print the result")
    p_rep.add_argument("--moves", required=True, help='Comma-separated cell indices, e.g. "0,4,1,5,2"')
    p_rep.add_argument("--jump", type=int, default=None, help="Jump to this move number after replaying")

    p_st = sub.add_parser(
        "status",
        help="Print the status line for a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_st.add_argument("--board", required=True, help="Board string, e.g., 100020000")
    p_st.add_argument(
        "--index",
        type=int,
        default=None,
        help="Current move number (default: number of pieces on the board)",
    )
    return p


def _parse_moves(raw: str) -> Optional[List[int]]:
    try:
        return [int(x) for x in raw.split(',') if x.strip()]
    except ValueError:
        return None


def _handle_command(view: GameView, line: str) -> Optional[bool]:
    """Apply one ``play`` command. Returns None to quit, else whether it was accepted."""
    parts = line.split()
    if not parts:
        return False
    head = parts[0].lower()
    if head in ("q", "quit", "exit"):
        return None
    if head in ("s", "sort"):
        view.on_toggle_sort()
        return True
    try:
        if head.isdigit() and len(parts) == 1:
            return view.on_cell_activate(int(head))
        if head in ("c", "cell") and len(parts) == 2:
            return view.on_cell_activate(int(parts[1]))
        if head in ("j", "jump") and len(parts) == 2:
            return view.on_history_select(int(parts[1]))
    except ValueError:
        return False
    return False


def run_play(view: GameView, color: bool, stdin: TextIO, stdout: TextIO) -> int:
    print(PLAY_HELP, file=stdout)
    print(render_view(view, color), file=stdout)
    for line in stdin:
        raw = line.strip()
        if not raw:
            continue
        accepted = _handle_command(view, raw)
        if accepted is None:
            break
        if not accepted:
            logger.warning("Ignored: %r", raw)
            continue
        print(render_view(view, color), file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else config.log_level(),
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-timetravel"))
        except Exception:
            print("unknown")
        return 0

    color = config.use_color() and not ns.no_color
    ascending = None if ns.descending is None else not ns.descending

    if ns.cmd == "play":
        return run_play(GameView(ascending=ascending), color, sys.stdin, sys.stdout)

    if ns.cmd == "replay":
        moves = _parse_moves(ns.moves)
        if moves is None:
            logging.error("Invalid move list. Must be comma-separated integers 0-8.")
            return 2
        view = GameView(GameStateMachine(), ascending=ascending)
        for i, mv in enumerate(moves, start=1):
            if not view.on_cell_activate(mv):
                logging.error("Move %d (cell %s) was rejected.", i, mv)
                return 2
        if ns.jump is not None and not view.on_history_select(ns.jump):
            logging.error("Cannot jump to move #%s; history has %d entries.", ns.jump, len(view.game.history))
            return 2
        logging.info("replayed=%d current=%d board=%s", len(moves), view.game.current_index,
                     serialize_board(view.board))
        print(render_view(view, color))
        return 0

    if ns.cmd == "status":
        raw = ns.board.strip()
        if len(raw) != 9 or any(ch not in "012" for ch in raw):
            logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
            return 2
        b = deserialize_board(raw)
        if not is_valid_state(b):
            logging.error("Board is not a valid reachable state.")
            return 2
        plies = sum(get_piece_counts(b))
        index = ns.index if ns.index is not None else plies
        if index != plies:
            logging.error("Move index %d does not match the %d piece(s) on the board.", index, plies)
            return 2
        print(describe_status(b, index))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
