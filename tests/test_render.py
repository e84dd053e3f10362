from timetravel.game_basics import EMPTY_BOARD, deserialize_board
from timetravel.render import REVERSE, render_board, render_view
from timetravel.view import GameView


def test_empty_board_shows_indices():
    out = render_board(EMPTY_BOARD, color=False)
    assert out.splitlines() == [
        " 0 | 1 | 2 ",
        "---+---+---",
        " 3 | 4 | 5 ",
        "---+---+---",
        " 6 | 7 | 8 ",
    ]


def test_highlight_without_color_uses_brackets():
    b = deserialize_board("111220000")
    out = render_board(b, highlight=(0, 1, 2), color=False)
    assert out.splitlines()[0] == "[X]|[X]|[X]"
    assert out.splitlines()[2] == " O | O | 5 "


def test_highlight_with_color_uses_reverse_video():
    b = deserialize_board("111220000")
    out = render_board(b, highlight=(0, 1, 2), color=True)
    assert out.count(REVERSE) == 3


def test_render_view_lists_moves_and_status():
    v = GameView(ascending=True)
    for c in (0, 4, 1, 5, 2):
        v.on_cell_activate(c)
    out = render_view(v, color=False)
    lines = out.splitlines()
    assert lines[0] == "Winner: X"
    assert "(s) Sort Descending" in lines
    assert "[ 0] Go to game start" in lines
    assert "[ 4] Go to move #4 (1, 2)" in lines
    assert lines[-1].strip() == "You are at move #5"


def test_render_view_descending():
    v = GameView(ascending=False)
    v.on_cell_activate(4)
    lines = render_view(v, color=False).splitlines()
    assert "(s) Sort Ascending" in lines
    assert lines[-1] == "[ 0] Go to game start"
