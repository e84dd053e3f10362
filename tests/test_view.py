from timetravel.game import GameStateMachine
from timetravel.view import GameView, HistoryEntry


def make_view(*cells, ascending=True):
    v = GameView(ascending=ascending)
    for c in cells:
        assert v.on_cell_activate(c)
    return v


def test_entries_labels_ascending():
    v = make_view(0, 4)
    assert v.entries() == [
        HistoryEntry(0, False, "Go to game start"),
        HistoryEntry(1, False, "Go to move #1 (0, 0)"),
        HistoryEntry(2, True, "You are at move #2"),
    ]


def test_current_label_follows_jump():
    v = make_view(0, 4)
    assert v.on_history_select(0)
    labels = [e.label for e in v.entries()]
    assert labels == ["You are at move #0", "Go to move #1 (0, 0)", "Go to move #2 (1, 1)"]
    assert v.status == "Next player: X"


def test_toggle_sort_only_reorders():
    v = make_view(0, 4, 8)
    hist, idx, board = v.game.history, v.game.current_index, v.board
    asc = v.entries()
    assert v.sort_label == "Sort Descending"
    v.on_toggle_sort()
    assert v.ascending is False
    assert v.sort_label == "Sort Ascending"
    assert v.entries() == asc[::-1]
    assert (v.game.history, v.game.current_index, v.board) == (hist, idx, board)
    v.on_toggle_sort()
    assert v.entries() == asc


def test_winning_line_and_status():
    v = make_view(0, 4, 1, 5, 2)
    assert v.winning_line == (0, 1, 2)
    assert v.status == "Winner: X"
    assert v.on_cell_activate(8) is False
    v.on_history_select(3)
    assert v.winning_line == ()


def test_default_sort_order_from_env(monkeypatch):
    monkeypatch.setenv("TTT_SORT_ORDER", "desc")
    assert GameView().ascending is False
    monkeypatch.delenv("TTT_SORT_ORDER")
    assert GameView().ascending is True


def test_view_wraps_existing_game():
    g = GameStateMachine()
    g.apply_move(4)
    v = GameView(g, ascending=True)
    assert v.board[4] == 1
    assert v.status == "Next player: O"
