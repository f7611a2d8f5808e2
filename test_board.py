"""
Tests for the TicTacToe board model.
Covers placing marks, win lines, draws and move validation.
"""

import pytest

from logic.game_state import Board, Mark, InvalidMove
from logic.session import GameSession
from logic.win_checker import WinChecker


checker = WinChecker()


def test_new_board_is_empty():
    board = Board()
    assert board.empty_indices() == list(range(9))
    assert not board.is_full()


def test_apply_returns_new_board():
    board = Board()
    moved = board.apply(4, Mark.X)

    assert moved[4] == Mark.X
    assert board[4] == Mark.EMPTY
    assert moved.empty_indices() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_apply_twice_at_same_index_fails():
    board = Board().apply(2, Mark.X)

    with pytest.raises(InvalidMove):
        board.apply(2, Mark.O)
    with pytest.raises(InvalidMove):
        board.apply(2, Mark.X)


def test_apply_rejects_bad_index_and_empty_mark():
    with pytest.raises(InvalidMove):
        Board().apply(9, Mark.X)
    with pytest.raises(InvalidMove):
        Board().apply(-1, Mark.X)
    with pytest.raises(ValueError):
        Board().apply(0, Mark.EMPTY)


def test_board_must_have_nine_cells():
    with pytest.raises(ValueError):
        Board((Mark.EMPTY,) * 8)
    with pytest.raises(ValueError):
        Board.from_string("XO")


def test_from_string():
    board = Board.from_string("XO. .X. ..O")
    assert board.cells == (
        Mark.X, Mark.O, Mark.EMPTY,
        Mark.EMPTY, Mark.X, Mark.EMPTY,
        Mark.EMPTY, Mark.EMPTY, Mark.O,
    )
    assert Board.from_string("XO_ _X_ __O") == board
    assert board.count(Mark.X) == 2
    assert board.empty_indices() == [2, 3, 5, 6, 7]


def test_boards_are_hashable_values():
    assert Board.from_string("X........") == Board().apply(0, Mark.X)
    assert len({Board(), Board(), Board().apply(0, Mark.X)}) == 2


@pytest.mark.parametrize("text", [
    "XXX......",
    "...XXX...",
    "......XXX",
    "X..X..X..",
    ".X..X..X.",
    "..X..X..X",
    "X...X...X",
    "..X.X.X..",
])
def test_every_winning_line(text):
    board = Board.from_string(text)
    assert checker.has_won(board, Mark.X)
    assert not checker.has_won(board, Mark.O)
    assert checker.check_winner(board) == Mark.X


def test_two_in_a_row_is_not_a_win():
    board = Board.from_string("XX.OO....")
    assert not checker.has_won(board, Mark.X)
    assert not checker.has_won(board, Mark.O)
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None


def test_winning_line():
    board = Board.from_string("O.XOX.OX.")
    assert checker.get_winning_line(board) == (0, 3, 6)


def test_full_board_without_line_is_draw():
    board = Board.from_string("XOXXOOOXX")
    assert checker.is_draw(board)
    assert not checker.has_won(board, Mark.X)
    assert not checker.has_won(board, Mark.O)


def test_partial_board_is_not_draw():
    assert not checker.is_draw(Board.from_string("XOXXOOOX."))


def test_both_marks_never_win_on_reachable_boards():
    """Walk every reachable position from the empty board."""
    seen = set()
    stack = [(Board(), Mark.X)]

    while stack:
        board, to_move = stack.pop()
        if board in seen:
            continue
        seen.add(board)

        x_won = checker.has_won(board, Mark.X)
        o_won = checker.has_won(board, Mark.O)
        assert not (x_won and o_won)

        if x_won or o_won or board.is_full():
            continue

        for index in board.empty_indices():
            stack.append((board.apply(index, to_move), to_move.opposite()))

    assert len(seen) == 5478


def test_validator_rejects_occupied_and_out_of_range():
    session = GameSession(mode="friend")
    session.cell_selected(4)

    assert not session.validator.validate_move(session, 4).is_valid
    assert "occupied" in session.validator.validate_move(session, 4).error_message
    assert not session.validator.validate_move(session, 9).is_valid
    assert not session.validator.validate_move(session, "4").is_valid
    assert session.validator.validate_move(session, 0).is_valid


def test_validator_rejects_moves_after_game_over():
    session = GameSession(mode="friend")
    for index in (0, 3, 1, 4, 2):
        session.cell_selected(index)

    result = session.validator.validate_move(session, 8)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


def test_board_cells_must_be_marks():
    with pytest.raises(ValueError):
        Board(("X",) * 9)
    with pytest.raises(ValueError):
        Board((Mark.X, None) + (Mark.EMPTY,) * 7)
