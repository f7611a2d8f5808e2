"""
Tests for the minimax search and the opponent policy.
"""

import pytest

from logic.game_state import Board, Mark, InvalidState
from logic.move_search import MinimaxSearch
from logic.opponent import Difficulty, OpponentPolicy


# Empty cells are 3, 5 and 7. O (to move) wins by force with 3 or 5,
# immediately with 7.
THREE_EMPTY = Board.from_string("XOX.O.X.O")


def test_empty_board_is_a_draw():
    search = MinimaxSearch(Mark.X)
    assert search.evaluate(Board(), Mark.X, True) == 0
    assert search.evaluate(Board(), Mark.O, False) == 0


def test_evaluate_terminal_positions():
    search = MinimaxSearch(Mark.O)
    assert search.evaluate(Board.from_string("OOOXX.X.."), Mark.O, False) == 1
    assert search.evaluate(Board.from_string("XXXOO...."), Mark.O, True) == -1
    assert search.evaluate(Board.from_string("XOXXOOOXX"), Mark.O, True) == 0


def test_evaluate_is_deterministic():
    board = Board.from_string("X...O...X")
    first = MinimaxSearch(Mark.O).evaluate(board, Mark.O, True)
    second = MinimaxSearch(Mark.O).evaluate(board, Mark.O, True)
    assert first == second == 0


def test_best_move_takes_the_win():
    # X also threatens 5, but O completes the top row first
    board = Board.from_string("OO.XX....")
    assert MinimaxSearch(Mark.O).best_move(board) == 2


def test_best_move_blocks_the_threat():
    board = Board.from_string("XX..O....")
    assert MinimaxSearch(Mark.O).best_move(board) == 2


def test_best_move_ties_go_to_lowest_index():
    # O wins at 6 or 8
    board = Board.from_string("OXOXOX.X.")
    assert MinimaxSearch(Mark.O).best_move(board) == 6

    # Every reply to the empty board draws
    assert MinimaxSearch(Mark.O).best_move(Board()) == 0


def test_best_move_answers_corner_with_center():
    board = Board.from_string("X........")
    assert MinimaxSearch(Mark.O).best_move(board) == 4


def test_best_move_on_full_board_fails():
    with pytest.raises(InvalidState):
        MinimaxSearch(Mark.O).best_move(Board.from_string("XOXXOOOXX"))


def test_search_needs_a_real_mark():
    with pytest.raises(ValueError):
        MinimaxSearch(Mark.EMPTY)


def test_easy_picks_by_sample():
    policy = OpponentPolicy(Mark.O)
    assert policy.choose_move(THREE_EMPTY, Difficulty.EASY, 0.0) == 3
    assert policy.choose_move(THREE_EMPTY, Difficulty.EASY, 0.5) == 5
    assert policy.choose_move(THREE_EMPTY, Difficulty.EASY, 0.99) == 7


def test_medium_uses_sample_for_branch_and_cell():
    policy = OpponentPolicy(Mark.O)
    # Below the threshold: random branch, floor(0.4 * 3) = 1 -> cell 5
    assert policy.choose_move(THREE_EMPTY, Difficulty.MEDIUM, 0.4) == 5
    # At or above the threshold: same as hard
    assert policy.choose_move(THREE_EMPTY, Difficulty.MEDIUM, 0.5) == 3
    assert policy.choose_move(THREE_EMPTY, Difficulty.MEDIUM, 0.6) == 3


def test_hard_ignores_sample():
    policy = OpponentPolicy(Mark.O)
    for sample in (0.0, 0.4, 0.99):
        assert policy.choose_move(THREE_EMPTY, Difficulty.HARD, sample) == 3


def test_policy_rejects_bad_input():
    policy = OpponentPolicy(Mark.O)

    with pytest.raises(InvalidState):
        policy.choose_move(Board.from_string("XOXXOOOXX"), Difficulty.EASY, 0.1)
    with pytest.raises(ValueError):
        policy.choose_move(THREE_EMPTY, Difficulty.EASY, 1.0)
    with pytest.raises(ValueError):
        policy.choose_move(THREE_EMPTY, Difficulty.EASY, -0.1)


def test_full_board_with_line_scores_as_win():
    # X completed the right column with the last cell
    board = Board.from_string("XOXOOXOXX")
    assert board.is_full()
    assert MinimaxSearch(Mark.X).evaluate(board, Mark.X, False) == 1
    assert MinimaxSearch(Mark.O).evaluate(board, Mark.O, True) == -1
