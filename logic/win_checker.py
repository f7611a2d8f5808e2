"""
Win checker for TicTacToe.
Checks if a mark has won or if the board is filled up.
"""

from typing import Optional, Tuple
from .game_state import Board, Mark


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_won(self, board: Board, mark: Mark) -> bool:
        """
        Check if a mark occupies a full winning line.

        Args:
            board: The board to check.
            mark: The mark to look for.

        Returns:
            True if any of the 8 lines is all `mark`.
        """
        return any(
            all(board[index] == mark for index in line)
            for line in self.WINNING_LINES
        )

    def is_draw(self, board: Board) -> bool:
        """
        Check if the board is filled up.

        Only looks at emptiness: a full board that also holds a line is a
        win, so callers must check has_won() first.
        """
        return board.is_full()

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for mark in (Mark.X, Mark.O):
            if self.has_won(board, mark):
                return mark
        return None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The three cell indices of the line, or None.
        """
        for line in self.WINNING_LINES:
            first = board[line[0]]
            if first != Mark.EMPTY and all(board[i] == first for i in line):
                return line
        return None
