"""
Move search for the TicTacToe opponent.
Uses the Minimax algorithm to find the best move.
"""

from typing import Dict, Optional, Tuple
from .config import GameConfig
from .game_state import Board, Mark, InvalidState
from .win_checker import WinChecker


class MinimaxSearch:
    """
    Exhaustive Minimax search over the TicTacToe game tree.

    Every position is scored from the searching mark's point of view:
    +1 = win, 0 = draw, -1 = loss. There is no depth limit and no pruning.
    A 3x3 board has at most 9! continuations, so the full tree is cheap,
    and scores of positions already seen are reused (the search is a pure
    function of the board, so this never changes the answer).
    """

    def __init__(self, mark: Mark = Mark.O, config: Optional[GameConfig] = None):
        """
        Initialize the search.

        Args:
            mark: The mark the search plays for (default: O).
            config: Game configuration. Uses defaults if not provided.
        """
        if mark == Mark.EMPTY:
            raise ValueError("The search must play X or O")

        self.mark = mark
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Scores of positions we've already solved
        self._scores: Dict[Tuple[Board, Mark, bool], int] = {}

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def evaluate(self, board: Board, maximizing_mark: Mark, is_maximizing: bool) -> int:
        """
        Score a position with Minimax.

        Args:
            board: Position to evaluate.
            maximizing_mark: The mark whose win counts as +1.
            is_maximizing: True if `maximizing_mark` moves next.

        Returns:
            1 if `maximizing_mark` wins with perfect play, -1 if it loses,
            0 for a draw.
        """
        key = (board, maximizing_mark, is_maximizing)
        if key in self._scores:
            return self._scores[key]

        self.positions_evaluated += 1
        minimizing_mark = maximizing_mark.opposite()

        # Terminal states, checked in this order
        if self.win_checker.has_won(board, maximizing_mark):
            score = 1
        elif self.win_checker.has_won(board, minimizing_mark):
            score = -1
        elif self.win_checker.is_draw(board):
            score = 0
        elif is_maximizing:
            score = max(
                self.evaluate(board.apply(index, maximizing_mark), maximizing_mark, False)
                for index in board.empty_indices()
            )
        else:
            score = min(
                self.evaluate(board.apply(index, minimizing_mark), maximizing_mark, True)
                for index in board.empty_indices()
            )

        self._scores[key] = score
        return score

    def best_move(self, board: Board) -> int:
        """
        Get the best move for the searching mark.

        Ties go to the lowest index, so the result is deterministic.

        Args:
            board: Current board, with the searching mark to move.

        Returns:
            Index of the best move.

        Raises:
            InvalidState: The board has no empty cells.
        """
        valid_moves = board.empty_indices()

        if not valid_moves:
            raise InvalidState("No moves available on a full board")

        self.positions_evaluated = 0
        best_score = None
        best_index = valid_moves[0]

        for index in valid_moves:
            score = self.evaluate(board.apply(index, self.mark), self.mark, False)

            if best_score is None or score > best_score:
                best_score = score
                best_index = index

        if self.config.DEBUG_MODE:
            print(
                f"Search evaluated {self.positions_evaluated} new positions. "
                f"Best move: {best_index} (score: {best_score})"
            )

        return best_index
