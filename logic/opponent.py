"""
Automated opponent for TicTacToe.
Picks moves at three difficulty levels on top of the Minimax search.
"""

import math
from enum import Enum
from typing import Optional
from .config import GameConfig
from .game_state import Board, Mark, InvalidState
from .move_search import MinimaxSearch


class Difficulty(Enum):
    """Opponent difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Coin flip between random and perfect
    HARD = "hard"        # Full minimax


class OpponentPolicy:
    """
    Chooses the opponent's move for a given difficulty.

    The random sample is supplied by the caller rather than drawn here,
    so a fixed sample always gives the same move.
    """

    def __init__(
        self,
        mark: Mark = Mark.O,
        config: Optional[GameConfig] = None,
        search: Optional[MinimaxSearch] = None
    ):
        """
        Initialize the opponent.

        Args:
            mark: Which mark the opponent plays (default: O).
            config: Game configuration. Uses defaults if not provided.
            search: Minimax search to use for perfect play.
        """
        self.mark = mark
        self.config = config or GameConfig()
        self.search = search or MinimaxSearch(mark, self.config)

    def choose_move(self, board: Board, difficulty: Difficulty, random_sample: float) -> int:
        """
        Pick the opponent's next move.

        Args:
            board: Current board, with the opponent to move.
            difficulty: How strong the opponent plays.
            random_sample: Uniform value in [0, 1).

        Returns:
            Index of the chosen cell.

        Raises:
            InvalidState: The board has no empty cells.
        """
        if not 0.0 <= random_sample < 1.0:
            raise ValueError(f"Random sample must be in [0, 1), got {random_sample}")

        if board.is_full():
            raise InvalidState("Opponent asked to move on a full board")

        if difficulty == Difficulty.EASY:
            return self._random_move(board, random_sample)

        if difficulty == Difficulty.MEDIUM:
            # The same sample gates the branch and picks the random cell
            if random_sample < self.config.MEDIUM_RANDOM_THRESHOLD:
                return self._random_move(board, random_sample)
            return self.search.best_move(board)

        return self.search.best_move(board)

    def _random_move(self, board: Board, random_sample: float) -> int:
        """Get a uniformly random empty cell."""
        empty_cells = board.empty_indices()
        return empty_cells[math.floor(random_sample * len(empty_cells))]
