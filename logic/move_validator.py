"""
Move validator for TicTacToe.
Validates that a player's click is allowed before the session applies it.
"""

import numbers
from typing import Optional
from dataclasses import dataclass
from .game_state import BOARD_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. The opponent must not be in the middle of its turn
    3. Can only place on empty cells that exist
    """

    def validate_move(self, session, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current GameSession.
            index: Cell the player clicked (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if session.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Opponent move pending
        if session.is_thinking:
            return ValidationResult(
                is_valid=False,
                error_message="Opponent is still thinking!"
            )

        # Check if index is in valid range
        if (
            not isinstance(index, numbers.Integral)
            or isinstance(index, bool)
            or not 0 <= index < BOARD_CELLS
        ):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        # Check if cell is empty
        if not session.board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {session.board[index]}"
            )

        return ValidationResult(is_valid=True)
