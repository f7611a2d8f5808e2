"""
Game session for TicTacToe.
Runs turns, switches modes, keeps score and drives the automated opponent.
"""

from enum import Enum
from typing import Any, Callable, Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .game_state import Board, Mark
from .move_validator import MoveValidator
from .opponent import Difficulty, OpponentPolicy
from .win_checker import WinChecker


# scheduler(delay_ms, callback) - e.g. Tk's root.after
Scheduler = Callable[[int, Callable[[], None]], Any]

# Returns a uniform float in [0, 1)
RandomSource = Callable[[], float]


class GameMode(Enum):
    """Who the first player is up against."""
    VS_OPPONENT = "ai"
    TWO_PLAYER = "friend"


class Outcome(Enum):
    """How a finished game ended."""
    WIN_A = "win_a"    # X won
    WIN_B = "win_b"    # O won
    DRAW = "draw"


@dataclass
class ScoreTally:
    """Running score across rounds."""
    side_a: int = 0     # Wins for X (the human in vs-opponent mode)
    side_b: int = 0     # Wins for O (the opponent in vs-opponent mode)
    draws: int = 0

    def record(self, outcome: Outcome):
        """Count a finished game."""
        if outcome == Outcome.WIN_A:
            self.side_a += 1
        elif outcome == Outcome.WIN_B:
            self.side_b += 1
        else:
            self.draws += 1

    def reset(self):
        self.side_a = 0
        self.side_b = 0
        self.draws = 0

    def total(self) -> int:
        return self.side_a + self.side_b + self.draws


class GameSession:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The board and whose turn it is
    - Game mode (vs opponent / two players) and opponent difficulty
    - Game status (in progress, won, draw) and the outcome text
    - Whether the opponent is thinking (input is locked meanwhile)
    - The score tally across rounds

    Game flow (vs opponent):
    1. Human (X) clicks a cell
    2. Session checks for a win or draw
    3. Opponent turn is scheduled and the session reports "thinking"
    4. When resumed, the opponent (O) picks a cell and the session
       checks for a win or draw again

    Every reset invalidates a pending opponent turn, so a callback that
    fires after New Game / mode change / difficulty change does nothing.
    """

    HUMAN_MARK = Mark.X
    OPPONENT_MARK = Mark.O

    def __init__(
        self,
        mode=None,
        difficulty=None,
        config: Optional[GameConfig] = None,
        random_source: Optional[RandomSource] = None,
        scheduler: Optional[Scheduler] = None,
        policy: Optional[OpponentPolicy] = None
    ):
        """
        Initialize the session.

        Args:
            mode: GameMode (or its value). Defaults to config.DEFAULT_MODE.
            difficulty: Difficulty (or its value). Defaults to
                        config.DEFAULT_DIFFICULTY.
            config: Game configuration. Uses defaults if not provided.
            random_source: Callable returning a uniform float in [0, 1),
                           called once per opponent move.
            scheduler: Callable(delay_ms, callback) used to delay the
                       opponent's move. If None, call
                       complete_opponent_turn() yourself.
            policy: Opponent policy (default: plays O).
        """
        self.config = config or GameConfig()
        self.mode = GameMode(mode or self.config.DEFAULT_MODE)
        self.difficulty = Difficulty(difficulty or self.config.DEFAULT_DIFFICULTY)

        if random_source is None:
            rng = np.random.default_rng(self.config.RANDOM_SEED)
            random_source = rng.random

        self.random_source = random_source
        self.scheduler = scheduler

        self.win_checker = WinChecker()
        self.validator = MoveValidator()
        self.policy = policy or OpponentPolicy(self.OPPONENT_MARK, self.config)

        self.scores = ScoreTally()

        # Bumped on every reset and every scheduled opponent turn
        self._ticket = 0

        self._reset_board()

    # ==================== STATE QUERIES ====================

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None

    @property
    def accepts_input(self) -> bool:
        """True if a click on an empty cell would be applied."""
        return not self.is_terminal and not self.is_thinking

    @property
    def pending_ticket(self) -> Optional[int]:
        """Ticket of the scheduled opponent turn, if one is pending."""
        return self._ticket if self.is_thinking else None

    def score_labels(self) -> Tuple[str, str]:
        """Names for the two score columns in the current mode."""
        if self.mode == GameMode.VS_OPPONENT:
            return "You", "AI"
        return "Player X", "Player O"

    def status_text(self) -> str:
        """One-line status for the presentation layer."""
        if self.winner_text:
            return self.winner_text
        if self.is_thinking:
            return "AI is thinking..."
        if self.mode == GameMode.VS_OPPONENT:
            return "Your move (X)"
        return f"Current: {self.current_mark}"

    # ==================== PLAYER INTENTS ====================

    def cell_selected(self, index) -> bool:
        """
        Handle a click on a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False if the click was ignored.
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            self._debug(f"Ignoring click on {index!r}: {result.error_message}")
            return False

        mark = self.current_mark
        self.board = self.board.apply(index, mark)
        self._debug(f"{mark} placed at {index}")

        if self._finish_if_terminal(mark):
            return True

        if self.mode == GameMode.TWO_PLAYER:
            self.current_mark = mark.opposite()
        else:
            self._begin_opponent_turn()

        return True

    def complete_opponent_turn(self, ticket: Optional[int] = None) -> Optional[int]:
        """
        Let the opponent make its pending move.

        Args:
            ticket: Ticket handed out when the turn was scheduled. A ticket
                    from before the last reset is ignored.

        Returns:
            The index the opponent played, or None if nothing was pending.
        """
        if not self.is_thinking:
            return None

        if ticket is not None and ticket != self._ticket:
            self._debug(f"Dropping stale opponent turn {ticket}")
            return None

        random_sample = float(self.random_source())
        move = self.policy.choose_move(self.board, self.difficulty, random_sample)

        self.board = self.board.apply(move, self.OPPONENT_MARK)
        self.is_thinking = False
        self._debug(f"Opponent ({self.difficulty.value}) placed {self.OPPONENT_MARK} at {move}")

        if not self._finish_if_terminal(self.OPPONENT_MARK):
            self.current_mark = self.HUMAN_MARK

        return move

    def set_mode(self, mode):
        """Switch game mode. Starts a new game and clears the score."""
        self.mode = GameMode(mode)
        self.scores.reset()
        self._reset_board()

    def set_difficulty(self, difficulty):
        """Change opponent difficulty. Starts a new game, keeps the score."""
        self.difficulty = Difficulty(difficulty)
        self._reset_board()

    def request_new_game(self):
        """Clear the board for another round."""
        self._reset_board()

    def request_score_reset(self):
        """Zero the score and start a new game."""
        self.scores.reset()
        self._reset_board()

    # ==================== INTERNALS ====================

    def _begin_opponent_turn(self):
        """Lock input and schedule the opponent's move."""
        self.is_thinking = True
        self.current_mark = self.OPPONENT_MARK
        self._ticket += 1
        ticket = self._ticket

        if self.scheduler is not None:
            self.scheduler(
                self.config.OPPONENT_DELAY_MS,
                lambda: self.complete_opponent_turn(ticket)
            )

    def _finish_if_terminal(self, mark: Mark) -> bool:
        """
        End the game if `mark` just won or filled the board.

        Returns:
            True if the game is now over.
        """
        if self.win_checker.has_won(self.board, mark):
            outcome = Outcome.WIN_A if mark == Mark.X else Outcome.WIN_B
        elif self.win_checker.is_draw(self.board):
            outcome = Outcome.DRAW
        else:
            return False

        self.outcome = outcome
        self.winner_text = self._outcome_text(outcome)
        self.scores.record(outcome)
        self._debug(f"Game over: {self.winner_text}")
        return True

    def _outcome_text(self, outcome: Outcome) -> str:
        if outcome == Outcome.DRAW:
            return "Draw!"
        if self.mode == GameMode.VS_OPPONENT:
            return "You win!" if outcome == Outcome.WIN_A else "AI wins!"
        return "Player X wins!" if outcome == Outcome.WIN_A else "Player O wins!"

    def _reset_board(self):
        self.board = Board()
        self.current_mark = Mark.X
        self.outcome = None
        self.winner_text = None
        self.is_thinking = False
        self._ticket += 1

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)
