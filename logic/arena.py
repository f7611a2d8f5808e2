"""
Arena for the TicTacToe opponent.
Plays many games of a random human against the opponent and tallies them.
"""

from typing import Optional
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .opponent import Difficulty
from .session import GameMode, GameSession, ScoreTally


@dataclass
class ArenaResult:
    """Tally of an arena run, from the human's side."""
    games: int
    scores: ScoreTally

    @property
    def opponent_loss_rate(self) -> float:
        """Fraction of games the random human won."""
        return self.scores.side_a / self.games if self.games else 0.0

    def summary(self) -> str:
        return (
            f"{self.games} games: human {self.scores.side_a}, "
            f"opponent {self.scores.side_b}, draws {self.scores.draws}"
        )


def play_random_games(
    games: int,
    difficulty=Difficulty.HARD,
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None
) -> ArenaResult:
    """
    Pit a uniformly random human against the opponent.

    Args:
        games: Number of games to play.
        difficulty: Opponent difficulty.
        seed: Seed for both the human's and the opponent's random draws.
        config: Game configuration. Uses defaults if not provided.

    Returns:
        ArenaResult with the final score tally.
    """
    rng = np.random.default_rng(seed)
    session = GameSession(
        mode=GameMode.VS_OPPONENT,
        difficulty=difficulty,
        config=config,
        random_source=rng.random
    )

    for _ in range(games):
        session.request_new_game()

        while not session.is_terminal:
            empty_cells = session.board.empty_indices()
            session.cell_selected(int(rng.choice(empty_cells)))
            session.complete_opponent_turn()

    return ArenaResult(games=games, scores=session.scores)
