"""
Logic module for TicTacToe.
Handles the board, rules, the automated opponent and the game session.
"""

from .config import GameConfig
from .game_state import Board, Mark, GameError, InvalidMove, InvalidState
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .move_search import MinimaxSearch
from .opponent import Difficulty, OpponentPolicy
from .session import GameMode, GameSession, Outcome, ScoreTally
