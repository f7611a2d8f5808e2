"""
TicTacToe
=========
Play TicTacToe on a 3x3 board against an automated opponent or a friend,
with the score kept across rounds.

Opponent difficulty: Easy (random) -> Medium (half random) -> Hard (minimax)
"""

__version__ = "1.0.0"
