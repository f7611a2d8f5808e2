"""
Display module for TicTacToe.
Draws the game board with OpenCV for the desktop front-ends.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
