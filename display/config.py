"""
Display configuration for TicTacToe.
Sizes, colors and window settings for drawing the board.

Colors are BGR tuples (OpenCV order).
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values based on your screen!
    """
    
    # ==================== WINDOW SETTINGS ====================
    WINDOW_NAME = "TicTacToe"
    SCREENSHOT_PREFIX = "tictactoe"
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    
    # Size of the square board area (pixels)
    BOARD_PIXELS = 360
    CELL_PIXELS = BOARD_PIXELS // BOARD_SIZE  # 120 pixels per cell
    
    # Gap between cells (pixels)
    CELL_GAP = 6
    
    # Status strip under the board (pixels)
    PANEL_HEIGHT = 80
    
    # ==================== COLORS ====================
    BACKGROUND_COLOR = (46, 26, 26)      # Dark navy
    CELL_COLOR = (62, 33, 22)
    X_COLOR = (235, 99, 37)              # Blue
    O_COLOR = (68, 68, 239)              # Red
    WIN_LINE_COLOR = (0, 215, 255)       # Gold
    TEXT_COLOR = (255, 255, 255)
    MUTED_TEXT_COLOR = (170, 170, 170)
    
    # ==================== DRAWING ====================
    MARK_THICKNESS = 10
    MARK_MARGIN = 28     # Space between a mark and its cell edge
    WIN_LINE_THICKNESS = 8
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    
    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
