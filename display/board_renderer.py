"""
Board renderer for TicTacToe.
Draws a game session into an OpenCV image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple
from .config import DisplayConfig

from logic.game_state import Mark
from logic.session import GameMode, GameSession
from logic.win_checker import WinChecker


class BoardRenderer:
    """
    Renders the board, the marks and a status strip.

    Layout (pixels):
        +-----------------+
        |   3x3 board     |  BOARD_PIXELS x BOARD_PIXELS
        +-----------------+
        |  status/scores  |  PANEL_HEIGHT
        +-----------------+
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.win_checker = WinChecker()

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of rendered images."""
        return (
            self.config.BOARD_PIXELS,
            self.config.BOARD_PIXELS + self.config.PANEL_HEIGHT
        )

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Convert a pixel position to a cell index.

        Args:
            x: Pixel X coordinate in the rendered image.
            y: Pixel Y coordinate in the rendered image.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        size = self.config.BOARD_PIXELS
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell = self.config.CELL_PIXELS
        row = min(int(y) // cell, self.config.BOARD_SIZE - 1)
        col = min(int(x) // cell, self.config.BOARD_SIZE - 1)
        index = row * self.config.BOARD_SIZE + col

        if self.config.DEBUG_MODE:
            print(f"Click at ({x}, {y}) -> cell {index}")

        return index

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel center of a cell."""
        row, col = divmod(index, self.config.BOARD_SIZE)
        cell = self.config.CELL_PIXELS
        return (col * cell + cell // 2, row * cell + cell // 2)

    def render(self, session: GameSession) -> np.ndarray:
        """
        Draw the current session state.

        Args:
            session: The session to draw.

        Returns:
            BGR image.
        """
        width, height = self.image_size
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        self._draw_cells(image)

        for index, mark in enumerate(session.board):
            if mark == Mark.X:
                self._draw_x(image, index)
            elif mark == Mark.O:
                self._draw_o(image, index)

        line = self.win_checker.get_winning_line(session.board)
        if line is not None:
            cv2.line(
                image,
                self.cell_center(line[0]),
                self.cell_center(line[2]),
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS
            )

        self._draw_panel(image, session)
        return image

    def _draw_cells(self, image: np.ndarray):
        """Draw the 9 cell backgrounds."""
        cell = self.config.CELL_PIXELS
        gap = self.config.CELL_GAP // 2

        for index in range(self.config.BOARD_SIZE ** 2):
            row, col = divmod(index, self.config.BOARD_SIZE)
            cv2.rectangle(
                image,
                (col * cell + gap, row * cell + gap),
                ((col + 1) * cell - gap, (row + 1) * cell - gap),
                self.config.CELL_COLOR,
                -1
            )

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        half = self.config.CELL_PIXELS // 2 - self.config.MARK_MARGIN

        for dx in (-half, half):
            cv2.line(
                image,
                (cx - dx, cy - half),
                (cx + dx, cy + half),
                self.config.X_COLOR,
                self.config.MARK_THICKNESS,
                cv2.LINE_AA
            )

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_PIXELS // 2 - self.config.MARK_MARGIN
        cv2.circle(
            image,
            self.cell_center(index),
            radius,
            self.config.O_COLOR,
            self.config.MARK_THICKNESS,
            cv2.LINE_AA
        )

    def _draw_panel(self, image: np.ndarray, session: GameSession):
        """Draw status and score under the board."""
        top = self.config.BOARD_PIXELS

        cv2.putText(
            image, session.status_text(), (10, top + 30),
            self.config.FONT, 0.7, self.config.TEXT_COLOR, 2
        )

        left, right = session.score_labels()
        scores = session.scores
        score_text = f"{left}: {scores.side_a}  Draws: {scores.draws}  {right}: {scores.side_b}"
        cv2.putText(
            image, score_text, (10, top + 55),
            self.config.FONT, 0.5, self.config.MUTED_TEXT_COLOR, 1
        )

        if session.mode == GameMode.VS_OPPONENT:
            mode_text = f"vs AI ({session.difficulty.value})"
        else:
            mode_text = "vs Friend"
        cv2.putText(
            image, mode_text, (10, top + 73),
            self.config.FONT, 0.45, self.config.MUTED_TEXT_COLOR, 1
        )
