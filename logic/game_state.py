"""
Board model for TicTacToe.
Holds the 9 cells and the marks the two players place on them.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass, field


# Number of cells on the board (3x3, indices 0-8 in row-major order)
BOARD_CELLS = 9


class GameError(Exception):
    """Base class for game contract violations."""


class InvalidMove(GameError):
    """Raised when a mark is placed on an occupied or unknown cell."""


class InvalidState(GameError):
    """Raised when a move is requested on a board that has no empty cells."""


class Mark(Enum):
    """The symbols that can occupy a cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY

    def __str__(self):
        return self.value


# Characters accepted for empty cells in Board.from_string()
_EMPTY_CHARS = " ._-"


@dataclass(frozen=True)
class Board:
    """
    The 3x3 TicTacToe board.

    Boards are immutable values: placing a mark returns a new Board and
    leaves the original untouched. Cells are addressed by index 0-8:

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8
    """

    cells: Tuple[Mark, ...] = field(
        default_factory=lambda: (Mark.EMPTY,) * BOARD_CELLS
    )

    def __post_init__(self):
        if len(self.cells) != BOARD_CELLS:
            raise ValueError(
                f"A board has {BOARD_CELLS} cells, got {len(self.cells)}"
            )
        if not all(isinstance(cell, Mark) for cell in self.cells):
            raise ValueError("Board cells must be Mark values")
        # Accept lists too, but always store a tuple so boards stay hashable
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9 character string.

        Args:
            text: "X", "O" and one of " ._-" for empty cells, row by row.
                  Whitespace between rows ("XO. .X. ...") is ignored.

        Returns:
            The matching Board.
        """
        chars = "".join(text.split()) if len(text) != BOARD_CELLS else text
        cells = []
        for char in chars:
            if char.upper() == "X":
                cells.append(Mark.X)
            elif char.upper() == "O":
                cells.append(Mark.O)
            elif char in _EMPTY_CHARS:
                cells.append(Mark.EMPTY)
            else:
                raise ValueError(f"Unknown cell character: {char!r}")
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def apply(self, index: int, mark: Mark) -> "Board":
        """
        Place a mark on an empty cell.

        Args:
            index: Cell index (0-8).
            mark: Mark.X or Mark.O.

        Returns:
            A new Board with the cell filled in.

        Raises:
            InvalidMove: The index is off the board or the cell is taken.
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an empty mark")

        if not 0 <= index < BOARD_CELLS:
            raise InvalidMove(f"Invalid position {index}. Must be 0-8.")

        if self.cells[index] != Mark.EMPTY:
            raise InvalidMove(
                f"Cell {index} is already occupied by {self.cells[index]}"
            )

        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def empty_indices(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Indices of empty cells in ascending order.
        """
        return [i for i, cell in enumerate(self.cells) if cell == Mark.EMPTY]

    def is_empty(self, index: int) -> bool:
        """True if the index is on the board and the cell is blank."""
        return 0 <= index < BOARD_CELLS and self.cells[index] == Mark.EMPTY

    def is_full(self) -> bool:
        return Mark.EMPTY not in self.cells

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def __str__(self):
        rows = []
        for row in range(3):
            row_cells = self.cells[row * 3:row * 3 + 3]
            rows.append(" " + " | ".join(str(cell) for cell in row_cells))
        return "\n---+---+---\n".join(rows)
