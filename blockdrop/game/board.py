"""
Board logic for a 10x20 falling-block grid.

The board is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell (state CLEAR)
  - 1-7 = piece type ID of a settled block (state MERGED)

Row 0 is the top of the field. A falling piece may hang above row 0 while
it spawns; those cells are never written to the grid.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from blockdrop.game.player import ActivePiece

logger = logging.getLogger(__name__)

EMPTY = 0


class CellState(enum.Enum):
    """Whether a board cell is free or holds a settled block."""
    CLEAR = "clear"
    MERGED = "merged"


class Board:
    """Playfield with collision detection, merging, and row sweeping.

    Attributes:
        width: Number of columns (default 10).
        height: Number of rows (default 20).
        grid: 2D numpy array of shape (height, width), dtype int8.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def collides(self, piece: ActivePiece, dx: int = 0, dy: int = 0) -> bool:
        """Check whether the piece, shifted by (dx, dy), would collide.

        A filled cell of the piece collides if it lands:
          - Left of column 0 or right of the last column.
          - Below the last row.
          - On a MERGED cell, for rows at or below row 0 only.

        Cells above the board (row < 0) skip the occupancy check so a piece
        can spawn partially off-screen, but they still respect the side
        walls.

        Args:
            piece: The active piece to test.
            dx: Column offset to apply (positive = right).
            dy: Row offset to apply (positive = down).

        Returns:
            True if any filled cell is out of bounds or overlaps the stack.
        """
        rows, cols = np.nonzero(piece.shape)
        for r, c in zip(rows, cols):
            board_row = piece.y + int(r) + dy
            board_col = piece.x + int(c) + dx
            # Check boundaries
            if board_col < 0 or board_col >= self.width or board_row >= self.height:
                return True
            # Rows above the field are exempt from occupancy
            if board_row >= 0 and self.grid[board_row, board_col] != EMPTY:
                return True
        return False

    def merge(self, piece: ActivePiece) -> None:
        """Settle a piece into the grid at its current position.

        Writes the piece's type ID at each filled cell. Cells outside the
        board are dropped. Does NOT check for collisions first: the caller
        must only merge a piece that was accepted at this position.

        Args:
            piece: The landed piece.
        """
        rows, cols = np.nonzero(piece.shape)
        dropped = 0
        for r, c in zip(rows, cols):
            board_row = piece.y + int(r)
            board_col = piece.x + int(c)
            if 0 <= board_row < self.height and 0 <= board_col < self.width:
                self.grid[board_row, board_col] = piece.shape[r, c]
            else:
                dropped += 1
        if dropped:
            logger.debug("Merged piece with %d cell(s) outside the board", dropped)

    def sweep(self) -> int:
        """Remove every complete row and drop the rows above into the gaps.

        Each removed row is replaced by an empty row at the top, so the
        board keeps its height and the surviving rows keep their order.

        Returns:
            The number of rows removed.
        """
        full = np.all(self.grid != EMPTY, axis=1)
        cleared = int(full.sum())
        if not cleared:
            return 0

        remaining = self.grid[~full]
        empty_rows = np.zeros((cleared, self.width), dtype=np.int8)
        self.grid = np.vstack([empty_rows, remaining])
        return cleared

    def is_row_complete(self, row: int) -> bool:
        """Return True if every cell in the row is MERGED."""
        return bool(np.all(self.grid[row] != EMPTY))

    def cell(self, row: int, col: int) -> tuple[int, CellState]:
        """Return the (value, state) pair for one cell."""
        value = int(self.grid[row, col])
        state = CellState.CLEAR if value == EMPTY else CellState.MERGED
        return value, state

    def get_grid(self) -> np.ndarray:
        """Return a copy of the board grid.

        Returns:
            A numpy array of shape (height, width), dtype int8.
        """
        return self.grid.copy()

    def reset(self) -> None:
        """Clear the entire board, setting all cells to 0."""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
