"""The currently falling piece."""

from __future__ import annotations

import dataclasses

import numpy as np


@dataclasses.dataclass
class ActivePiece:
    """Position, orientation, and landed flag of the falling piece.

    Attributes:
        piece: Catalog entry the piece was spawned from.
        shape: Current orientation; non-zero cells carry the type ID.
        x: Board column of the shape's top-left corner.
        y: Board row of the shape's top-left corner (may be negative).
        landed: Set once the piece can no longer fall.
    """

    piece: dict
    shape: np.ndarray
    x: int
    y: int
    landed: bool = False

    @classmethod
    def spawn(cls, piece: dict, board_width: int) -> ActivePiece:
        """Create a piece centered horizontally on the top row."""
        shape = piece["shape"]
        return cls(piece=piece, shape=shape, x=(board_width - shape.shape[1]) // 2, y=0)

    @property
    def width(self) -> int:
        return self.shape.shape[1]
