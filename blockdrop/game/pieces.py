"""
Piece definitions, clockwise rotation, and the wall-kick search order.

Coordinate convention:
  - Each shape is a 2D numpy array; a cell holds the piece's type ID when
    filled and 0 when empty.
  - On the board, row 0 is the top and row increases downward.
  - Column 0 is the left edge and column increases rightward.

Only one orientation is stored per piece. Other orientations are produced
on demand with rotate_clockwise(), which never touches the catalog arrays.
"""

from __future__ import annotations

import random
from typing import Iterator

import numpy as np

# =============================================================================
# Piece Colors (RGB), used by the renderer only
# =============================================================================

COLOR_CYAN   = (6, 182, 212)     # I
COLOR_BLUE   = (59, 130, 246)    # J
COLOR_ORANGE = (249, 115, 22)    # L
COLOR_YELLOW = (234, 179, 8)     # O
COLOR_GREEN  = (34, 197, 94)     # S
COLOR_PURPLE = (168, 85, 247)    # T
COLOR_RED    = (239, 68, 68)     # Z


def _shape(rows: list[list[int]]) -> np.ndarray:
    shape = np.array(rows, dtype=np.int8)
    shape.setflags(write=False)
    return shape


# =============================================================================
# Piece Definitions
# =============================================================================

I_PIECE: dict = {
    "id": 1,
    "name": "I",
    "color": COLOR_CYAN,
    "shape": _shape([
        [0, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 0, 0],
    ]),
}

J_PIECE: dict = {
    "id": 2,
    "name": "J",
    "color": COLOR_BLUE,
    "shape": _shape([
        [0, 2, 0],
        [0, 2, 0],
        [2, 2, 0],
    ]),
}

L_PIECE: dict = {
    "id": 3,
    "name": "L",
    "color": COLOR_ORANGE,
    "shape": _shape([
        [0, 3, 0],
        [0, 3, 0],
        [0, 3, 3],
    ]),
}

O_PIECE: dict = {
    "id": 4,
    "name": "O",
    "color": COLOR_YELLOW,
    "shape": _shape([
        [4, 4],
        [4, 4],
    ]),
}

S_PIECE: dict = {
    "id": 5,
    "name": "S",
    "color": COLOR_GREEN,
    "shape": _shape([
        [0, 5, 5],
        [5, 5, 0],
        [0, 0, 0],
    ]),
}

T_PIECE: dict = {
    "id": 6,
    "name": "T",
    "color": COLOR_PURPLE,
    "shape": _shape([
        [0, 0, 0],
        [6, 6, 6],
        [0, 6, 0],
    ]),
}

Z_PIECE: dict = {
    "id": 7,
    "name": "Z",
    "color": COLOR_RED,
    "shape": _shape([
        [7, 7, 0],
        [0, 7, 7],
        [0, 0, 0],
    ]),
}

# =============================================================================
# Ordered list of all piece types
# =============================================================================

PIECE_TYPES: list[dict] = [I_PIECE, J_PIECE, L_PIECE, O_PIECE, S_PIECE, T_PIECE, Z_PIECE]

PIECES_BY_NAME: dict[str, dict] = {piece["name"]: piece for piece in PIECE_TYPES}
PIECES_BY_ID: dict[int, dict] = {piece["id"]: piece for piece in PIECE_TYPES}


def get_piece(name: str) -> dict:
    """Look up a piece definition by its letter (e.g. 'T').

    Raises:
        KeyError: If no piece has that name.
    """
    return PIECES_BY_NAME[name]


def random_piece(rng: random.Random | None = None) -> dict:
    """Draw one piece type uniformly at random.

    There is no bag or history: every draw is independent.

    Args:
        rng: Random source; the module-level generator when omitted.

    Returns:
        A piece dict from PIECE_TYPES.
    """
    return (rng or random).choice(PIECE_TYPES)


def rotate_clockwise(shape: np.ndarray) -> np.ndarray:
    """Rotate a shape matrix 90 degrees clockwise.

    Transposes the matrix, then reverses each resulting row. Returns a new
    array; the input is left untouched.
    """
    assert shape.ndim == 2 and shape.size > 0, f"malformed shape {shape!r}"
    return shape.T[:, ::-1].copy()


def kick_offsets(width: int) -> Iterator[int]:
    """Yield the horizontal shifts tried when a rotation collides.

    The shift is cumulative: steps of +1, -2, +3, -4, ... are added one
    after another, so the positions tried relative to the start are
    +1, -1, +2, -2, ... The search stops once the next step would be
    larger than the rotated shape's width.

    Args:
        width: Column count of the rotated shape.
    """
    shift = 0
    step = 1
    while True:
        shift += step
        step = -(step + (1 if step > 0 else -1))
        if abs(step) > width:
            return
        yield shift
