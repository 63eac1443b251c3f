from __future__ import annotations

import random

import pytest

from blockdrop.game.board import Board
from blockdrop.game.pieces import get_piece
from blockdrop.game.player import ActivePiece
from blockdrop.game.tetris import TetrisGame


@pytest.fixture
def board() -> Board:
    return Board(10, 20)


@pytest.fixture
def game() -> TetrisGame:
    return TetrisGame(rng=random.Random(1234))


def make_piece(name: str, x: int, y: int) -> ActivePiece:
    piece = get_piece(name)
    return ActivePiece(piece=piece, shape=piece["shape"], x=x, y=y)


def place(game: TetrisGame, name: str, x: int | None = None, y: int = 0) -> ActivePiece:
    """Replace the game's falling piece with `name` at (x, y)."""
    piece = ActivePiece.spawn(get_piece(name), game.board.width)
    if x is not None:
        piece.x = x
    piece.y = y
    game.current = piece
    return piece
