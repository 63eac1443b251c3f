"""Game logic: board, pieces, scoring, drop timer, and game orchestrator."""

from blockdrop.game.board import Board, CellState
from blockdrop.game.config import GameConfig
from blockdrop.game.pieces import PIECE_TYPES, random_piece, rotate_clockwise
from blockdrop.game.player import ActivePiece
from blockdrop.game.scheduler import DropScheduler, TimerHandle
from blockdrop.game.scoring import SCORE_TABLE, Progression
from blockdrop.game.tetris import Action, TetrisGame

__all__ = [
    "PIECE_TYPES",
    "SCORE_TABLE",
    "ActivePiece",
    "Action",
    "Board",
    "CellState",
    "DropScheduler",
    "GameConfig",
    "Progression",
    "TetrisGame",
    "TimerHandle",
    "random_piece",
    "rotate_clockwise",
]
