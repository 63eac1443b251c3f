"""
Game orchestrator: active piece transitions, landing, scoring, and the drop timer.

This module ties the Board, the piece catalog, the Progression tracker and
the DropScheduler into one game session. All mutation happens through the
public methods below, each of which runs to completion before the next one,
so a landing (merge, sweep, score, spawn) is never observed half done.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import random
from typing import Any

from blockdrop.game.board import Board
from blockdrop.game.config import GameConfig
from blockdrop.game.pieces import kick_offsets, random_piece, rotate_clockwise
from blockdrop.game.player import ActivePiece
from blockdrop.game.scheduler import DropScheduler
from blockdrop.game.scoring import Progression, drop_interval

logger = logging.getLogger(__name__)


class Action(enum.IntEnum):
    """Logical actions the input layer can send to the game."""
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    PAUSE = 5
    RESTART = 6


class TetrisGame:
    """One falling-block game session.

    Attributes:
        config: Immutable board size and speed settings.
        board: The playfield.
        progression: Score, line total, and level.
        current: The falling piece (kept after game over for display).
        next_piece: Catalog entry that will spawn next.
        paused: Whether player actions and drop ticks are suspended.
        game_over: Terminal flag; only restart() leaves this state.
        scheduler: The drop timer.
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None) -> None:
        """Create a game with a fresh board and the first piece spawned.

        The drop timer is not running until start() is called.

        Args:
            config: Engine settings; defaults to a 10x20 board at 200 ms.
            rng: Random source for piece draws.
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.board = Board(self.config.board_width, self.config.board_height)
        self.progression = Progression()
        self.current: ActivePiece | None = None
        self.next_piece: dict | None = None
        self.paused: bool = False
        self.game_over: bool = False
        self.lines_cleared_last: int = 0
        self.scheduler = DropScheduler(self._on_drop_timer, lambda: self.drop_interval)
        self.reset()

    # ── Read-only state ──────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.progression.score

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def lines(self) -> int:
        return self.progression.lines

    @property
    def drop_interval(self) -> float:
        """Milliseconds between automatic drops at the current level."""
        return drop_interval(self.config.base_speed_ms, self.level)

    def get_state(self) -> dict[str, Any]:
        """Return a snapshot of everything the presentation layer draws.

        Returns:
            Dict with keys:
              - board_grid: np.ndarray (height x width, int8), a copy
              - current_shape: np.ndarray or None, a copy
              - current_x, current_y: int
              - next_piece: piece name or None
              - next_shape: np.ndarray or None
              - score, level, lines: int
              - lines_cleared: int (rows removed by the LAST landing)
              - paused, game_over: bool
              - drop_interval: float (ms)
        """
        current = self.current
        return {
            "board_grid": self.board.get_grid(),
            "current_shape": current.shape.copy() if current else None,
            "current_x": current.x if current else 0,
            "current_y": current.y if current else 0,
            "next_piece": self.next_piece["name"] if self.next_piece else None,
            "next_shape": self.next_piece["shape"].copy() if self.next_piece else None,
            "score": self.score,
            "level": self.level,
            "lines": self.lines,
            "lines_cleared": self.lines_cleared_last,
            "paused": self.paused,
            "game_over": self.game_over,
            "drop_interval": self.drop_interval,
        }

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> dict[str, Any]:
        """Reinitialize board, progression, and pieces without touching the timer.

        Returns:
            Initial game state dict (same format as get_state()).
        """
        self.board = Board(self.config.board_width, self.config.board_height)
        self.progression.reset()
        self.paused = False
        self.game_over = False
        self.lines_cleared_last = 0
        self.next_piece = random_piece(self.rng)
        self._spawn_piece()
        return self.get_state()

    def start(self) -> None:
        """Start the drop timer."""
        self.scheduler.start()

    def stop(self) -> None:
        """Cancel the drop timer (teardown)."""
        self.scheduler.cancel()

    def restart(self) -> None:
        """Cancel the pending drop, start a new session, and restart the timer."""
        self.scheduler.cancel()
        self.reset()
        self.scheduler.start()
        logger.info("Game restarted")

    def advance(self, elapsed_ms: float) -> int:
        """Let `elapsed_ms` of time pass on the drop timer.

        Returns:
            Number of timer wake-ups that fired (paused ones included).
        """
        return self.scheduler.advance(elapsed_ms)

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused
        logger.info("Game %s", "paused" if self.paused else "resumed")

    # ── Player actions ───────────────────────────────────────────────────

    def step(self, action: int) -> dict[str, Any]:
        """Dispatch one logical action and return the resulting state."""
        handlers = {
            Action.LEFT: self.move_left,
            Action.RIGHT: self.move_right,
            Action.ROTATE: self.rotate,
            Action.SOFT_DROP: self.soft_drop,
            Action.HARD_DROP: self.hard_drop,
            Action.PAUSE: self.toggle_pause,
            Action.RESTART: self.restart,
        }
        handlers[Action(action)]()
        return self.get_state()

    def move_left(self) -> bool:
        return self._move(-1)

    def move_right(self) -> bool:
        return self._move(1)

    def soft_drop(self) -> bool:
        """Move the piece down one row, landing it if it cannot fall."""
        return self.tick()

    def tick(self) -> bool:
        """Apply one row of gravity.

        If the piece can fall it moves down. Otherwise, if it is still on
        its spawn row the game is over; else it lands, merges, and the next
        piece spawns.

        Returns:
            True if the piece moved down.
        """
        if not self._accepts_input():
            return False
        piece = self.current
        if not self.board.collides(piece, 0, 1):
            piece.y += 1
            piece.landed = False
            return True
        if piece.y < 1:
            self._end_game("piece blocked on its spawn row")
            return False
        piece.landed = True
        self._land()
        return False

    def hard_drop(self) -> int:
        """Drop the piece to its resting row and land it in one step.

        Returns:
            Number of rows dropped.
        """
        if not self._accepts_input():
            return 0
        piece = self.current
        rows = 0
        while not self.board.collides(piece, 0, rows + 1):
            rows += 1
        piece.y += rows
        piece.landed = True
        self._land()
        return rows

    def rotate(self) -> bool:
        """Rotate the piece clockwise, kicking sideways if it collides.

        Returns:
            True if the rotation was applied (possibly with a kick),
            False if every kick position collided.
        """
        if not self._accepts_input():
            return False
        piece = self.current
        rotated = dataclasses.replace(piece, shape=rotate_clockwise(piece.shape))

        if not self.board.collides(rotated):
            self.current = rotated
            return True
        for shift in kick_offsets(rotated.width):
            if not self.board.collides(rotated, shift, 0):
                rotated.x += shift
                self.current = rotated
                return True

        logger.debug("Rotation of %s rejected at x=%d", piece.piece["name"], piece.x)
        return False

    # ── Internals ────────────────────────────────────────────────────────

    def _accepts_input(self) -> bool:
        return self.current is not None and not self.paused and not self.game_over

    def _move(self, dx: int) -> bool:
        if not self._accepts_input():
            return False
        if self.board.collides(self.current, dx, 0):
            return False
        self.current.x += dx
        return True

    def _on_drop_timer(self) -> None:
        # Paused or finished games skip the tick; the timer keeps running.
        if not self.paused and not self.game_over:
            self.tick()

    def _spawn_piece(self) -> bool:
        """Spawn the upcoming piece and draw a new upcoming one.

        Returns:
            True if the piece fits, False if it collides (game over).
        """
        self.current = ActivePiece.spawn(self.next_piece, self.board.width)
        self.next_piece = random_piece(self.rng)
        logger.debug(
            "Spawned %s at x=%d, next=%s",
            self.current.piece["name"], self.current.x, self.next_piece["name"],
        )
        if self.board.collides(self.current):
            self._end_game("spawn position is blocked")
            return False
        return True

    def _land(self) -> None:
        """Merge the landed piece, sweep full rows, score, and spawn the next piece."""
        self.board.merge(self.current)
        cleared = self.board.sweep()
        self.lines_cleared_last = cleared
        gained = self.progression.apply_clear(cleared)
        if cleared:
            logger.debug("Cleared %d row(s) for %d points", cleared, gained)
        self._spawn_piece()

    def _end_game(self, reason: str) -> None:
        self.game_over = True
        logger.info("Game over (%s): score=%d lines=%d level=%d",
                    reason, self.score, self.lines, self.level)
