"""
Manual play mode.

A human plays with the keyboard while the drop timer runs off the pygame
clock. Each frame the elapsed milliseconds are handed to the game, which
fires as many drop ticks as fell due.
"""

from __future__ import annotations

import logging
import random
from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.game.config import GameConfig
from blockdrop.game.tetris import Action, TetrisGame
from blockdrop.renderer import TetrisRenderer

logger = logging.getLogger(__name__)


# ── Keyboard mapping for manual play ─────────────────────────────────────
# Arrow keys to move/rotate/drop, Space for hard drop, P pause, R restart
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Action.LEFT,
        pygame.K_RIGHT: Action.RIGHT,
        pygame.K_DOWN: Action.SOFT_DROP,
        pygame.K_UP: Action.ROTATE,
        pygame.K_SPACE: Action.HARD_DROP,
        pygame.K_p: Action.PAUSE,
        pygame.K_r: Action.RESTART,
    }


def build_game(config: dict[str, Any]) -> TetrisGame:
    """Create a TetrisGame from a loaded config dict."""
    seed = config.get("seed")
    rng = random.Random(seed) if seed is not None else None
    return TetrisGame(GameConfig.from_dict(config), rng=rng)


def play_manual(config: dict[str, Any]) -> None:
    """Run the game in manual (human) play mode.

    The player uses keyboard controls:
      - Left/Right arrow: move piece
      - Down arrow: soft drop
      - Up arrow: rotate clockwise
      - Space: hard drop
      - P: pause / resume
      - R: restart
      - Escape / close window: quit

    Args:
        config: Config dict loaded from the YAML config file.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    fps = config.get("fps", 60)
    game = build_game(config)
    renderer = TetrisRenderer(game, cell_size=config.get("cell_size", 30))
    # Force renderer init before event loop (pygame must be initialized for event.get())
    renderer.render()

    clock = pygame.time.Clock()
    game.start()
    logger.info("Game started: %s", game.config)
    running = True

    while running:
        elapsed = clock.tick(fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key in KEY_MAP:
                    game.step(KEY_MAP[event.key])

        if not running:
            break

        game.advance(elapsed)
        renderer.render()

    game.stop()
    logger.info("Session ended: score=%d lines=%d level=%d", game.score, game.lines, game.level)
    renderer.close()
