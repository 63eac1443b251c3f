"""
Pygame renderer for the falling-block game.

Draws the board grid, active piece, next piece preview, a sidebar with
score / level / lines, and the PAUSED / GAME OVER overlays. It reads the
game only through TetrisGame.get_state().
"""

from __future__ import annotations

from typing import Any

import numpy as np

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.game.pieces import PIECES_BY_ID
from blockdrop.game.tetris import TetrisGame


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (17, 24, 39)
GRID_LINE_COLOR = (55, 65, 81)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
ACCENT_COLOR = (192, 132, 252)
OVERLAY_ALPHA = 180
SIDEBAR_BG_COLOR = (10, 10, 14)
EMPTY_CELL_COLOR = (31, 41, 55)

# ── Piece ID -> RGB color mapping ──────────────────────────────────────────
PIECE_COLORS: dict[int, tuple[int, int, int]] = {
    piece_id: piece["color"] for piece_id, piece in PIECES_BY_ID.items()
}

PREVIEW_CELLS = 4


def preview_origin(shape: np.ndarray, box_cells: int = PREVIEW_CELLS) -> tuple[int, int]:
    """Cell offset (row, col) that centers a shape in a square preview box."""
    rows, cols = shape.shape
    return (box_cells - rows) // 2, (box_cells - cols) // 2


class TetrisRenderer:
    """Pygame-based renderer for a TetrisGame.

    The window is divided into:
      - Left: board area (cell_size * board_width) x (cell_size * board_height)
      - Right: sidebar with next piece, score, level, lines

    Attributes:
        game: Reference to the TetrisGame being rendered.
        cell_size: Pixel size of each grid cell.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 7  # sidebar width in cell units

    def __init__(self, game: TetrisGame, cell_size: int = 30) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().

        Args:
            game: The TetrisGame instance to render.
            cell_size: Size of each grid cell in pixels.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.game = game
        self.cell_size = cell_size

        self.board_pixel_width = cell_size * game.board.width
        self.board_pixel_height = cell_size * game.board.height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._initialized: bool = False

    def render(self) -> None:
        """Draw the current game state to the screen.

        Initializes Pygame on the first call.
        """
        if not self._initialized:
            self._init_pygame()

        state = self.game.get_state()
        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board(state["board_grid"])
        self._draw_current_piece(state)
        self._draw_sidebar(state)

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )

        if state["game_over"]:
            self._draw_overlay("GAME OVER", f"Score: {state['score']}", "Press R to restart")
        elif state["paused"]:
            self._draw_overlay("PAUSED", "Press P to resume", "Press R to restart")

        pygame.display.flip()

    def _init_pygame(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("blockdrop")
        self._font = pygame.font.SysFont("monospace", 20)
        self._big_font = pygame.font.SysFont("monospace", 36, bold=True)
        self._initialized = True

    def _draw_cell(self, x: int, y: int, size: int, value: int) -> None:
        if value == 0:
            pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (x, y, size, size))
            pygame.draw.rect(self.screen, GRID_LINE_COLOR, (x, y, size, size), 1)
            return
        color = PIECE_COLORS.get(int(value), (128, 128, 128))
        pygame.draw.rect(self.screen, color, (x, y, size, size))
        # Slightly darker border for a 3D effect
        darker = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(self.screen, darker, (x, y, size, size), 1)

    def _draw_board(self, grid: np.ndarray) -> None:
        for row in range(grid.shape[0]):
            for col in range(grid.shape[1]):
                self._draw_cell(
                    col * self.cell_size, row * self.cell_size, self.cell_size, grid[row, col]
                )

    def _draw_current_piece(self, state: dict[str, Any]) -> None:
        """Draw the falling piece; cells above row 0 are not visible."""
        shape = state["current_shape"]
        if shape is None:
            return
        rows, cols = np.nonzero(shape)
        for r, c in zip(rows, cols):
            board_row = state["current_y"] + int(r)
            board_col = state["current_x"] + int(c)
            if board_row < 0:
                continue
            self._draw_cell(
                board_col * self.cell_size,
                board_row * self.cell_size,
                self.cell_size,
                shape[r, c],
            )

    def _draw_sidebar(self, state: dict[str, Any]) -> None:
        """Draw the sidebar with next piece, score, level, and lines."""
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )

        margin = 15
        text_x = sidebar_x + margin

        self._draw_piece_preview(state["next_shape"], text_x, 20)

        text_y = 190
        for label, key in (("SCORE", "score"), ("LEVEL", "level"), ("LINES", "lines")):
            self._draw_text(label, text_x, text_y, ACCENT_COLOR)
            self._draw_text(str(state[key]), text_x, text_y + 25)
            text_y += 65

    def _draw_piece_preview(self, shape: np.ndarray | None, x_offset: int, y_offset: int) -> None:
        """Draw the NEXT box with the upcoming piece centered in a 4x4 grid."""
        preview_cell = self.cell_size * 2 // 3
        box_size = preview_cell * PREVIEW_CELLS

        self._draw_text("NEXT", x_offset, y_offset, ACCENT_COLOR)
        box_y = y_offset + 25
        pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (x_offset, box_y, box_size, box_size))
        pygame.draw.rect(self.screen, BORDER_COLOR, (x_offset, box_y, box_size, box_size), 1)

        if shape is None:
            return

        origin_row, origin_col = preview_origin(shape)
        rows, cols = np.nonzero(shape)
        for r, c in zip(rows, cols):
            self._draw_cell(
                x_offset + (origin_col + int(c)) * preview_cell,
                box_y + (origin_row + int(r)) * preview_cell,
                preview_cell,
                shape[r, c],
            )

    def _draw_overlay(self, title: str, *lines: str) -> None:
        """Dim the board and print a title with hint lines below it."""
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        self.screen.blit(overlay, (0, 0))

        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2

        text = self._big_font.render(title, True, (239, 68, 68))
        self.screen.blit(text, (cx - text.get_width() // 2, cy - 40))
        for i, line in enumerate(lines):
            text = self._font.render(line, True, TEXT_COLOR)
            self.screen.blit(text, (cx - text.get_width() // 2, cy + 10 + 30 * i))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
