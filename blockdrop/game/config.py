"""Engine configuration: board size and base drop speed."""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

# Base drop intervals (ms at level 1) used by the two front ends
DESKTOP_BASE_SPEED_MS = 200
RELAXED_BASE_SPEED_MS = 500


@dataclasses.dataclass(frozen=True)
class GameConfig:
    """Immutable engine settings, fixed for the lifetime of a game.

    Attributes:
        board_width: Board width in columns.
        board_height: Board height in rows.
        base_speed_ms: Drop interval at level 1; level N drops every
            base_speed_ms / N milliseconds.
    """

    board_width: int = 10
    board_height: int = 20
    base_speed_ms: float = DESKTOP_BASE_SPEED_MS

    def __post_init__(self) -> None:
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if self.base_speed_ms <= 0:
            raise ValueError(f"base_speed_ms must be positive, got {self.base_speed_ms}")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> GameConfig:
        """Build a config from a loaded YAML mapping.

        Keys that are not engine settings (cell_size, fps, ...) are ignored.
        """
        fields = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in fields})
