"""
Score, line count, level, and drop speed.

Scoring follows the classic table, multiplied by the current level:
  1 row  = 40   * level
  2 rows = 100  * level
  3 rows = 300  * level
  4 rows = 1200 * level

Levels start at 1. After each clear the level goes up by one when the total
line count reaches level * 10. It never rises by more than one per clear,
even when a large clear crosses two thresholds at once.
"""

from __future__ import annotations

import dataclasses
import logging

logger = logging.getLogger(__name__)

# Score table: index = rows cleared in one landing (1-4)
SCORE_TABLE: dict[int, int] = {
    1: 40,
    2: 100,
    3: 300,
    4: 1200,
}

LINES_PER_LEVEL = 10


def line_clear_score(cleared: int, level: int) -> int:
    """Points earned for clearing `cleared` rows at `level`.

    Clears of more than four rows score as four.

    Raises:
        ValueError: If `cleared` is negative.
    """
    if cleared < 0:
        raise ValueError(f"cleared row count must be >= 0, got {cleared}")
    if cleared == 0:
        return 0
    return SCORE_TABLE[min(cleared, 4)] * level


def drop_interval(base_speed_ms: float, level: int) -> float:
    """Milliseconds between automatic drops at the given level."""
    return base_speed_ms / level


@dataclasses.dataclass
class Progression:
    """Score, cleared-line total, and level of one session."""

    score: int = 0
    lines: int = 0
    level: int = 1

    def apply_clear(self, cleared: int) -> int:
        """Record one landing that removed `cleared` rows.

        The score is computed with the level in force before any level-up
        caused by this clear. Landings that clear nothing never level up.

        Returns:
            The score gained.
        """
        gained = line_clear_score(cleared, self.level)
        self.score += gained
        self.lines += cleared
        if cleared and self.lines >= self.level * LINES_PER_LEVEL:
            self.level += 1
            logger.info("Level up: %d (lines=%d)", self.level, self.lines)
        return gained

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 1
