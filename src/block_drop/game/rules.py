from __future__ import annotations

import logging
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)


@dataclass
class ScoringRules:
    points_per_line: int = 100
    lines_per_level: int = 10
    base_drop_interval: int = 1000
    drop_interval_step: int = 100
    min_drop_interval: int = 100
    hard_drop_points: int = 2

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def drop_interval_for_level(self, level: int) -> int:
        return max(self.min_drop_interval, self.base_drop_interval - (level - 1) * self.drop_interval_step)


@dataclass
class Progression:
    """Score, level, cleared lines and the gravity interval derived from them."""

    rules: ScoringRules = field(default_factory=ScoringRules)
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval: int = 0

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval = self.rules.drop_interval_for_level(self.level)

    def apply_lines(self, cleared: int) -> int:
        """Credit a simultaneous clear of `cleared` rows and return the points gained.

        Points use the level in force before the clear; the level is
        recomputed afterwards.
        """
        if cleared <= 0:
            return 0
        self.lines += cleared
        gained = cleared * self.rules.points_per_line * self.level
        self.score += gained
        new_level = self.rules.level_for_lines(self.lines)
        if new_level != self.level:
            logger.info("level up: %d -> %d", self.level, new_level)
        self.level = new_level
        self.drop_interval = self.rules.drop_interval_for_level(self.level)
        return gained

    def award_hard_drop(self, rows: int = 1) -> int:
        gained = rows * self.rules.hard_drop_points
        self.score += gained
        return gained
