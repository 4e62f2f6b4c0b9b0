from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)

    def __post_init__(self) -> None:
        scores = (0,) + tuple(self.line_clear_scores)
        if len(scores) != 5 or any(a >= b for a, b in zip(scores, scores[1:])):
            raise ValueError("line_clear_scores must be four strictly increasing positive values")

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return self.line_clear_scores[min(lines, 4) - 1]


@dataclass
class LevelRules:
    lines_per_level: int = 10
    start_level: int = 1
    base_fall_interval: float = 0.8  # seconds per row at the start level
    fall_interval_step: float = 0.07
    min_fall_interval: float = 0.1

    def __post_init__(self) -> None:
        # A single landing clears at most 4 rows, so each landing crosses at most one threshold
        if self.lines_per_level < 4:
            raise ValueError("lines_per_level must be at least 4")
        if self.start_level < 1:
            raise ValueError("start_level must be positive")
        if self.min_fall_interval <= 0 or self.fall_interval_step <= 0:
            raise ValueError("fall intervals must be positive")
        if self.base_fall_interval < self.min_fall_interval:
            raise ValueError("base_fall_interval must not be below min_fall_interval")

    def level_for_lines(self, total_lines: int) -> int:
        return self.start_level + max(0, total_lines) // self.lines_per_level

    def fall_interval(self, level: int) -> float:
        steps = max(0, level - self.start_level)
        return max(self.min_fall_interval, self.base_fall_interval - steps * self.fall_interval_step)
