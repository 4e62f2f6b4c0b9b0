from __future__ import annotations

import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Iterable, Optional

import numpy as np

from .geometry import Cells
from .grid import GameGrid
from .pieces import Candidate, Piece, TetrominoType
from .rules import LevelRules, ScoringRules

logger = logging.getLogger(__name__)


class Command(IntEnum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    SOFT_DROP = 3
    ROTATE = 4
    HARD_DROP = 5
    PAUSE = 6
    QUIT = 7

    @classmethod
    def coerce(cls, value: Any) -> "Command":
        """Map arbitrary input onto a command; anything unrecognized is NONE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.NONE


class GameStatus(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0
    spawn_x: Optional[int] = None  # None centers each shape

    def __post_init__(self) -> None:
        if self.width < 4:
            raise ValueError("width must be at least 4 to fit every shape")
        if self.height < 2:
            raise ValueError("height must be at least 2")
        if not 0 <= self.spawn_y < self.height - 1:
            raise ValueError("spawn_y must leave room for a two-row shape")
        if self.spawn_x is not None and not 0 <= self.spawn_x <= self.width - 4:
            raise ValueError("spawn_x must leave room for a four-wide shape")


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one tick's result, handed to renderers."""

    grid: np.ndarray
    piece_cells: Cells
    piece_kind: Optional[TetrominoType]
    score: int
    level: int
    lines: int
    status: GameStatus
    last_cleared: int = 0

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.OVER

    def overlay(self) -> np.ndarray:
        """Grid copy with the falling piece drawn as negative kind values."""
        state = self.grid.copy()
        if self.piece_kind is not None:
            for x, y in self.piece_cells:
                if 0 <= y < self.height and 0 <= x < self.width:
                    state[y, x] = -int(self.piece_kind)
        return state


class FallingBlocksGame:
    """Game state engine: spawn, player commands, gravity, landing and scoring.

    Time is read from an injectable monotonic `clock` so gravity does not depend
    on how often `tick` is called.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        level_rules: Optional[LevelRules] = None,
        clock: Callable[[], float] = time.monotonic,
        piece_sequence: Optional[Iterable[TetrominoType]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.level_rules = level_rules or LevelRules()
        self.clock = clock
        self.rng = random.Random(self.config.random_seed)
        self._scripted = deque(piece_sequence or ())
        self.grid = GameGrid(self.config.width, self.config.height)
        self.current_piece: Optional[Piece] = None
        self.score = 0
        self.level = self.level_rules.start_level
        self.lines_cleared_total = 0
        self.last_cleared = 0
        self.status = GameStatus.READY
        self._last_fall = self.clock()
        self.reset()

    @property
    def fall_interval(self) -> float:
        return self.level_rules.fall_interval(self.level)

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.OVER

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def final_score(self) -> Optional[int]:
        return self.score if self.game_over else None

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.level = self.level_rules.start_level
        self.lines_cleared_total = 0
        self.last_cleared = 0
        self.status = GameStatus.READY
        self._spawn_piece()
        self._last_fall = self.clock()

    def start(self) -> None:
        if self.status is GameStatus.READY:
            self.status = GameStatus.RUNNING
            self._last_fall = self.clock()

    def _next_kind(self) -> TetrominoType:
        if self._scripted:
            return self._scripted.popleft()
        return self.rng.choice(list(TetrominoType))

    def _spawn_piece(self) -> None:
        piece = Piece.spawn(
            self._next_kind(), self.grid.width, self.config.spawn_y, self.config.spawn_x
        )
        self.current_piece = piece
        # Immediate collision check: if overlaps, game over
        if not self.grid.is_legal(piece.cells):
            self.status = GameStatus.OVER
            logger.info("Spawn blocked for %s; game over with score %d", piece.kind.name, self.score)

    def _try_commit(self, candidate: Candidate) -> bool:
        assert self.current_piece is not None
        if self.grid.is_legal(candidate.cells):
            self.current_piece.commit(candidate)
            return True
        return False

    def _move(self, dx: int, dy: int) -> bool:
        assert self.current_piece is not None
        return self._try_commit(self.current_piece.moved_candidate(dx, dy))

    def _rotate(self) -> bool:
        assert self.current_piece is not None
        return self._try_commit(self.current_piece.rotated_candidate())

    def _land(self) -> int:
        assert self.current_piece is not None
        piece = self.current_piece
        self.grid.merge(piece.cells, int(piece.kind))
        lines = self.grid.clear_full_lines()
        self.last_cleared = lines
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        new_level = self.level_rules.level_for_lines(self.lines_cleared_total)
        logger.debug("Landed %s at %s, cleared %d", piece.kind.name, piece.origin, lines)
        if new_level != self.level:
            self.level = new_level
            logger.info("Level %d reached, fall interval %.2fs", self.level, self.fall_interval)
        self._spawn_piece()
        self._last_fall = self.clock()
        return lines

    def hard_drop(self) -> int:
        if self.status is not GameStatus.RUNNING:
            return 0
        while self._move(0, 1):
            pass
        return self._land()

    def _apply(self, command: Command) -> bool:
        """Apply one player command. Returns True when the piece landed."""
        if command == Command.MOVE_LEFT:
            self._move(-1, 0)
        elif command == Command.MOVE_RIGHT:
            self._move(1, 0)
        elif command == Command.ROTATE:
            self._rotate()
        elif command == Command.SOFT_DROP:
            if not self._move(0, 1):
                self._land()
                return True
        elif command == Command.HARD_DROP:
            self.hard_drop()
            return True
        return False

    def _apply_gravity(self) -> None:
        now = self.clock()
        if now - self._last_fall < self.fall_interval:
            return
        if self._move(0, 1):
            self._last_fall = now
        else:
            self._land()

    def tick(self, command: Any = Command.NONE) -> GameSnapshot:
        command = Command.coerce(command)
        if self.status is GameStatus.OVER:
            return self.snapshot()

        if command == Command.QUIT:
            self.status = GameStatus.OVER
            logger.info("Quit with score %d", self.score)
            return self.snapshot()

        if self.status is GameStatus.READY:
            if command != Command.NONE:
                self.start()
            return self.snapshot()

        if command == Command.PAUSE:
            if self.status is GameStatus.PAUSED:
                self.status = GameStatus.RUNNING
                self._last_fall = self.clock()
            else:
                self.status = GameStatus.PAUSED
            return self.snapshot()

        if self.status is GameStatus.PAUSED:
            return self.snapshot()

        landed = self._apply(command)
        if not landed and not self.game_over:
            self._apply_gravity()
        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        piece = self.current_piece
        return GameSnapshot(
            grid=self.grid.clone_state(),
            piece_cells=piece.cells if piece is not None else (),
            piece_kind=piece.kind if piece is not None else None,
            score=self.score,
            level=self.level,
            lines=self.lines_cleared_total,
            status=self.status,
            last_cleared=self.last_cleared,
        )

    def get_state(self) -> np.ndarray:
        return self.snapshot().overlay()
