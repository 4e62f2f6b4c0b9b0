from __future__ import annotations

import pytest

from falling_blocks.game import FallingBlocksGame, GameConfig, LevelRules


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_game(clock):
    def _make(kinds=(), width=10, height=20, level_rules=None, start=True) -> FallingBlocksGame:
        game = FallingBlocksGame(
            GameConfig(width=width, height=height, random_seed=0),
            level_rules=level_rules or LevelRules(),
            clock=clock,
            piece_sequence=list(kinds),
        )
        if start:
            game.start()
        return game

    return _make
