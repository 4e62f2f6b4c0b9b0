"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- Offset, rotate90, translate: cell geometry
- GameGrid: Grid representation, collision checks and line clearing
- Piece: Tetromino piece with candidate/commit movement
- TetrominoType: Enum of available piece types
- ScoringRules, LevelRules: Scoring table and level/speed progression
- FallingBlocksGame: Per-tick state machine
- run_game: Cooperative loop over an InputSource and a Renderer
"""

from .geometry import Offset, rotate90, translate
from .grid import GameGrid
from .pieces import BASE_SHAPES, Candidate, Piece, TetrominoType
from .rules import LevelRules, ScoringRules
from .core import Command, FallingBlocksGame, GameConfig, GameSnapshot, GameStatus
from .loop import InputSource, Renderer, run_game

__all__ = [
    "Offset",
    "rotate90",
    "translate",
    "GameGrid",
    "BASE_SHAPES",
    "Candidate",
    "Piece",
    "TetrominoType",
    "ScoringRules",
    "LevelRules",
    "Command",
    "FallingBlocksGame",
    "GameConfig",
    "GameSnapshot",
    "GameStatus",
    "InputSource",
    "Renderer",
    "run_game",
]
