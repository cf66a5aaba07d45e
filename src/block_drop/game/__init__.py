"""Game module for block-drop.

Exports the core game engine and supporting classes:
- GameGrid: Well representation and line clearing
- Piece / PieceFactory: Tetromino pieces and spawning
- collides / lock: Placement legality and merge-on-lock
- rotate: Rotation with wall kicks
- Progression / ScoringRules: Score, level and gravity speed
- BlockDropGame: Main game loop and state management
"""

from .grid import GameGrid
from .pieces import Piece, PieceFactory, TetrominoType
from .collision import collides, lock
from .rotation import rotate, rotate_shape, kick_offsets
from .rules import Progression, ScoringRules
from .events import GameListener, Renderer
from .core import BlockDropGame, Command, GameConfig, GameState

__all__ = [
    "GameGrid",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "collides",
    "lock",
    "rotate",
    "rotate_shape",
    "kick_offsets",
    "Progression",
    "ScoringRules",
    "GameListener",
    "Renderer",
    "BlockDropGame",
    "Command",
    "GameConfig",
    "GameState",
]
