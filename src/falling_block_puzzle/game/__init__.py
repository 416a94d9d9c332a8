"""Game module for the falling block puzzle.

Exports the core engine and supporting classes:
- Shape / PieceKind: piece geometry and the piece catalog
- Piece: a shape positioned on the board
- Board: bounds-checked grid with collision queries and line clearing
- ScoringRules: points awarded per cleared line
- FallingBlockGame: tick-driven game loop and session state
"""

from .colors import BACKGROUND, ColorTag, shade
from .shapes import BASE_SHAPES, PIECE_COLORS, PieceKind, Shape
from .pieces import Piece
from .grid import Board
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, Phase

__all__ = [
    "BACKGROUND",
    "ColorTag",
    "shade",
    "BASE_SHAPES",
    "PIECE_COLORS",
    "PieceKind",
    "Shape",
    "Piece",
    "Board",
    "ScoringRules",
    "Action",
    "FallingBlockGame",
    "GameConfig",
    "Phase",
]
