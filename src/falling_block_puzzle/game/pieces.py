from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .colors import ColorTag
from .shapes import BASE_SHAPES, PIECE_COLORS, PieceKind, Shape


@dataclass
class Piece:
    """A shape placed on the board at (x, y), its top-left corner.

    Moves are not validated here; the game checks them against the board
    before committing.
    """

    kind: PieceKind
    shape: Shape
    x: int
    y: int
    color: ColorTag

    @classmethod
    def spawn(cls, kind: PieceKind, x: int, y: int) -> "Piece":
        return cls(kind=kind, shape=BASE_SHAPES[kind], x=x, y=y, color=PIECE_COLORS[kind])

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def width(self) -> int:
        return self.shape.width

    @property
    def height(self) -> int:
        return self.shape.height

    def rotated_shape(self) -> Shape:
        return self.shape.rotate()

    def translate(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + dx, self.y + dy) for dx, dy in self.shape.cells()]
