from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterator, Sequence, Tuple

import numpy as np

from .colors import ColorTag


class Shape:
    """Immutable occupancy mask for one piece orientation.

    Row 0 is the top of the piece. The mask never carries empty margins:
    the first and last row and column each contain at least one occupied
    cell, so `width` and `height` are the piece's true extent.
    """

    __slots__ = ("_mask",)

    def __init__(self, mask: np.ndarray) -> None:
        arr = np.array(mask)
        if arr.ndim != 2 or arr.size == 0:
            raise ValueError("Shape mask must be a non-empty 2D grid")
        if not np.isin(arr, (0, 1)).all():
            raise ValueError("Shape mask may only contain 0 and 1")
        arr = arr.astype(np.bool_)
        if not (arr[0, :].any() and arr[-1, :].any() and arr[:, 0].any() and arr[:, -1].any()):
            raise ValueError("Shape mask must not have empty margin rows or columns")
        arr.setflags(write=False)
        self._mask = arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Shape":
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("Shape rows must be non-empty and of equal length")
        return cls(np.array(rows, dtype=np.int8))

    @property
    def mask(self) -> np.ndarray:
        """Read-only boolean view of the occupancy grid."""
        return self._mask

    @property
    def width(self) -> int:
        return int(self._mask.shape[1])

    @property
    def height(self) -> int:
        return int(self._mask.shape[0])

    @property
    def count(self) -> int:
        return int(self._mask.sum())

    def is_filled(self, dy: int, dx: int) -> bool:
        return bool(self._mask[dy, dx])

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (dx, dy) offsets of occupied cells, row by row."""
        for dy, dx in np.argwhere(self._mask):
            yield int(dx), int(dy)

    def rotate(self) -> "Shape":
        # rotated[j][rows - 1 - i] = original[i][j]
        return Shape(np.rot90(self._mask, 1, axes=(1, 0)))

    def to_rows(self) -> list[list[int]]:
        return self._mask.astype(np.int8).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return np.array_equal(self._mask, other._mask)

    def __hash__(self) -> int:
        return hash((self._mask.shape, self._mask.tobytes()))

    def __repr__(self) -> str:
        return f"Shape({self.to_rows()!r})"


class PieceKind(IntEnum):
    O = 1
    L = 2
    Z = 3
    T = 4
    I = 5


BASE_SHAPES: Dict[PieceKind, Shape] = {
    PieceKind.O: Shape.from_rows([[1, 1], [1, 1]]),
    PieceKind.L: Shape.from_rows([[1, 0], [1, 0], [1, 1]]),
    PieceKind.Z: Shape.from_rows([[1, 1, 0], [0, 1, 1]]),
    PieceKind.T: Shape.from_rows([[1, 1, 1], [0, 1, 0]]),
    PieceKind.I: Shape.from_rows([[1], [1], [1], [1]]),
}

PIECE_COLORS: Dict[PieceKind, ColorTag] = {
    PieceKind.O: (51, 153, 255),
    PieceKind.L: (255, 0, 0),
    PieceKind.Z: (0, 255, 0),
    PieceKind.T: (255, 255, 0),
    PieceKind.I: (0, 255, 255),
}
