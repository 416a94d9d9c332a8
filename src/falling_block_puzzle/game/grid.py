from __future__ import annotations

import logging

import numpy as np

from .colors import BACKGROUND, ColorTag, locked_color
from .pieces import Piece
from .shapes import Shape


logger = logging.getLogger(__name__)


class Board:
    """Fixed-size grid of locked cells.

    Occupancy and per-cell color live in two numpy arrays of matching
    height and width. Row 0 is the top. Collision queries treat any
    coordinate outside the board as blocked.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros((self._height, self._width), dtype=np.bool_)
        self._colors = np.empty((self._height, self._width, 3), dtype=np.uint8)
        self._colors[:] = BACKGROUND

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._cells.fill(False)
        self._colors[:] = BACKGROUND

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.is_inside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self._height}x{self._width} board")

    def is_cell_free(self, row: int, col: int) -> bool:
        if not self.is_inside(row, col):
            return False
        return not self._cells[row, col]

    def cell_color(self, row: int, col: int) -> ColorTag:
        self._check_bounds(row, col)
        r, g, b = self._colors[row, col]
        return (int(r), int(g), int(b))

    # Collision queries. All take the shape's top-left corner (x, y).

    def collides_below(self, x: int, y: int, shape: Shape) -> bool:
        """True if the shape cannot move from row `y` to row `y + 1`.

        The floor test uses the full bounding-box height, not the lowest
        occupied cell of each column.
        """
        target = y + 1
        if target + shape.height > self._height:
            return True
        for dx, dy in shape.cells():
            if not self.is_cell_free(target + dy, x + dx):
                return True
        return False

    def collides_left(self, x: int, y: int, shape: Shape) -> bool:
        """True if the shape's leftmost column is blocked at column `x`.

        Only the leading edge is checked; the rest of the shape is assumed
        to be collision-free already.
        """
        if x < 0:
            return True
        for dy in range(shape.height):
            if shape.is_filled(dy, 0) and not self.is_cell_free(y + dy, x):
                return True
        return False

    def collides_right(self, x: int, y: int, shape: Shape) -> bool:
        if x + shape.width > self._width:
            return True
        last = shape.width - 1
        for dy in range(shape.height):
            if shape.is_filled(dy, last) and not self.is_cell_free(y + dy, x + last):
                return True
        return False

    def collides(self, x: int, y: int, shape: Shape) -> bool:
        """Placement check used for rotations and spawns.

        Combines the left and right edge checks at (x, y) with the down
        check for the shape arriving at row `y`.
        """
        return (
            self.collides_below(x, y - 1, shape)
            or self.collides_left(x, y, shape)
            or self.collides_right(x, y, shape)
        )

    def lock_piece(self, piece: Piece) -> None:
        cells = piece.cells()
        for x, y in cells:
            self._check_bounds(y, x)
        tag = locked_color(piece.color)
        for x, y in cells:
            self._cells[y, x] = True
            self._colors[y, x] = tag
        logger.debug("Locked %s at (%d, %d)", piece.kind.name, piece.x, piece.y)

    def is_row_complete(self, row: int) -> bool:
        if not 0 <= row < self._height:
            return False
        return bool(self._cells[row].all())

    def remove_row(self, row: int) -> None:
        """Delete `row`, shift the rows above it down and add an empty top row."""
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} is outside a board of height {self._height}")
        if row > 0:
            self._cells[1 : row + 1] = self._cells[0:row].copy()
            self._colors[1 : row + 1] = self._colors[0:row].copy()
        self._cells[0] = False
        self._colors[0] = BACKGROUND

    def clear_completed_rows(self, start: int, end: int) -> int:
        """Remove complete rows in [start, end), scanning top to bottom.

        Removing a row only moves rows above it, so rows still to be visited
        keep their index.
        """
        start = max(0, start)
        end = min(self._height, end)
        lines = 0
        for row in range(start, end):
            if self.is_row_complete(row):
                self.remove_row(row)
                lines += 1
        if lines:
            logger.debug("Cleared %d row(s) in [%d, %d)", lines, start, end)
        return lines

    def occupancy(self) -> np.ndarray:
        return self._cells.copy()

    def colors(self) -> np.ndarray:
        return self._colors.copy()

    def filled_count(self) -> int:
        return int(self._cells.sum())
