from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional

import numpy as np

from .grid import Board
from .pieces import Piece
from .rules import ScoringRules
from .shapes import BASE_SHAPES, PieceKind


logger = logging.getLogger(__name__)

LOCKED_CELL = 1
FALLING_CELL = 2


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 15
    random_seed: Optional[int] = None
    spawn_y: int = 0
    gravity_interval: float = 0.2  # seconds between forced drops

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        widest = max(shape.width for shape in BASE_SHAPES.values())
        if self.width < widest:
            raise ValueError(f"Board width {self.width} cannot fit a piece of width {widest}")
        if self.spawn_y not in (0, 1):
            raise ValueError(f"spawn_y must be 0 or 1, got {self.spawn_y}")
        tallest = max(shape.height for shape in BASE_SHAPES.values())
        if self.spawn_y + tallest > self.height:
            raise ValueError(
                f"Board height {self.height} cannot fit a piece of height {tallest} spawned at row {self.spawn_y}"
            )
        if self.gravity_interval <= 0:
            raise ValueError("gravity_interval must be positive")


class FallingBlockGame:
    """Owns the board, the active piece and the session state.

    Hosts drive it through `move_left`, `move_right`, `rotate`, `soft_drop`,
    `tick` and `restart`. Each returns True when it changed the game.
    While the game is over everything except `restart` is a no-op.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.clock = clock
        self.rng = random.Random(self.config.random_seed)
        self.board = Board(self.config.width, self.config.height)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.phase = Phase.PLAYING
        self.piece: Optional[Piece] = None
        # None until the first tick anchors it to the host clock
        self.last_gravity_tick: Optional[float] = None
        self.restart()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def gravity_interval(self) -> float:
        return self.config.gravity_interval

    def restart(self) -> bool:
        self.board.clear()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.phase = Phase.PLAYING
        self.last_gravity_tick = None
        logger.info("New game on a %dx%d board", self.board.width, self.board.height)
        self._spawn_piece()
        return True

    def _random_piece(self) -> Piece:
        kind = self.rng.choice(list(PieceKind))
        shape = BASE_SHAPES[kind]
        x = self.rng.randint(0, self.board.width - shape.width)
        return Piece.spawn(kind, x, self.config.spawn_y)

    def _spawn_piece(self) -> None:
        self.piece = self._random_piece()
        logger.debug("Spawned %s at (%d, %d)", self.piece.kind.name, self.piece.x, self.piece.y)
        if self.board.collides(self.piece.x, self.piece.y, self.piece.shape):
            self.phase = Phase.GAME_OVER
            logger.info(
                "Game over: score=%d lines=%d pieces=%d",
                self.score,
                self.lines_cleared_total,
                self.pieces_locked,
            )

    def _active(self) -> Optional[Piece]:
        if self.phase is not Phase.PLAYING:
            return None
        return self.piece

    def move_left(self) -> bool:
        piece = self._active()
        if piece is None or self.board.collides_left(piece.x - 1, piece.y, piece.shape):
            return False
        piece.translate(-1, 0)
        return True

    def move_right(self) -> bool:
        piece = self._active()
        if piece is None or self.board.collides_right(piece.x + 1, piece.y, piece.shape):
            return False
        piece.translate(1, 0)
        return True

    def rotate(self) -> bool:
        piece = self._active()
        if piece is None:
            return False
        candidate = piece.rotated_shape()
        if self.board.collides(piece.x, piece.y, candidate):
            return False
        piece.shape = candidate
        return True

    def soft_drop(self) -> bool:
        """Move the piece down one row, or lock it when it is resting."""
        piece = self._active()
        if piece is None:
            return False
        if not self.board.collides_below(piece.x, piece.y, piece.shape):
            piece.translate(0, 1)
        else:
            self._lock_piece(piece)
        return True

    def tick(self, now: Optional[float] = None) -> bool:
        """Apply gravity once the interval since the last forced drop has passed."""
        if self.phase is not Phase.PLAYING:
            return False
        if now is None:
            now = self.clock()
        if self.last_gravity_tick is None:
            self.last_gravity_tick = now
            return False
        if now - self.last_gravity_tick <= self.config.gravity_interval:
            return False
        self.last_gravity_tick = now
        return self.soft_drop()

    def _lock_piece(self, piece: Piece) -> int:
        self.board.lock_piece(piece)
        lines = self.board.clear_completed_rows(piece.y, piece.y + piece.height)
        self.pieces_locked += 1
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        self._spawn_piece()
        return lines

    def step(self, action: Action) -> bool:
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        return False

    def get_state(self) -> np.ndarray:
        """Board occupancy with the falling piece overlaid."""
        state = self.board.occupancy().astype(np.int8) * LOCKED_CELL
        if self.piece is not None and not self.game_over:
            for x, y in self.piece.cells():
                if self.board.is_inside(y, x):
                    state[y, x] = FALLING_CELL
        return state
