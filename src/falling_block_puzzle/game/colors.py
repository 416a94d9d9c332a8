from __future__ import annotations

from typing import Tuple


ColorTag = Tuple[int, int, int]

BACKGROUND: ColorTag = (192, 192, 192)

# Factor applied to a piece's color when its cells are locked into the board
LOCKED_SHADE = 0.5


def shade(color: ColorTag, factor: float) -> ColorTag:
    """Scale each RGB channel by `factor`, clamped to [0, 255]."""
    r, g, b = (max(0, min(255, int(c * factor))) for c in color)
    return (r, g, b)


def locked_color(color: ColorTag) -> ColorTag:
    return shade(color, LOCKED_SHADE)
