from __future__ import annotations

from typing import Iterator

import numpy as np

from .collision import collides
from .grid import GameGrid
from .pieces import Piece, Shape


def rotate_shape(shape: Shape) -> Shape:
    """Rotate clockwise: each old column, read bottom to top, becomes a new row."""
    return np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))


def kick_offsets(limit: int) -> Iterator[int]:
    """Horizontal offsets tried after a rotation, in order: 0, 1, -2, 3, -4, ...

    Stops once the magnitude exceeds `limit`.
    """
    offset = 0
    while abs(offset) <= limit:
        yield offset
        offset = -(offset + 1) if offset > 0 else -offset + 1


def rotate(grid: GameGrid, piece: Piece) -> bool:
    """Rotate the piece in place with a wall kick; return False if it stays put."""
    rotated = rotate_shape(piece.shape)
    for offset in kick_offsets(rotated.shape[1]):
        if not collides(grid, piece, dx=offset, shape=rotated):
            piece.shape = rotated
            piece.x += offset
            return True
    return False
