from __future__ import annotations

from typing import Optional

from .grid import GameGrid
from .pieces import Piece, Shape


def collides(grid: GameGrid, piece: Piece, dx: int = 0, dy: int = 0, shape: Optional[Shape] = None) -> bool:
    """True if `piece` (or `shape` at the piece's position) offset by (dx, dy) is illegal.

    Every movement, rotation and spawn check goes through here. Cells above the
    top of the well are legal as long as they stay within the side walls.
    """
    for x, y in piece.cells(dx, dy, shape):
        if grid.is_occupied(x, y):
            return True
    return False


def lock(grid: GameGrid, piece: Piece) -> bool:
    """Write the piece into the grid; return True if any cell was above row 0.

    Cells inside the well are written even when the piece overhangs the top.
    """
    overflow = False
    for x, y in piece.cells():
        if y < 0:
            overflow = True
        else:
            grid.set_cell(x, y, piece.color)
    return overflow
