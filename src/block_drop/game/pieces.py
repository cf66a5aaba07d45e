from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _shape(rows: List[List[int]]) -> Shape:
    return np.array(rows, dtype=np.int8)


# Non-zero entries carry the colour index of their kind
BASE_SHAPES = {
    TetrominoType.I: _shape([[1, 1, 1, 1]]),
    TetrominoType.J: _shape([[2, 0, 0], [2, 2, 2]]),
    TetrominoType.L: _shape([[0, 0, 3], [3, 3, 3]]),
    TetrominoType.O: _shape([[4, 4], [4, 4]]),
    TetrominoType.S: _shape([[0, 5, 5], [5, 5, 0]]),
    TetrominoType.T: _shape([[0, 6, 0], [6, 6, 6]]),
    TetrominoType.Z: _shape([[7, 7, 0], [0, 7, 7]]),
}

# RGB per colour index; 0 is the empty well
PALETTE: Dict[int, Tuple[int, int, int]] = {
    0: (0, 0, 0),
    1: (255, 13, 114),   # I
    2: (13, 194, 255),   # J
    3: (13, 255, 114),   # L
    4: (245, 56, 255),   # O
    5: (255, 142, 13),   # S
    6: (255, 225, 56),   # T
    7: (56, 119, 255),   # Z
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    # Negative values mark the falling piece in observations
    return PALETTE.get(abs(int(v)), (200, 200, 200))


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def color(self) -> int:
        return int(self.kind)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def cells(self, dx: int = 0, dy: int = 0, shape: Optional[Shape] = None) -> List[Tuple[int, int]]:
        """Absolute (x, y) of every filled cell, optionally offset or reshaped."""
        s = self.shape if shape is None else shape
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for row in range(h):
            for col in range(w):
                if s[row, col]:
                    cells.append((self.x + col + dx, self.y + row + dy))
        return cells


class PieceFactory:
    """Builds spawn-ready pieces for a well of the given width.

    Random kinds are independent uniform draws over the seven tetrominoes;
    there is no bag, so repeats and droughts happen.
    """

    def __init__(self, columns: int, rng: Optional[random.Random] = None) -> None:
        self.columns = int(columns)
        self.rng = rng or random.Random()

    def create_piece(self, kind: int) -> Piece:
        try:
            kind = TetrominoType(kind)
        except ValueError:
            raise ValueError(f"unknown tetromino kind: {kind!r}") from None
        shape = BASE_SHAPES[kind].copy()
        x = self.columns // 2 - shape.shape[1] // 2
        return Piece(kind=kind, shape=shape, x=x, y=0)

    def random_piece(self) -> Piece:
        return self.create_piece(self.rng.randint(1, len(TetrominoType)))
