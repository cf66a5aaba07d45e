from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .pieces import TetrominoType


logger = logging.getLogger(__name__)

EMPTY = 0


class GameGrid:
    """Fixed-size well holding locked blocks.

    Cells use 0 for empty and 1..7 for the colour index of the tetromino that
    left the block there. Row 0 is the top of the well; pieces may overhang
    above it (negative y), which is never treated as blocking.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_occupied(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return self.grid[y, x] != EMPTY

    def cell(self, x: int, y: int) -> Optional[TetrominoType]:
        """Colour of the block at (x, y), or None when the cell is empty."""
        value = int(self.grid[y, x])
        if value == EMPTY:
            return None
        return TetrominoType(value)

    def set_cell(self, x: int, y: int, color: int) -> None:
        self.grid[y, x] = int(color)

    def is_row_complete(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != EMPTY))

    def collapse_row(self, y: int) -> None:
        # Shift everything above y down by one and open an empty row at the top
        self.grid[1 : y + 1] = self.grid[0:y].copy()
        self.grid[0].fill(EMPTY)

    def clear_complete_rows(self) -> int:
        """Remove every complete row and return how many were cleared.

        Rows are scanned bottom to top. After a collapse the same index is
        examined again, since the row that was above it has moved into place.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_complete(y):
                self.collapse_row(y)
                cleared += 1
            else:
                y -= 1
        if cleared:
            logger.debug("cleared %d row(s)", cleared)
        return cleared

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != EMPTY, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        top_index = int(non_empty_rows[0])
        return self.height - top_index

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            column = self.grid[:, x]
            seen_block = False
            for cell in column:
                if cell != EMPTY:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
