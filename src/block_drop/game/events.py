"""Interfaces the engine calls out to.

The engine never draws or updates a UI itself. A front-end supplies a
`Renderer` and any number of `GameListener` objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from .grid import GameGrid
    from .pieces import Piece


class Renderer(Protocol):
    def draw_board(self, grid: "GameGrid") -> None: ...

    def draw_piece(self, piece: "Piece") -> None: ...

    def draw_preview(self, piece: "Piece") -> None: ...


class GameListener:
    """Receives status and lifecycle notifications. Override what you need."""

    def on_status(self, score: int, level: int, lines: int) -> None:
        pass

    def on_game_over(self, final_score: int) -> None:
        pass

    def on_start(self) -> None:
        pass
