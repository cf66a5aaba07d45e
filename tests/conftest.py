from __future__ import annotations

from typing import List, Tuple

import pytest

from block_drop.game import BlockDropGame, GameConfig, GameGrid, GameListener, PieceFactory


class RecordingListener(GameListener):
    def __init__(self) -> None:
        self.statuses: List[Tuple[int, int, int]] = []
        self.game_overs: List[int] = []
        self.starts = 0

    def on_status(self, score: int, level: int, lines: int) -> None:
        self.statuses.append((score, level, lines))

    def on_game_over(self, final_score: int) -> None:
        self.game_overs.append(final_score)

    def on_start(self) -> None:
        self.starts += 1


class RecordingRenderer:
    def __init__(self) -> None:
        self.boards = 0
        self.pieces = []
        self.previews = []

    def draw_board(self, grid) -> None:
        self.boards += 1

    def draw_piece(self, piece) -> None:
        self.pieces.append((piece.kind, piece.x, piece.y))

    def draw_preview(self, piece) -> None:
        self.previews.append(piece.kind)


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(12, 20)


@pytest.fixture
def factory() -> PieceFactory:
    return PieceFactory(12)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def game(listener, renderer) -> BlockDropGame:
    g = BlockDropGame(GameConfig(random_seed=1234), renderer=renderer, listeners=[listener])
    g.start()
    return g
