from __future__ import annotations

import pygame
import pytest

from block_drop.game import GameGrid, PieceFactory, TetrominoType
from block_drop.game.pieces import color_for_value
from block_drop.visualization.human_play import KEY_TO_COMMAND, StatusPanel
from block_drop.visualization.renderer import Renderer


CELL = 10
MARGIN = 20


@pytest.fixture
def renderer():
    size = Renderer.window_size((12, 20), CELL, MARGIN)
    return Renderer(pygame.Surface(size), (12, 20), cell_size=CELL, margin=MARGIN)


def pixel(renderer, x, y):
    # Centre of board cell (x, y)
    return tuple(renderer.screen.get_at((MARGIN + x * CELL + CELL // 2, MARGIN + y * CELL + CELL // 2)))[:3]


def test_board_and_piece_colours(renderer):
    grid = GameGrid(12, 20)
    grid.set_cell(0, 19, TetrominoType.Z)
    renderer.draw_board(grid)
    assert pixel(renderer, 0, 19) == color_for_value(7)
    assert pixel(renderer, 1, 19) == color_for_value(0)

    piece = PieceFactory(12).create_piece(TetrominoType.I)
    piece.y = 3
    renderer.draw_piece(piece)
    assert pixel(renderer, 4, 3) == color_for_value(1)


def test_cells_above_well_are_not_drawn(renderer):
    renderer.screen.fill((1, 2, 3))
    piece = PieceFactory(12).create_piece(TetrominoType.I)
    piece.y = -1
    renderer.draw_piece(piece)
    assert tuple(renderer.screen.get_at((MARGIN + 4 * CELL + 5, MARGIN - 5)))[:3] == (1, 2, 3)


def test_preview_is_centred(renderer):
    piece = PieceFactory(12).create_piece(TetrominoType.O)
    renderer.draw_preview(piece)
    left, top = renderer.preview_rect.topleft
    # O fills the middle 2x2 of the 4x4 box
    assert tuple(renderer.screen.get_at((left + CELL + 5, top + CELL + 5)))[:3] == color_for_value(4)
    assert tuple(renderer.screen.get_at((left + 5, top + 5)))[:3] == color_for_value(0)


def test_status_panel_tracks_engine_notifications():
    panel = StatusPanel()
    assert panel.text()[-1] == "Start: Enter or R"
    panel.on_start()
    panel.on_status(300, 2, 12)
    panel.on_game_over(300)
    lines = panel.text()
    assert lines[:3] == ["Score: 300", "Level: 2", "Lines: 12"]
    assert lines[-1] == "Restart: Enter or R"
    assert panel.final_score == 300
    panel.on_start()
    assert panel.final_score is None


def test_key_map_covers_every_command():
    assert len(set(KEY_TO_COMMAND.values())) == 6


class SparseGrid(GameGrid):
    """Reports a block only through `cell`, leaving the raw matrix empty."""

    def cell(self, x, y):
        return TetrominoType.T if (x, y) == (3, 3) else None


def test_board_is_drawn_from_cell_reads(renderer):
    renderer.draw_board(SparseGrid(12, 20))
    assert pixel(renderer, 3, 3) == color_for_value(6)
    assert pixel(renderer, 4, 3) == color_for_value(0)
