from __future__ import annotations

from typing import Optional, Tuple

import pygame

from block_drop.game import GameGrid, Piece
from block_drop.game.pieces import color_for_value


PREVIEW_CELLS = 4


class Renderer:
    """Draws the well, the falling piece, the preview box and the side panel.

    Drawing goes to the screen surface; `present()` flips the display.
    """

    def __init__(self, screen: pygame.Surface, grid_size: Tuple[int, int], cell_size: int = 20, margin: int = 20) -> None:
        self.screen = screen
        self.cols, self.rows = grid_size
        self.cell_size = cell_size
        self.margin = margin
        self.board_rect = pygame.Rect(margin, margin, self.cols * cell_size, self.rows * cell_size)
        self.panel_x = self.board_rect.right + margin
        self.preview_rect = pygame.Rect(
            self.panel_x, margin, PREVIEW_CELLS * cell_size, PREVIEW_CELLS * cell_size
        )
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    @staticmethod
    def window_size(grid_size: Tuple[int, int], cell_size: int, margin: int = 20) -> Tuple[int, int]:
        cols, rows = grid_size
        side_panel_w = 8 * cell_size
        return margin * 3 + cols * cell_size + side_panel_w, margin * 2 + rows * cell_size

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        return self._font

    @property
    def big_font(self) -> pygame.font.Font:
        if self._big_font is None:
            self._big_font = pygame.font.SysFont(None, 40)
        return self._big_font

    def _draw_block(self, origin: Tuple[int, int], x: float, y: float, value: int) -> None:
        rect = pygame.Rect(
            origin[0] + int(x * self.cell_size),
            origin[1] + int(y * self.cell_size),
            self.cell_size,
            self.cell_size,
        )
        pygame.draw.rect(self.screen, color_for_value(value), rect)
        pygame.draw.rect(self.screen, (0, 0, 0), rect, 2)

    def draw_board(self, grid: GameGrid) -> None:
        pygame.draw.rect(self.screen, color_for_value(0), self.board_rect)
        for y in range(grid.height):
            for x in range(grid.width):
                kind = grid.cell(x, y)
                if kind is not None:
                    self._draw_block(self.board_rect.topleft, x, y, int(kind))

    def draw_piece(self, piece: Piece) -> None:
        for x, y in piece.cells():
            # Cells above the well are not drawn
            if y >= 0:
                self._draw_block(self.board_rect.topleft, x, y, piece.color)

    def draw_preview(self, piece: Piece) -> None:
        pygame.draw.rect(self.screen, color_for_value(0), self.preview_rect)
        off_x = (PREVIEW_CELLS - piece.width) / 2
        off_y = (PREVIEW_CELLS - piece.height) / 2
        for py in range(piece.height):
            for px in range(piece.width):
                if piece.shape[py, px]:
                    self._draw_block(self.preview_rect.topleft, px + off_x, py + off_y, piece.color)

    def draw_status(self, lines_of_text) -> None:
        x_text = self.panel_x
        y_text = self.preview_rect.bottom + 20
        clear = pygame.Rect(x_text, y_text, self.screen.get_width() - x_text, self.screen.get_height() - y_text)
        self.screen.fill((15, 15, 20), clear)
        for i, txt in enumerate(lines_of_text):
            img = self.font.render(txt, True, (230, 230, 230))
            self.screen.blit(img, (x_text, y_text + i * 22))

    def draw_banner(self, title: str, subtitle: str = "") -> None:
        shade = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self.screen.blit(shade, self.board_rect.topleft)
        text = self.big_font.render(title, True, (255, 100, 100))
        self.screen.blit(text, text.get_rect(center=self.board_rect.center))
        if subtitle:
            sub = self.font.render(subtitle, True, (230, 230, 230))
            self.screen.blit(sub, sub.get_rect(center=(self.board_rect.centerx, self.board_rect.centery + 32)))

    def present(self) -> None:
        pygame.display.flip()
