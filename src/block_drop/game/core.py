from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional

import numpy as np

from .collision import collides, lock
from .events import GameListener, Renderer
from .grid import GameGrid
from .pieces import Piece, PieceFactory
from .rotation import rotate
from .rules import Progression, ScoringRules


logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    HARD_DROP = 4
    TOGGLE_PAUSE = 5


class GameState(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 12
    height: int = 20
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")


class BlockDropGame:
    """One play session: the well, the falling piece and the progression.

    Time only advances through `tick(dt)` and input only arrives through
    `handle(command)`; both run to completion before returning, so the session
    can be driven by any frame loop.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        renderer: Optional[Renderer] = None,
        listeners: Optional[List[GameListener]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.factory = PieceFactory(self.config.width, self.rng)
        self.progression = Progression(rules or ScoringRules())
        self.renderer = renderer
        self.listeners: List[GameListener] = list(listeners or [])
        self.state = GameState.READY
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.drop_counter = 0.0

    @property
    def score(self) -> int:
        return self.progression.score

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def lines(self) -> int:
        return self.progression.lines

    @property
    def drop_interval(self) -> int:
        return self.progression.drop_interval

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    def add_listener(self, listener: GameListener) -> None:
        self.listeners.append(listener)

    # Lifecycle

    def start(self) -> None:
        """Begin a fresh game; used for both the first start and restarts."""
        self.grid.reset()
        self.progression.reset()
        self.drop_counter = 0.0
        self.current_piece = self.factory.random_piece()
        self.next_piece = self.factory.random_piece()
        self.state = GameState.RUNNING
        logger.info("game started (%dx%d)", self.grid.width, self.grid.height)
        for listener in self.listeners:
            listener.on_start()
        self._notify_status()
        self._draw_preview()

    def _end_game(self) -> None:
        self.state = GameState.GAME_OVER
        logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)
        for listener in self.listeners:
            listener.on_game_over(self.score)

    # Time

    def tick(self, dt: float) -> bool:
        """Advance the gravity timer by `dt` milliseconds.

        Returns True while the caller should keep scheduling ticks.
        """
        if self.state is not GameState.RUNNING:
            return False
        self.drop_counter += dt
        if self.drop_counter > self.drop_interval:
            self.descend()
        self.render()
        return self.state is GameState.RUNNING

    def descend(self) -> None:
        """Move the piece down one row, or lock it and bring in the next one."""
        assert self.current_piece is not None
        if not collides(self.grid, self.current_piece, 0, 1):
            self.current_piece.y += 1
        else:
            overflow = lock(self.grid, self.current_piece)
            logger.debug(
                "locked %s at (%d, %d)",
                self.current_piece.kind.name,
                self.current_piece.x,
                self.current_piece.y,
            )
            cleared = self.grid.clear_complete_rows()
            if cleared:
                self.progression.apply_lines(cleared)
                self._notify_status()
            if overflow:
                self._end_game()
                return
            self._spawn_next()
            if collides(self.grid, self.current_piece):
                self._end_game()
                return
        self.drop_counter = 0.0

    def _spawn_next(self) -> None:
        assert self.next_piece is not None
        self.current_piece = self.next_piece
        self.next_piece = self.factory.random_piece()
        self._draw_preview()

    # Input

    def handle(self, command: Command) -> None:
        if command == Command.TOGGLE_PAUSE:
            self.toggle_pause()
            return
        if self.state is not GameState.RUNNING:
            return

        if command == Command.MOVE_LEFT:
            self.move(-1)
        elif command == Command.MOVE_RIGHT:
            self.move(1)
        elif command == Command.SOFT_DROP:
            self.descend()
        elif command == Command.ROTATE:
            assert self.current_piece is not None
            rotate(self.grid, self.current_piece)
        elif command == Command.HARD_DROP:
            self.hard_drop()
        else:
            logger.debug("ignoring unknown command %r", command)

    def toggle_pause(self) -> None:
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING

    def move(self, dx: int) -> bool:
        assert self.current_piece is not None
        if collides(self.grid, self.current_piece, dx, 0):
            return False
        self.current_piece.x += dx
        return True

    def hard_drop(self) -> int:
        """Drop straight down, lock, and return the number of rows fallen."""
        assert self.current_piece is not None
        rows = 0
        while not collides(self.grid, self.current_piece, 0, 1):
            self.current_piece.y += 1
            self.progression.award_hard_drop()
            rows += 1
        self.descend()
        self._notify_status()
        return rows

    # Output

    def render(self) -> None:
        if self.renderer is None:
            return
        self.renderer.draw_board(self.grid)
        if self.current_piece is not None:
            self.renderer.draw_piece(self.current_piece)

    def _draw_preview(self) -> None:
        if self.renderer is not None and self.next_piece is not None:
            self.renderer.draw_preview(self.next_piece)

    def _notify_status(self) -> None:
        for listener in self.listeners:
            listener.on_status(self.score, self.level, self.lines)

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells():
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.current_piece.color
        return state
