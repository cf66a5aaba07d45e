from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from block_drop.game import BlockDropGame, Command, GameConfig, GameListener, GameState
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)


class StatusPanel(GameListener):
    """Side-panel labels plus the game-over box, kept in sync by the engine."""

    def __init__(self) -> None:
        self.score = 0
        self.level = 1
        self.lines = 0
        self.final_score: Optional[int] = None
        self.started = False

    def on_status(self, score: int, level: int, lines: int) -> None:
        self.score, self.level, self.lines = score, level, lines

    def on_game_over(self, final_score: int) -> None:
        self.final_score = final_score

    def on_start(self) -> None:
        self.final_score = None
        self.started = True

    def text(self) -> List[str]:
        start_label = "Restart" if self.started else "Start"
        return [
            f"Score: {self.score}",
            f"Level: {self.level}",
            f"Lines: {self.lines}",
            "",
            "Move: Left/Right",
            "Rotate: Up",
            "Soft drop: Down",
            "Hard drop: Space",
            "Pause: P",
            f"{start_label}: Enter or R",
        ]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play block-drop with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=20)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO")
    return p


def run(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
    )

    pygame.init()
    try:
        config = GameConfig(random_seed=args.seed)
        grid_size = (config.width, config.height)
        screen = pygame.display.set_mode(Renderer.window_size(grid_size, args.cell_size))
        pygame.display.set_caption("Block Drop")
        screen.fill((15, 15, 20))

        renderer = Renderer(screen, grid_size, cell_size=args.cell_size)
        panel = StatusPanel()
        game = BlockDropGame(config, renderer=renderer, listeners=[panel])
        renderer.draw_board(game.grid)

        clock = pygame.time.Clock()
        running = True
        while running:
            # KEYDOWN only: held keys do not repeat
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in START_KEYS:
                        game.start()
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.handle(command)

            dt = clock.tick(args.fps)
            game.tick(dt)

            if game.state is not GameState.RUNNING:
                game.render()
            if game.state is GameState.READY:
                renderer.draw_banner("BLOCK DROP", "Press Enter to start")
            elif game.state is GameState.PAUSED:
                renderer.draw_banner("PAUSED", "Press P to resume")
            elif game.state is GameState.GAME_OVER:
                renderer.draw_banner("GAME OVER", f"Score {panel.final_score} - Enter to restart")
            renderer.draw_status(panel.text())
            renderer.present()
        logger.info("window closed (state=%s, score=%d)", game.state.value, game.score)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
