"""Lane Runner - pygame front end for the lane_runner simulation core.

Controls (on key release):
  A / Left    Move one lane back
  D / Right   Move one lane forward
  Space / Up  Jump
  R           Run again after a game over
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from lane_runner import Runner, RunnerConfig, monotonic_ms

from ui.constants import BG_COLOR, SCREEN_H, SCREEN_W
from ui.hud import draw_game_over, draw_score
from ui.scene import draw_scene

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lane Runner - endless three-lane runner")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for wave generation")
    p.add_argument(
        "--cadence",
        choices=("time", "distance"),
        default="time",
        help="Wave cadence policy",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Lane Runner")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 28, bold=True)

    runner = Runner(RunnerConfig(cadence=args.cadence), seed=args.seed)
    score_width = runner.config.score_width
    running = True

    while running:
        # Uncapped: the runner's clock scales each step by real elapsed time.
        clock.tick()

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in LEFT_KEYS:
                    runner.latch.set_left()
                elif event.key in RIGHT_KEYS:
                    runner.latch.set_right()
                elif event.key in JUMP_KEYS:
                    runner.latch.set_jump()
                elif event.key == pygame.K_r and not runner.running:
                    runner.reset()

        # --- Tick ---
        result = runner.step(monotonic_ms())

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_scene(screen, runner.world)
        if result.running:
            draw_score(screen, font, result.score, score_width)
        else:
            draw_game_over(screen, font, result.score, score_width)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
