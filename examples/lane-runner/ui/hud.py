"""Score line and game-over overlay."""
from __future__ import annotations

import pygame

from lane_runner import format_score

from ui.constants import OVERLAY_COLOR, OVERLAY_TEXT, TEXT_COLOR


def draw_score(
    surface: pygame.Surface, font: pygame.font.Font, score: int, width: int
) -> None:
    text = font.render(format_score(score, width), True, TEXT_COLOR)
    surface.blit(text, (surface.get_width() - text.get_width() - 20, 16))


def draw_game_over(
    surface: pygame.Surface, font: pygame.font.Font, score: int, width: int
) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))

    lines = [
        "GAME OVER",
        f"Score {format_score(score, width)}",
        "R to run again, Esc to quit",
    ]
    cy = surface.get_height() // 2 - len(lines) * font.get_linesize() // 2
    for line in lines:
        text = font.render(line, True, OVERLAY_TEXT)
        surface.blit(text, (surface.get_width() // 2 - text.get_width() // 2, cy))
        cy += font.get_linesize()
