from __future__ import annotations

import pygame

from . import config
from .state import Snapshot

GAME_OVER_TEXT = "Game Over! Press Space to restart"


def draw_particles(screen: pygame.Surface, particles) -> None:
    for p in particles:
        side = max(1, int(p.size))
        dot = pygame.Surface((side, side), pygame.SRCALPHA)
        dot.fill(p.color)
        screen.blit(dot, (p.x, p.y))


def draw_state(screen: pygame.Surface, snap: Snapshot, font: pygame.font.Font) -> None:
    screen.fill(config.GAME_OVER_BG_COLOR if snap.game_over else config.BG_COLOR)

    # Segments are one pixel short so the body reads as separate blocks.
    for i, (x, y) in enumerate(snap.snake):
        color = config.HEAD_COLOR if i == 0 else config.BODY_COLOR
        rect = pygame.Rect(x, y, config.CELL - 1, config.CELL - 1)
        pygame.draw.rect(screen, color, rect)

    fx, fy = snap.food
    pygame.draw.rect(screen, config.FOOD_COLOR, pygame.Rect(fx, fy, config.CELL, config.CELL))

    score = font.render(f"Score: {snap.score}", True, config.TEXT_COLOR)
    screen.blit(score, (10, 20 - score.get_height() // 2))

    if snap.game_over:
        text = font.render(GAME_OVER_TEXT, True, config.TEXT_COLOR)
        screen.blit(text, text.get_rect(center=(config.WIDTH // 2, config.HEIGHT // 2)))

    draw_particles(screen, snap.particles)
