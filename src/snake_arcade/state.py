from __future__ import annotations

import random
from collections import namedtuple
from enum import Enum

from . import config
from .linalg import Vec2


class Direction(Enum):
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Particle:
    def __init__(self, pos: Vec2, vel: Vec2, life: int, color, size: float):
        self.pos = pos
        self.vel = vel
        self.life = life
        self.max_life = life
        self.color = color  # (r, g, b, a)
        self.size = size

    def __repr__(self):
        return f"Particle(pos={self.pos!r}, life={self.life}, alpha={self.color[3]})"


TickResult = namedtuple(
    "TickResult",
    ["moved", "ate_food", "game_over", "burst", "restarted"],
    defaults=(False, False, False, None, False),
)
# burst: tuple[Particle, ...] spawned this tick, or None.

ParticleView = namedtuple("ParticleView", ["x", "y", "color", "size"])

Snapshot = namedtuple("Snapshot", ["snake", "food", "score", "game_over", "particles"])
# snake: tuple[(x, y)], head is first element.
# particles: tuple[ParticleView]


class GameState:
    """Everything the simulation owns. Mutated only by ``logic.advance``."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.snake: list[tuple[int, int]] = []
        self.direction = Direction.RIGHT
        self.moved_direction = Direction.RIGHT
        self.food = (0, 0)
        self.score = 0
        self.particles: list[Particle] = []
        self.game_over = False
        self.since_move = 0.0
        self.reset()

    def reset(self) -> None:
        self.snake = list(config.START_SNAKE)
        self.direction = Direction.RIGHT
        self.moved_direction = Direction.RIGHT
        self.score = 0
        self.particles = []
        self.game_over = False
        self.since_move = 0.0
        self.place_food()

    def place_food(self) -> None:
        # Occupied cells are not excluded.
        self.food = (
            self.rng.randrange(config.GRID_WIDTH) * config.CELL,
            self.rng.randrange(config.GRID_HEIGHT) * config.CELL,
        )

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            game_over=self.game_over,
            particles=tuple(
                ParticleView(p.pos.x, p.pos.y, p.color, p.size) for p in self.particles
            ),
        )
