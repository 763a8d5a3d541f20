from __future__ import annotations

import math
import random

from . import config
from .linalg import Vec2
from .state import Particle


def create_burst(x: float, y: float, count: int = config.PARTICLE_COUNT, rng=random) -> list[Particle]:
    """Spray ``count`` gold particles outward from (x, y) at random angles and speeds."""
    burst = []
    for _ in range(count):
        angle = rng.random() * 2 * math.pi
        speed = rng.random() * config.PARTICLE_MAX_SPEED
        burst.append(
            Particle(
                pos=Vec2(float(x), float(y)),
                vel=Vec2.from_angle(angle) * speed,
                life=config.PARTICLE_LIFE,
                color=config.PARTICLE_COLOR,
                size=rng.random() * 3 + 1,
            )
        )
    return burst


def update_particles(particles: list[Particle]) -> list[Particle]:
    alive = []
    for p in particles:
        if p.life <= 0:
            continue
        p.pos = p.pos + p.vel
        p.life -= 1
        r, g, b, _ = p.color
        p.color = (r, g, b, int(p.life / p.max_life * 255))
        if p.life > 0:
            alive.append(p)
    return alive
