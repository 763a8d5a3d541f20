from __future__ import annotations

import logging

from . import config
from .particles import create_burst, update_particles
from .state import Direction, GameState, TickResult

log = logging.getLogger(__name__)


def handle_input(state: GameState, requested: Direction | None) -> None:
    # Compared with the last executed move, not the pending request.
    if requested is not None and requested != state.moved_direction.opposite:
        state.direction = requested


def wrap(value: int, extent: int) -> int:
    # Strict ">" leaves a one-cell column at ``extent`` before wrapping to 0.
    if value < 0:
        return extent - config.CELL
    if value > extent:
        return 0
    return value


def next_head(state: GameState) -> tuple[int, int]:
    x, y = state.head
    dx, dy = state.direction.value
    return (
        wrap(x + dx * config.CELL, config.WIDTH),
        wrap(y + dy * config.CELL, config.HEIGHT),
    )


def hits_body(state: GameState, pos: tuple[int, int]) -> bool:
    # Tail is included: it has not moved out of the way yet.
    return pos in state.snake


def move_snake(state: GameState) -> TickResult:
    new_head = next_head(state)

    if hits_body(state, new_head):
        log.debug("collision detected at %s", new_head)
        state.game_over = True
        log.info("game over, score %d", state.score)
        return TickResult(game_over=True)

    burst = None
    grow = new_head == state.food
    if grow:
        fx, fy = state.food
        burst = tuple(create_burst(fx, fy, rng=state.rng))
        state.particles.extend(burst)
        state.place_food()
        state.score += config.FOOD_SCORE
        log.info("food eaten, score %d", state.score)

    if grow:
        state.snake = [new_head] + state.snake
    else:
        state.snake = [new_head] + state.snake[:-1]
    state.moved_direction = state.direction
    return TickResult(moved=True, ate_food=grow, burst=burst)


def advance(
    state: GameState,
    requested: Direction | None,
    elapsed: float,
    restart: bool = False,
) -> TickResult:
    """Run one frame of the simulation.

    ``elapsed`` is the frame time in seconds. The snake moves at most once per
    frame, and only once ``config.MOVE_INTERVAL`` has accumulated. Particles age
    every frame. A game-over state is frozen until ``restart`` is passed.
    """
    if state.game_over:
        if restart:
            state.reset()
            return TickResult(restarted=True)
        return TickResult()

    handle_input(state, requested)

    result = TickResult()
    state.since_move += elapsed
    if state.since_move >= config.MOVE_INTERVAL:
        state.since_move = 0.0
        result = move_snake(state)
        if result.game_over:
            return result

    state.particles = update_particles(state.particles)
    return result
