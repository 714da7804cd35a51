from __future__ import annotations

import random
from collections import namedtuple

from . import config
from .state import Functor, GameState, add_vectors, wrap

Tick = namedtuple("Tick", ["prev", "length", "head", "ate", "crashed", "next"])
# prev: GameState the tick started from.
# length: running snake length after this tick.
# head: new head position.
# ate: head landed on food.
# crashed: head landed on the pre-move body.
# next: GameState being built.


def advance_head(tick: Tick, direction: tuple[int, int]) -> Tick:
    head = wrap(add_vectors(tick.prev.snake[0], direction))
    return tick._replace(head=head)


def eat_food(tick: Tick) -> Tick:
    if tick.head != tick.prev.food:
        return tick
    return tick._replace(
        ate=True,
        length=tick.length + 1,
        next=tick.next._replace(score=tick.next.score + 1),
    )


def check_collisions(tick: Tick) -> Tick:
    # Checked against the whole pre-move body, tail included.
    if tick.head not in tick.prev.snake:
        return tick
    return tick._replace(
        crashed=True,
        length=config.INITIAL_LENGTH,
        next=tick.next._replace(snake=(config.RESTART_POSITION,), score=0),
    )


def move_snake(tick: Tick) -> Tick:
    if tick.crashed:
        return tick
    body = tick.prev.snake[: tick.length - 1]
    return tick._replace(next=tick.next._replace(snake=(tick.head,) + body))


def respawn_food(tick: Tick, rng: random.Random) -> Tick:
    if not tick.ate or tick.crashed:
        return tick
    # Uniform over the whole board; may land on the snake.
    food = (
        rng.randrange(config.BOARD_WIDTH),
        rng.randrange(config.BOARD_HEIGHT),
    )
    return tick._replace(next=tick.next._replace(food=food))


def run_tick(
    state: GameState,
    length: int,
    direction: tuple[int, int],
    rng: random.Random,
) -> Tick:
    start = Tick(prev=state, length=length, head=None, ate=False, crashed=False, next=state)
    return (
        Functor(start)
        .map(lambda t: advance_head(t, direction))
        .map(eat_food)
        .map(check_collisions)
        .map(move_snake)
        .map(lambda t: respawn_food(t, rng))
        .get()
    )


def game_tick(
    state: GameState,
    length: int,
    direction: tuple[int, int],
    rng: random.Random,
) -> tuple[GameState, int]:
    """Advance one tick. Returns the next snapshot and the running length."""
    tick = run_tick(state, length, direction, rng)
    return tick.next, tick.length
