from __future__ import annotations

from collections import namedtuple

from . import config

GameState = namedtuple("GameState", ["snake", "food", "score"])
# snake: tuple[(x, y)], head is first element, never empty.
# food: (x, y)
# score: int, >= 0

RIGHT = (1, 0)
LEFT = (-1, 0)
DOWN = (0, 1)
UP = (0, -1)
DIRECTIONS = (RIGHT, LEFT, DOWN, UP)


def initial_state() -> GameState:
    return GameState(
        snake=(config.START_POSITION,),
        food=config.INITIAL_FOOD,
        score=0,
    )


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def wrap(pos: tuple[int, int]) -> tuple[int, int]:
    """Fold a position back onto the board; the board is a torus."""
    x, y = pos
    return (
        (x + config.BOARD_WIDTH) % config.BOARD_WIDTH,
        (y + config.BOARD_HEIGHT) % config.BOARD_HEIGHT,
    )


def is_opposite(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
