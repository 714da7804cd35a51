from __future__ import annotations

from . import config
from .direction import DirectionStore
from .state import DIRECTIONS, is_opposite


class Steering:
    """Input-side filter in front of a DirectionStore.

    Tracks the last direction it forwarded and drops exact reversals, which
    the simulation itself never rejects.
    """

    def __init__(self, store: DirectionStore, current: tuple[int, int] = config.INITIAL_DIRECTION):
        self.store = store
        self._current = tuple(current)

    @property
    def current(self) -> tuple[int, int]:
        return self._current

    def request(self, direction: tuple[int, int]) -> bool:
        direction = tuple(direction)
        if direction not in DIRECTIONS:
            raise ValueError(f"not a unit direction: {direction}")
        if is_opposite(self._current, direction):
            return False
        self._current = direction
        self.store.set(direction)
        return True
