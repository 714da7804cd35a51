from __future__ import annotations

import threading

from . import config


class DirectionStore:
    """The single pending movement vector shared by input and the tick loop.

    Writes replace the previous value; the last write before a tick reads it
    is the one that tick sees.
    """

    def __init__(self, initial: tuple[int, int] = config.INITIAL_DIRECTION):
        self._lock = threading.Lock()
        self._direction = initial

    def set(self, direction: tuple[int, int]) -> None:
        with self._lock:
            self._direction = tuple(direction)

    def get(self) -> tuple[int, int]:
        with self._lock:
            return self._direction
