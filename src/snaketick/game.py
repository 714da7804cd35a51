from __future__ import annotations

import logging
import random
import threading

from . import config
from .channel import StateChannel
from .direction import DirectionStore
from .logic import run_tick
from .state import GameState, initial_state

logger = logging.getLogger(__name__)


class Game:
    """Owns the simulation: authoritative state, running length, direction.

    The loop runs on a background thread once ``start`` is called and ticks
    every ``tick_ms`` milliseconds until ``stop``. Observers read snapshots
    from ``snapshots``; input writes through ``move`` / ``set_direction``.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        tick_ms: int = config.TICK_MS,
        direction: DirectionStore | None = None,
    ):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.rng = rng if rng is not None else random.Random()
        self.tick_ms = tick_ms
        self.direction = direction if direction is not None else DirectionStore()
        self.snapshots = StateChannel()
        self.ticks = 0

        self._state = initial_state()
        self._length = config.INITIAL_LENGTH
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def move(self) -> tuple[int, int]:
        return self.direction.get()

    @move.setter
    def move(self, direction: tuple[int, int]) -> None:
        self.direction.set(direction)

    def set_direction(self, direction: tuple[int, int]) -> None:
        self.direction.set(direction)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def step(self) -> GameState:
        """Run one tick and publish the resulting snapshot."""
        direction = self.direction.get()
        tick = run_tick(self._state, self._length, direction, self.rng)
        self._state, self._length = tick.next, tick.length
        self.ticks += 1

        if tick.crashed:
            logger.info("Self-collision at %s, score %d reset", tick.head, tick.prev.score)
        elif tick.ate:
            logger.debug("Food eaten at %s, score %d, new food %s", tick.head, tick.next.score, tick.next.food)
        logger.debug("Tick %d: head=%s length=%d", self.ticks, tick.next.snake[0], len(tick.next.snake))

        self.snapshots.publish(self._state)
        return self._state

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("game already started")
        if self._stop.is_set():
            raise RuntimeError("game already stopped")
        self.snapshots.publish(self._state)
        self._thread = threading.Thread(target=self._run, name="snaketick-loop", daemon=True)
        self._thread.start()
        logger.info("Simulation started (tick=%dms)", self.tick_ms)

    def stop(self, timeout: float | None = None) -> None:
        """Stop scheduling ticks; a tick already running completes first."""
        self._stop.set()
        if self._thread is None:
            if not self.snapshots.closed:
                self.snapshots.close()
            return
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        period = self.tick_ms / 1000.0
        try:
            while not self._stop.wait(period):
                self.step()
        finally:
            self.snapshots.close()
            logger.info("Simulation stopped after %d ticks", self.ticks)

    def __enter__(self) -> Game:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
