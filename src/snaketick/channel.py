from __future__ import annotations

import threading
from typing import Any, Iterator


class StateChannel:
    """Single-slot broadcast of the latest snapshot.

    Publishing overwrites the slot. Readers always get the newest value and
    may miss intermediate ones; there is no backlog. ``value`` is None until
    the first publish.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._value: Any = None
        self._version = 0
        self._closed = False

    @property
    def value(self) -> Any:
        with self._cond:
            return self._value

    @property
    def version(self) -> int:
        with self._cond:
            return self._version

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def publish(self, value: Any) -> None:
        with self._cond:
            if self._closed:
                raise RuntimeError("cannot publish to a closed channel")
            self._value = value
            self._version += 1
            self._cond.notify_all()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def wait_for_change(self, version: int, timeout: float | None = None) -> tuple[int, Any]:
        """Block until a publish newer than ``version`` (or close, or timeout)."""
        with self._cond:
            self._cond.wait_for(lambda: self._version > version or self._closed, timeout)
            return self._version, self._value

    def subscribe(self, timeout: float | None = None) -> Iterator[Any]:
        """Yield the current value, then each newer latest value until closed.

        With a timeout, iteration also ends when nothing new arrives in time.
        """
        with self._cond:
            version, value = self._version, self._value
        yield value
        while True:
            new_version, value = self.wait_for_change(version, timeout)
            if new_version == version:
                return
            version = new_version
            yield value
