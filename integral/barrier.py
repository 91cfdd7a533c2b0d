"""A reusable thread barrier."""

from __future__ import annotations

import threading


class Barrier:
    """Blocks arriving threads until the expected number have arrived."""

    def __init__(self, expected: int) -> None:
        self._condition = threading.Condition()
        self._total = 0
        self._current = 0
        self._phase = 0
        self.reset(expected)

    def reset(self, expected: int) -> None:
        if expected <= 0:
            raise ValueError("expected must be positive")
        with self._condition:
            if self._current != self._total:
                raise RuntimeError("cannot reset a barrier while threads are waiting")
            self._total = expected
            self._current = expected

    def arrive_and_wait(self) -> None:
        with self._condition:
            self._current -= 1
            if self._current > 0:
                phase = self._phase
                self._condition.wait_for(lambda: self._phase != phase)
            else:
                self._current = self._total
                self._phase += 1
                self._condition.notify_all()

    def is_cleared(self) -> bool:
        with self._condition:
            return self._current == self._total