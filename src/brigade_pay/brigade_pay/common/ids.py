from __future__ import annotations

import time


class MonotonicIdGenerator:
    """Creation-time identifiers (epoch milliseconds as text).

    Two records created within the same millisecond get consecutive values.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last = 0

    def next_id(self) -> str:
        value = max(int(self._clock()), self._last + 1)
        self._last = value
        return str(value)
