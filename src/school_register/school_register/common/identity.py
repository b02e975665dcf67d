from __future__ import annotations

import time
from typing import Callable, Optional


def _millis() -> int:
    return time.time_ns() // 1_000_000


class IdentityGenerator:
    """Issue record ids as millisecond timestamps.

    Two ids requested within the same millisecond (or after the clock moves
    backwards) fall back to `last + 1`, so every id handed out by one generator
    is distinct and increasing.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _millis
        self._last = 0

    def next(self) -> str:
        try:
            candidate = int(self._clock())
        except (TypeError, ValueError, OverflowError):
            candidate = 0
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)

    __call__ = next
