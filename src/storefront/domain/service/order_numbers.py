"""Domain service: human-readable order identifiers.

Identifiers look like ``ORD-1718000000000`` (milliseconds since the
epoch).  Within one generator they are strictly increasing, even when
two checkouts land in the same millisecond.
"""

from __future__ import annotations

import time
from typing import Callable

ORDER_ID_PREFIX = "ORD-"


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class OrderNumberGenerator:

    def __init__(
        self,
        clock: Callable[[], int] = _epoch_millis,
        prefix: str = ORDER_ID_PREFIX,
    ) -> None:
        self._clock = clock
        self._prefix = prefix
        self._last = 0

    def next_id(self) -> str:
        stamp = max(self._clock(), self._last + 1)
        self._last = stamp
        return f"{self._prefix}{stamp}"
