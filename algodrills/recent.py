"""Counting requests within a sliding time window."""

from __future__ import annotations

from collections import deque


class RecentCounter:
    """Counts pings made within the last 3000 time units, inclusive."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._pings: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a ping at time ``t`` and return the pings in ``[t - 3000, t]``."""
        self._pings.append(t)
        while self._pings and self._pings[0] < t - self.WINDOW:
            self._pings.popleft()
        return len(self._pings)