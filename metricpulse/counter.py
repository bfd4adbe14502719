"""A metric counting the numbers divisible by three."""

from __future__ import annotations

import threading

from .metric import Metric


class CounterMetric(Metric):
    """Counts how many of the numbers it is shown are divisible by 3."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._count = 0
        self._lock = threading.Lock()

    def consider_number(self, value: int) -> None:
        """Count ``value`` if it is divisible by 3."""
        if value % 3 == 0:
            with self._lock:
                self._count += 1

    def get_value_and_reset(self) -> str:
        with self._lock:
            value, self._count = self._count, 0
        return str(value)