"""A metric estimating CPU throughput by timing a fixed workload."""

from __future__ import annotations

import math
import threading
import time

from .metric import Metric


def _workload() -> float:
    """Run one unit of floating-point work."""
    val = 1.0
    for i in range(1000):
        val = math.sqrt(val + 0.001 * i)
        val = math.sin(val) * math.cos(val)
    return val


class CpuPerformanceMetric(Metric):
    """Reports how many workload units completed in the last interval.

    ``interval`` is the measuring period in seconds. Measuring happens on a
    background thread between :meth:`start_measuring` and
    :meth:`stop_measuring`; the object can also be used as a context manager.
    """

    def __init__(self, name: str, interval: float = 0.1) -> None:
        self.name = name
        self.interval = interval
        self._ops = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether the background measurement is active."""
        return self._thread is not None and not self._stop.is_set()

    def start_measuring(self) -> None:
        """Start measuring; does nothing if already running."""
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._measure, name=f"cpu-metric-{self.name}", daemon=True
        )
        self._thread.start()

    def stop_measuring(self) -> None:
        """Stop measuring and wait for the background thread to finish."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def get_value_and_reset(self) -> str:
        with self._lock:
            value, self._ops = self._ops, 0
        return str(value)

    def __enter__(self) -> CpuPerformanceMetric:
        self.start_measuring()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_measuring()

    def _measure(self) -> None:
        while not self._stop.is_set():
            loop_start = time.perf_counter()
            ops = 0
            while not self._stop.is_set():
                _workload()
                ops += 1
                if time.perf_counter() - loop_start >= self.interval:
                    break
            with self._lock:
                self._ops = ops
            elapsed = time.perf_counter() - loop_start
            if elapsed < self.interval:
                self._stop.wait(self.interval - elapsed)