"""Periodic writing of metric values to a log file."""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime

from .metric import Metric


def get_timestamp() -> str:
    """Return local time as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"


class MetricsWriter:
    """Appends one line with every registered metric per write interval.

    Each line is a timestamp followed by `` "name" value`` for every metric,
    in registration order. The file is truncated on construction.
    ``write_interval`` is in seconds. Stopping writes one final line.
    """

    def __init__(self, filename: str | os.PathLike[str], write_interval: float) -> None:
        self.filename = os.fspath(filename)
        self.write_interval = write_interval
        self._metrics: list[Metric] = []
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        with open(self.filename, "w", encoding="utf-8"):
            pass

    def register_metric(self, metric: Metric) -> None:
        """Add a metric to every following line."""
        self._metrics.append(metric)

    def start(self) -> None:
        """Start writing on a background thread."""
        if self._thread is not None:
            raise RuntimeError("metrics writer already started")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="metrics-writer", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop writing and wait for the background thread to finish."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()

    def __enter__(self) -> MetricsWriter:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        try:
            log = open(self.filename, "a", encoding="utf-8")
        except OSError:
            print(f"Error: Could not open metrics file: {self.filename}", file=sys.stderr)
            return
        with log:
            while not self._stop.is_set():
                self._stop.wait(self.write_interval)
                metrics = tuple(self._metrics)
                if not metrics:
                    continue
                parts = [get_timestamp()]
                parts.extend(f' "{metric.name}" {metric.get_value_and_reset()}' for metric in metrics)
                log.write("".join(parts) + "\n")
                log.flush()