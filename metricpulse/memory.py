"""A metric reporting the resident memory of the current process."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .metric import Metric

_STATUS_PATH = "/proc/self/status"


def _parse_vm_rss(lines: Iterable[str]) -> int:
    """Return the VmRSS value in kB from status lines, or 0 if absent."""
    for line in lines:
        if line.startswith("VmRSS:"):
            fields = line.split()
            try:
                return int(fields[1])
            except (IndexError, ValueError):
                return 0
    return 0


def read_memory_usage_kb() -> int | None:
    """Return the resident set size in kB, or None where unsupported."""
    if not sys.platform.startswith("linux"):
        return None
    try:
        with open(_STATUS_PATH, encoding="utf-8") as status:
            return _parse_vm_rss(status)
    except OSError:
        return 0


class MemoryUsageMetric(Metric):
    """Reports the current resident memory of the process in kB."""

    def __init__(self, name: str = "memory_usage_mb") -> None:
        self.name = name

    def get_value_and_reset(self) -> str:
        memory_kb = read_memory_usage_kb()
        if memory_kb is None:
            print("MemoryUsageMetric not supported on this platform.", file=sys.stderr)
            return "N/A"
        return str(memory_kb)