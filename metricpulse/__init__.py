"""Periodic metric collection written to a timestamped log file, with CPU, memory, counter and click-robot metrics."""

__version__ = "0.1.0"