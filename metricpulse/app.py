"""Command that records CPU, memory and counter metrics to a log file."""

from __future__ import annotations

import argparse
import random
import threading
import time

from .counter import CounterMetric
from .cpu import CpuPerformanceMetric
from .memory import MemoryUsageMetric
from .writer import MetricsWriter

_GENERATOR_PERIOD = 0.05


def _positive(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _non_negative(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="metricpulse",
        description="Record CPU, memory and divisible-by-3 metrics to a log file.",
    )
    parser.add_argument("--log", default="system_metrics.log", help="metrics log file")
    parser.add_argument(
        "--duration", type=_non_negative, default=10.0, help="seconds to run"
    )
    parser.add_argument(
        "--write-interval",
        type=_positive,
        default=1.0,
        help="seconds between log lines",
    )
    return parser.parse_args(argv)


def _generate_numbers(counter: CounterMetric, stop: threading.Event) -> None:
    rng = random.Random()
    while not stop.is_set():
        counter.consider_number(rng.randint(1, 1000))
        stop.wait(_GENERATOR_PERIOD)


def main(argv: list[str] | None = None) -> int:
    """Run the metrics demo and return the exit status."""
    args = _parse_args(argv)

    with CpuPerformanceMetric("cpu_performance_score", 0.1) as cpu:
        memory = MemoryUsageMetric("memory_usage_mb")
        counter = CounterMetric("divisible_by_3")

        writer = MetricsWriter(args.log, args.write_interval)
        for metric in (cpu, memory, counter):
            writer.register_metric(metric)

        with writer:
            stop = threading.Event()
            generator = threading.Thread(
                target=_generate_numbers, args=(counter, stop), daemon=True
            )
            generator.start()
            print(
                "Generating numbers and counting how many are divisible by 3 "
                f"({args.duration:g} seconds). See {args.log}",
                flush=True,
            )
            time.sleep(args.duration)
            stop.set()
            generator.join()
            print("Stopping measurement...", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())