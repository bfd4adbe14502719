"""Command that simulates user clicks and logs the robots detected."""

from __future__ import annotations

import argparse
import random
import threading
import time

from .click_tracker import ClickTracker
from .robot_count import RobotCount
from .writer import MetricsWriter


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _positive(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="metricpulse-robots",
        description="Simulate user clicks and log how many robots are detected.",
    )
    parser.add_argument("--log", default="robot_metric_test.log", help="metrics log file")
    parser.add_argument("--users", type=_positive_int, default=15, help="number of users")
    parser.add_argument("--clicks", type=_non_negative_int, default=500, help="total clicks")
    parser.add_argument(
        "--robot-clicks", type=_positive_int, default=5, help="clicks that make a robot"
    )
    parser.add_argument(
        "--robot-interval",
        type=_positive,
        default=0.1,
        help="seconds within which the robot clicks must fall",
    )
    parser.add_argument(
        "--write-interval", type=_positive, default=1.0, help="seconds between log lines"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def _generate_clicks(
    tracker: ClickTracker, users: list[str], total: int, rng: random.Random
) -> int:
    generated = 0
    while generated < total:
        batch = min(rng.randint(1, len(users)), total - generated)
        for _ in range(batch):
            tracker.register_click(rng.choice(users))
            generated += 1
        time.sleep(rng.randint(40, 60) / 1000)
    print(f"Click generation finished. Total clicks: {generated}", flush=True)
    return generated


def main(argv: list[str] | None = None) -> int:
    """Run the click simulation and return the exit status."""
    args = _parse_args(argv)

    tracker = ClickTracker(args.robot_interval, args.robot_clicks)
    robot_metric = RobotCount("robots_detected_per_sec", tracker)
    users = [f"user_{i}" for i in range(args.users)]

    writer = MetricsWriter(args.log, args.write_interval)
    writer.register_metric(robot_metric)

    with writer:
        rng = random.Random(args.seed)
        clicker = threading.Thread(
            target=_generate_clicks, args=(tracker, users, args.clicks, rng)
        )
        clicker.start()
        clicker.join()

        print("All clicks generated. Waiting for final metric logs...", flush=True)
        time.sleep(args.write_interval * 2)
        print(f"Simulation complete. Check '{args.log}' for results.", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())