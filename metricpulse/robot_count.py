"""A metric reporting how many robots were banned since the last read."""

from __future__ import annotations

from .click_tracker import ClickTracker
from .metric import Metric


class RobotCount(Metric):
    """Reports the users a :class:`ClickTracker` banned in the last period."""

    def __init__(self, name: str, tracker: ClickTracker) -> None:
        self.name = name
        self.tracker = tracker

    def get_value_and_reset(self) -> str:
        return str(self.tracker.get_newly_banned_and_reset())