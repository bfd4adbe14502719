"""Per-user click tracking that bans users clicking like robots."""

from __future__ import annotations

import threading
from collections import deque
from time import monotonic


class ClickTracker:
    """Counts clicks per user and bans users that click too fast.

    A user is banned as a robot once ``robot_clicks`` of their clicks fall
    within ``robot_interval`` seconds of each other. Clicks from banned users
    are ignored. All methods are safe to call from several threads.
    """

    def __init__(self, robot_interval: float, robot_clicks: int) -> None:
        self.robot_interval = robot_interval
        self.robot_clicks = robot_clicks
        self._events: dict[str, deque[float]] = {}
        self._banned: set[str] = set()
        self._clicks = 0
        self._newly_banned = 0
        self._lock = threading.Lock()

    @property
    def clicks(self) -> int:
        """Number of clicks accepted from users who were not banned."""
        with self._lock:
            return self._clicks

    def register_click(self, user_id: str, time: float | None = None) -> None:
        """Record a click by ``user_id`` at ``time`` (monotonic seconds, default now)."""
        if time is None:
            time = monotonic()
        with self._lock:
            if user_id in self._banned:
                return
            self._clicks += 1

            events = self._events.setdefault(user_id, deque())
            cutoff = time - self.robot_interval
            while events and events[0] < cutoff:
                events.popleft()
            events.append(time)

            if len(events) >= self.robot_clicks:
                self._banned.add(user_id)
                self._newly_banned += 1
                del self._events[user_id]

    def count_robots(self) -> int:
        """Return how many users have been banned."""
        with self._lock:
            return len(self._banned)

    def count_users(self) -> int:
        """Return how many users are being tracked and not banned."""
        with self._lock:
            return len(self._events)

    def get_newly_banned_and_reset(self) -> int:
        """Return the number of bans since the last call and reset it."""
        with self._lock:
            value, self._newly_banned = self._newly_banned, 0
        return value