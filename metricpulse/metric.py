"""The interface shared by every metric the writer can record."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Metric(ABC):
    """A named value that is read and reset once per reporting period.

    Subclasses set ``name`` and implement :meth:`get_value_and_reset`.
    """

    name: str

    @abstractmethod
    def get_value_and_reset(self) -> str:
        """Return the current value as text and start a new period."""