"""Time sources that can be swapped out in tests."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """A source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""


class RealClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class MockClock(Clock):
    """Clock that returns a fixed time until advanced."""

    current_time: datetime

    def now(self) -> datetime:
        return self.current_time

    def advance(self, delta: timedelta) -> None:
        """Move the clock by *delta*, which may be negative."""
        self.current_time = self.current_time + delta