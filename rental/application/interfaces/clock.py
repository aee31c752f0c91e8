"""Clock port - abstraction over system time."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone


class Clock(ABC):
    """
    Port for the system clock.

    Lets tests inject a fixed time for deterministic timestamps and
    eligibility checks.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Current instant.

        Returns:
            Timezone-aware UTC datetime.
        """
        raise NotImplementedError

    def today(self) -> date:
        """Current calendar date in UTC."""
        return self.now().date()


class SystemClock(Clock):
    """Real implementation backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """Frozen clock for tests; moves only through set_time or advance."""

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def advance(self, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> None:
        """Move the fixed time forward."""
        delta = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        self._fixed_time = self._fixed_time + delta
