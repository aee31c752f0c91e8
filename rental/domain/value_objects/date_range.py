"""Value Object DateRange - half-open calendar date range of a rental."""

from dataclasses import dataclass
from datetime import date

from rental.domain.errors import InvalidDateRangeError


@dataclass(frozen=True)
class DateRange:
    """
    Immutable [start, end) range of calendar dates.

    The end date is exclusive: a rental returned on the 15th frees the
    vehicle for a rental picked up on the 15th.

    Attributes:
        start: Pickup date.
        end: Return date.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidDateRangeError(
                f"end_date must be after start_date: {self.start} >= {self.end}"
            )

    @property
    def days(self) -> int:
        """Number of calendar days between start and end."""
        return (self.end - self.start).days

    def overlaps_with(self, other: "DateRange") -> bool:
        """True if both ranges share at least one day."""
        return self.start < other.end and other.start < self.end

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
