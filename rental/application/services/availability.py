from datetime import date
from typing import Iterable

from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.domain.entities.reservation import Reservation
from rental.domain.value_objects.date_range import DateRange


def find_overlapping(
    reservations: Iterable[Reservation],
    period: DateRange,
    exclude_reservation_id: str | None = None,
) -> list[Reservation]:
    """Active reservations whose [start, end) range overlaps period."""
    return [
        r
        for r in reservations
        if r.blocks_vehicle
        and r.id != exclude_reservation_id
        and r.period.overlaps_with(period)
    ]


class AvailabilityChecker:
    """Read-only check of a vehicle's calendar against a requested range."""

    def __init__(self, reservation_repo: ReservationRepo) -> None:
        self._reservation_repo = reservation_repo

    async def is_available(
        self,
        vehicle_id: str,
        start_date: date,
        end_date: date,
        exclude_reservation_id: str | None = None,
    ) -> bool:
        """
        True iff no non-cancelled reservation of the vehicle overlaps the range.

        Raises:
            InvalidDateRangeError: If start_date is not before end_date.
        """
        period = DateRange(start=start_date, end=end_date)
        existing = await self._reservation_repo.list_active_by_vehicle(vehicle_id)
        return not find_overlapping(existing, period, exclude_reservation_id)
