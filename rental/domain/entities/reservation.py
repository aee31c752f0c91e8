"""Reservation entity - aggregate root of the domain."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from rental.domain import pricing
from rental.domain.errors import InvalidReservationStatusError, ValidationError
from rental.domain.value_objects.date_range import DateRange


class ReservationStatus(str, Enum):
    """Lifecycle states of a reservation."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = frozenset({ReservationStatus.COMPLETED, ReservationStatus.CANCELLED})

# Cancelling a rental that is already on the road is not allowed.
CANCELLABLE_STATUSES = (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)


@dataclass
class Reservation:
    """
    Booking of one vehicle by one customer for a date range.

    Mutated only through the transition methods below; each one validates
    the current status and refreshes ``updated_at``. ``daily_rate`` and
    ``total_amount`` are captured at creation and never recomputed.
    """

    # Identifiers
    id: str
    customer_id: str
    vehicle_id: str

    # Rental period
    start_date: date
    end_date: date

    # Financials
    daily_rate: Decimal
    total_amount: Decimal

    status: ReservationStatus = ReservationStatus.PENDING
    qr_code: str | None = None
    notes: str | None = None
    final_mileage: int | None = None

    # Concurrency control
    lock_version: int = 0

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        reservation_id: str,
        customer_id: str,
        vehicle_id: str,
        start_date: date,
        end_date: date,
        daily_rate: Decimal,
        now: datetime,
        notes: str | None = None,
    ) -> "Reservation":
        """Factory for a new PENDING reservation with its total computed."""
        period = DateRange(start=start_date, end=end_date)
        rate = pricing.to_money(daily_rate)
        return cls(
            id=reservation_id,
            customer_id=customer_id,
            vehicle_id=vehicle_id,
            start_date=period.start,
            end_date=period.end,
            daily_rate=rate,
            total_amount=pricing.compute_total(rate, period.start, period.end),
            status=ReservationStatus.PENDING,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    # === Computed properties ===

    @property
    def period(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    @property
    def rental_days(self) -> int:
        return pricing.rental_days(self.start_date, self.end_date)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def blocks_vehicle(self) -> bool:
        """Whether this reservation counts against the vehicle's availability."""
        return self.status != ReservationStatus.CANCELLED

    @property
    def can_be_cancelled(self) -> bool:
        return self.status in CANCELLABLE_STATUSES

    # === Transitions ===

    def confirm(self, now: datetime) -> None:
        """PENDING -> CONFIRMED."""
        self._require(ReservationStatus.PENDING, "confirm")
        self._move_to(ReservationStatus.CONFIRMED, now)

    def start(self, now: datetime) -> None:
        """CONFIRMED -> IN_PROGRESS."""
        self._require(ReservationStatus.CONFIRMED, "start")
        self._move_to(ReservationStatus.IN_PROGRESS, now)

    def complete(self, final_mileage: int, now: datetime) -> None:
        """IN_PROGRESS -> COMPLETED, recording the odometer at return."""
        self.check_can_complete(final_mileage)
        self.final_mileage = final_mileage
        self._move_to(ReservationStatus.COMPLETED, now)

    def check_can_complete(self, final_mileage: int) -> None:
        """Raise unless complete(final_mileage) would succeed; changes nothing."""
        if self.status != ReservationStatus.IN_PROGRESS:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=ReservationStatus.IN_PROGRESS.value,
                operation="complete (reservation must be CONFIRMED and then started)",
            )
        if final_mileage < 0:
            raise ValidationError("final_mileage", "must be zero or greater")

    def cancel(self, now: datetime) -> None:
        """PENDING | CONFIRMED -> CANCELLED."""
        if not self.can_be_cancelled:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=[s.value for s in CANCELLABLE_STATUSES],
                operation="cancel",
            )
        self._move_to(ReservationStatus.CANCELLED, now)

    def set_qr_code(self, payload: str, now: datetime) -> None:
        """Store (or replace) the QR payload; status is unchanged."""
        if self.is_terminal:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=[
                    s.value for s in ReservationStatus if s not in TERMINAL_STATUSES
                ],
                operation="set QR code on",
            )
        self.qr_code = payload
        self.updated_at = now

    def _require(self, expected: ReservationStatus, operation: str) -> None:
        if self.status != expected:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=expected.value,
                operation=operation,
            )

    def _move_to(self, status: ReservationStatus, now: datetime) -> None:
        self.status = status
        self.updated_at = now
