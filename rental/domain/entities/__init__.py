"""Entities of the reservation domain."""

from rental.domain.entities.customer import Customer
from rental.domain.entities.payment import (
    Payment,
    PaymentMethod,
    PaymentStatus,
    is_fully_paid,
    total_paid,
)
from rental.domain.entities.reservation import (
    CANCELLABLE_STATUSES,
    TERMINAL_STATUSES,
    Reservation,
    ReservationStatus,
)
from rental.domain.entities.vehicle import Vehicle

__all__ = [
    # Reservation
    "Reservation",
    "ReservationStatus",
    "TERMINAL_STATUSES",
    "CANCELLABLE_STATUSES",
    # Payment
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "total_paid",
    "is_fully_paid",
    # Collaborators
    "Customer",
    "Vehicle",
]
