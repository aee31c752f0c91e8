"""
Domain layer - car rental reservation lifecycle.

Pure business logic with no framework dependencies.

Layout:
- entities/: Reservation (aggregate root), Payment, Customer, Vehicle
- value_objects/: DateRange
- pricing.py: rental day count and totals
- errors.py: typed domain errors tagged with an ErrorKind
"""

from rental.domain.entities import (
    Customer,
    Payment,
    PaymentMethod,
    PaymentStatus,
    Reservation,
    ReservationStatus,
    Vehicle,
)
from rental.domain.errors import (
    CustomerNotEligibleError,
    CustomerNotFoundError,
    DomainError,
    ErrorKind,
    InvalidDateRangeError,
    InvalidReservationStatusError,
    OptimisticLockError,
    ReservationNotFoundError,
    ValidationError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from rental.domain.value_objects import DateRange

__all__ = [
    # Entities
    "Reservation",
    "ReservationStatus",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "Customer",
    "Vehicle",
    # Value Objects
    "DateRange",
    # Errors
    "DomainError",
    "ErrorKind",
    "ReservationNotFoundError",
    "CustomerNotFoundError",
    "VehicleNotFoundError",
    "InvalidReservationStatusError",
    "VehicleUnavailableError",
    "CustomerNotEligibleError",
    "OptimisticLockError",
    "ValidationError",
    "InvalidDateRangeError",
]
