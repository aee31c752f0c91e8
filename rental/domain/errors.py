"""Domain exceptions for the reservation lifecycle."""

from enum import Enum


class ErrorKind(str, Enum):
    """Error categories the API boundary translates into transport codes."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"
    INVALID_INPUT = "INVALID_INPUT"


class DomainError(Exception):
    """Base class for every domain error."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Not found ===


class ReservationNotFoundError(DomainError):
    """The reservation does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, reservation_id: str):
        super().__init__(
            message=f"Reservation not found: {reservation_id}",
            code="RESERVATION_NOT_FOUND",
        )
        self.reservation_id = reservation_id


class CustomerNotFoundError(DomainError):
    """The customer does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, customer_id: str):
        super().__init__(
            message=f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class VehicleNotFoundError(DomainError):
    """The vehicle does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, vehicle_id: str):
        super().__init__(
            message=f"Vehicle not found: {vehicle_id}",
            code="VEHICLE_NOT_FOUND",
        )
        self.vehicle_id = vehicle_id


# === Invalid state ===


class InvalidReservationStatusError(DomainError):
    """The reservation status does not allow the operation."""

    kind = ErrorKind.INVALID_STATE

    def __init__(self, current_status: str, expected_status: str | list[str], operation: str):
        expected = expected_status if isinstance(expected_status, str) else ", ".join(expected_status)
        super().__init__(
            message=f"Cannot {operation} reservation: current status '{current_status}', "
            f"expected '{expected}'",
            code="INVALID_RESERVATION_STATUS",
        )
        self.current_status = current_status
        self.expected_status = expected_status
        self.operation = operation


# === Conflict ===


class VehicleUnavailableError(DomainError):
    """The vehicle already has an active reservation overlapping the range."""

    kind = ErrorKind.CONFLICT

    def __init__(self, vehicle_id: str, start_date: object, end_date: object):
        super().__init__(
            message=f"Vehicle {vehicle_id} is not available from {start_date} to {end_date}",
            code="VEHICLE_UNAVAILABLE",
        )
        self.vehicle_id = vehicle_id


class CustomerNotEligibleError(DomainError):
    """The customer cannot make reservations (inactive or under age)."""

    kind = ErrorKind.CONFLICT

    def __init__(self, customer_id: str):
        super().__init__(
            message=f"Customer {customer_id} is not eligible to make reservations",
            code="CUSTOMER_NOT_ELIGIBLE",
        )
        self.customer_id = customer_id


class OptimisticLockError(DomainError):
    """Concurrent update detected on a reservation."""

    kind = ErrorKind.CONFLICT

    def __init__(self, reservation_id: str, expected_version: int, actual_version: int | None):
        super().__init__(
            message=f"Concurrent update on reservation {reservation_id}: "
            f"expected version {expected_version}, found {actual_version}",
            code="OPTIMISTIC_LOCK_ERROR",
        )
        self.reservation_id = reservation_id
        self.expected_version = expected_version
        self.actual_version = actual_version


# === Invalid input ===


class ValidationError(DomainError):
    """Input data failed validation."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed for '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class InvalidDateRangeError(DomainError):
    """Malformed date range (end not after start)."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")
