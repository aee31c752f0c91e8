"""DTOs (Data Transfer Objects) of the application layer."""

from rental.application.dtos.payment_dto import ReservationBalanceDTO
from rental.application.dtos.reservation_dto import (
    PageDTO,
    QrCodeDTO,
    ReservationSearchCriteria,
    ReservationSortField,
    ReservationSummaryDTO,
)

__all__ = [
    # Reservation DTOs
    "ReservationSearchCriteria",
    "ReservationSortField",
    "ReservationSummaryDTO",
    "PageDTO",
    "QrCodeDTO",
    # Payment DTOs
    "ReservationBalanceDTO",
]
