"""DTOs for reservation queries."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from rental.domain.entities.reservation import ReservationStatus

T = TypeVar("T")


class ReservationSortField(str, Enum):
    """Fields a reservation listing can be ordered by."""

    START_DATE = "start_date"
    TOTAL_AMOUNT = "total_amount"
    CREATED_AT = "created_at"


@dataclass
class ReservationSearchCriteria:
    """Filters, ordering and pagination for a reservation search."""

    # Filters
    search_term: str | None = None
    status: ReservationStatus | None = None
    customer_id: str | None = None
    start_date_from: date | None = None
    start_date_to: date | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None

    # Ordering
    sort_by: ReservationSortField = ReservationSortField.CREATED_AT
    sort_descending: bool = True

    # Pagination (1-indexed)
    page: int = 1
    page_size: int = 10


@dataclass
class ReservationSummaryDTO:
    """Row of a reservation listing."""

    id: str
    customer_id: str
    customer_name: str
    vehicle_id: str
    vehicle_info: str
    start_date: date
    end_date: date
    rental_days: int
    total_amount: Decimal
    status: str
    created_at: datetime | None


@dataclass
class PageDTO(Generic[T]):
    """One page of a paginated result."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages


@dataclass
class QrCodeDTO:
    reservation_id: str
    qr_code_base64: str
