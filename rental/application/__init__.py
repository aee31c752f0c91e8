"""
Application layer - reservation lifecycle.

Holds the use cases, DTOs and ports. Orchestrates the domain and defines
the contracts infrastructure adapters implement.

Layout:
- use_cases/: one class per operation
- services/: availability, search and notification helpers
- dtos/: data transfer objects
- interfaces/: ports (contracts for adapters)
"""

from rental.application.dtos import (
    PageDTO,
    QrCodeDTO,
    ReservationBalanceDTO,
    ReservationSearchCriteria,
    ReservationSortField,
    ReservationSummaryDTO,
)
from rental.application.interfaces import (
    Clock,
    CustomerRepo,
    FakeClock,
    FakeIdGenerator,
    IdGenerator,
    JobDispatcher,
    NotificationGateway,
    PaymentRepo,
    QrCodeEncoder,
    ReservationNotice,
    ReservationRepo,
    SystemClock,
    TransactionManager,
    UUIDGenerator,
    VehicleRepo,
)

__all__ = [
    # DTOs
    "ReservationSearchCriteria",
    "ReservationSortField",
    "ReservationSummaryDTO",
    "PageDTO",
    "QrCodeDTO",
    "ReservationBalanceDTO",
    # Interfaces - Repositories
    "ReservationRepo",
    "CustomerRepo",
    "VehicleRepo",
    "PaymentRepo",
    # Interfaces - Gateways
    "NotificationGateway",
    "ReservationNotice",
    "QrCodeEncoder",
    # Interfaces - Infrastructure
    "TransactionManager",
    "JobDispatcher",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "IdGenerator",
    "UUIDGenerator",
    "FakeIdGenerator",
]
