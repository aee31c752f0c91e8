"""In-memory adapters: the default backend and the test doubles."""

from rental.infrastructure.in_memory.customer_repo import InMemoryCustomerRepo
from rental.infrastructure.in_memory.notification_gateway import LoggingNotificationGateway
from rental.infrastructure.in_memory.payment_repo import InMemoryPaymentRepo
from rental.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from rental.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from rental.infrastructure.in_memory.vehicle_repo import InMemoryVehicleRepo

__all__ = [
    # Repositories
    "InMemoryReservationRepo",
    "InMemoryCustomerRepo",
    "InMemoryVehicleRepo",
    "InMemoryPaymentRepo",
    # Gateways
    "LoggingNotificationGateway",
    # Infrastructure
    "NoopTransactionManager",
]
