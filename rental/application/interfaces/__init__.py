"""Ports of the application layer."""

from rental.application.interfaces.clock import Clock, FakeClock, SystemClock
from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.id_generator import FakeIdGenerator, IdGenerator, UUIDGenerator
from rental.application.interfaces.job_dispatcher import Job, JobDispatcher
from rental.application.interfaces.notification_gateway import (
    NotificationGateway,
    ReservationNotice,
)
from rental.application.interfaces.payment_repo import PaymentRepo
from rental.application.interfaces.qr_encoder import QrCodeEncoder
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.interfaces.vehicle_repo import VehicleRepo

__all__ = [
    # Repositories
    "ReservationRepo",
    "CustomerRepo",
    "VehicleRepo",
    "PaymentRepo",
    # Gateways
    "NotificationGateway",
    "ReservationNotice",
    "QrCodeEncoder",
    # Infrastructure
    "TransactionManager",
    "JobDispatcher",
    "Job",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "IdGenerator",
    "UUIDGenerator",
    "FakeIdGenerator",
]
