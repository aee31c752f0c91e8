from functools import lru_cache
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from rental.api.deps import get_sessionmaker
from rental.application.interfaces.clock import Clock, SystemClock
from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.id_generator import IdGenerator, UUIDGenerator
from rental.application.interfaces.job_dispatcher import JobDispatcher
from rental.application.interfaces.notification_gateway import NotificationGateway
from rental.application.interfaces.payment_repo import PaymentRepo
from rental.application.interfaces.qr_encoder import QrCodeEncoder
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.application.services.availability import AvailabilityChecker
from rental.application.services.notifier import ReservationNotifier
from rental.application.use_cases import (
    CancelReservationUseCase,
    CompleteReservationUseCase,
    ConfirmReservationUseCase,
    CreateReservationUseCase,
    GenerateQrCodeUseCase,
    GetReservationBalanceUseCase,
    GetReservationUseCase,
    ListCustomerReservationsUseCase,
    RecordPaymentUseCase,
    SearchReservationsUseCase,
    StartReservationUseCase,
)
from rental.config import Settings, get_settings
from rental.infrastructure.db.repositories import (
    CustomerRepoSQL,
    PaymentRepoSQL,
    ReservationRepoSQL,
    VehicleRepoSQL,
)
from rental.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from rental.infrastructure.demo_data import seed_in_memory
from rental.infrastructure.gateways.notification_http import HttpNotificationGateway
from rental.infrastructure.gateways.qr_code_encoder import SegnoQrCodeEncoder
from rental.infrastructure.in_memory import (
    InMemoryCustomerRepo,
    InMemoryPaymentRepo,
    InMemoryReservationRepo,
    InMemoryVehicleRepo,
    LoggingNotificationGateway,
    NoopTransactionManager,
)


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with get_sessionmaker()() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle() -> dict[str, Any]:
    customer_repo = InMemoryCustomerRepo()
    vehicle_repo = InMemoryVehicleRepo()
    seed_in_memory(customer_repo, vehicle_repo)
    return {
        "reservation_repo": InMemoryReservationRepo(),
        "customer_repo": customer_repo,
        "vehicle_repo": vehicle_repo,
        "payment_repo": InMemoryPaymentRepo(),
        "tx_manager": NoopTransactionManager(),
    }


@lru_cache(maxsize=1)
def _shared_services() -> dict[str, Any]:
    settings = get_settings()
    if settings.notification_base_url:
        notification_gateway: NotificationGateway = HttpNotificationGateway(
            base_url=settings.notification_base_url,
            api_key=settings.notification_api_key,
            timeout_seconds=settings.notification_timeout_seconds,
        )
    else:
        notification_gateway = LoggingNotificationGateway()
    return {
        "clock": SystemClock(),
        "id_generator": UUIDGenerator(),
        "qr_encoder": SegnoQrCodeEncoder(scale=settings.qr_scale),
        "notification_gateway": notification_gateway,
    }


def get_dispatcher(request: Request) -> JobDispatcher:
    return request.app.state.notification_dispatcher


def build_use_cases(
    reservation_repo: ReservationRepo,
    customer_repo: CustomerRepo,
    vehicle_repo: VehicleRepo,
    payment_repo: PaymentRepo,
    tx_manager: TransactionManager,
    notification_gateway: NotificationGateway,
    dispatcher: JobDispatcher,
    qr_encoder: QrCodeEncoder,
    clock: Clock,
    id_generator: IdGenerator,
) -> dict[str, Any]:
    notifier = ReservationNotifier(
        customer_repo=customer_repo,
        vehicle_repo=vehicle_repo,
        gateway=notification_gateway,
        dispatcher=dispatcher,
    )
    search = SearchReservationsUseCase(
        reservation_repo=reservation_repo,
        customer_repo=customer_repo,
        vehicle_repo=vehicle_repo,
    )
    return {
        "create_reservation": CreateReservationUseCase(
            reservation_repo=reservation_repo,
            customer_repo=customer_repo,
            vehicle_repo=vehicle_repo,
            availability_checker=AvailabilityChecker(reservation_repo),
            transaction_manager=tx_manager,
            id_generator=id_generator,
            clock=clock,
        ),
        "confirm_reservation": ConfirmReservationUseCase(
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            notifier=notifier,
            clock=clock,
        ),
        "start_reservation": StartReservationUseCase(
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "complete_reservation": CompleteReservationUseCase(
            reservation_repo=reservation_repo,
            vehicle_repo=vehicle_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "cancel_reservation": CancelReservationUseCase(
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            notifier=notifier,
            clock=clock,
        ),
        "generate_qr_code": GenerateQrCodeUseCase(
            reservation_repo=reservation_repo,
            customer_repo=customer_repo,
            vehicle_repo=vehicle_repo,
            qr_encoder=qr_encoder,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "get_reservation": GetReservationUseCase(reservation_repo=reservation_repo),
        "search_reservations": search,
        "list_customer_reservations": ListCustomerReservationsUseCase(
            customer_repo=customer_repo,
            search=search,
        ),
        "record_payment": RecordPaymentUseCase(
            reservation_repo=reservation_repo,
            payment_repo=payment_repo,
            transaction_manager=tx_manager,
            notifier=notifier,
            id_generator=id_generator,
            clock=clock,
        ),
        "get_reservation_balance": GetReservationBalanceUseCase(
            reservation_repo=reservation_repo,
            payment_repo=payment_repo,
        ),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
    dispatcher: JobDispatcher = Depends(get_dispatcher),
) -> dict[str, Any]:
    services = _shared_services()

    if settings.use_in_memory:
        bundle = _in_memory_bundle()
        return build_use_cases(
            reservation_repo=bundle["reservation_repo"],
            customer_repo=bundle["customer_repo"],
            vehicle_repo=bundle["vehicle_repo"],
            payment_repo=bundle["payment_repo"],
            tx_manager=bundle["tx_manager"],
            dispatcher=dispatcher,
            **services,
        )

    if not session:
        raise RuntimeError("DB session not available")

    return build_use_cases(
        reservation_repo=ReservationRepoSQL(session),
        customer_repo=CustomerRepoSQL(session),
        vehicle_repo=VehicleRepoSQL(session),
        payment_repo=PaymentRepoSQL(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        dispatcher=dispatcher,
        **services,
    )
