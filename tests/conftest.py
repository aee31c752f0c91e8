"""
Shared fixtures.

- In-memory stack wired the way the API wires it, with a fixed clock and
  sequential ids
- aiosqlite in-memory database for the SQL repositories
- FastAPI TestClient over the in-memory backend
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from rental.api.dependencies import _in_memory_bundle, _shared_services, build_use_cases
from rental.application.interfaces.clock import FakeClock
from rental.application.interfaces.id_generator import FakeIdGenerator
from rental.config import Settings
from rental.infrastructure.db.engine import build_engine, build_sessionmaker, create_tables
from rental.infrastructure.in_memory import (
    InMemoryCustomerRepo,
    InMemoryPaymentRepo,
    InMemoryReservationRepo,
    InMemoryVehicleRepo,
    LoggingNotificationGateway,
    NoopTransactionManager,
)
from tests.factories import (
    NOW,
    OTHER_VEHICLE_ID,
    FakeQrEncoder,
    RecordingDispatcher,
    make_customer,
    make_vehicle,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@dataclass
class InMemoryStack:
    reservation_repo: InMemoryReservationRepo
    customer_repo: InMemoryCustomerRepo
    vehicle_repo: InMemoryVehicleRepo
    payment_repo: InMemoryPaymentRepo
    gateway: LoggingNotificationGateway
    dispatcher: RecordingDispatcher
    qr_encoder: FakeQrEncoder
    clock: FakeClock
    ids: FakeIdGenerator
    use_cases: dict[str, Any]


# ============================================================================
# IN-MEMORY STACK
# ============================================================================

@pytest.fixture
def stack() -> InMemoryStack:
    """Use cases over seeded in-memory repos: customer Jane Doe, a Corolla and a Civic."""
    reservation_repo = InMemoryReservationRepo()
    customer_repo = InMemoryCustomerRepo()
    vehicle_repo = InMemoryVehicleRepo()
    payment_repo = InMemoryPaymentRepo()
    gateway = LoggingNotificationGateway()
    dispatcher = RecordingDispatcher()
    qr_encoder = FakeQrEncoder()
    clock = FakeClock(NOW)
    ids = FakeIdGenerator()

    customer_repo.add(make_customer())
    vehicle_repo.add(make_vehicle())
    vehicle_repo.add(
        make_vehicle(
            id=OTHER_VEHICLE_ID,
            brand="Honda",
            model="Civic",
            license_plate="XYZ-987",
            base_daily_rate=Decimal("60.00"),
            daily_rate=Decimal("55.00"),
        )
    )

    use_cases = build_use_cases(
        reservation_repo=reservation_repo,
        customer_repo=customer_repo,
        vehicle_repo=vehicle_repo,
        payment_repo=payment_repo,
        tx_manager=NoopTransactionManager(),
        notification_gateway=gateway,
        dispatcher=dispatcher,
        qr_encoder=qr_encoder,
        clock=clock,
        id_generator=ids,
    )
    return InMemoryStack(
        reservation_repo=reservation_repo,
        customer_repo=customer_repo,
        vehicle_repo=vehicle_repo,
        payment_repo=payment_repo,
        gateway=gateway,
        dispatcher=dispatcher,
        qr_encoder=qr_encoder,
        clock=clock,
        ids=ids,
        use_cases=use_cases,
    )


# ============================================================================
# SQL (aiosqlite)
# ============================================================================

@pytest_asyncio.fixture
async def sql_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(Settings(database_url=TEST_DATABASE_URL, use_in_memory=False))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_session(sql_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with build_sessionmaker(sql_engine)() as session:
        yield session


# ============================================================================
# HTTP CLIENT
# ============================================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient over a fresh in-memory backend seeded with two customers and two vehicles."""
    from rental.main import app

    _in_memory_bundle.cache_clear()
    _shared_services.cache_clear()
    bundle = _in_memory_bundle()
    bundle["customer_repo"].add(make_customer())
    bundle["customer_repo"].add(
        make_customer(id="cust-minor", first_name="Tim", date_of_birth=date(2015, 1, 1))
    )
    bundle["vehicle_repo"].add(make_vehicle())
    bundle["vehicle_repo"].add(
        make_vehicle(id=OTHER_VEHICLE_ID, brand="Honda", model="Civic", license_plate="XYZ-987")
    )

    with TestClient(app) as test_client:
        yield test_client

    _in_memory_bundle.cache_clear()
    _shared_services.cache_clear()
