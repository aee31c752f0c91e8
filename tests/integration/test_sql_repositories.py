"""SQLAlchemy repositories against an in-memory aiosqlite database."""

from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio

from rental.domain.entities.payment import Payment, PaymentMethod, PaymentStatus
from rental.domain.entities.reservation import ReservationStatus
from rental.domain.errors import OptimisticLockError, VehicleNotFoundError, VehicleUnavailableError
from rental.infrastructure.db.repositories import (
    CustomerRepoSQL,
    PaymentRepoSQL,
    ReservationRepoSQL,
    VehicleRepoSQL,
)
from rental.infrastructure.db.tables import customers, vehicles
from rental.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from tests.factories import CUSTOMER_ID, NOW, VEHICLE_ID, make_reservation

pytestmark = pytest.mark.sql


@pytest_asyncio.fixture
async def seeded(sql_session):
    async with sql_session.begin():
        await sql_session.execute(
            customers.insert().values(
                id=CUSTOMER_ID,
                first_name="Jane",
                last_name="Doe",
                email="jane.doe@example.com",
                date_of_birth=date(1990, 6, 15),
                is_active=True,
            )
        )
        await sql_session.execute(
            vehicles.insert().values(
                id=VEHICLE_ID,
                brand="Toyota",
                model="Corolla",
                license_plate="ABC-123",
                base_daily_rate=Decimal("50.00"),
                daily_rate=None,
                mileage=1000,
            )
        )
    return sql_session


@pytest.mark.asyncio
async def test_reservation_round_trip(seeded):
    repo = ReservationRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)
    reservation = make_reservation("res-1", date(2024, 3, 1), date(2024, 3, 4))

    async with tx.start():
        await repo.add(reservation)

    loaded = await repo.get_by_id("res-1")
    assert loaded.total_amount == Decimal("150.00")
    assert loaded.start_date == date(2024, 3, 1)
    assert loaded.status == ReservationStatus.PENDING
    assert loaded.lock_version == 0
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_add_rejects_overlap_and_accepts_boundary(seeded):
    repo = ReservationRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)

    async with tx.start():
        await repo.add(make_reservation("res-1", date(2024, 1, 10), date(2024, 1, 15)))

    with pytest.raises(VehicleUnavailableError):
        async with tx.start():
            await repo.add(make_reservation("res-2", date(2024, 1, 12), date(2024, 1, 18)))

    async with tx.start():
        await repo.add(make_reservation("res-3", date(2024, 1, 15), date(2024, 1, 20)))

    ids = {r.id for r in await repo.list_all()}
    assert ids == {"res-1", "res-3"}


@pytest.mark.asyncio
async def test_cancelled_rows_do_not_block(seeded):
    repo = ReservationRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)
    async with tx.start():
        await repo.add(make_reservation("res-1", date(2024, 1, 10), date(2024, 1, 15)))

    async with tx.start():
        reservation = await repo.get_by_id("res-1")
        reservation.cancel(NOW)
        await repo.update(reservation, expected_lock_version=0)

    assert await repo.list_active_by_vehicle(VEHICLE_ID) == []
    async with tx.start():
        await repo.add(make_reservation("res-2", date(2024, 1, 10), date(2024, 1, 15)))


@pytest.mark.asyncio
async def test_update_with_stale_version_conflicts(seeded):
    repo = ReservationRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)
    async with tx.start():
        await repo.add(make_reservation("res-1"))

    first = await repo.get_by_id("res-1")
    second = await repo.get_by_id("res-1")
    await seeded.rollback()

    async with tx.start():
        first.confirm(NOW)
        await repo.update(first, expected_lock_version=0)
    assert first.lock_version == 1

    with pytest.raises(OptimisticLockError) as exc_info:
        async with tx.start():
            second.cancel(NOW)
            await repo.update(second, expected_lock_version=0)
    assert exc_info.value.actual_version == 1

    stored = await repo.get_by_id("res-1")
    assert stored.status == ReservationStatus.CONFIRMED


@pytest.mark.asyncio
async def test_failed_transaction_rolls_back(seeded):
    repo = ReservationRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)

    with pytest.raises(RuntimeError):
        async with tx.start():
            await repo.add(make_reservation("res-1"))
            raise RuntimeError("request aborted")

    assert await repo.get_by_id("res-1") is None


@pytest.mark.asyncio
async def test_customer_and_vehicle_lookups(seeded):
    customer_repo = CustomerRepoSQL(seeded)
    vehicle_repo = VehicleRepoSQL(seeded)

    customer = await customer_repo.get_by_id(CUSTOMER_ID)
    assert customer.full_name == "Jane Doe"
    assert customer.is_eligible(date(2024, 1, 1))
    assert set(await customer_repo.get_many([CUSTOMER_ID, "nobody"])) == {CUSTOMER_ID}
    assert await customer_repo.get_many([]) == {}

    vehicle = await vehicle_repo.get_by_id(VEHICLE_ID)
    assert vehicle.effective_daily_rate() == Decimal("50.00")

    async with SQLAlchemyTransactionManager(seeded).start():
        await vehicle_repo.update_mileage(VEHICLE_ID, 1500)
    assert (await vehicle_repo.get_by_id(VEHICLE_ID)).mileage == 1500

    with pytest.raises(VehicleNotFoundError):
        await vehicle_repo.update_mileage("no-such-car", 1)


@pytest.mark.asyncio
async def test_payments_listed_in_order(seeded):
    reservation_repo = ReservationRepoSQL(seeded)
    payment_repo = PaymentRepoSQL(seeded)
    tx = SQLAlchemyTransactionManager(seeded)

    async with tx.start():
        await reservation_repo.add(make_reservation("res-1"))
        for n, status in enumerate([PaymentStatus.COMPLETED, PaymentStatus.FAILED]):
            await payment_repo.add(
                Payment(
                    id=f"pay-{n}",
                    reservation_id="res-1",
                    amount=Decimal("40.00"),
                    method=PaymentMethod.DEBIT_CARD,
                    status=status,
                    payment_date=NOW,
                    created_at=NOW,
                )
            )

    payments = await payment_repo.list_by_reservation("res-1")
    assert [p.id for p in payments] == ["pay-0", "pay-1"]
    assert payments[1].status == PaymentStatus.FAILED
    assert payments[0].amount == Decimal("40.00")
    assert await payment_repo.list_by_reservation("other") == []


@pytest.mark.asyncio
async def test_lifecycle_through_use_cases(seeded):
    from rental.api.dependencies import build_use_cases
    from rental.application.interfaces.clock import FakeClock
    from rental.application.interfaces.id_generator import FakeIdGenerator
    from rental.infrastructure.in_memory import LoggingNotificationGateway
    from tests.factories import FakeQrEncoder, RecordingDispatcher

    dispatcher = RecordingDispatcher()
    use_cases = build_use_cases(
        reservation_repo=ReservationRepoSQL(seeded),
        customer_repo=CustomerRepoSQL(seeded),
        vehicle_repo=VehicleRepoSQL(seeded),
        payment_repo=PaymentRepoSQL(seeded),
        tx_manager=SQLAlchemyTransactionManager(seeded),
        notification_gateway=LoggingNotificationGateway(),
        dispatcher=dispatcher,
        qr_encoder=FakeQrEncoder(),
        clock=FakeClock(NOW),
        id_generator=FakeIdGenerator(),
    )

    created = await use_cases["create_reservation"].execute(
        CUSTOMER_ID, VEHICLE_ID, date(2024, 2, 1), date(2024, 2, 3)
    )
    assert created.total_amount == Decimal("100.00")

    await use_cases["confirm_reservation"].execute(created.id)
    await use_cases["start_reservation"].execute(created.id)
    completed = await use_cases["complete_reservation"].execute(created.id, 1320)
    assert completed.status == ReservationStatus.COMPLETED
    assert completed.lock_version == 3

    assert (await VehicleRepoSQL(seeded).get_by_id(VEHICLE_ID)).mileage == 1320
    assert "reservation_confirmed" in dispatcher.names


@pytest.mark.asyncio
async def test_rounded_rate_survives_round_trip(seeded):
    repo = ReservationRepoSQL(seeded)
    reservation = make_reservation(
        "res-odd", date(2024, 4, 1), date(2024, 4, 5), daily_rate=Decimal("45.555")
    )
    async with SQLAlchemyTransactionManager(seeded).start():
        await repo.add(reservation)

    loaded = await repo.get_by_id("res-odd")
    assert loaded.daily_rate == Decimal("45.56")
    assert loaded.total_amount == loaded.daily_rate * loaded.rental_days
