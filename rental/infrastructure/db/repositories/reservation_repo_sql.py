from typing import Any, Mapping, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.domain.entities.reservation import Reservation, ReservationStatus
from rental.domain.errors import OptimisticLockError, ReservationNotFoundError, VehicleUnavailableError
from rental.infrastructure.db.tables import reservations, vehicles


def _to_entity(row: Mapping[str, Any]) -> Reservation:
    return Reservation(
        id=row["id"],
        customer_id=row["customer_id"],
        vehicle_id=row["vehicle_id"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        daily_rate=row["daily_rate"],
        total_amount=row["total_amount"],
        status=ReservationStatus(row["status"]),
        qr_code=row["qr_code"],
        notes=row["notes"],
        final_mileage=row["final_mileage"],
        lock_version=row["lock_version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class ReservationRepoSQL(ReservationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        stmt = select(reservations).where(reservations.c.id == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    async def list_all(self) -> Sequence[Reservation]:
        result = await self._session.execute(select(reservations))
        return [_to_entity(row) for row in result.mappings().all()]

    async def list_active_by_vehicle(self, vehicle_id: str) -> Sequence[Reservation]:
        stmt = select(reservations).where(
            reservations.c.vehicle_id == vehicle_id,
            reservations.c.status != ReservationStatus.CANCELLED.value,
        )
        result = await self._session.execute(stmt)
        return [_to_entity(row) for row in result.mappings().all()]

    async def add(self, reservation: Reservation) -> None:
        # Serialise bookings of the same vehicle on its row lock
        await self._session.execute(
            select(vehicles.c.id).where(vehicles.c.id == reservation.vehicle_id).with_for_update()
        )
        overlap = await self._session.execute(
            select(reservations.c.id)
            .where(
                reservations.c.vehicle_id == reservation.vehicle_id,
                reservations.c.status != ReservationStatus.CANCELLED.value,
                reservations.c.start_date < reservation.end_date,
                reservations.c.end_date > reservation.start_date,
            )
            .limit(1)
        )
        if overlap.scalar() is not None:
            raise VehicleUnavailableError(
                reservation.vehicle_id, reservation.start_date, reservation.end_date
            )

        await self._session.execute(
            insert(reservations).values(
                id=reservation.id,
                customer_id=reservation.customer_id,
                vehicle_id=reservation.vehicle_id,
                start_date=reservation.start_date,
                end_date=reservation.end_date,
                daily_rate=reservation.daily_rate,
                total_amount=reservation.total_amount,
                status=reservation.status.value,
                qr_code=reservation.qr_code,
                notes=reservation.notes,
                final_mileage=reservation.final_mileage,
                lock_version=reservation.lock_version,
                created_at=reservation.created_at,
                updated_at=reservation.updated_at,
            )
        )

    async def update(self, reservation: Reservation, expected_lock_version: int) -> None:
        stmt = (
            update(reservations)
            .where(
                reservations.c.id == reservation.id,
                reservations.c.lock_version == expected_lock_version,
            )
            .values(
                status=reservation.status.value,
                qr_code=reservation.qr_code,
                notes=reservation.notes,
                final_mileage=reservation.final_mileage,
                updated_at=reservation.updated_at,
                lock_version=reservations.c.lock_version + 1,
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            current = await self._session.execute(
                select(reservations.c.lock_version).where(reservations.c.id == reservation.id)
            )
            actual = current.scalar()
            if actual is None:
                raise ReservationNotFoundError(reservation.id)
            raise OptimisticLockError(reservation.id, expected_lock_version, actual)
        reservation.lock_version = expected_lock_version + 1
