from typing import Any, Iterable, Mapping

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.domain.entities.vehicle import Vehicle
from rental.domain.errors import VehicleNotFoundError
from rental.infrastructure.db.tables import vehicles


def _to_entity(row: Mapping[str, Any]) -> Vehicle:
    return Vehicle(
        id=row["id"],
        brand=row["brand"],
        model=row["model"],
        license_plate=row["license_plate"],
        base_daily_rate=row["base_daily_rate"],
        daily_rate=row["daily_rate"],
        mileage=row["mileage"],
    )


class VehicleRepoSQL(VehicleRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        stmt = select(vehicles).where(vehicles.c.id == vehicle_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    async def get_many(self, vehicle_ids: Iterable[str]) -> dict[str, Vehicle]:
        ids = set(vehicle_ids)
        if not ids:
            return {}
        result = await self._session.execute(select(vehicles).where(vehicles.c.id.in_(ids)))
        return {row["id"]: _to_entity(row) for row in result.mappings().all()}

    async def update_mileage(self, vehicle_id: str, mileage: int) -> None:
        result = await self._session.execute(
            update(vehicles).where(vehicles.c.id == vehicle_id).values(mileage=mileage)
        )
        if result.rowcount == 0:
            raise VehicleNotFoundError(vehicle_id)
