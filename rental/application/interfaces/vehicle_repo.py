from typing import Iterable

from rental.domain.entities.vehicle import Vehicle


class VehicleRepo:
    async def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        raise NotImplementedError

    async def get_many(self, vehicle_ids: Iterable[str]) -> dict[str, Vehicle]:
        raise NotImplementedError

    async def update_mileage(self, vehicle_id: str, mileage: int) -> None:
        raise NotImplementedError
