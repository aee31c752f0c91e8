import copy
from typing import Iterable

from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.domain.entities.vehicle import Vehicle
from rental.domain.errors import VehicleNotFoundError


class InMemoryVehicleRepo(VehicleRepo):
    def __init__(self) -> None:
        self.vehicles: dict[str, Vehicle] = {}

    def add(self, vehicle: Vehicle) -> None:
        """Seed a vehicle (the fleet module owns its lifecycle)."""
        self.vehicles[vehicle.id] = copy.deepcopy(vehicle)

    async def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        stored = self.vehicles.get(vehicle_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def get_many(self, vehicle_ids: Iterable[str]) -> dict[str, Vehicle]:
        return {
            vid: copy.deepcopy(self.vehicles[vid])
            for vid in set(vehicle_ids)
            if vid in self.vehicles
        }

    async def update_mileage(self, vehicle_id: str, mileage: int) -> None:
        if vehicle_id not in self.vehicles:
            raise VehicleNotFoundError(vehicle_id)
        self.vehicles[vehicle_id].mileage = mileage
