import copy
from typing import Sequence

from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.services.availability import find_overlapping
from rental.domain.entities.reservation import Reservation
from rental.domain.errors import OptimisticLockError, ReservationNotFoundError, VehicleUnavailableError


class InMemoryReservationRepo(ReservationRepo):
    """
    Dict-backed reservation store.

    Reads hand out copies so an entity mutated by a use case that later fails
    never leaks into the store. ``add`` and ``update`` contain no await between
    the check and the write, which makes them atomic on the event loop.
    """

    def __init__(self) -> None:
        self.reservations: dict[str, Reservation] = {}

    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        stored = self.reservations.get(reservation_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def list_all(self) -> Sequence[Reservation]:
        return [copy.deepcopy(r) for r in self.reservations.values()]

    async def list_active_by_vehicle(self, vehicle_id: str) -> Sequence[Reservation]:
        return [copy.deepcopy(r) for r in self._active_for(vehicle_id)]

    async def add(self, reservation: Reservation) -> None:
        if reservation.id in self.reservations:
            raise ValueError("Reservation id already exists")
        if find_overlapping(self._active_for(reservation.vehicle_id), reservation.period):
            raise VehicleUnavailableError(
                reservation.vehicle_id, reservation.start_date, reservation.end_date
            )
        self.reservations[reservation.id] = copy.deepcopy(reservation)

    async def update(self, reservation: Reservation, expected_lock_version: int) -> None:
        stored = self.reservations.get(reservation.id)
        if stored is None:
            raise ReservationNotFoundError(reservation.id)
        if stored.lock_version != expected_lock_version:
            raise OptimisticLockError(reservation.id, expected_lock_version, stored.lock_version)
        reservation.lock_version = expected_lock_version + 1
        self.reservations[reservation.id] = copy.deepcopy(reservation)

    def _active_for(self, vehicle_id: str) -> list[Reservation]:
        return [
            r for r in self.reservations.values()
            if r.vehicle_id == vehicle_id and r.blocks_vehicle
        ]
