from typing import Sequence

from rental.domain.entities.reservation import Reservation


class ReservationRepo:
    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_active_by_vehicle(self, vehicle_id: str) -> Sequence[Reservation]:
        """Reservations of the vehicle whose status is not CANCELLED."""
        raise NotImplementedError

    async def add(self, reservation: Reservation) -> None:
        """
        Persist a new reservation.

        Must re-check the vehicle's active reservations for overlap atomically
        with the insert and raise VehicleUnavailableError on conflict; the
        application-level availability check alone is not race-free.
        """
        raise NotImplementedError

    async def update(self, reservation: Reservation, expected_lock_version: int) -> None:
        """
        Write the reservation if the stored lock_version still matches.

        Increments reservation.lock_version on success and raises
        OptimisticLockError otherwise.
        """
        raise NotImplementedError
