import logging

from rental.application.interfaces.clock import Clock
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.application.use_cases.common import load_reservation
from rental.domain.entities.reservation import Reservation
from rental.domain.errors import ValidationError, VehicleNotFoundError


class CompleteReservationUseCase:
    """Closes an in-progress rental and moves the vehicle's odometer forward."""

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        vehicle_repo: VehicleRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._vehicle_repo = vehicle_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, reservation_id: str, final_mileage: int) -> Reservation:
        async with self._transaction_manager.start():
            reservation = await load_reservation(self._reservation_repo, reservation_id)
            expected_lock_version = reservation.lock_version
            reservation.check_can_complete(final_mileage)

            vehicle = await self._vehicle_repo.get_by_id(reservation.vehicle_id)
            if vehicle is None:
                raise VehicleNotFoundError(reservation.vehicle_id)
            if final_mileage < vehicle.mileage:
                raise ValidationError(
                    "final_mileage",
                    f"cannot be lower than the vehicle's current mileage ({vehicle.mileage})",
                )

            reservation.complete(final_mileage, self._clock.now())
            await self._reservation_repo.update(reservation, expected_lock_version)
            await self._vehicle_repo.update_mileage(vehicle.id, final_mileage)

        self._logger.info(
            "Rental completed",
            extra={"reservation_id": reservation.id, "final_mileage": final_mileage},
        )
        return reservation
