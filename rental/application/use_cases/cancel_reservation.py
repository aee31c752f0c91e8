import logging

from rental.application.interfaces.clock import Clock
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.services.notifier import ReservationNotifier
from rental.application.use_cases.common import load_reservation
from rental.domain.entities.reservation import Reservation


class CancelReservationUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        notifier: ReservationNotifier,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._notifier = notifier
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, reservation_id: str) -> Reservation:
        async with self._transaction_manager.start():
            reservation = await load_reservation(self._reservation_repo, reservation_id)
            expected_lock_version = reservation.lock_version
            reservation.cancel(self._clock.now())
            await self._reservation_repo.update(reservation, expected_lock_version)

        self._logger.info("Reservation cancelled", extra={"reservation_id": reservation.id})
        await self._notifier.reservation_cancelled(reservation)
        return reservation
