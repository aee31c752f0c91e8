from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.use_cases.common import load_reservation
from rental.domain.entities.reservation import Reservation


class GetReservationUseCase:
    def __init__(self, reservation_repo: ReservationRepo) -> None:
        self._reservation_repo = reservation_repo

    async def execute(self, reservation_id: str) -> Reservation:
        return await load_reservation(self._reservation_repo, reservation_id)
