from rental.application.dtos.payment_dto import ReservationBalanceDTO
from rental.application.interfaces.payment_repo import PaymentRepo
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.use_cases.common import load_reservation


class GetReservationBalanceUseCase:
    def __init__(self, reservation_repo: ReservationRepo, payment_repo: PaymentRepo) -> None:
        self._reservation_repo = reservation_repo
        self._payment_repo = payment_repo

    async def execute(self, reservation_id: str) -> ReservationBalanceDTO:
        reservation = await load_reservation(self._reservation_repo, reservation_id)
        payments = list(await self._payment_repo.list_by_reservation(reservation_id))
        return ReservationBalanceDTO(
            reservation_id=reservation.id,
            total_amount=reservation.total_amount,
            payments=payments,
        )
