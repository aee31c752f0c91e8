from typing import Sequence

from rental.domain.entities.payment import Payment


class PaymentRepo:
    async def add(self, payment: Payment) -> None:
        raise NotImplementedError

    async def list_by_reservation(self, reservation_id: str) -> Sequence[Payment]:
        raise NotImplementedError
