import copy
from collections import defaultdict
from typing import Sequence

from rental.application.interfaces.payment_repo import PaymentRepo
from rental.domain.entities.payment import Payment


class InMemoryPaymentRepo(PaymentRepo):
    def __init__(self) -> None:
        self._by_id: dict[str, Payment] = {}
        self._by_reservation: dict[str, list[str]] = defaultdict(list)

    async def add(self, payment: Payment) -> None:
        if payment.id in self._by_id:
            raise ValueError("Payment id already exists")
        self._by_id[payment.id] = copy.deepcopy(payment)
        self._by_reservation[payment.reservation_id].append(payment.id)

    async def list_by_reservation(self, reservation_id: str) -> Sequence[Payment]:
        return [
            copy.deepcopy(self._by_id[pid])
            for pid in self._by_reservation.get(reservation_id, [])
        ]
