from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ReservationNotice:
    """Snapshot of what a customer-facing message needs about a reservation."""

    reservation_id: str
    customer_email: str
    customer_name: str
    vehicle_info: str
    start_date: date
    end_date: date
    total_amount: Decimal


class NotificationGateway:
    async def send_reservation_confirmed(self, notice: ReservationNotice) -> None:
        raise NotImplementedError

    async def send_reservation_cancelled(self, notice: ReservationNotice) -> None:
        raise NotImplementedError

    async def send_payment_received(self, notice: ReservationNotice, amount: Decimal) -> None:
        raise NotImplementedError
