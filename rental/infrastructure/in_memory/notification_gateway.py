import logging
from decimal import Decimal

from rental.application.interfaces.notification_gateway import (
    NotificationGateway,
    ReservationNotice,
)

logger = logging.getLogger(__name__)


class LoggingNotificationGateway(NotificationGateway):
    """Logs notifications instead of sending them; keeps them for inspection."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, ReservationNotice]] = []

    async def send_reservation_confirmed(self, notice: ReservationNotice) -> None:
        self._record("reservation_confirmed", notice)

    async def send_reservation_cancelled(self, notice: ReservationNotice) -> None:
        self._record("reservation_cancelled", notice)

    async def send_payment_received(self, notice: ReservationNotice, amount: Decimal) -> None:
        self._record("payment_received", notice, amount=str(amount))

    def _record(self, kind: str, notice: ReservationNotice, **extra: str) -> None:
        self.sent.append((kind, notice))
        logger.info(
            "Notification %s for %s",
            kind,
            notice.customer_email,
            extra={"reservation_id": notice.reservation_id, **extra},
        )
