import logging
from decimal import Decimal
from typing import Any

import httpx
from pybreaker import CircuitBreaker

from rental.application.interfaces.notification_gateway import (
    NotificationGateway,
    ReservationNotice,
)
from rental.infrastructure.circuit_breaker import CircuitBreakerError, build_breaker

logger = logging.getLogger(__name__)


class NotificationDeliveryError(Exception):
    """The messaging service did not accept a notification."""


class HttpNotificationGateway(NotificationGateway):
    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 5.0,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        """
        Sends customer notifications through an HTTP messaging service.

        Args:
            base_url: Base URL of the messaging API; messages are POSTed to /messages
            api_key: Bearer token, if the service requires one
            timeout_seconds: Request timeout in seconds
            breaker: Circuit breaker guarding the service (a fresh one by default)
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._breaker = breaker or build_breaker("notification_service")

    async def send_reservation_confirmed(self, notice: ReservationNotice) -> None:
        await self._send(
            "reservation_confirmed",
            notice,
            subject="Your reservation is confirmed",
        )

    async def send_reservation_cancelled(self, notice: ReservationNotice) -> None:
        await self._send(
            "reservation_cancelled",
            notice,
            subject="Your reservation was cancelled",
        )

    async def send_payment_received(self, notice: ReservationNotice, amount: Decimal) -> None:
        await self._send(
            "payment_received",
            notice,
            subject="Payment received",
            amount=format(amount, ".2f"),
        )

    async def _send(self, template: str, notice: ReservationNotice, subject: str, **extra: Any) -> None:
        payload: dict[str, Any] = {
            "template": template,
            "to": notice.customer_email,
            "subject": subject,
            "data": {
                "reservation_id": notice.reservation_id,
                "customer_name": notice.customer_name,
                "vehicle": notice.vehicle_info,
                "start_date": notice.start_date.isoformat(),
                "end_date": notice.end_date.isoformat(),
                "total_amount": format(notice.total_amount, ".2f"),
                **extra,
            },
        }
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
        url = f"{self._base_url}/messages"

        try:
            with self._breaker.calling():
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=payload, headers=headers)
                    response.raise_for_status()
        except CircuitBreakerError:
            logger.error(
                "Notification circuit breaker is open - message not sent",
                extra={"reservation_id": notice.reservation_id, "template": template},
            )
            raise
        except httpx.TimeoutException as exc:
            logger.warning(
                "Notification request timeout",
                extra={"reservation_id": notice.reservation_id, "timeout": self._timeout},
            )
            raise NotificationDeliveryError(f"{template}: timeout") from exc
        except httpx.HTTPError as exc:
            logger.error(
                "Notification HTTP error",
                exc_info=exc,
                extra={"reservation_id": notice.reservation_id, "template": template},
            )
            raise NotificationDeliveryError(f"{template}: {exc}") from exc

        logger.info(
            "Notification sent",
            extra={"reservation_id": notice.reservation_id, "template": template},
        )
