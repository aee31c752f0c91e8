import logging
from decimal import Decimal

from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.job_dispatcher import JobDispatcher
from rental.application.interfaces.notification_gateway import (
    NotificationGateway,
    ReservationNotice,
)
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.domain.entities.reservation import Reservation

logger = logging.getLogger(__name__)


class ReservationNotifier:
    """
    Fire-and-forget customer notifications for reservation events.

    The notice is assembled while the request still holds its repositories;
    only the gateway call runs in the background. Failures are logged and
    never reach the caller: the reservation has already been persisted.
    """

    def __init__(
        self,
        customer_repo: CustomerRepo,
        vehicle_repo: VehicleRepo,
        gateway: NotificationGateway,
        dispatcher: JobDispatcher,
    ) -> None:
        self._customer_repo = customer_repo
        self._vehicle_repo = vehicle_repo
        self._gateway = gateway
        self._dispatcher = dispatcher

    async def reservation_confirmed(self, reservation: Reservation) -> None:
        notice = await self._build_notice(reservation)
        if notice is None:
            return
        self._dispatcher.dispatch(
            "reservation_confirmed",
            lambda: self._gateway.send_reservation_confirmed(notice),
            reservation_id=reservation.id,
        )

    async def reservation_cancelled(self, reservation: Reservation) -> None:
        notice = await self._build_notice(reservation)
        if notice is None:
            return
        self._dispatcher.dispatch(
            "reservation_cancelled",
            lambda: self._gateway.send_reservation_cancelled(notice),
            reservation_id=reservation.id,
        )

    async def payment_received(self, reservation: Reservation, amount: Decimal) -> None:
        notice = await self._build_notice(reservation)
        if notice is None:
            return
        self._dispatcher.dispatch(
            "payment_received",
            lambda: self._gateway.send_payment_received(notice, amount),
            reservation_id=reservation.id,
        )

    async def _build_notice(self, reservation: Reservation) -> ReservationNotice | None:
        try:
            customer = await self._customer_repo.get_by_id(reservation.customer_id)
            vehicle = await self._vehicle_repo.get_by_id(reservation.vehicle_id)
        except Exception as exc:
            logger.error(
                "Could not load notification data",
                exc_info=exc,
                extra={"reservation_id": reservation.id},
            )
            return None

        if customer is None or vehicle is None:
            logger.warning(
                "Skipping notification, customer or vehicle missing",
                extra={
                    "reservation_id": reservation.id,
                    "customer_id": reservation.customer_id,
                    "vehicle_id": reservation.vehicle_id,
                },
            )
            return None

        return ReservationNotice(
            reservation_id=reservation.id,
            customer_email=customer.email,
            customer_name=customer.full_name,
            vehicle_info=vehicle.display_name,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
            total_amount=reservation.total_amount,
        )
