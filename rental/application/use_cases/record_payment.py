import logging
from decimal import Decimal

from rental.application.interfaces.clock import Clock
from rental.application.interfaces.id_generator import IdGenerator
from rental.application.interfaces.payment_repo import PaymentRepo
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.services.notifier import ReservationNotifier
from rental.application.use_cases.common import load_reservation
from rental.domain.entities.payment import Payment, PaymentMethod, PaymentStatus
from rental.domain.entities.reservation import ReservationStatus
from rental.domain.errors import InvalidReservationStatusError, ValidationError


class RecordPaymentUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        payment_repo: PaymentRepo,
        transaction_manager: TransactionManager,
        notifier: ReservationNotifier,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._payment_repo = payment_repo
        self._transaction_manager = transaction_manager
        self._notifier = notifier
        self._id_generator = id_generator
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        reservation_id: str,
        amount: Decimal,
        method: PaymentMethod,
        status: PaymentStatus = PaymentStatus.COMPLETED,
        transaction_reference: str | None = None,
        notes: str | None = None,
    ) -> Payment:
        if amount <= 0:
            raise ValidationError("amount", "must be greater than zero")

        async with self._transaction_manager.start():
            reservation = await load_reservation(self._reservation_repo, reservation_id)
            if reservation.status == ReservationStatus.CANCELLED:
                raise InvalidReservationStatusError(
                    current_status=reservation.status.value,
                    expected_status=[
                        s.value for s in ReservationStatus if s != ReservationStatus.CANCELLED
                    ],
                    operation="record a payment for",
                )

            now = self._clock.now()
            payment = Payment(
                id=self._id_generator.new_id(),
                reservation_id=reservation.id,
                amount=amount,
                method=method,
                status=status,
                payment_date=now,
                transaction_reference=transaction_reference,
                notes=notes,
                created_at=now,
            )
            await self._payment_repo.add(payment)

        self._logger.info(
            "Payment recorded",
            extra={
                "reservation_id": reservation.id,
                "payment_id": payment.id,
                "amount": str(payment.amount),
                "status": payment.status.value,
            },
        )
        if payment.is_successful:
            await self._notifier.payment_received(reservation, payment.amount)
        return payment
