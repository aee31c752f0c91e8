import logging
from datetime import date

from rental.application.interfaces.clock import Clock
from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.id_generator import IdGenerator
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.application.services.availability import AvailabilityChecker
from rental.domain.entities.reservation import Reservation
from rental.domain.errors import (
    CustomerNotEligibleError,
    CustomerNotFoundError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from rental.domain.value_objects.date_range import DateRange


class CreateReservationUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        customer_repo: CustomerRepo,
        vehicle_repo: VehicleRepo,
        availability_checker: AvailabilityChecker,
        transaction_manager: TransactionManager,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._customer_repo = customer_repo
        self._vehicle_repo = vehicle_repo
        self._availability_checker = availability_checker
        self._transaction_manager = transaction_manager
        self._id_generator = id_generator
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        customer_id: str,
        vehicle_id: str,
        start_date: date,
        end_date: date,
        notes: str | None = None,
    ) -> Reservation:
        # Reject a malformed range before touching storage
        period = DateRange(start=start_date, end=end_date)

        async with self._transaction_manager.start():
            customer = await self._customer_repo.get_by_id(customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)
            if not customer.is_eligible(self._clock.today()):
                raise CustomerNotEligibleError(customer_id)

            vehicle = await self._vehicle_repo.get_by_id(vehicle_id)
            if vehicle is None:
                raise VehicleNotFoundError(vehicle_id)

            available = await self._availability_checker.is_available(
                vehicle_id, period.start, period.end
            )
            if not available:
                raise VehicleUnavailableError(vehicle_id, period.start, period.end)

            reservation = Reservation.create(
                reservation_id=self._id_generator.new_id(),
                customer_id=customer_id,
                vehicle_id=vehicle_id,
                start_date=period.start,
                end_date=period.end,
                daily_rate=vehicle.effective_daily_rate(),
                now=self._clock.now(),
                notes=notes,
            )
            # The repository re-checks overlap atomically with the insert
            await self._reservation_repo.add(reservation)

        self._logger.info(
            "Reservation created",
            extra={
                "reservation_id": reservation.id,
                "vehicle_id": vehicle_id,
                "customer_id": customer_id,
                "rental_days": reservation.rental_days,
                "total_amount": str(reservation.total_amount),
            },
        )
        return reservation
