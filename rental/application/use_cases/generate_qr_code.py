import json
import logging

from rental.application.dtos.reservation_dto import QrCodeDTO
from rental.application.interfaces.clock import Clock
from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.qr_encoder import QrCodeEncoder
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.transaction_manager import TransactionManager
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.application.use_cases.common import load_reservation
from rental.domain.entities.customer import Customer
from rental.domain.entities.reservation import Reservation
from rental.domain.entities.vehicle import Vehicle
from rental.domain.errors import CustomerNotFoundError, VehicleNotFoundError


def build_qr_content(reservation: Reservation, customer: Customer, vehicle: Vehicle) -> str:
    """JSON document scanned at the rental counter."""
    return json.dumps(
        {
            "reservation_id": reservation.id,
            "customer_name": customer.full_name,
            "customer_email": customer.email,
            "vehicle_brand": vehicle.brand,
            "vehicle_model": vehicle.model,
            "license_plate": vehicle.license_plate,
            "start_date": reservation.start_date.isoformat(),
            "end_date": reservation.end_date.isoformat(),
            "total_amount": format(reservation.total_amount, ".2f"),
            "status": reservation.status.value,
        },
        separators=(",", ":"),
    )


class GenerateQrCodeUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        customer_repo: CustomerRepo,
        vehicle_repo: VehicleRepo,
        qr_encoder: QrCodeEncoder,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._customer_repo = customer_repo
        self._vehicle_repo = vehicle_repo
        self._qr_encoder = qr_encoder
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, reservation_id: str) -> QrCodeDTO:
        async with self._transaction_manager.start():
            reservation = await load_reservation(self._reservation_repo, reservation_id)
            expected_lock_version = reservation.lock_version

            customer = await self._customer_repo.get_by_id(reservation.customer_id)
            if customer is None:
                raise CustomerNotFoundError(reservation.customer_id)
            vehicle = await self._vehicle_repo.get_by_id(reservation.vehicle_id)
            if vehicle is None:
                raise VehicleNotFoundError(reservation.vehicle_id)

            payload = self._qr_encoder.encode(build_qr_content(reservation, customer, vehicle))
            reservation.set_qr_code(payload, self._clock.now())
            await self._reservation_repo.update(reservation, expected_lock_version)

        self._logger.info("QR code generated", extra={"reservation_id": reservation.id})
        return QrCodeDTO(reservation_id=reservation.id, qr_code_base64=payload)
