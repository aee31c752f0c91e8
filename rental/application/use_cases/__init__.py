from rental.application.use_cases.cancel_reservation import CancelReservationUseCase
from rental.application.use_cases.complete_reservation import CompleteReservationUseCase
from rental.application.use_cases.confirm_reservation import ConfirmReservationUseCase
from rental.application.use_cases.create_reservation import CreateReservationUseCase
from rental.application.use_cases.generate_qr_code import GenerateQrCodeUseCase
from rental.application.use_cases.get_reservation import GetReservationUseCase
from rental.application.use_cases.get_reservation_balance import GetReservationBalanceUseCase
from rental.application.use_cases.record_payment import RecordPaymentUseCase
from rental.application.use_cases.search_reservations import (
    ListCustomerReservationsUseCase,
    SearchReservationsUseCase,
)
from rental.application.use_cases.start_reservation import StartReservationUseCase

__all__ = [
    "CreateReservationUseCase",
    "ConfirmReservationUseCase",
    "StartReservationUseCase",
    "CompleteReservationUseCase",
    "CancelReservationUseCase",
    "GenerateQrCodeUseCase",
    "GetReservationUseCase",
    "SearchReservationsUseCase",
    "ListCustomerReservationsUseCase",
    "RecordPaymentUseCase",
    "GetReservationBalanceUseCase",
]
