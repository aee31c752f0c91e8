from typing import Annotated

from fastapi import APIRouter, Depends, status

from rental.api.dependencies import get_use_cases
from rental.api.schemas.payments import (
    PaymentResponse,
    RecordPaymentRequest,
    ReservationBalanceResponse,
)
from rental.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()


@router.post(
    "/reservations/{reservation_id}/payments",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_payment(
    reservation_id: str,
    payload: RecordPaymentRequest,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> PaymentResponse:
    payment = await retry_on_deadlock(
        lambda: use_cases["record_payment"].execute(
            reservation_id=reservation_id,
            amount=payload.amount,
            method=payload.method,
            status=payload.status,
            transaction_reference=payload.transaction_reference,
            notes=payload.notes,
        )
    )
    return PaymentResponse.model_validate(payment)


@router.get(
    "/reservations/{reservation_id}/payments",
    response_model=ReservationBalanceResponse,
)
async def get_reservation_balance(
    reservation_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> ReservationBalanceResponse:
    balance = await use_cases["get_reservation_balance"].execute(reservation_id)
    return ReservationBalanceResponse.model_validate(balance)
