from datetime import date
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from rental.api.dependencies import get_use_cases
from rental.api.schemas.reservations import (
    CompleteReservationRequest,
    CreateReservationRequest,
    QrCodeResponse,
    ReservationPageResponse,
    ReservationResponse,
)
from rental.application.dtos.reservation_dto import ReservationSearchCriteria, ReservationSortField
from rental.config import Settings, get_settings
from rental.domain.entities.reservation import ReservationStatus
from rental.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()

UseCases = Annotated[dict, Depends(get_use_cases)]


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    payload: CreateReservationRequest,
    use_cases: UseCases,
) -> ReservationResponse:
    """
    Book a vehicle for a date range.

    Retried on deadlock: concurrent bookings of one vehicle serialise on its row lock.
    """
    reservation = await retry_on_deadlock(
        lambda: use_cases["create_reservation"].execute(
            customer_id=payload.customer_id,
            vehicle_id=payload.vehicle_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            notes=payload.notes,
        )
    )
    return ReservationResponse.model_validate(reservation)


@router.get("/reservations/search", response_model=ReservationPageResponse)
async def search_reservations(
    use_cases: UseCases,
    settings: Annotated[Settings, Depends(get_settings)],
    search_term: str | None = None,
    status_filter: ReservationStatus | None = Query(default=None, alias="status"),
    customer_id: str | None = None,
    start_date_from: date | None = None,
    start_date_to: date | None = None,
    min_amount: Decimal | None = None,
    max_amount: Decimal | None = None,
    sort_by: ReservationSortField = ReservationSortField.CREATED_AT,
    sort_descending: bool = True,
    page: int = 1,
    page_size: int = 10,
) -> ReservationPageResponse:
    criteria = ReservationSearchCriteria(
        search_term=search_term,
        status=status_filter,
        customer_id=customer_id,
        start_date_from=start_date_from,
        start_date_to=start_date_to,
        min_amount=min_amount,
        max_amount=max_amount,
        sort_by=sort_by,
        sort_descending=sort_descending,
        page=page,
        page_size=min(page_size, settings.search_max_page_size),
    )
    result = await use_cases["search_reservations"].execute(criteria)
    return ReservationPageResponse.model_validate(result)


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(reservation_id: str, use_cases: UseCases) -> ReservationResponse:
    reservation = await use_cases["get_reservation"].execute(reservation_id)
    return ReservationResponse.model_validate(reservation)


@router.post("/reservations/{reservation_id}/confirm", response_model=ReservationResponse)
async def confirm_reservation(reservation_id: str, use_cases: UseCases) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["confirm_reservation"].execute(reservation_id)
    )
    return ReservationResponse.model_validate(reservation)


@router.post("/reservations/{reservation_id}/start", response_model=ReservationResponse)
async def start_reservation(reservation_id: str, use_cases: UseCases) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["start_reservation"].execute(reservation_id)
    )
    return ReservationResponse.model_validate(reservation)


@router.post("/reservations/{reservation_id}/complete", response_model=ReservationResponse)
async def complete_reservation(
    reservation_id: str,
    payload: CompleteReservationRequest,
    use_cases: UseCases,
) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["complete_reservation"].execute(reservation_id, payload.final_mileage)
    )
    return ReservationResponse.model_validate(reservation)


@router.post("/reservations/{reservation_id}/cancel", response_model=ReservationResponse)
async def cancel_reservation(reservation_id: str, use_cases: UseCases) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["cancel_reservation"].execute(reservation_id)
    )
    return ReservationResponse.model_validate(reservation)


@router.post("/reservations/{reservation_id}/qr-code", response_model=QrCodeResponse)
async def generate_qr_code(reservation_id: str, use_cases: UseCases) -> QrCodeResponse:
    result = await retry_on_deadlock(
        lambda: use_cases["generate_qr_code"].execute(reservation_id)
    )
    return QrCodeResponse.model_validate(result)
