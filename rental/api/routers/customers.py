from typing import Annotated

from fastapi import APIRouter, Depends

from rental.api.dependencies import get_use_cases
from rental.api.schemas.reservations import ReservationPageResponse
from rental.config import Settings, get_settings

router = APIRouter()


@router.get(
    "/customers/{customer_id}/reservations",
    response_model=ReservationPageResponse,
)
async def list_customer_reservations(
    customer_id: str,
    use_cases: Annotated[dict, Depends(get_use_cases)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: int = 1,
    page_size: int = 10,
) -> ReservationPageResponse:
    """A customer's reservations, newest first."""
    result = await use_cases["list_customer_reservations"].execute(
        customer_id,
        page=page,
        page_size=min(page_size, settings.search_max_page_size),
    )
    return ReservationPageResponse.model_validate(result)
