from rental.application.dtos.reservation_dto import (
    PageDTO,
    ReservationSearchCriteria,
    ReservationSummaryDTO,
)
from rental.application.interfaces.customer_repo import CustomerRepo
from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.application.interfaces.vehicle_repo import VehicleRepo
from rental.application.services.reservation_search import search_reservations, validate_criteria
from rental.domain.errors import CustomerNotFoundError


class SearchReservationsUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        customer_repo: CustomerRepo,
        vehicle_repo: VehicleRepo,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._customer_repo = customer_repo
        self._vehicle_repo = vehicle_repo

    async def execute(self, criteria: ReservationSearchCriteria) -> PageDTO[ReservationSummaryDTO]:
        validate_criteria(criteria)
        reservations = await self._reservation_repo.list_all()
        customers = await self._customer_repo.get_many({r.customer_id for r in reservations})
        vehicles = await self._vehicle_repo.get_many({r.vehicle_id for r in reservations})
        return search_reservations(reservations, customers, vehicles, criteria)


class ListCustomerReservationsUseCase:
    """A customer's own reservations, newest first."""

    def __init__(self, customer_repo: CustomerRepo, search: SearchReservationsUseCase) -> None:
        self._customer_repo = customer_repo
        self._search = search

    async def execute(
        self, customer_id: str, page: int = 1, page_size: int = 10
    ) -> PageDTO[ReservationSummaryDTO]:
        if await self._customer_repo.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)
        return await self._search.execute(
            ReservationSearchCriteria(customer_id=customer_id, page=page, page_size=page_size)
        )
