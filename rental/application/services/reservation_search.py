"""
Filtering, ordering and pagination over the reservation collection.

Rows are joined with customer and vehicle data in memory so the same
rules apply to every storage backend.
"""

from typing import Mapping, Sequence

from rental.application.dtos.reservation_dto import (
    PageDTO,
    ReservationSearchCriteria,
    ReservationSortField,
    ReservationSummaryDTO,
)
from rental.domain.entities.customer import Customer
from rental.domain.entities.reservation import Reservation
from rental.domain.entities.vehicle import Vehicle
from rental.domain.errors import ValidationError

UNKNOWN_CUSTOMER = "Unknown customer"
UNKNOWN_VEHICLE = "Unknown vehicle"


def validate_criteria(criteria: ReservationSearchCriteria) -> None:
    if criteria.page < 1:
        raise ValidationError("page", "must be 1 or greater")
    if criteria.page_size < 1:
        raise ValidationError("page_size", "must be 1 or greater")
    if not isinstance(criteria.sort_by, ReservationSortField):
        raise ValidationError("sort_by", f"unsupported sort field: {criteria.sort_by}")
    if (
        criteria.min_amount is not None
        and criteria.max_amount is not None
        and criteria.min_amount > criteria.max_amount
    ):
        raise ValidationError("min_amount", "cannot be greater than max_amount")


def to_summary(
    reservation: Reservation,
    customer: Customer | None,
    vehicle: Vehicle | None,
) -> ReservationSummaryDTO:
    return ReservationSummaryDTO(
        id=reservation.id,
        customer_id=reservation.customer_id,
        customer_name=customer.full_name if customer else UNKNOWN_CUSTOMER,
        vehicle_id=reservation.vehicle_id,
        vehicle_info=vehicle.display_name if vehicle else UNKNOWN_VEHICLE,
        start_date=reservation.start_date,
        end_date=reservation.end_date,
        rental_days=reservation.rental_days,
        total_amount=reservation.total_amount,
        status=reservation.status.value,
        created_at=reservation.created_at,
    )


def _matches_term(term: str, customer: Customer | None, vehicle: Vehicle | None) -> bool:
    haystack = []
    if customer:
        haystack.append(customer.full_name)
    if vehicle:
        haystack.extend([vehicle.brand, vehicle.model, vehicle.license_plate])
    return any(term in value.lower() for value in haystack)


def _matches(
    reservation: Reservation,
    criteria: ReservationSearchCriteria,
    customer: Customer | None,
    vehicle: Vehicle | None,
) -> bool:
    if criteria.customer_id is not None and reservation.customer_id != criteria.customer_id:
        return False
    if criteria.status is not None and reservation.status != criteria.status:
        return False
    if criteria.start_date_from is not None and reservation.start_date < criteria.start_date_from:
        return False
    if criteria.start_date_to is not None and reservation.start_date > criteria.start_date_to:
        return False
    if criteria.min_amount is not None and reservation.total_amount < criteria.min_amount:
        return False
    if criteria.max_amount is not None and reservation.total_amount > criteria.max_amount:
        return False
    term = (criteria.search_term or "").strip().lower()
    if term and not _matches_term(term, customer, vehicle):
        return False
    return True


def _sort_key(field: ReservationSortField):
    if field == ReservationSortField.START_DATE:
        return lambda r: (r.start_date, r.id)
    if field == ReservationSortField.TOTAL_AMOUNT:
        return lambda r: (r.total_amount, r.id)
    return lambda r: (r.created_at, r.id)


def search_reservations(
    reservations: Sequence[Reservation],
    customers: Mapping[str, Customer],
    vehicles: Mapping[str, Vehicle],
    criteria: ReservationSearchCriteria,
) -> PageDTO[ReservationSummaryDTO]:
    """Apply criteria to the collection and return the requested page."""
    validate_criteria(criteria)

    matching = [
        r
        for r in reservations
        if _matches(r, criteria, customers.get(r.customer_id), vehicles.get(r.vehicle_id))
    ]
    matching.sort(key=_sort_key(criteria.sort_by), reverse=criteria.sort_descending)

    offset = (criteria.page - 1) * criteria.page_size
    window = matching[offset : offset + criteria.page_size]
    return PageDTO(
        items=[
            to_summary(r, customers.get(r.customer_id), vehicles.get(r.vehicle_id))
            for r in window
        ],
        total_count=len(matching),
        page=criteria.page,
        page_size=criteria.page_size,
    )
