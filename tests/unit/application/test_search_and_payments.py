from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio

from rental.application.dtos import ReservationSearchCriteria, ReservationSortField
from rental.domain.entities.payment import PaymentMethod, PaymentStatus
from rental.domain.entities.reservation import ReservationStatus
from rental.domain.errors import (
    CustomerNotFoundError,
    InvalidReservationStatusError,
    ReservationNotFoundError,
    ValidationError,
)
from tests.factories import CUSTOMER_ID, OTHER_VEHICLE_ID, VEHICLE_ID, make_customer


@pytest_asyncio.fixture
async def booked(stack):
    """Three reservations created a day apart: Corolla x2 (Jane), Civic x1 (John)."""
    stack.customer_repo.add(make_customer(id="cust-0002", first_name="John", last_name="Smith", email="john@example.com"))
    create = stack.use_cases["create_reservation"]

    first = await create.execute(CUSTOMER_ID, VEHICLE_ID, date(2024, 2, 1), date(2024, 2, 3))
    stack.clock.advance(days=1)
    second = await create.execute(CUSTOMER_ID, VEHICLE_ID, date(2024, 3, 1), date(2024, 3, 8))
    stack.clock.advance(days=1)
    third = await create.execute("cust-0002", OTHER_VEHICLE_ID, date(2024, 2, 10), date(2024, 2, 12))
    await stack.use_cases["confirm_reservation"].execute(third.id)
    return first, second, third


async def _search(stack, **criteria):
    return await stack.use_cases["search_reservations"].execute(ReservationSearchCriteria(**criteria))


class TestSearch:
    @pytest.mark.asyncio
    async def test_default_sort_is_newest_first(self, stack, booked):
        first, second, third = booked

        page = await _search(stack)

        assert [item.id for item in page.items] == [third.id, second.id, first.id]
        assert page.total_count == 3
        assert page.total_pages == 1
        assert not page.has_next_page
        assert not page.has_previous_page

    @pytest.mark.asyncio
    async def test_summary_joins_customer_and_vehicle(self, stack, booked):
        page = await _search(stack, search_term="civic")

        assert len(page.items) == 1
        item = page.items[0]
        assert item.customer_name == "John Smith"
        assert item.vehicle_info == "Honda Civic (XYZ-987)"
        assert item.rental_days == 2
        assert item.status == "CONFIRMED"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["jane", "DOE", "toyota", "abc-1"])
    async def test_free_text_is_case_insensitive(self, stack, booked, term):
        page = await _search(stack, search_term=term)
        assert page.total_count == 2

    @pytest.mark.asyncio
    async def test_filters_combine(self, stack, booked):
        first, second, third = booked

        assert (await _search(stack, status=ReservationStatus.CONFIRMED)).total_count == 1
        assert (await _search(stack, customer_id=CUSTOMER_ID)).total_count == 2
        by_date = await _search(stack, start_date_from=date(2024, 2, 5), start_date_to=date(2024, 3, 1))
        assert {i.id for i in by_date.items} == {second.id, third.id}
        by_amount = await _search(stack, min_amount=Decimal("100"), max_amount=Decimal("110"))
        assert [i.id for i in by_amount.items] == [third.id, first.id]

    @pytest.mark.asyncio
    async def test_sort_by_amount_ascending(self, stack, booked):
        first, second, third = booked

        page = await _search(stack, sort_by=ReservationSortField.TOTAL_AMOUNT, sort_descending=False)

        # first 100.00, third 110.00, second 350.00
        assert [i.id for i in page.items] == [first.id, third.id, second.id]

    @pytest.mark.asyncio
    async def test_pagination(self, stack, booked):
        first, second, third = booked

        page_two = await _search(stack, page=2, page_size=2)

        assert [i.id for i in page_two.items] == [first.id]
        assert page_two.total_pages == 2
        assert page_two.has_previous_page
        assert not page_two.has_next_page

        beyond = await _search(stack, page=5, page_size=2)
        assert beyond.items == []
        assert beyond.total_count == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("criteria", [{"page": 0}, {"page_size": 0}, {"sort_by": "colour"}])
    async def test_invalid_criteria(self, stack, criteria):
        with pytest.raises(ValidationError):
            await _search(stack, **criteria)

    @pytest.mark.asyncio
    async def test_customer_listing(self, stack, booked):
        page = await stack.use_cases["list_customer_reservations"].execute(CUSTOMER_ID)
        assert page.total_count == 2

        with pytest.raises(CustomerNotFoundError):
            await stack.use_cases["list_customer_reservations"].execute("nobody")

    @pytest.mark.asyncio
    async def test_equal_keys_break_ties_by_id(self, stack):
        create = stack.use_cases["create_reservation"]
        a = await create.execute(CUSTOMER_ID, VEHICLE_ID, date(2024, 5, 1), date(2024, 5, 2))
        b = await create.execute(CUSTOMER_ID, OTHER_VEHICLE_ID, date(2024, 5, 1), date(2024, 5, 2))

        page = await _search(stack, sort_descending=False)

        assert [i.id for i in page.items] == sorted([a.id, b.id])


class TestPayments:
    @pytest.mark.asyncio
    async def test_balance_tracks_completed_payments(self, stack):
        reservation = await stack.use_cases["create_reservation"].execute(
            CUSTOMER_ID, VEHICLE_ID, date(2024, 3, 1), date(2024, 3, 4)
        )
        record = stack.use_cases["record_payment"]

        await record.execute(reservation.id, Decimal("100.00"), PaymentMethod.CREDIT_CARD)
        await record.execute(reservation.id, Decimal("25.00"), PaymentMethod.CASH, status=PaymentStatus.FAILED)
        balance = await stack.use_cases["get_reservation_balance"].execute(reservation.id)

        assert balance.total_amount == Decimal("150.00")
        assert balance.total_paid == Decimal("100.00")
        assert balance.remaining_balance == Decimal("50.00")
        assert not balance.is_fully_paid
        assert len(balance.payments) == 2

        await record.execute(reservation.id, Decimal("50.00"), PaymentMethod.BANK_TRANSFER)
        balance = await stack.use_cases["get_reservation_balance"].execute(reservation.id)
        assert balance.is_fully_paid
        assert balance.remaining_balance == Decimal("0")

    @pytest.mark.asyncio
    async def test_only_completed_payments_notify(self, stack):
        reservation = await stack.use_cases["create_reservation"].execute(
            CUSTOMER_ID, VEHICLE_ID, date(2024, 3, 1), date(2024, 3, 4)
        )
        record = stack.use_cases["record_payment"]

        await record.execute(reservation.id, Decimal("10.00"), PaymentMethod.CASH, status=PaymentStatus.PENDING)
        assert stack.dispatcher.jobs == []

        payment = await record.execute(reservation.id, Decimal("10.00"), PaymentMethod.CASH)
        assert stack.dispatcher.names == ["payment_received"]
        assert payment.payment_date == stack.clock.now()

    @pytest.mark.asyncio
    async def test_non_positive_amount_rejected(self, stack):
        reservation = await stack.use_cases["create_reservation"].execute(
            CUSTOMER_ID, VEHICLE_ID, date(2024, 3, 1), date(2024, 3, 4)
        )
        with pytest.raises(ValidationError):
            await stack.use_cases["record_payment"].execute(reservation.id, Decimal("0"), PaymentMethod.CASH)

    @pytest.mark.asyncio
    async def test_cancelled_reservation_rejects_payments(self, stack):
        reservation = await stack.use_cases["create_reservation"].execute(
            CUSTOMER_ID, VEHICLE_ID, date(2024, 3, 1), date(2024, 3, 4)
        )
        await stack.use_cases["cancel_reservation"].execute(reservation.id)

        with pytest.raises(InvalidReservationStatusError):
            await stack.use_cases["record_payment"].execute(reservation.id, Decimal("10"), PaymentMethod.CASH)

    @pytest.mark.asyncio
    async def test_unknown_reservation(self, stack):
        with pytest.raises(ReservationNotFoundError):
            await stack.use_cases["record_payment"].execute("missing", Decimal("10"), PaymentMethod.CASH)
        with pytest.raises(ReservationNotFoundError):
            await stack.use_cases["get_reservation_balance"].execute("missing")
