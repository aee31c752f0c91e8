from datetime import date, timedelta
from decimal import Decimal

import pytest

from rental.domain.entities.reservation import ReservationStatus
from rental.domain.errors import ErrorKind, InvalidReservationStatusError, ValidationError
from tests.factories import NOW, make_reservation

LATER = NOW + timedelta(hours=1)


def test_create_computes_total_and_starts_pending():
    reservation = make_reservation(start=date(2024, 3, 1), end=date(2024, 3, 4))

    assert reservation.status == ReservationStatus.PENDING
    assert reservation.rental_days == 3
    assert reservation.total_amount == Decimal("150.00")
    assert reservation.lock_version == 0
    assert reservation.created_at == reservation.updated_at == NOW


@pytest.mark.parametrize(
    "rate, expected_rate, expected_total",
    [
        (Decimal("45.555"), Decimal("45.56"), Decimal("136.68")),
        (Decimal("45.554"), Decimal("45.55"), Decimal("136.65")),
        (39.99, Decimal("39.99"), Decimal("119.97")),
    ],
)
def test_create_rounds_rate_to_cents_before_pricing(rate, expected_rate, expected_total):
    reservation = make_reservation(start=date(2024, 3, 1), end=date(2024, 3, 4), daily_rate=rate)

    assert reservation.daily_rate == expected_rate
    assert reservation.daily_rate.as_tuple().exponent == -2
    assert reservation.total_amount == expected_total
    assert reservation.total_amount == reservation.daily_rate * reservation.rental_days


class TestHappyPath:
    def test_full_lifecycle(self):
        reservation = make_reservation()

        reservation.confirm(LATER)
        assert reservation.status == ReservationStatus.CONFIRMED
        reservation.start(LATER)
        assert reservation.status == ReservationStatus.IN_PROGRESS
        reservation.complete(1500, LATER)

        assert reservation.status == ReservationStatus.COMPLETED
        assert reservation.final_mileage == 1500
        assert reservation.updated_at == LATER
        assert reservation.is_terminal

    def test_total_is_not_recomputed_by_transitions(self):
        reservation = make_reservation()
        total = reservation.total_amount

        reservation.confirm(LATER)
        reservation.start(LATER)
        reservation.complete(10, LATER)

        assert reservation.total_amount == total


class TestInvalidTransitions:
    def test_cancel_then_confirm_fails(self):
        reservation = make_reservation()
        reservation.cancel(LATER)

        with pytest.raises(InvalidReservationStatusError) as exc_info:
            reservation.confirm(LATER)

        assert exc_info.value.kind == ErrorKind.INVALID_STATE
        assert exc_info.value.current_status == "CANCELLED"
        assert reservation.status == ReservationStatus.CANCELLED

    def test_cannot_cancel_in_progress_rental(self):
        reservation = make_reservation()
        reservation.confirm(LATER)
        reservation.start(LATER)

        with pytest.raises(InvalidReservationStatusError) as exc_info:
            reservation.cancel(LATER)

        assert exc_info.value.current_status == "IN_PROGRESS"
        assert reservation.status == ReservationStatus.IN_PROGRESS

    def test_complete_pending_names_the_required_path(self):
        reservation = make_reservation()

        with pytest.raises(InvalidReservationStatusError) as exc_info:
            reservation.complete(100, LATER)

        message = str(exc_info.value)
        assert "CONFIRMED" in message
        assert "IN_PROGRESS" in message
        assert "PENDING" in message

    def test_double_confirm_fails(self):
        reservation = make_reservation()
        reservation.confirm(LATER)

        with pytest.raises(InvalidReservationStatusError):
            reservation.confirm(LATER)

    def test_start_requires_confirmed(self):
        with pytest.raises(InvalidReservationStatusError):
            make_reservation().start(LATER)

    @pytest.mark.parametrize("terminal", ["completed", "cancelled"])
    def test_terminal_states_accept_nothing(self, terminal):
        reservation = make_reservation()
        if terminal == "completed":
            reservation.confirm(LATER)
            reservation.start(LATER)
            reservation.complete(10, LATER)
        else:
            reservation.cancel(LATER)
        status = reservation.status

        for transition in (
            lambda: reservation.confirm(LATER),
            lambda: reservation.start(LATER),
            lambda: reservation.complete(10, LATER),
            lambda: reservation.cancel(LATER),
            lambda: reservation.set_qr_code("payload", LATER),
        ):
            with pytest.raises(InvalidReservationStatusError):
                transition()
        assert reservation.status == status

    def test_failed_transition_leaves_timestamp_alone(self):
        reservation = make_reservation()
        with pytest.raises(InvalidReservationStatusError):
            reservation.start(LATER)
        assert reservation.updated_at == NOW


def test_cancel_allowed_from_confirmed():
    reservation = make_reservation()
    reservation.confirm(LATER)
    reservation.cancel(LATER)
    assert reservation.status == ReservationStatus.CANCELLED
    assert not reservation.blocks_vehicle


def test_negative_final_mileage_rejected():
    reservation = make_reservation()
    reservation.confirm(LATER)
    reservation.start(LATER)

    with pytest.raises(ValidationError):
        reservation.complete(-1, LATER)
    assert reservation.status == ReservationStatus.IN_PROGRESS


def test_set_qr_code_keeps_status():
    reservation = make_reservation()
    reservation.set_qr_code("abc", LATER)

    assert reservation.qr_code == "abc"
    assert reservation.status == ReservationStatus.PENDING
    assert reservation.updated_at == LATER


def test_check_can_complete_changes_nothing():
    reservation = make_reservation()
    reservation.confirm(NOW)
    reservation.start(NOW)

    reservation.check_can_complete(2000)

    assert reservation.status == ReservationStatus.IN_PROGRESS
    assert reservation.final_mileage is None
    assert reservation.updated_at == NOW


def test_check_can_complete_reports_status_before_mileage():
    reservation = make_reservation()

    with pytest.raises(InvalidReservationStatusError):
        reservation.check_can_complete(-5)
