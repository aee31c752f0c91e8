"""Rental pricing: billable day count and reservation totals."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from rental.domain.errors import ValidationError
from rental.domain.value_objects.date_range import DateRange

CENTS = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert to Decimal without inheriting binary float error."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Decimal rounded half-up to cents."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def rental_days(start_date: date, end_date: date) -> int:
    """
    Billable days for a rental.

    Business rule: whole calendar days between pickup and return, never
    less than one.
    """
    return max(1, DateRange(start=start_date, end=end_date).days)


def compute_total(daily_rate: Decimal | int | float | str, start_date: date, end_date: date) -> Decimal:
    """Total amount = daily rate x rental days, rounded to cents."""
    rate = to_decimal(daily_rate)
    if rate < 0:
        raise ValidationError("daily_rate", f"cannot be negative: {rate}")
    total = rate * rental_days(start_date, end_date)
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)
