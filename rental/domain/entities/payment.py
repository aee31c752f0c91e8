"""Payment entity - a payment recorded against a reservation."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable


class PaymentStatus(str, Enum):
    """Possible states of a payment."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, Enum):
    """Supported payment methods."""

    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    BANK_TRANSFER = "BANK_TRANSFER"


@dataclass
class Payment:
    """
    A payment associated with a reservation.

    The reservation does not own its payments; they reference it by id.
    """

    id: str
    reservation_id: str
    amount: Decimal
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.COMPLETED
    payment_date: datetime | None = None
    transaction_reference: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    @property
    def is_successful(self) -> bool:
        return self.status == PaymentStatus.COMPLETED


def total_paid(payments: Iterable[Payment]) -> Decimal:
    """Sum of COMPLETED payments."""
    return sum((p.amount for p in payments if p.is_successful), Decimal("0"))


def is_fully_paid(total_amount: Decimal, payments: Iterable[Payment]) -> bool:
    """Fully paid means completed payments cover the reservation total."""
    return total_paid(payments) >= total_amount
