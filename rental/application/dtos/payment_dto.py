"""DTOs for payments."""

from dataclasses import dataclass, field
from decimal import Decimal

from rental.domain.entities import payment as payment_rules
from rental.domain.entities.payment import Payment


@dataclass
class ReservationBalanceDTO:
    """Payments of a reservation and what is left to pay."""

    reservation_id: str
    total_amount: Decimal
    payments: list[Payment] = field(default_factory=list)

    @property
    def total_paid(self) -> Decimal:
        return payment_rules.total_paid(self.payments)

    @property
    def remaining_balance(self) -> Decimal:
        """Never negative; overpayment shows as zero remaining."""
        return max(self.total_amount - self.total_paid, Decimal("0"))

    @property
    def is_fully_paid(self) -> bool:
        return payment_rules.is_fully_paid(self.total_amount, self.payments)
