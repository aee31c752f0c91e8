from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, condecimal, constr

from rental.domain.entities.payment import PaymentMethod, PaymentStatus

Money = condecimal(max_digits=12, decimal_places=2)


class RecordPaymentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: Money
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.COMPLETED
    transaction_reference: constr(strip_whitespace=True, max_length=100) | None = None
    notes: constr(max_length=500) | None = None


class PaymentResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={Decimal: lambda v: format(v, ".2f")},
    )

    id: str
    reservation_id: str
    amount: Money
    method: PaymentMethod
    status: PaymentStatus
    payment_date: datetime | None = None
    transaction_reference: str | None = None
    notes: str | None = None


class ReservationBalanceResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={Decimal: lambda v: format(v, ".2f")},
    )

    reservation_id: str
    total_amount: Money
    total_paid: Money
    remaining_balance: Money
    is_fully_paid: bool
    payments: list[PaymentResponse]
