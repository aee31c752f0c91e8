from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, condecimal, constr

from rental.domain.entities.reservation import ReservationStatus

Money = condecimal(max_digits=12, decimal_places=2)


class CreateReservationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_id: constr(strip_whitespace=True, min_length=1, max_length=36)
    vehicle_id: constr(strip_whitespace=True, min_length=1, max_length=36)
    start_date: date
    end_date: date
    notes: constr(max_length=1000) | None = None


class CompleteReservationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    final_mileage: int


class ReservationResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={Decimal: lambda v: format(v, ".2f")},
    )

    id: str
    customer_id: str
    vehicle_id: str
    start_date: date
    end_date: date
    rental_days: int
    daily_rate: Money
    total_amount: Money
    status: ReservationStatus
    qr_code: str | None = None
    notes: str | None = None
    final_mileage: int | None = None
    lock_version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReservationSummaryResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={Decimal: lambda v: format(v, ".2f")},
    )

    id: str
    customer_id: str
    customer_name: str
    vehicle_id: str
    vehicle_info: str
    start_date: date
    end_date: date
    rental_days: int
    total_amount: Money
    status: ReservationStatus
    created_at: datetime | None = None


class ReservationPageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[ReservationSummaryResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool


class QrCodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: str
    qr_code_base64: str
