"""Vehicle entity - owned by the fleet module, read by reservations."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Vehicle:
    """
    A rentable vehicle.

    Attributes:
        base_daily_rate: Rate of the vehicle's type.
        daily_rate: Optional vehicle-specific override of the type rate.
        mileage: Current odometer reading.
    """

    id: str
    brand: str
    model: str
    license_plate: str
    base_daily_rate: Decimal
    daily_rate: Decimal | None = None
    mileage: int = 0

    def effective_daily_rate(self) -> Decimal:
        """Chargeable per-day price: the override if set, else the type rate."""
        if self.daily_rate is not None:
            return self.daily_rate
        return self.base_daily_rate

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model} ({self.license_plate})"
