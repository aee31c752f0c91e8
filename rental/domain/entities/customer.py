"""Customer entity - owned by the customer module, read by reservations."""

from dataclasses import dataclass
from datetime import date

MINIMUM_RENTAL_AGE = 18


@dataclass
class Customer:
    id: str
    first_name: str
    last_name: str
    email: str
    date_of_birth: date | None = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def age_on(self, day: date) -> int | None:
        if self.date_of_birth is None:
            return None
        dob = self.date_of_birth
        years = day.year - dob.year
        if (day.month, day.day) < (dob.month, dob.day):
            years -= 1
        return years

    def is_eligible(self, on_date: date) -> bool:
        """An active customer of legal rental age may book vehicles."""
        if not self.is_active:
            return False
        age = self.age_on(on_date)
        return age is not None and age >= MINIMUM_RENTAL_AGE
