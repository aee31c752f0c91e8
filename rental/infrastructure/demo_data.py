"""Demo customers and vehicles loaded into a fresh backend."""

from datetime import date
from decimal import Decimal

from rental.domain.entities.customer import Customer
from rental.domain.entities.vehicle import Vehicle
from rental.infrastructure.in_memory.customer_repo import InMemoryCustomerRepo
from rental.infrastructure.in_memory.vehicle_repo import InMemoryVehicleRepo

DEMO_CUSTOMERS = [
    {
        "id": "c0000000-0000-4000-8000-000000000001",
        "first_name": "Ana",
        "last_name": "Torres",
        "email": "ana.torres@example.com",
        "date_of_birth": date(1988, 4, 12),
        "is_active": True,
    },
    {
        "id": "c0000000-0000-4000-8000-000000000002",
        "first_name": "Luis",
        "last_name": "Mendez",
        "email": "luis.mendez@example.com",
        "date_of_birth": date(1995, 11, 30),
        "is_active": True,
    },
]

DEMO_VEHICLES = [
    {
        "id": "v0000000-0000-4000-8000-000000000001",
        "brand": "Toyota",
        "model": "Yaris",
        "license_plate": "DEM-001",
        "base_daily_rate": Decimal("45.00"),
        "daily_rate": None,
        "mileage": 12000,
    },
    {
        "id": "v0000000-0000-4000-8000-000000000002",
        "brand": "Honda",
        "model": "CR-V",
        "license_plate": "DEM-002",
        "base_daily_rate": Decimal("60.00"),
        "daily_rate": Decimal("55.00"),
        "mileage": 30500,
    },
]


def seed_in_memory(customer_repo: InMemoryCustomerRepo, vehicle_repo: InMemoryVehicleRepo) -> None:
    for row in DEMO_CUSTOMERS:
        customer_repo.add(Customer(**row))
    for row in DEMO_VEHICLES:
        vehicle_repo.add(Vehicle(**row))
