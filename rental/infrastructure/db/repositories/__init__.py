from rental.infrastructure.db.repositories.customer_repo_sql import CustomerRepoSQL
from rental.infrastructure.db.repositories.payment_repo_sql import PaymentRepoSQL
from rental.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from rental.infrastructure.db.repositories.vehicle_repo_sql import VehicleRepoSQL

__all__ = [
    "ReservationRepoSQL",
    "CustomerRepoSQL",
    "VehicleRepoSQL",
    "PaymentRepoSQL",
]
