from rental.application.interfaces.reservation_repo import ReservationRepo
from rental.domain.entities.reservation import Reservation
from rental.domain.errors import ReservationNotFoundError


async def load_reservation(reservation_repo: ReservationRepo, reservation_id: str) -> Reservation:
    reservation = await reservation_repo.get_by_id(reservation_id)
    if reservation is None:
        raise ReservationNotFoundError(reservation_id)
    return reservation
