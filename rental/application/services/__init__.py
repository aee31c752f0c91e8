"""Application services shared by the use cases."""

from rental.application.services.availability import AvailabilityChecker, find_overlapping
from rental.application.services.notifier import ReservationNotifier
from rental.application.services.reservation_search import search_reservations, to_summary

__all__ = [
    "AvailabilityChecker",
    "find_overlapping",
    "ReservationNotifier",
    "search_reservations",
    "to_summary",
]
