"""Immutable value objects of the domain."""

from rental.domain.value_objects.date_range import DateRange

__all__ = ["DateRange"]
