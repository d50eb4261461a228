"""Booking submission model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewBooking:
    """A completed booking form: rents one vacant unit."""

    branch_id: str
    apartment_id: str
    contract_duration_months: int
    how_heard: str
