"""Apartment record model."""

from dataclasses import dataclass
from decimal import Decimal

from mathwaa_portfolio.models.enums import ApartmentStatus, ApartmentType


@dataclass(frozen=True)
class ApartmentRecord:
    """One leasable unit and its current occupancy and financial state.

    ``id`` and ``number`` are always equal, formatted ``"<prefix>-<unit>"``
    (e.g. ``"52-07"``). Unit numbers are unique within a branch only.
    """

    id: str
    number: str
    unit_type: ApartmentType
    status: ApartmentStatus
    monthly_rent: Decimal
    contract_duration_months: int  # 0 only when not rented
    cash_collected: Decimal  # Cumulative for the current contract
    how_heard: str | None = None
    lifetime_value: Decimal = Decimal("0")  # Contracted value of the current lease

    @property
    def is_rented(self) -> bool:
        return self.status == ApartmentStatus.RENTED

    def implied_monthly_rent(self) -> Decimal | None:
        """Rent implied by lifetime value and duration, if a duration is set."""
        if self.contract_duration_months <= 0:
            return None
        return self.lifetime_value / self.contract_duration_months
