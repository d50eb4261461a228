"""Branch (building) model."""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable

from mathwaa_portfolio.models.apartment import ApartmentRecord


@dataclass(frozen=True)
class RevenueTarget:
    """Yearly revenue range, configured externally."""

    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class Branch:
    """One physical building with its ordered apartment collection."""

    id: str
    name: str
    target_yearly_revenue: RevenueTarget
    apartments: tuple[ApartmentRecord, ...] = field(default_factory=tuple)

    def find_apartment(self, apartment_id: str) -> ApartmentRecord | None:
        """Return the apartment with ``apartment_id`` or None."""
        for apartment in self.apartments:
            if apartment.id == apartment_id:
                return apartment
        return None

    def with_apartments(self, apartments: Iterable[ApartmentRecord]) -> "Branch":
        """Return a copy of this branch holding ``apartments``."""
        return replace(self, apartments=tuple(apartments))
