"""Synthetic apartment spreadsheet exports."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from mathwaa_portfolio.generators.base import BaseGenerator
from mathwaa_portfolio.models.enums import ApartmentStatus, ApartmentType

FULL_HEADER = (
    "Apt #",
    "Type",
    "Status",
    "Monthly Rent",
    "Cash Collected",
    "Estimated Duration",
    "Lifetime Value",
    "Booking Source",
)

OPTIONAL_COLUMNS = ("Monthly Rent", "Estimated Duration")


class RentRollExportGenerator(BaseGenerator):
    """Generate apartment exports in the dashboard's upload format."""

    TYPE_CELLS = {
        ApartmentType.STUDIO: ("Studio", "st", "ST"),
        ApartmentType.ONE_BEDROOM: ("One Bedroom", "1br", "1BR"),
        ApartmentType.TWO_BEDROOM: ("Two Bedroom", "2br", "2BR"),
    }
    TYPE_WEIGHTS = {
        ApartmentType.STUDIO: 0.65,
        ApartmentType.ONE_BEDROOM: 0.30,
        ApartmentType.TWO_BEDROOM: 0.05,
    }

    # Monthly list rent range by unit type (SAR)
    RENT_RANGES = {
        ApartmentType.STUDIO: (2000, 2500),
        ApartmentType.ONE_BEDROOM: (2500, 3000),
        ApartmentType.TWO_BEDROOM: (3200, 4200),
    }

    DURATIONS = (1, 2, 3, 6, 12)
    DURATION_WEIGHTS = (0.10, 0.05, 0.20, 0.10, 0.55)

    KNOWN_SOURCES = (
        "Bayut",
        "Aqar",
        "Social Media Campaign",
        "Instagram",
        "TikTok Ad",
        "Word of Mouth",
        "Walk in",
        "Building Board",
        "Google Maps",
    )

    def generate(
        self,
        prefix: str,
        units: int = 32,
        occupancy: float = 0.6,
        reserved_rate: float = 0.05,
        include_optional: bool = True,
    ) -> str:
        """Generate one branch export as CSV text.

        Parameters
        ----------
        prefix : str
            Branch prefix of the unit numbers, e.g. ``"52"``.
        units : int
            Number of units (rows).
        occupancy : float
            Probability a unit is rented (0.0 to 1.0).
        reserved_rate : float
            Probability a non-rented unit is reserved.
        include_optional : bool
            Include the ``Monthly Rent`` and ``Estimated Duration`` columns.
            Without them, rent and duration must be inferred on import.

        Returns
        -------
        str
            Header line plus one line per unit.
        """
        header = [
            column for column in FULL_HEADER
            if include_optional or column not in OPTIONAL_COLUMNS
        ]
        lines = [",".join(header)]
        for row in self.generate_rows(prefix, units, occupancy, reserved_rate):
            lines.append(",".join(row[column] for column in header))
        return "\n".join(lines) + "\n"

    def generate_rows(
        self,
        prefix: str,
        units: int,
        occupancy: float,
        reserved_rate: float = 0.05,
    ) -> Iterator[dict[str, str]]:
        """Yield one row per unit, keyed by full header name."""
        for unit in range(1, units + 1):
            yield self._generate_row(f"{prefix}-{unit:02d}", occupancy, reserved_rate)

    def generate_source(self) -> str:
        """A booking source: mostly known channels, sometimes a referral."""
        rng = self.fake.random
        if rng.random() < 0.85:
            return rng.choice(self.KNOWN_SOURCES)
        return f"Referral - {self.fake.company()}".replace(",", "")

    def _generate_row(self, number: str, occupancy: float, reserved_rate: float) -> dict[str, str]:
        rng = self.fake.random
        unit_type = rng.choices(
            list(self.TYPE_WEIGHTS), weights=list(self.TYPE_WEIGHTS.values()), k=1
        )[0]
        low, high = self.RENT_RANGES[unit_type]
        rent = Decimal(rng.randrange(low, high + 1, 10))

        if rng.random() < occupancy:
            status = ApartmentStatus.RENTED
            duration = rng.choices(self.DURATIONS, weights=self.DURATION_WEIGHTS, k=1)[0]
            cash = rent * rng.randint(1, duration)
            ltv = rent * duration
            source = self.generate_source()
        else:
            if rng.random() < reserved_rate:
                status = ApartmentStatus.RESERVED
            else:
                status = ApartmentStatus.VACANT
            duration = 0
            cash = Decimal("0")
            ltv = Decimal("0")
            source = ""

        return {
            "Apt #": number,
            "Type": rng.choice(self.TYPE_CELLS[unit_type]),
            "Status": status.value,
            "Monthly Rent": str(rent),
            "Cash Collected": str(cash),
            "Estimated Duration": f"{duration} months" if duration else "0",
            "Lifetime Value": str(ltv),
            "Booking Source": source,
        }
