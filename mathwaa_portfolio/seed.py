"""Startup portfolio for the two Mathwaa buildings.

Each building has 32 units over four floors of eight. Rented units come
from the leasing sheet below; every other unit is vacant at its floor's
list rent.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from mathwaa_portfolio.models import (
    ApartmentRecord,
    ApartmentStatus,
    ApartmentType,
    Branch,
    RevenueTarget,
)

MATHWAA_SHARE_PERCENTAGE = Decimal("0.20")
MATHWAA_CURRENCY = "SAR"

UNITS_PER_BRANCH = 32
UNITS_PER_FLOOR = 8


@dataclass(frozen=True)
class LeaseEntry:
    """One row of a branch's leasing sheet."""

    number: str
    cash: Decimal
    duration: int
    ltv: Decimal
    source: str


@dataclass(frozen=True)
class BranchSeed:
    """Static definition of one branch."""

    id: str
    name: str
    prefix: str
    target: RevenueTarget
    floor_rents: tuple[Decimal, Decimal, Decimal, Decimal]  # ground floor first
    one_bedroom_threshold: Decimal  # rent or cash above this means One Bedroom
    leases: tuple[LeaseEntry, ...]


def _leases(rows: list[tuple[str, int, int, int, str]]) -> tuple[LeaseEntry, ...]:
    return tuple(
        LeaseEntry(number=n, cash=Decimal(cash), duration=d, ltv=Decimal(ltv), source=s)
        for n, cash, d, ltv, s in rows
    )


MATHWAA_52 = BranchSeed(
    id="mathwaa-52",
    name="Mathwaa 52 - Al Murooj",
    prefix="52",
    target=RevenueTarget(min=Decimal("819000"), max=Decimal("936000")),
    floor_rents=(Decimal("2400"), Decimal("2300"), Decimal("2200"), Decimal("2000")),
    one_bedroom_threshold=Decimal("2500"),
    leases=_leases([
        ("52-11", 2300, 12, 2300, "Social Media Campaign"),
        ("52-19", 2200, 12, 26400, "Bayut"),
        ("52-30", 2000, 12, 24000, "Social Media Campaign"),
        ("52-13", 2900, 12, 34800, "Aqar"),
        ("52-28", 2600, 12, 31200, "Aqar"),
        ("52-27", 2000, 12, 24000, "Bayut"),
        ("52-09", 2300, 12, 27600, "Social Media Campaign"),
        ("52-14", 2300, 12, 27600, "Word of Mouth"),
        ("52-18", 2400, 3, 7200, "Bayut"),
        ("52-32", 2000, 12, 24000, "Google Maps"),
        ("52-17", 2200, 12, 26400, "Word of Mouth"),
        ("52-26", 2200, 12, 26400, "Social Media Campaign"),
        ("52-29", 2600, 12, 31200, "Social Media Campaign"),
        ("52-10", 2500, 12, 30000, "Social Media Campaign"),
        ("52-22", 2200, 3, 6600, "Social Media Campaign"),
        ("52-20", 2200, 3, 6600, "Social Media Campaign"),
        ("52-21", 2200, 3, 2200, "Social Media Campaign"),
        ("52-24", 2200, 12, 26400, "Social Media Campaign"),
        ("52-16", 2300, 12, 27600, "Social Media Campaign"),
        ("52-15", 2500, 12, 30000, "Social Media Campaign"),
        ("52-25", 2200, 12, 26400, "Social Media Campaign"),
        ("52-23", 2400, 12, 28800, "Aqar"),
        ("52-31", 2200, 12, 26400, "Social Media Campaign"),
        ("52-06", 2400, 12, 28800, "Aqar"),
        ("52-08", 2400, 1, 2400, "Bayut"),
        ("52-02", 2600, 3, 2600, "Social Media Campaign"),
        ("52-03", 2400, 1, 2400, "Paid Social Advertising"),
        ("52-07", 2600, 12, 31200, "Bayut"),
    ]),
)

MATHWAA_53 = BranchSeed(
    id="mathwaa-53",
    name="Mathwaa 53 - Al Murooj",
    prefix="53",
    target=RevenueTarget(min=Decimal("907200"), max=Decimal("1036800")),
    floor_rents=(Decimal("2640"), Decimal("2530"), Decimal("2420"), Decimal("2200")),
    one_bedroom_threshold=Decimal("2800"),
    leases=_leases([
        ("53-25", 2200, 12, 26400, "Social Media Campaign"),
        ("53-13", 2530, 12, 30360, "Bayut"),
        ("53-03", 2640, 12, 31680, "Word of Mouth"),
        ("53-11", 2530, 12, 30360, "Social Media Campaign"),
        ("53-20", 2420, 1, 2420, "Social Media Campaign"),
        ("53-27", 2200, 12, 26400, "Google Maps"),
        ("53-29", 2200, 12, 26400, "Social Media Campaign"),
        ("53-28", 2420, 12, 29040, "Bayut"),
        ("53-32", 2200, 12, 26400, "Bayut"),
        ("53-26", 2860, 3, 8580, "Wasalt"),
        ("53-22", 2420, 2, 4840, "Social Media Campaign"),
        ("53-09", 2530, 12, 30360, "Bayut"),
        ("53-12", 2750, 12, 33000, "Social Media Campaign"),
    ]),
)

DEFAULT_BRANCH_SEEDS: tuple[BranchSeed, ...] = (MATHWAA_52, MATHWAA_53)


def list_rent(seed: BranchSeed, unit: int) -> Decimal:
    """List rent of 1-based ``unit`` by floor."""
    return seed.floor_rents[min((unit - 1) // UNITS_PER_FLOOR, len(seed.floor_rents) - 1)]


def _rented_unit(
    seed: BranchSeed,
    number: str,
    unit: int,
    entries: list[LeaseEntry],
) -> ApartmentRecord:
    # Several sheet rows for one unit fold into one record
    total_cash = sum((e.cash for e in entries), Decimal("0"))
    total_ltv = sum((e.ltv for e in entries), Decimal("0"))
    main = entries[0]
    for entry in entries[1:]:
        if entry.duration >= main.duration:
            main = entry

    rent = main.ltv / main.duration if main.duration else Decimal("0")
    if rent > 0:
        monthly_rent = rent.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    else:
        monthly_rent = list_rent(seed, unit)

    if rent > seed.one_bedroom_threshold or main.cash > seed.one_bedroom_threshold:
        unit_type = ApartmentType.ONE_BEDROOM
    else:
        unit_type = ApartmentType.STUDIO

    return ApartmentRecord(
        id=number,
        number=number,
        unit_type=unit_type,
        status=ApartmentStatus.RENTED,
        monthly_rent=monthly_rent,
        contract_duration_months=main.duration,
        cash_collected=total_cash,
        how_heard=main.source,
        lifetime_value=total_ltv,
    )


def _vacant_unit(seed: BranchSeed, number: str, unit: int) -> ApartmentRecord:
    return ApartmentRecord(
        id=number,
        number=number,
        unit_type=ApartmentType.ONE_BEDROOM if unit % 4 == 0 else ApartmentType.STUDIO,
        status=ApartmentStatus.VACANT,
        monthly_rent=list_rent(seed, unit),
        contract_duration_months=0,
        cash_collected=Decimal("0"),
        lifetime_value=Decimal("0"),
    )


def build_branch(seed: BranchSeed, units: int = UNITS_PER_BRANCH) -> Branch:
    """Build one branch's apartments from its seed definition."""
    apartments = []
    for unit in range(1, units + 1):
        number = f"{seed.prefix}-{unit:02d}"
        entries = [entry for entry in seed.leases if entry.number == number]
        if entries:
            apartments.append(_rented_unit(seed, number, unit, entries))
        else:
            apartments.append(_vacant_unit(seed, number, unit))

    return Branch(
        id=seed.id,
        name=seed.name,
        target_yearly_revenue=seed.target,
        apartments=tuple(apartments),
    )


def build_default_branches() -> tuple[Branch, ...]:
    """The portfolio the dashboard starts with."""
    return tuple(build_branch(seed) for seed in DEFAULT_BRANCH_SEEDS)
