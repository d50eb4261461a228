"""Dashboard metrics derived from branch state.

Every function here is a pure recomputation over the current branches;
nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Sequence

from mathwaa_portfolio.attribution import classify_source
from mathwaa_portfolio.models import (
    ApartmentRecord,
    AttributionCategory,
    Branch,
    RevenueTarget,
)
from mathwaa_portfolio.seed import MATHWAA_CURRENCY, MATHWAA_SHARE_PERCENTAGE
from mathwaa_portfolio.serialization import to_dict

CENTS = Decimal("0.01")
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class Occupancy:
    """Rented vs total units, with a whole-number percentage."""

    total: int
    rented: int
    percentage: int


@dataclass(frozen=True)
class ShareSplit:
    """A total divided between the operator and the investor."""

    manager_share: Decimal
    investor_share: Decimal


@dataclass(frozen=True)
class ShareRange:
    """A revenue range divided between the operator and the investor."""

    manager: RevenueTarget
    investor: RevenueTarget


@dataclass(frozen=True)
class BranchCashComparison:
    """Cash collected so far against the top of the yearly target."""

    branch_id: str
    name: str
    cash_collected: Decimal
    target_revenue: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Every figure the dashboard renders, computed in one pass."""

    branch_occupancy: dict[str, Occupancy]
    portfolio_occupancy: Occupancy
    total_target_revenue: RevenueTarget
    total_cash_collected: Decimal
    total_lifetime_value: Decimal
    cash_share: ShareSplit
    lifetime_value_share: ShareSplit
    target_share: ShareRange
    monthly_target_shares: dict[str, ShareRange]
    cash_vs_target: tuple[BranchCashComparison, ...]
    attribution: dict[AttributionCategory, int] = field(default_factory=dict)
    share_percentage: Decimal = MATHWAA_SHARE_PERCENTAGE
    currency: str = MATHWAA_CURRENCY

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for the presentation layer."""
        return to_dict(self)


def _all_apartments(branches: Iterable[Branch]) -> list[ApartmentRecord]:
    return [apartment for branch in branches for apartment in branch.apartments]


def _occupancy(apartments: Sequence[ApartmentRecord]) -> Occupancy:
    total = len(apartments)
    rented = sum(1 for apartment in apartments if apartment.is_rented)
    if total == 0:
        return Occupancy(total=0, rented=0, percentage=0)
    percentage = (Decimal(rented * 100) / total).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Occupancy(total=total, rented=rented, percentage=int(percentage))


def branch_occupancy(branch: Branch) -> Occupancy:
    """Occupancy of one branch; 0% for a branch with no units."""
    return _occupancy(branch.apartments)


def portfolio_occupancy(branches: Iterable[Branch]) -> Occupancy:
    """Occupancy over the union of all branches' units."""
    return _occupancy(_all_apartments(branches))


def branch_cash_collected(branch: Branch) -> Decimal:
    return sum((apartment.cash_collected for apartment in branch.apartments), Decimal("0"))


def total_cash_collected(branches: Iterable[Branch]) -> Decimal:
    """Sum of cash collected over every unit of every branch."""
    return sum((branch_cash_collected(branch) for branch in branches), Decimal("0"))


def total_lifetime_value(branches: Iterable[Branch]) -> Decimal:
    """Sum of lifetime value over every unit of every branch."""
    return sum(
        (apartment.lifetime_value or Decimal("0") for apartment in _all_apartments(branches)),
        Decimal("0"),
    )


def total_target_revenue(branches: Iterable[Branch]) -> RevenueTarget:
    low = Decimal("0")
    high = Decimal("0")
    for branch in branches:
        low += branch.target_yearly_revenue.min
        high += branch.target_yearly_revenue.max
    return RevenueTarget(min=low, max=high)


def share_split(total: Decimal, share_percentage: Decimal) -> ShareSplit:
    """Split ``total`` into ``total * share`` and ``total * (1 - share)``."""
    return ShareSplit(
        manager_share=total * share_percentage,
        investor_share=total * (1 - share_percentage),
    )


def share_range(target: RevenueTarget, share_percentage: Decimal) -> ShareRange:
    """Apply ``share_split`` to both bounds of a revenue range."""
    low = share_split(target.min, share_percentage)
    high = share_split(target.max, share_percentage)
    return ShareRange(
        manager=RevenueTarget(min=low.manager_share, max=high.manager_share),
        investor=RevenueTarget(min=low.investor_share, max=high.investor_share),
    )


def monthly_target_share(branch: Branch, share_percentage: Decimal) -> ShareRange:
    """Per-party monthly range of a branch's yearly target, rounded to cents."""
    yearly = share_range(branch.target_yearly_revenue, share_percentage)

    def _monthly(value: Decimal) -> Decimal:
        return (value / MONTHS_PER_YEAR).quantize(CENTS, rounding=ROUND_HALF_UP)

    return ShareRange(
        manager=RevenueTarget(min=_monthly(yearly.manager.min), max=_monthly(yearly.manager.max)),
        investor=RevenueTarget(
            min=_monthly(yearly.investor.min),
            max=_monthly(yearly.investor.max),
        ),
    )


def cash_vs_target(branches: Iterable[Branch]) -> tuple[BranchCashComparison, ...]:
    return tuple(
        BranchCashComparison(
            branch_id=branch.id,
            name=branch.name,
            cash_collected=branch_cash_collected(branch),
            target_revenue=branch.target_yearly_revenue.max,
        )
        for branch in branches
    )


def attribution_histogram(branches: Iterable[Branch]) -> dict[AttributionCategory, int]:
    """Count rented units with a recorded source, grouped by channel.

    Categories appear in order of first occurrence; channels with no
    bookings are absent.
    """
    counts: dict[AttributionCategory, int] = {}
    for apartment in _all_apartments(branches):
        if not apartment.is_rented or not apartment.how_heard:
            continue
        category = classify_source(apartment.how_heard)
        counts[category] = counts.get(category, 0) + 1
    return counts


def build_summary(
    branches: Sequence[Branch],
    share_percentage: Decimal = MATHWAA_SHARE_PERCENTAGE,
    currency: str = MATHWAA_CURRENCY,
) -> DashboardSummary:
    """Compute every dashboard figure for ``branches``.

    Parameters
    ----------
    branches : Sequence[Branch]
        Current portfolio state.
    share_percentage : Decimal
        Operator share of revenue, ``MATHWAA_SHARE_PERCENTAGE`` when shipped.
    currency : str
        ISO code the money figures are denominated in.

    Returns
    -------
    DashboardSummary
        All derived values.
    """
    cash = total_cash_collected(branches)
    lifetime = total_lifetime_value(branches)
    target = total_target_revenue(branches)
    return DashboardSummary(
        branch_occupancy={branch.id: branch_occupancy(branch) for branch in branches},
        portfolio_occupancy=portfolio_occupancy(branches),
        total_target_revenue=target,
        total_cash_collected=cash,
        total_lifetime_value=lifetime,
        cash_share=share_split(cash, share_percentage),
        lifetime_value_share=share_split(lifetime, share_percentage),
        target_share=share_range(target, share_percentage),
        monthly_target_shares={
            branch.id: monthly_target_share(branch, share_percentage) for branch in branches
        },
        cash_vs_target=cash_vs_target(branches),
        attribution=attribution_histogram(branches),
        share_percentage=share_percentage,
        currency=currency,
    )
