"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal

import pytest

from mathwaa_portfolio.models import (
    ApartmentRecord,
    ApartmentStatus,
    ApartmentType,
    Branch,
    RevenueTarget,
)
from mathwaa_portfolio.seed import build_default_branches
from mathwaa_portfolio.store import PortfolioStore

FULL_HEADER = (
    "Apt #,Type,Status,Monthly Rent,Cash Collected,Estimated Duration,Lifetime Value,Booking Source"
)

ENV_VARS = (
    "LOCALE",
    "STRICT_NUMERIC",
    "ALLOW_EMPTY_BATCH",
    "DEDUPLICATE",
    "SHARE_PERCENTAGE",
    "CURRENCY",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable read by PortfolioConfig.from_env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def full_header() -> str:
    """Header row with every recognised column."""
    return FULL_HEADER


@pytest.fixture
def sample_csv() -> str:
    """Five-unit export for branch 53."""
    return "\n".join([
        FULL_HEADER,
        "53-01,Studio,RENTED,2640,2640,12,31680,Bayut",
        "53-02,1br,Vacant,2640,0,0,0,",
        "53-03,ST,RESERVED,2640,0,0,0,",
        "53-04,One Bedroom,rented - active,2900,5800,6 months,17400,Instagram",
        "53-05,2BR,VACANT,3500,0,,0,",
    ])


@pytest.fixture
def branches() -> tuple[Branch, ...]:
    """The default two-branch portfolio."""
    return build_default_branches()


@pytest.fixture
def store(branches: tuple[Branch, ...]) -> PortfolioStore:
    """Store seeded with the default portfolio."""
    return PortfolioStore(branches=branches)


def _make_apartment(
    number: str,
    status: ApartmentStatus = ApartmentStatus.VACANT,
    rent: str = "2400",
    cash: str = "0",
    ltv: str = "0",
    months: int = 0,
    how_heard: str | None = None,
    unit_type: ApartmentType = ApartmentType.STUDIO,
) -> ApartmentRecord:
    """Build an apartment record with sensible defaults."""
    return ApartmentRecord(
        id=number,
        number=number,
        unit_type=unit_type,
        status=status,
        monthly_rent=Decimal(rent),
        contract_duration_months=months,
        cash_collected=Decimal(cash),
        how_heard=how_heard,
        lifetime_value=Decimal(ltv),
    )


def _make_branch(
    branch_id: str,
    apartments: list[ApartmentRecord],
    low: str = "0",
    high: str = "0",
) -> Branch:
    """Build a branch around ``apartments``."""
    return Branch(
        id=branch_id,
        name=branch_id.title(),
        target_yearly_revenue=RevenueTarget(min=Decimal(low), max=Decimal(high)),
        apartments=tuple(apartments),
    )


@pytest.fixture
def make_apartment():
    """Factory for apartment records."""
    return _make_apartment


@pytest.fixture
def make_branch():
    """Factory for branches."""
    return _make_branch
