"""Portfolio state: branch routing, wholesale replacement and bookings.

The module-level functions are pure: they take a tuple of branches and
return a new tuple, leaving untouched branches and apartments as the very
same objects. ``PortfolioStore`` owns the current snapshot and serialises
mutations on it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from mathwaa_portfolio.config import IngestionConfig, PortfolioConfig, ReportingConfig
from mathwaa_portfolio.exceptions import (
    ApartmentNotFoundError,
    BranchNotFoundError,
    FormatError,
    StaleStateError,
)
from mathwaa_portfolio.ingestion.parser import parse_apartments
from mathwaa_portfolio.messages import render
from mathwaa_portfolio.models import ApartmentRecord, ApartmentStatus, Branch, NewBooking
from mathwaa_portfolio.reporting.metrics import DashboardSummary, build_summary
from mathwaa_portfolio.seed import build_default_branches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of a successful upload."""

    branch_id: str
    apartment_count: int
    message: str


def resolve_target_branch(
    records: Sequence[ApartmentRecord],
    branches: Sequence[Branch],
    branch_prefixes: Mapping[str, str],
    *,
    allow_empty: bool = False,
) -> str:
    """Pick the branch a parsed batch belongs to.

    Only the first record's id is inspected. A prefix hit routes to the
    mapped branch id; anything else falls back to the first branch.

    Parameters
    ----------
    records : Sequence[ApartmentRecord]
        Parsed batch, in file order.
    branches : Sequence[Branch]
        Configured branches.
    branch_prefixes : Mapping[str, str]
        Id prefix -> branch id, checked in order.
    allow_empty : bool
        Route an empty batch to the fallback branch instead of failing.

    Returns
    -------
    str
        Target branch id.

    Raises
    ------
    FormatError
        If ``records`` is empty and ``allow_empty`` is False.
    BranchNotFoundError
        If the fallback is needed but no branch is configured.
    """
    if not records and not allow_empty:
        raise FormatError("empty_batch")

    first_id = records[0].id if records else ""
    for prefix, branch_id in branch_prefixes.items():
        if first_id.startswith(prefix):
            return branch_id

    if not branches:
        raise BranchNotFoundError("No branches configured")
    return branches[0].id


def deduplicate_by_id(records: Iterable[ApartmentRecord]) -> list[ApartmentRecord]:
    """Collapse repeated ids: the last row's values at the first row's position."""
    by_id: dict[str, ApartmentRecord] = {}
    for record in records:
        by_id[record.id] = record
    return list(by_id.values())


def replace_branch_apartments(
    branches: Sequence[Branch],
    branch_id: str,
    records: Iterable[ApartmentRecord],
) -> tuple[Branch, ...]:
    """Return ``branches`` with one branch's apartments replaced wholesale."""
    if not any(branch.id == branch_id for branch in branches):
        raise BranchNotFoundError(f"Branch {branch_id} not found")

    new_apartments = tuple(records)
    return tuple(
        branch.with_apartments(new_apartments) if branch.id == branch_id else branch
        for branch in branches
    )


def book_apartment(
    branches: Sequence[Branch], booking: NewBooking
) -> tuple[tuple[Branch, ...], ApartmentRecord]:
    """Rent one unit and return the new branches along with the booked record.

    The only fields touched are status, duration, source and cash.
    One month's rent is recorded as collected on booking. Lifetime value is
    left as it was.

    Raises
    ------
    BranchNotFoundError
        If ``booking.branch_id`` is unknown.
    ApartmentNotFoundError
        If the apartment is not in that branch.
    """
    branch = next((b for b in branches if b.id == booking.branch_id), None)
    if branch is None:
        raise BranchNotFoundError(f"Branch {booking.branch_id} not found")

    apartment = branch.find_apartment(booking.apartment_id)
    if apartment is None:
        raise ApartmentNotFoundError(
            f"Apartment {booking.apartment_id} not found in branch {booking.branch_id}"
        )

    booked = replace(
        apartment,
        status=ApartmentStatus.RENTED,
        contract_duration_months=booking.contract_duration_months,
        how_heard=booking.how_heard,
        cash_collected=apartment.monthly_rent,
    )
    updated_branch = branch.with_apartments(
        booked if apt is apartment else apt for apt in branch.apartments
    )
    return tuple(updated_branch if b is branch else b for b in branches), booked


def apply_booking(branches: Sequence[Branch], booking: NewBooking) -> tuple[Branch, ...]:
    """Return ``branches`` with one unit rented; see ``book_apartment``."""
    updated, _ = book_apartment(branches, booking)
    return updated


@dataclass
class PortfolioStore:
    """In-memory owner of the branch collections.

    Every mutation swaps in a new snapshot and bumps ``version``; readers
    holding an older ``branches`` tuple keep a consistent view.
    """

    branches: tuple[Branch, ...] = field(default_factory=tuple)
    config: IngestionConfig = field(default_factory=IngestionConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)
    version: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.branches = tuple(self.branches)

    @classmethod
    def from_config(
        cls, config: PortfolioConfig, branches: Iterable[Branch] | None = None
    ) -> "PortfolioStore":
        """Create a store from config, starting from the default portfolio unless given one."""
        if branches is None:
            branches = build_default_branches()
        return cls(branches=tuple(branches), config=config.ingestion, reporting=config.reporting)

    def get_branch(self, branch_id: str) -> Branch:
        """Get a branch by id."""
        for branch in self.branches:
            if branch.id == branch_id:
                return branch
        raise BranchNotFoundError(f"Branch {branch_id} not found")

    def resolve_target_branch(self, records: Sequence[ApartmentRecord]) -> str:
        """Branch id an uploaded batch should replace."""
        return resolve_target_branch(
            records,
            self.branches,
            self.config.branch_prefixes,
            allow_empty=self.config.allow_empty_batch,
        )

    def replace_apartments(
        self,
        branch_id: str,
        records: Iterable[ApartmentRecord],
        *,
        expected_version: int | None = None,
    ) -> Branch:
        """Replace a branch's entire apartment collection.

        Parameters
        ----------
        branch_id : str
            Branch to replace.
        records : Iterable[ApartmentRecord]
            New apartments, in display order.
        expected_version : int | None
            When given, the replacement only applies if no other mutation
            happened since this version was read.

        Returns
        -------
        Branch
            The updated branch.
        """
        records = list(records)
        if self.config.deduplicate:
            unique = deduplicate_by_id(records)
            if len(unique) != len(records):
                logger.warning(
                    "Dropped %d duplicate apartment ids for branch %s",
                    len(records) - len(unique),
                    branch_id,
                )
            records = unique

        with self._lock:
            self._check_version(expected_version)
            self.branches = replace_branch_apartments(self.branches, branch_id, records)
            self.version += 1
            branch = self.get_branch(branch_id)
            version = self.version

        logger.info(
            "Replaced apartments of %s: %d units",
            branch_id,
            len(branch.apartments),
            extra={"branch_id": branch_id, "portfolio_version": version},
        )
        return branch

    def ingest(self, raw_text: str, locale: str | None = None) -> IngestionResult:
        """Parse an upload and replace the branch it belongs to.

        Either the whole batch is applied or nothing is; a ``FormatError``
        leaves the store untouched.
        """
        locale = locale or self.config.locale
        version = self.version
        records = parse_apartments(raw_text, strict_numeric=self.config.strict_numeric)
        branch_id = self.resolve_target_branch(records)
        logger.info(
            "Ingesting %d apartment rows into %s",
            len(records),
            branch_id,
            extra={"branch_id": branch_id},
        )
        branch = self.replace_apartments(branch_id, records, expected_version=version)
        return IngestionResult(
            branch_id=branch_id,
            apartment_count=len(branch.apartments),
            message=render("upload_success", locale),
        )

    def ingest_file(self, path: str | Path, locale: str | None = None) -> IngestionResult:
        """Read an uploaded spreadsheet from disk and ingest it."""
        try:
            raw_text = Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read upload %s: %s", path, e)
            raise FormatError("read_failed") from e
        return self.ingest(raw_text, locale=locale)

    def apply_booking(self, booking: NewBooking) -> ApartmentRecord:
        """Record a booking on one unit and return the updated record."""
        with self._lock:
            try:
                self.branches, booked = book_apartment(self.branches, booking)
            except (BranchNotFoundError, ApartmentNotFoundError) as e:
                logger.warning(
                    "Booking not applied: %s",
                    e,
                    extra={"branch_id": booking.branch_id, "apartment_id": booking.apartment_id},
                )
                raise
            self.version += 1
            version = self.version

        logger.info(
            "Booked %s in %s for %d months",
            booking.apartment_id,
            booking.branch_id,
            booking.contract_duration_months,
            extra={
                "branch_id": booking.branch_id,
                "apartment_id": booking.apartment_id,
                "portfolio_version": version,
            },
        )
        return booked

    def summary(self, share_percentage: Decimal | None = None) -> DashboardSummary:
        """Dashboard figures for the current snapshot, at the configured share by default."""
        if share_percentage is None:
            share_percentage = self.reporting.share_percentage
        return build_summary(self.branches, share_percentage, self.reporting.currency)

    def _check_version(self, expected_version: int | None) -> None:
        if expected_version is not None and expected_version != self.version:
            raise StaleStateError(
                f"Portfolio changed since version {expected_version} (now {self.version})"
            )
