"""In-memory portfolio store and reconciliation."""

from mathwaa_portfolio.store.portfolio import (
    IngestionResult,
    PortfolioStore,
    apply_booking,
    book_apartment,
    deduplicate_by_id,
    replace_branch_apartments,
    resolve_target_branch,
)

__all__ = [
    "IngestionResult",
    "PortfolioStore",
    "apply_booking",
    "book_apartment",
    "deduplicate_by_id",
    "replace_branch_apartments",
    "resolve_target_branch",
]
