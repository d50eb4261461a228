"""Derived dashboard metrics."""

from mathwaa_portfolio.reporting.metrics import (
    BranchCashComparison,
    DashboardSummary,
    Occupancy,
    ShareRange,
    ShareSplit,
    attribution_histogram,
    branch_occupancy,
    build_summary,
    cash_vs_target,
    monthly_target_share,
    portfolio_occupancy,
    share_range,
    share_split,
    total_cash_collected,
    total_lifetime_value,
    total_target_revenue,
)

__all__ = [
    "BranchCashComparison",
    "DashboardSummary",
    "Occupancy",
    "ShareRange",
    "ShareSplit",
    "attribution_histogram",
    "branch_occupancy",
    "build_summary",
    "cash_vs_target",
    "monthly_target_share",
    "portfolio_occupancy",
    "share_range",
    "share_split",
    "total_cash_collected",
    "total_lifetime_value",
    "total_target_revenue",
]
