"""Apartment portfolio ingestion, reconciliation and reporting."""

from mathwaa_portfolio.attribution import classify_source
from mathwaa_portfolio.exceptions import FormatError, PortfolioError
from mathwaa_portfolio.ingestion import parse_apartments
from mathwaa_portfolio.seed import build_default_branches
from mathwaa_portfolio.store import PortfolioStore

__version__ = "0.1.0"

__all__ = [
    "FormatError",
    "PortfolioError",
    "PortfolioStore",
    "__version__",
    "build_default_branches",
    "classify_source",
    "parse_apartments",
]
