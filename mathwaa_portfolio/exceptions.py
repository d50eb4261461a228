"""Custom exception hierarchy for mathwaa-portfolio."""

from typing import Any

from mathwaa_portfolio.messages import DEFAULT_LOCALE, render


class PortfolioError(Exception):
    """Base exception for all mathwaa-portfolio errors."""


class FormatError(PortfolioError):
    """Raised when an apartment spreadsheet cannot be ingested.

    The English rendering is the exception message; ``localized()`` renders
    the same failure for another dashboard locale.
    """

    def __init__(
        self,
        code: str,
        *,
        row: int | None = None,
        column: str | None = None,
        value: str | None = None,
    ) -> None:
        self.code = code
        self.row = row
        self.column = column
        self.value = value
        super().__init__(self.localized(DEFAULT_LOCALE))

    def localized(self, locale: str) -> str:
        """Render the error message for ``locale``."""
        params: dict[str, Any] = {"row": self.row, "column": self.column, "value": self.value}
        return render(self.code, locale, **params)


class EntityNotFoundError(PortfolioError):
    """Raised when a referenced entity does not exist."""


class BranchNotFoundError(EntityNotFoundError):
    """Raised when a branch id is not configured in the portfolio."""


class ApartmentNotFoundError(EntityNotFoundError):
    """Raised when an apartment id does not exist within its branch."""


class StaleStateError(PortfolioError):
    """Raised when a mutation was prepared against an outdated portfolio version."""


class ConfigurationError(PortfolioError):
    """Raised when configuration is invalid or missing."""
