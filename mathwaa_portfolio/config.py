"""Configuration management for mathwaa-portfolio."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from mathwaa_portfolio.exceptions import ConfigurationError
from mathwaa_portfolio.messages import SUPPORTED_LOCALES
from mathwaa_portfolio.seed import MATHWAA_CURRENCY, MATHWAA_SHARE_PERCENTAGE


def _default_branch_prefixes() -> dict[str, str]:
    return {"52": "mathwaa-52", "53": "mathwaa-53"}


@dataclass
class IngestionConfig:
    """Spreadsheet ingestion configuration."""

    strict_numeric: bool = False
    allow_empty_batch: bool = False
    deduplicate: bool = True
    # Apartment-id prefix -> branch id, checked in insertion order
    branch_prefixes: dict[str, str] = field(default_factory=_default_branch_prefixes)
    locale: str = "en"


@dataclass
class ReportingConfig:
    """Reporting configuration."""

    share_percentage: Decimal = MATHWAA_SHARE_PERCENTAGE
    currency: str = MATHWAA_CURRENCY


@dataclass
class PortfolioConfig:
    """Main configuration for mathwaa-portfolio."""

    ingestion: IngestionConfig = field(default_factory=IngestionConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "PortfolioConfig":
        """Create config from environment variables."""
        import os

        locale = os.getenv("LOCALE", "en")
        if locale not in SUPPORTED_LOCALES:
            raise ConfigurationError(f"Unsupported locale: {locale}")

        ingestion = IngestionConfig(
            strict_numeric=_env_flag(os.getenv("STRICT_NUMERIC"), default=False),
            allow_empty_batch=_env_flag(os.getenv("ALLOW_EMPTY_BATCH"), default=False),
            deduplicate=_env_flag(os.getenv("DEDUPLICATE"), default=True),
            locale=locale,
        )

        reporting = ReportingConfig(
            share_percentage=_parse_share(
                os.getenv("SHARE_PERCENTAGE", str(MATHWAA_SHARE_PERCENTAGE))
            ),
            currency=os.getenv("CURRENCY", MATHWAA_CURRENCY),
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid SEED: {seed_str}") from e

        return cls(
            ingestion=ingestion,
            reporting=reporting,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )


def _env_flag(raw: str | None, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return raw.lower() == "true"


def _parse_share(raw: str) -> Decimal:
    try:
        share = Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"Invalid SHARE_PERCENTAGE: {raw}") from e
    if not share.is_finite() or not Decimal("0") <= share <= Decimal("1"):
        raise ConfigurationError(f"SHARE_PERCENTAGE must be between 0 and 1, got {raw}")
    return share
