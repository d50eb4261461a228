"""Command-line entry point for the portfolio core.

Configuration comes from the environment (see ``PortfolioConfig.from_env``).
Reports go to stdout as JSON; logs go to stderr.

Examples
--------
Dashboard figures after uploading a rent roll::

    mathwaa-portfolio summary --file units-53.csv

A synthetic export for branch 52::

    mathwaa-portfolio generate 52 --units 32 --occupancy 0.8
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from mathwaa_portfolio.config import PortfolioConfig
from mathwaa_portfolio.exceptions import ConfigurationError, EntityNotFoundError, FormatError
from mathwaa_portfolio.generators import RentRollExportGenerator
from mathwaa_portfolio.logging import get_logger, setup_logging_from_config
from mathwaa_portfolio.serialization import branch_to_dict
from mathwaa_portfolio.store import PortfolioStore

logger = get_logger(__name__)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathwaa-portfolio",
        description="Apartment portfolio ingestion and reporting",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser("summary", help="Print dashboard figures as JSON")
    summary.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Apartment spreadsheet to ingest first (repeatable)",
    )

    apartments = subparsers.add_parser("apartments", help="Print one branch's apartments")
    apartments.add_argument("branch_id", help="Branch id, e.g. mathwaa-52")
    apartments.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Apartment spreadsheet to ingest first (repeatable)",
    )

    generate = subparsers.add_parser("generate", help="Print a synthetic apartment export")
    generate.add_argument("prefix", help="Branch prefix of the unit numbers, e.g. 52")
    generate.add_argument("--units", type=int, default=32, help="Number of units (default: 32)")
    generate.add_argument(
        "--occupancy",
        type=float,
        default=0.6,
        help="Probability a unit is rented (default: 0.6)",
    )
    generate.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: SEED from the environment)",
    )
    generate.add_argument(
        "--no-optional",
        action="store_true",
        help="Omit the Monthly Rent and Estimated Duration columns",
    )
    return parser


def _ingest_files(store: PortfolioStore, files: Sequence[str]) -> None:
    for path in files:
        result = store.ingest_file(path)
        logger.info("%s: %s (%d units)", path, result.message, result.apartment_count)


def run(args: argparse.Namespace, config: PortfolioConfig) -> int:
    """Execute a parsed command against a fresh store."""
    if args.command == "generate":
        seed = args.seed if args.seed is not None else config.seed
        generator = RentRollExportGenerator(seed=seed)
        sys.stdout.write(
            generator.generate(
                args.prefix,
                units=args.units,
                occupancy=args.occupancy,
                include_optional=not args.no_optional,
            )
        )
        return 0

    store = PortfolioStore.from_config(config)
    _ingest_files(store, args.files)

    if args.command == "apartments":
        _print_json(branch_to_dict(store.get_branch(args.branch_id)))
    else:
        _print_json(store.summary().to_dict())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    try:
        config = PortfolioConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging_from_config(config, stream=sys.stderr)

    try:
        return run(args, config)
    except FormatError as e:
        logger.error("Upload rejected: %s", e)
        print(e.localized(config.ingestion.locale), file=sys.stderr)
        return 1
    except EntityNotFoundError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
