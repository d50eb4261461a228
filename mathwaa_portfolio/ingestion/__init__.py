"""Spreadsheet ingestion."""

from mathwaa_portfolio.ingestion.parser import (
    HEADER_PREFIXES,
    REQUIRED_COLUMNS,
    build_header_map,
    parse_apartments,
)

__all__ = ["HEADER_PREFIXES", "REQUIRED_COLUMNS", "build_header_map", "parse_apartments"]
