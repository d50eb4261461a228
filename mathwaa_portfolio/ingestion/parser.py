"""Apartment spreadsheet parser.

Turns a comma-separated export (one header row, one row per unit) into
validated ``ApartmentRecord`` objects. Columns are located by
case-insensitive header prefix, so order and extra columns do not matter.

Missing numeric data is inferred rather than rejected:

- Duration defaults to ``1`` when the cell has no leading digits, and is
  forced to ``1`` when it reads ``0`` but a lifetime value was recorded.
- Monthly rent is derived as ``lifetime value / duration`` when the rent
  cell is blank or zero.

Any structural problem raises ``FormatError`` and aborts the whole batch.
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal

from mathwaa_portfolio.exceptions import FormatError
from mathwaa_portfolio.models import ApartmentRecord, ApartmentStatus, ApartmentType

logger = logging.getLogger(__name__)

APT = "Apt #"
TYPE = "Type"
STATUS = "Status"
MONTHLY_RENT = "Monthly Rent"
CASH_COLLECTED = "Cash Collected"
DURATION = "Duration"
LIFETIME_VALUE = "Lifetime Value"
SOURCE = "Source"

# Logical column -> lowercase header prefix
HEADER_PREFIXES: dict[str, str] = {
    APT: "apt",
    TYPE: "type",
    STATUS: "status",
    MONTHLY_RENT: "monthly rent",
    CASH_COLLECTED: "cash collected",
    DURATION: "estimated",
    LIFETIME_VALUE: "lifetime",
    SOURCE: "booking source",
}

REQUIRED_COLUMNS: tuple[str, ...] = (APT, TYPE, STATUS, CASH_COLLECTED, LIFETIME_VALUE, SOURCE)

TYPE_ABBREVIATIONS: dict[str, ApartmentType] = {
    "1br": ApartmentType.ONE_BEDROOM,
    "2br": ApartmentType.TWO_BEDROOM,
    "st": ApartmentType.STUDIO,
}

CENTS = Decimal("0.01")
ZERO = Decimal("0")

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_DECIMAL = re.compile(r"[0-9]*(?:\.[0-9]*)?")
_LEADING_DIGITS = re.compile(r"^([0-9]+)")
_STRICT_AMOUNT = re.compile(r"^[0-9]+(?:\.[0-9]+)?$")
# Only LF and CRLF end a row; other Unicode separators stay inside cells
_LINE_BREAK = re.compile(r"\r?\n")


def build_header_map(header_line: str) -> dict[str, int]:
    """Map logical column names to cell indexes of ``header_line``.

    The first header cell matching a prefix wins; cells matching no prefix
    are ignored.
    """
    header_map: dict[str, int] = {}
    for index, raw in enumerate(header_line.split(",")):
        cell = raw.strip().strip("\"'").strip().lower()
        for column, prefix in HEADER_PREFIXES.items():
            if cell.startswith(prefix):
                header_map.setdefault(column, index)
                break
    return header_map


def parse_apartments(raw_text: str, *, strict_numeric: bool = False) -> list[ApartmentRecord]:
    """Parse spreadsheet text into apartment records, in file order.

    Parameters
    ----------
    raw_text : str
        Comma-separated text with a header row.
    strict_numeric : bool
        Reject malformed numeric cells instead of stripping stray characters.

    Returns
    -------
    list[ApartmentRecord]
        One record per data row. Duplicate unit numbers are kept.

    Raises
    ------
    FormatError
        On missing rows, a missing required column, or an invalid row.
    """
    lines = [line for line in _LINE_BREAK.split(raw_text) if line.strip()]
    if len(lines) < 2:
        raise FormatError("missing_rows")

    header_map = build_header_map(lines[0])
    for column in REQUIRED_COLUMNS:
        if column not in header_map:
            raise FormatError("missing_column", column=column)

    records = [
        _parse_row(line.split(","), header_map, index + 2, strict_numeric)
        for index, line in enumerate(lines[1:])
    ]
    logger.debug("Parsed %d apartment rows", len(records))
    return records


def parse_unit_type(raw: str) -> ApartmentType | None:
    """Resolve an abbreviation (``1br``, ``2br``, ``st``) or full type name."""
    key = raw.strip().lower()
    if key in TYPE_ABBREVIATIONS:
        return TYPE_ABBREVIATIONS[key]
    for unit_type in ApartmentType:
        if unit_type.value.lower() == key:
            return unit_type
    return None


def parse_status(raw: str) -> ApartmentStatus | None:
    """Resolve a status cell by prefix, e.g. ``"RENTED - ACTIVE"``."""
    upper = raw.strip().upper()
    for status in ApartmentStatus:
        if upper.startswith(status.value):
            return status
    return None


def parse_amount(raw: str) -> Decimal:
    """Leniently parse a money cell: every non-digit, non-dot character is dropped."""
    stripped = _NON_NUMERIC.sub("", raw)
    leading = _LEADING_DECIMAL.match(stripped).group(0)
    if not any(ch.isdigit() for ch in leading):
        return ZERO
    return Decimal(leading)


def parse_duration(raw: str, lifetime_value: Decimal) -> int:
    """Parse the leading digits of a duration cell such as ``"12 months"``."""
    match = _LEADING_DIGITS.match(raw.strip())
    months = int(match.group(1)) if match else 1
    if months == 0 and lifetime_value > 0:
        months = 1
    return months


def derive_monthly_rent(lifetime_value: Decimal, months: int) -> Decimal:
    return (lifetime_value / months).quantize(CENTS, rounding=ROUND_HALF_UP)


def _cell(values: list[str], header_map: dict[str, int], column: str) -> str | None:
    index = header_map.get(column)
    if index is None or index >= len(values):
        return None
    return values[index]


def _amount(
    values: list[str],
    header_map: dict[str, int],
    column: str,
    row: int,
    strict_numeric: bool,
) -> Decimal:
    raw = _cell(values, header_map, column) or ""
    if strict_numeric:
        text = raw.strip()
        if not text:
            return ZERO
        if not _STRICT_AMOUNT.match(text):
            raise FormatError("invalid_amount", row=row, column=column, value=text)
        return Decimal(text)
    return parse_amount(raw)


def _parse_row(
    values: list[str],
    header_map: dict[str, int],
    row: int,
    strict_numeric: bool,
) -> ApartmentRecord:
    number = (_cell(values, header_map, APT) or "").strip()
    if not number:
        raise FormatError("empty_number", row=row)

    type_raw = (_cell(values, header_map, TYPE) or "").strip()
    unit_type = parse_unit_type(type_raw)
    if unit_type is None:
        raise FormatError("invalid_type", row=row, value=type_raw)

    status_raw = (_cell(values, header_map, STATUS) or "").strip()
    status = parse_status(status_raw)
    if status is None:
        raise FormatError("invalid_status", row=row, value=status_raw)

    lifetime_value = _amount(values, header_map, LIFETIME_VALUE, row, strict_numeric)

    months = parse_duration(_cell(values, header_map, DURATION) or "0", lifetime_value)

    monthly_rent = _amount(values, header_map, MONTHLY_RENT, row, strict_numeric)
    if monthly_rent == 0 and lifetime_value > 0 and months > 0:
        monthly_rent = derive_monthly_rent(lifetime_value, months)

    cash_collected = _amount(values, header_map, CASH_COLLECTED, row, strict_numeric)

    how_heard = (_cell(values, header_map, SOURCE) or "").strip() or None

    return ApartmentRecord(
        id=number,
        number=number,
        unit_type=unit_type,
        status=status,
        monthly_rent=monthly_rent,
        contract_duration_months=months,
        cash_collected=cash_collected,
        how_heard=how_heard,
        lifetime_value=lifetime_value,
    )
