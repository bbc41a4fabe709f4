"""Totals for the Connect earnings export.

The export has three money columns whose exact header text varies between
versions ("Payment Received", "PaymentReceived", "payment received (USD)"),
so columns are located by case-insensitive substring match.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from amounts import coerce_amount
from csv_table import CsvTable, parse_csv
from errors import MissingColumnError
from logging_setup import get_logger

_LOG = get_logger("daily_earnings.connect_earnings")

# logical column -> (display label, accepted spellings)
REQUIRED_COLUMNS: dict[str, tuple[str, tuple[str, ...]]] = {
    "received": ("Payment Received", ("payment received", "paymentreceived")),
    "pending": ("Payment Pending", ("payment pending", "paymentpending")),
    "bonused": ("Amount Bonused", ("amount bonused", "amountbonused")),
}


@dataclass(frozen=True)
class EarningsBreakdown:
    received: float
    pending: float
    bonused: float
    rows: int = 0

    @property
    def total(self) -> float:
        return self.received + self.pending + self.bonused


def find_column(headers: Sequence[str], spellings: Sequence[str]) -> int | None:
    """Index of the first header containing any spelling, else ``None``."""
    for index, header in enumerate(headers):
        lowered = header.lower()
        if any(s in lowered for s in spellings):
            return index
    return None


def resolve_columns(headers: Sequence[str]) -> dict[str, int]:
    """Map each required logical column to a header index.

    Raises ``MissingColumnError`` naming every unresolved column.
    """
    resolved = {}
    missing = []
    for key, (_label, spellings) in REQUIRED_COLUMNS.items():
        index = find_column(headers, spellings)
        if index is None:
            missing.append(key)
        else:
            resolved[key] = index
    if missing:
        raise MissingColumnError(missing, headers)
    _LOG.debug("resolved columns %s", resolved)
    return resolved


def aggregate_earnings(table: CsvTable) -> EarningsBreakdown:
    columns = resolve_columns(table.headers)
    totals = dict.fromkeys(columns, 0.0)
    for row in table.rows:
        for key, index in columns.items():
            totals[key] += coerce_amount(row[index])
    return EarningsBreakdown(rows=len(table), **totals)


def calculate_connect_earnings(text: str) -> EarningsBreakdown:
    """Parse a Connect export and total every row.

    A header-only file is valid and totals to zero. Blank lines are kept as
    empty rows, which count toward ``rows`` but add nothing to the totals.
    """
    table = parse_csv(text, require_data=False, skip_blank_lines=False)
    breakdown = aggregate_earnings(table)
    _LOG.info(
        "connect export: %d row(s), total=%.2f (received=%.2f pending=%.2f bonused=%.2f)",
        breakdown.rows,
        breakdown.total,
        breakdown.received,
        breakdown.pending,
        breakdown.bonused,
    )
    return breakdown
