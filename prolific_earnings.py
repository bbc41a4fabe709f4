"""Today's earnings from a Prolific submissions export.

A study counts when it was started today and its status is not a terminal
failure. Rewards and bonuses are bucketed by the currency symbol in the raw
cell and GBP is converted to USD at a caller-supplied rate.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from amounts import GBP, USD, coerce_money, currency_of
from csv_table import CsvTable, parse_csv
from logging_setup import get_logger
from study_dates import DateOrder, started_on

_LOG = get_logger("daily_earnings.prolific_earnings")

DEFAULT_CONVERSION_RATE = 1.25

# Statuses that never pay. Anything else, including statuses Prolific adds
# later, is counted.
EXCLUDED_STATUSES = frozenset({"", "TIMED-OUT", "RETURNED", "REJECTED"})

DISPLAY_COLUMNS = ("Study", "Reward", "Bonus", "Status", "Completion Code", "Started At")


@dataclass(frozen=True)
class StudyRow:
    study: str = ""
    reward: str = ""
    bonus: str = ""
    status: str = ""
    completion_code: str = ""
    started_at: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> StudyRow:
        # Absent columns read as empty strings; there is no schema check.
        return cls(
            study=record.get("Study", ""),
            reward=record.get("Reward", ""),
            bonus=record.get("Bonus", ""),
            status=record.get("Status", ""),
            completion_code=record.get("Completion Code", ""),
            started_at=record.get("Started At", ""),
        )

    def display_values(self) -> tuple[str, ...]:
        return (self.study, self.reward, self.bonus, self.status, self.completion_code, self.started_at)


@dataclass(frozen=True)
class StudyEarningsResult:
    total_studies: int
    valid_studies: int
    usd_rewards: float
    gbp_rewards: float
    usd_bonuses: float
    gbp_bonuses: float
    total_earnings: float
    conversion_rate: float
    studies: tuple[StudyRow, ...] = ()


def load_studies(text: str) -> tuple[StudyRow, ...]:
    """Parse export text into rows; raises ``EmptyInputError`` without data."""
    return study_rows(parse_csv(text, require_data=True, skip_blank_lines=True))


def study_rows(table: CsvTable) -> tuple[StudyRow, ...]:
    return tuple(StudyRow.from_record(record) for record in table.records())


def effective_rate(value: float | str | None, default: float = DEFAULT_CONVERSION_RATE) -> float:
    """Rate typed into the form, or ``default`` when blank, zero or unreadable."""
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return default
    if rate != rate or rate == 0:
        return default
    return rate


def is_eligible_status(status: str | None) -> bool:
    return (status or "").upper().strip() not in EXCLUDED_STATUSES


def is_valid_study(row: StudyRow, today: date, order: DateOrder = DateOrder.AUTO) -> bool:
    return is_eligible_status(row.status) and started_on(row.started_at, today, order)


def aggregate_studies(
    rows: Iterable[StudyRow],
    today: date,
    conversion_rate: float = DEFAULT_CONVERSION_RATE,
    order: DateOrder = DateOrder.AUTO,
) -> StudyEarningsResult:
    """Filter ``rows`` to today's paying studies and total them.

    Amounts without a ``£`` or ``$`` symbol are parsed but land in neither
    bucket, so they do not reach ``total_earnings``.
    """
    rows = tuple(rows)
    valid = tuple(row for row in rows if is_valid_study(row, today, order))

    totals = {(USD, "reward"): 0.0, (GBP, "reward"): 0.0, (USD, "bonus"): 0.0, (GBP, "bonus"): 0.0}
    for row in valid:
        for kind, raw in (("reward", row.reward), ("bonus", row.bonus)):
            currency = currency_of(raw)
            if currency is None:
                _LOG.debug("no currency symbol in %s %r for study %r", kind, raw, row.study)
                continue
            totals[(currency, kind)] += coerce_money(raw)

    usd_rewards = totals[(USD, "reward")]
    gbp_rewards = totals[(GBP, "reward")]
    usd_bonuses = totals[(USD, "bonus")]
    gbp_bonuses = totals[(GBP, "bonus")]
    total_earnings = usd_rewards + usd_bonuses + (gbp_rewards + gbp_bonuses) * conversion_rate

    _LOG.info(
        "prolific export: %d/%d valid for %s, total=%.2f USD at rate %s",
        len(valid),
        len(rows),
        today.isoformat(),
        total_earnings,
        conversion_rate,
    )
    return StudyEarningsResult(
        total_studies=len(rows),
        valid_studies=len(valid),
        usd_rewards=usd_rewards,
        gbp_rewards=gbp_rewards,
        usd_bonuses=usd_bonuses,
        gbp_bonuses=gbp_bonuses,
        total_earnings=total_earnings,
        conversion_rate=conversion_rate,
        studies=valid,
    )
