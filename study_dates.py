"""Deciding whether a study's ``Started At`` falls on a given day.

Prolific exports have shipped several timestamp shapes (ISO 8601 with and
without offsets, ``M/D/YYYY H:MM``, ``D/M/YYYY``). ``parse_started_at`` reads
them with pandas' general-purpose parser and falls back to an explicit
slash-date pattern. Slash dates like ``05/03/2026`` are ambiguous; how they
are read is controlled by ``DateOrder``:

``AUTO``
    pandas decides (month first, day first when the month would be > 12),
    then ``D/M/YYYY`` for anything pandas rejects. This matches how the tool
    has always behaved.
``DAY_FIRST`` / ``MONTH_FIRST``
    Slash dates are always read in that order; other shapes go to pandas.

The comparison is on the UTC calendar date. Timestamps with an offset are
converted to UTC, naive ones are taken as already being UTC.
"""

from __future__ import annotations

import re
import warnings
from datetime import date, datetime
from enum import Enum

import pandas as pd

from logging_setup import get_logger

_LOG = get_logger("daily_earnings.study_dates")

# AUTO relies on pandas switching to day-first when the month would be > 12
DAYFIRST_WARNING = r"Parsing dates in .* format when dayfirst=.* was specified"
warnings.filterwarnings("ignore", message=DAYFIRST_WARNING, category=UserWarning)

SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:[ T](\d{1,2}):(\d{2}))?")
# pandas resolves these against the wall clock
_CLOCK_WORDS = {"now", "today"}


class DateOrder(str, Enum):
    AUTO = "auto"
    DAY_FIRST = "day-first"
    MONTH_FIRST = "month-first"


def _from_slash_match(match: re.Match, day_first: bool) -> datetime | None:
    first, second, year, hour, minute = match.groups()
    day, month = (first, second) if day_first else (second, first)
    try:
        return datetime(int(year), int(month), int(day), int(hour or 0), int(minute or 0))
    except ValueError:
        return None


def _general_parse(value: str) -> datetime | None:
    if value.lower() in _CLOCK_WORDS:
        return None
    parsed = pd.to_datetime(value, errors="coerce")
    if parsed is None or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert("UTC").tz_localize(None)
    return parsed.to_pydatetime()


def parse_started_at(value: str | None, order: DateOrder = DateOrder.AUTO) -> datetime | None:
    """Return a naive UTC ``datetime`` for ``value`` or ``None`` if unreadable."""
    text = (value or "").strip()
    if not text:
        return None

    match = SLASH_DATE.match(text)
    if match is not None and order is not DateOrder.AUTO:
        return _from_slash_match(match, day_first=order is DateOrder.DAY_FIRST)

    parsed = _general_parse(text)
    if parsed is not None:
        return parsed
    if match is not None:
        return _from_slash_match(match, day_first=True)
    return None


def started_on(value: str | None, day: date, order: DateOrder = DateOrder.AUTO) -> bool:
    """True when ``value`` parses and its UTC calendar date is ``day``.

    Unreadable values are never "today"; they are excluded, not errors.
    """
    parsed = parse_started_at(value, order)
    if parsed is None:
        _LOG.debug("unreadable Started At %r", value)
        return False
    return parsed.date() == day
