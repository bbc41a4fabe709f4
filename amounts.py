"""Lenient money parsing used by both aggregators.

Bad numeric cells are a normal part of these exports (``N/A``, blanks,
stray text), so nothing here raises: unparsable input counts as zero.
"""

from __future__ import annotations

import re

# Longest leading decimal literal, the way browser ``parseFloat`` reads it:
# "12.5 USD" -> 12.5, "  -3" -> -3.0, "1e3" -> 1000.0, "abc" -> no match.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CURRENCY_NOISE = re.compile(r"[£$,]")

GBP = "GBP"
USD = "USD"


def coerce_amount(value: str | None) -> float:
    """Parse the leading number in ``value`` or return ``0.0``.

    Contract: ``None``, empty strings and text without a leading number give
    ``0.0``; trailing garbage after a number is ignored; the result is always
    finite.
    """
    if not value:
        return 0.0
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return 0.0
    number = float(match.group(1))
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def strip_currency(value: str | None) -> str:
    """Drop ``£``, ``$`` and thousands separators."""
    return _CURRENCY_NOISE.sub("", value or "")


def currency_of(value: str | None) -> str | None:
    """Bucket a raw amount by symbol; ``£`` wins when both are present."""
    raw = value or ""
    if "£" in raw:
        return GBP
    if "$" in raw:
        return USD
    return None


def coerce_money(value: str | None) -> float:
    return coerce_amount(strip_currency(value))
