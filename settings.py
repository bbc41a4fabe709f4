"""Runtime configuration read from the environment (and a local ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from logging_setup import get_logger
from prolific_earnings import DEFAULT_CONVERSION_RATE
from study_dates import DateOrder

_LOG = get_logger("daily_earnings.settings")


@dataclass(frozen=True)
class Settings:
    conversion_rate: float = DEFAULT_CONVERSION_RATE
    date_order: DateOrder = DateOrder.AUTO
    log_level: str = "INFO"


def _rate_from_env(raw: str | None) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_CONVERSION_RATE
    try:
        rate = float(raw)
    except ValueError:
        rate = None
    if rate is None or rate != rate or rate <= 0:
        _LOG.warning("Ignoring EARNINGS_GBP_USD_RATE=%r; using %s", raw, DEFAULT_CONVERSION_RATE)
        return DEFAULT_CONVERSION_RATE
    return rate


def _date_order_from_env(raw: str | None) -> DateOrder:
    if raw is None or raw.strip() == "":
        return DateOrder.AUTO
    try:
        return DateOrder(raw.strip().lower())
    except ValueError:
        _LOG.warning("Ignoring EARNINGS_DATE_ORDER=%r; using %s", raw, DateOrder.AUTO.value)
        return DateOrder.AUTO


def load_settings(dotenv: bool = True) -> Settings:
    """Build ``Settings`` from ``EARNINGS_*`` environment variables.

    Bad values never stop the app: they are logged and replaced by defaults.
    """
    if dotenv:
        load_dotenv()
    return Settings(
        conversion_rate=_rate_from_env(os.getenv("EARNINGS_GBP_USD_RATE")),
        date_order=_date_order_from_env(os.getenv("EARNINGS_DATE_ORDER")),
        log_level=(os.getenv("EARNINGS_LOG_LEVEL") or "INFO").strip() or "INFO",
    )
