import warnings
from datetime import date, datetime

import pytest

from study_dates import DAYFIRST_WARNING, DateOrder, parse_started_at, started_on

TODAY = date(2026, 10, 18)


@pytest.mark.parametrize(
    "value",
    [
        "2026-10-18",
        "2026-10-18T09:15:00Z",
        "2026-10-18 23:59:59",
        "2026-10-18T09:15:00.123456+00:00",
    ],
)
def test_iso_timestamps_on_the_day_match(value):
    assert started_on(value, TODAY)


def test_yesterday_does_not_match():
    assert not started_on("2026-10-17T23:59:00Z", TODAY)


def test_offsets_are_normalized_to_utc_before_comparing():
    # 00:30 at +02:00 is 22:30 UTC the previous evening
    value = "2026-10-18T00:30:00+02:00"

    assert parse_started_at(value) == datetime(2026, 10, 17, 22, 30)
    assert not started_on(value, TODAY)
    assert started_on(value, date(2026, 10, 17))


def test_naive_timestamps_are_taken_as_utc():
    assert parse_started_at("2026-10-18 00:05") == datetime(2026, 10, 18, 0, 5)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "N/A", "today", "now"])
def test_unreadable_values_are_never_today(value):
    assert parse_started_at(value) is None
    assert not started_on(value, TODAY)


def test_auto_reads_ambiguous_slash_dates_month_first():
    assert parse_started_at("05/03/2026") == datetime(2026, 5, 3)


def test_auto_falls_back_to_day_first_when_month_is_impossible():
    assert parse_started_at("18/10/2026 09:30") == datetime(2026, 10, 18, 9, 30)
    assert started_on("18/10/2026 09:30", TODAY)


def test_auto_uses_day_first_pattern_when_general_parser_gives_up():
    assert parse_started_at("18/10/2026 09:30 edited") == datetime(2026, 10, 18, 9, 30)


def test_day_first_policy_changes_ambiguous_dates():
    # Behavior change from AUTO: the same text lands on a different day.
    assert parse_started_at("05/03/2026", DateOrder.DAY_FIRST) == datetime(2026, 3, 5)
    assert parse_started_at("05/03/2026", DateOrder.MONTH_FIRST) == datetime(2026, 5, 3)


def test_explicit_policy_reads_time_of_day():
    assert parse_started_at("5/3/2026 14:07", DateOrder.DAY_FIRST) == datetime(2026, 3, 5, 14, 7)
    assert parse_started_at("5/3/2026T14:07", DateOrder.MONTH_FIRST) == datetime(2026, 5, 3, 14, 7)


def test_explicit_policy_rejects_impossible_dates():
    assert parse_started_at("5/13/2026", DateOrder.DAY_FIRST) is None
    assert parse_started_at("13/5/2026", DateOrder.MONTH_FIRST) is None


def test_explicit_policy_leaves_iso_values_to_general_parser():
    assert parse_started_at("2026-10-18T09:15:00Z", DateOrder.DAY_FIRST) == datetime(2026, 10, 18, 9, 15)


def test_dayfirst_guess_warning_is_filtered_by_message():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        warnings.filterwarnings("ignore", message=DAYFIRST_WARNING, category=UserWarning)

        assert parse_started_at("18/10/2026") == datetime(2026, 10, 18)

    assert not [w for w in caught if issubclass(w.category, UserWarning)]
