"""Tests for listing order helpers."""

from datetime import date

from client_hub.services import date_sort_key


def test_missing_dates_sort_last() -> None:
    values = [None, date(2026, 12, 1), None, date(2026, 10, 20)]
    assert sorted(values, key=date_sort_key) == [
        date(2026, 10, 20),
        date(2026, 12, 1),
        None,
        None,
    ]


def test_far_future_date_still_precedes_missing() -> None:
    assert date_sort_key(date.max) < date_sort_key(None)
