from datetime import date, datetime

import pytest

from planting_engine.date_utils import (
    days_from_today,
    format_date,
    format_long_date,
    is_past,
    parse_date,
)


def test_format_long_date():
    assert format_long_date(date(2024, 4, 3)) == "April 3, 2024"
    assert format_long_date(date(2025, 12, 31)) == "December 31, 2025"


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2024, 4, 3), "April 3, 2024"),
        ("2024-12-25", "December 25, 2024"),
        (datetime(2024, 1, 5, 13, 0), "January 5, 2024"),
        ("2024-01-05T10:30:00", "January 5, 2024"),
        (None, "Not set"),
        ("", "Not set"),
        ("not-a-date", "Invalid date"),
        ("2024-02-30", "Invalid date"),
        (12345, "Invalid date"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_parse_date():
    assert parse_date(" 2024-05-15 ") == date(2024, 5, 15)
    assert parse_date(datetime(2024, 5, 15, 23, 59)) == date(2024, 5, 15)
    with pytest.raises(ValueError):
        parse_date("garbage")
    with pytest.raises(ValueError):
        parse_date(42)


def test_is_past():
    today = date(2024, 5, 15)
    assert is_past("2024-05-14", today)
    assert not is_past(today, today)
    assert not is_past(date(2024, 6, 1), today)
    assert not is_past("garbage", today)
    assert not is_past(None, today)


def test_days_from_today():
    today = date(2024, 5, 15)
    assert days_from_today(date(2024, 5, 20), today) == 5
    assert days_from_today("2024-05-01", today) == -14
    assert days_from_today("garbage", today) is None
    assert days_from_today(None, today) is None
