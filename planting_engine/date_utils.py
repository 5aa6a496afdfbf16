"""Calendar date helpers shared by the engine and display code."""

from __future__ import annotations

import logging
from datetime import date, datetime

from .constants import INVALID_DATE_TEXT, MONTH_NAMES, NOT_SET_TEXT

__all__ = [
    "parse_date",
    "format_long_date",
    "format_month_day",
    "format_date",
    "is_past",
    "days_from_today",
]

_LOGGER = logging.getLogger(__name__)

DateLike = date | datetime | str


def parse_date(value: DateLike) -> date:
    """Return ``value`` as a calendar :class:`~datetime.date`.

    ``datetime`` values and ISO-8601 timestamps are truncated to their date
    component. A :class:`ValueError` is raised for anything else.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise ValueError(f"Invalid date string: {value!r}") from exc
    raise ValueError(f"Unsupported date value: {value!r}")


def format_month_day(value: date) -> str:
    """Return ``value`` as ``"Month D"``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}"


def format_long_date(value: date) -> str:
    """Return ``value`` as ``"Month D, YYYY"``."""
    return f"{format_month_day(value)}, {value.year}"


def format_date(value: DateLike | None) -> str:
    """Return a display string for ``value``.

    Missing values render as ``"Not set"`` and anything that cannot be parsed
    renders as ``"Invalid date"``; this helper never raises.
    """

    if value is None or value == "":
        return NOT_SET_TEXT
    try:
        return format_long_date(parse_date(value))
    except ValueError:
        _LOGGER.debug("Cannot format %r as a date", value)
        return INVALID_DATE_TEXT


def is_past(value: DateLike | None, today: date) -> bool:
    """Return ``True`` if ``value`` falls strictly before ``today``."""

    if value is None:
        return False
    try:
        return parse_date(value) < today
    except ValueError:
        return False


def days_from_today(value: DateLike | None, today: date) -> int | None:
    """Return signed whole days from ``today`` to ``value``.

    Negative numbers mean the date has passed. ``None`` is returned when
    ``value`` is missing or cannot be parsed.
    """

    if value is None:
        return None
    try:
        return (parse_date(value) - today).days
    except ValueError:
        return None
