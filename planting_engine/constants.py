"""Central constants used across the planting engine."""

from __future__ import annotations

# Window classification thresholds in days relative to the main planting date.
TOO_EARLY_AFTER_DAYS = 28
OPTIMAL_GRACE_DAYS = -7
LATE_LIMIT_DAYS = -28

# Direct sow window synthesized when only the earliest bound is configured.
DEFAULT_DIRECT_SOW_WINDOW_WEEKS = 4

NOT_SET_TEXT = "Not set"
INVALID_DATE_TEXT = "Invalid date"

# Fixed English names so rendering never depends on the process locale.
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

__all__ = [
    "TOO_EARLY_AFTER_DAYS",
    "OPTIMAL_GRACE_DAYS",
    "LATE_LIMIT_DAYS",
    "DEFAULT_DIRECT_SOW_WINDOW_WEEKS",
    "NOT_SET_TEXT",
    "INVALID_DATE_TEXT",
    "MONTH_NAMES",
]
