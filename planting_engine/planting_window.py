"""Classify how timely planting is relative to a given day."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from .constants import LATE_LIMIT_DAYS, OPTIMAL_GRACE_DAYS, TOO_EARLY_AFTER_DAYS
from .crop_profile import CropTimingProfile
from .date_utils import DateLike
from .milestones import compute_milestones, main_plant_date

__all__ = [
    "WindowStatus",
    "classify_days",
    "classify_window",
    "days_until_planting",
]


class WindowStatus(StrEnum):
    """Coarse planting window status."""

    TOO_EARLY = "too-early"
    OPTIMAL = "optimal"
    LATE = "late"
    TOO_LATE = "too-late"


def classify_days(days_until: int) -> WindowStatus:
    """Return the window status for a signed day offset.

    More than four weeks out is too early, up to one week overdue is still
    optimal, up to four weeks overdue is late and anything older is too late.
    """

    if days_until > TOO_EARLY_AFTER_DAYS:
        return WindowStatus.TOO_EARLY
    if days_until >= OPTIMAL_GRACE_DAYS:
        return WindowStatus.OPTIMAL
    if days_until >= LATE_LIMIT_DAYS:
        return WindowStatus.LATE
    return WindowStatus.TOO_LATE


def _main_date(profile: CropTimingProfile, reference_date: DateLike) -> date | None:
    return main_plant_date(compute_milestones(profile, reference_date))


def classify_window(
    profile: CropTimingProfile, reference_date: DateLike, today: date
) -> WindowStatus:
    """Return the planting window status of ``profile`` on ``today``.

    Crops without any planting milestone are reported as optimal so that
    incomplete crop data never blocks the caller.
    """

    main = _main_date(profile, reference_date)
    if main is None:
        return WindowStatus.OPTIMAL
    return classify_days((main - today).days)


def days_until_planting(
    profile: CropTimingProfile, reference_date: DateLike, today: date
) -> int:
    """Return signed days from ``today`` to the main planting date.

    Negative values are overdue. ``0`` is also returned when nothing is
    scheduled at all, so callers that need to tell the two apart should check
    :func:`~planting_engine.milestones.main_plant_date` first.
    """

    main = _main_date(profile, reference_date)
    if main is None:
        return 0
    return (main - today).days
