"""Succession planting schedules."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from .crop_profile import CropTimingProfile
from .date_utils import DateLike
from .milestones import compute_milestones, main_plant_date

__all__ = ["iter_succession_dates", "succession_dates"]


def iter_succession_dates(
    profile: CropTimingProfile, reference_date: DateLike, count: int
) -> Iterator[date]:
    """Yield up to ``count`` sowing dates spaced by the succession interval.

    Nothing is yielded when the crop has no succession interval, when
    ``count`` is below one or when no planting date can be derived.
    """

    interval = profile.succession_interval_weeks
    if not interval or count < 1:
        return

    first = main_plant_date(compute_milestones(profile, reference_date))
    if first is None:
        return

    step = timedelta(weeks=interval)
    for index in range(count):
        yield first + step * index


def succession_dates(
    profile: CropTimingProfile, reference_date: DateLike, count: int
) -> list[date]:
    """Return the first ``count`` succession planting dates."""
    return list(iter_succession_dates(profile, reference_date, count))
