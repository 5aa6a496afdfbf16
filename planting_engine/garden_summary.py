"""Dashboard style summaries over the crops in a garden."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any

from .crop_profile import CropTimingProfile
from .date_utils import DateLike, days_from_today, parse_date
from .milestones import compute_milestones, main_plant_date
from .planting_window import WindowStatus, classify_window

__all__ = [
    "CropStatus",
    "PlannedCrop",
    "PlannedDates",
    "GardenSummary",
    "HarvestCountdown",
    "planned_dates",
    "summarize_garden",
    "harvest_countdowns",
]

THIS_WEEK_DAYS = 7


class CropStatus(StrEnum):
    """Lifecycle of a crop in a garden."""

    PLANNED = "planned"
    PLANTED = "planted"
    HARVESTING = "harvesting"
    HARVESTED = "harvested"


@dataclass(slots=True, frozen=True)
class PlannedCrop:
    """A crop the gardener added to their garden.

    ``estimated_harvest_date`` is the date stored when the crop was added; it
    is recomputed from the profile when missing.
    """

    name: str
    profile: CropTimingProfile
    status: CropStatus = CropStatus.PLANNED
    estimated_harvest_date: DateLike | None = None


@dataclass(slots=True, frozen=True)
class PlannedDates:
    """Dates stored alongside a crop when it is added to a garden."""

    planned_plant_date: date | None
    estimated_harvest_date: date | None

    def as_dict(self) -> dict[str, str | None]:
        return {
            "planned_plant_date": (
                self.planned_plant_date.isoformat() if self.planned_plant_date else None
            ),
            "estimated_harvest_date": (
                self.estimated_harvest_date.isoformat()
                if self.estimated_harvest_date
                else None
            ),
        }


@dataclass(slots=True)
class GardenSummary:
    """Counts and highlights for a garden on a given day."""

    total_crops: int = 0
    ready_to_plant: int = 0
    overdue_plantings: int = 0
    upcoming_harvests: int = 0
    planting_this_week: list[str] = field(default_factory=list)
    days_to_next_planting: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "total_crops": self.total_crops,
            "ready_to_plant": self.ready_to_plant,
            "overdue_plantings": self.overdue_plantings,
            "upcoming_harvests": self.upcoming_harvests,
            "planting_this_week": list(self.planting_this_week),
            "days_to_next_planting": self.days_to_next_planting,
        }


def planned_dates(profile: CropTimingProfile, reference_date: DateLike) -> PlannedDates:
    """Return the planting and harvest dates to record for ``profile``."""

    milestones = compute_milestones(profile, reference_date)
    return PlannedDates(
        planned_plant_date=main_plant_date(milestones),
        estimated_harvest_date=milestones.estimated_harvest_date,
    )


def summarize_garden(
    crops: Iterable[PlannedCrop], reference_date: DateLike, today: date
) -> GardenSummary:
    """Return a :class:`GardenSummary` of ``crops`` as seen on ``today``.

    Only planned crops take part in the planting figures. Crops without any
    planting milestone still count as ready to plant, mirroring
    :func:`~planting_engine.planting_window.classify_window`, but are left out
    of the overdue, this week and next planting figures.
    """

    frost = parse_date(reference_date)
    summary = GardenSummary()
    upcoming: list[int] = []

    for crop in crops:
        summary.total_crops += 1
        if crop.status in (CropStatus.PLANTED, CropStatus.HARVESTING):
            summary.upcoming_harvests += 1
            continue
        if crop.status != CropStatus.PLANNED:
            continue

        if classify_window(crop.profile, frost, today) is WindowStatus.OPTIMAL:
            summary.ready_to_plant += 1

        main = main_plant_date(compute_milestones(crop.profile, frost))
        if main is None:
            continue
        days = (main - today).days
        if days < 0:
            summary.overdue_plantings += 1
            continue
        upcoming.append(days)
        if days <= THIS_WEEK_DAYS:
            summary.planting_this_week.append(crop.name)

    summary.days_to_next_planting = min(upcoming) if upcoming else None
    return summary


@dataclass(slots=True, frozen=True)
class HarvestCountdown:
    """Days left until a growing crop is expected to be ready."""

    name: str
    harvest_date: date
    days_until: int

    @property
    def ready(self) -> bool:
        return self.days_until < 0

    def describe(self) -> str:
        if self.ready:
            return "Ready to harvest"
        unit = "day" if self.days_until == 1 else "days"
        return f"Harvest in {self.days_until} {unit}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "harvest_date": self.harvest_date.isoformat(),
            "days_until": self.days_until,
            "ready": self.ready,
        }


def harvest_countdowns(
    crops: Iterable[PlannedCrop], reference_date: DateLike, today: date
) -> list[HarvestCountdown]:
    """Return harvest countdowns for planted and harvesting crops.

    The stored harvest date wins over the one derived from the profile. Crops
    without a usable harvest date are skipped. A crop whose harvest date is
    today is still counting down; it reads as ready from the next day on.
    """

    frost = parse_date(reference_date)
    countdowns: list[HarvestCountdown] = []
    for crop in crops:
        if crop.status not in (CropStatus.PLANTED, CropStatus.HARVESTING):
            continue
        harvest = crop.estimated_harvest_date
        if harvest is None:
            harvest = planned_dates(crop.profile, frost).estimated_harvest_date
        days = days_from_today(harvest, today)
        if days is None:
            continue
        countdowns.append(HarvestCountdown(crop.name, parse_date(harvest), days))
    return countdowns
