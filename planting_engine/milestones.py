"""Derive planting milestone dates from a crop profile and frost date."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any

from .constants import DEFAULT_DIRECT_SOW_WINDOW_WEEKS
from .crop_profile import CropTimingProfile
from .date_utils import DateLike, parse_date

__all__ = [
    "PlantingMilestones",
    "compute_milestones",
    "earliest_plant_date",
    "main_plant_date",
]


@dataclass(slots=True, frozen=True)
class PlantingMilestones:
    """Calendar dates derived for one crop. Any field may be ``None``."""

    indoor_start_date: date | None = None
    transplant_date: date | None = None
    direct_sow_earliest: date | None = None
    direct_sow_latest: date | None = None
    estimated_harvest_date: date | None = None

    @property
    def has_any(self) -> bool:
        """Return ``True`` if at least one planting milestone exists."""
        return main_plant_date(self) is not None

    def as_dict(self) -> dict[str, Any]:
        """Return milestones as ISO date strings, ``None`` when absent."""
        return {
            "indoor_start_date": _iso(self.indoor_start_date),
            "transplant_date": _iso(self.transplant_date),
            "direct_sow_earliest": _iso(self.direct_sow_earliest),
            "direct_sow_latest": _iso(self.direct_sow_latest),
            "estimated_harvest_date": _iso(self.estimated_harvest_date),
        }


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _weeks(count: int) -> timedelta:
    return timedelta(weeks=count)


def earliest_plant_date(milestones: PlantingMilestones) -> date | None:
    """Return the earliest of indoor start, transplant and direct sow dates."""

    candidates = [
        d
        for d in (
            milestones.indoor_start_date,
            milestones.transplant_date,
            milestones.direct_sow_earliest,
        )
        if d is not None
    ]
    return min(candidates) if candidates else None


def main_plant_date(milestones: PlantingMilestones) -> date | None:
    """Return the most actionable planting date.

    Transplanting wins over direct sowing, which wins over starting seeds
    indoors.
    """

    for candidate in (
        milestones.transplant_date,
        milestones.direct_sow_earliest,
        milestones.indoor_start_date,
    ):
        if candidate is not None:
            return candidate
    return None


def compute_milestones(
    profile: CropTimingProfile, reference_date: DateLike
) -> PlantingMilestones:
    """Return the planting milestones for ``profile``.

    Parameters
    ----------
    profile : CropTimingProfile
        Crop timing parameters. Unset fields produce no milestone.
    reference_date : date | str
        Last frost date, as a date or ISO ``YYYY-MM-DD`` string.

    Returns
    -------
    PlantingMilestones
        When only one direct sow bound is configured the other one is filled
        in: a missing latest bound becomes earliest plus four weeks while a
        missing earliest bound collapses onto the latest one.
    """

    frost = parse_date(reference_date)

    indoor = None
    if profile.indoor_start_weeks_before_frost is not None:
        indoor = frost - _weeks(profile.indoor_start_weeks_before_frost)

    transplant = None
    if profile.transplant_weeks_relative_to_frost is not None:
        transplant = frost + _weeks(profile.transplant_weeks_relative_to_frost)

    sow_earliest = None
    if profile.direct_sow_weeks_before_frost is not None:
        sow_earliest = frost - _weeks(profile.direct_sow_weeks_before_frost)

    sow_latest = None
    if profile.direct_sow_weeks_after_frost is not None:
        sow_latest = frost + _weeks(profile.direct_sow_weeks_after_frost)

    if sow_earliest is not None and sow_latest is None:
        sow_latest = sow_earliest + _weeks(DEFAULT_DIRECT_SOW_WINDOW_WEEKS)
    elif sow_latest is not None and sow_earliest is None:
        sow_earliest = sow_latest

    milestones = PlantingMilestones(
        indoor_start_date=indoor,
        transplant_date=transplant,
        direct_sow_earliest=sow_earliest,
        direct_sow_latest=sow_latest,
    )

    plant_date = earliest_plant_date(milestones)
    if plant_date is None or profile.days_to_maturity is None:
        return milestones

    return replace(
        milestones,
        estimated_harvest_date=plant_date + timedelta(days=profile.days_to_maturity),
    )
