"""Human readable planting instructions."""

from __future__ import annotations

from dataclasses import dataclass

from .crop_profile import CropTimingProfile
from .date_utils import DateLike, format_long_date, format_month_day
from .milestones import PlantingMilestones, compute_milestones

__all__ = [
    "PlantingInstructions",
    "format_instructions",
    "instructions_from_milestones",
]


@dataclass(slots=True, frozen=True)
class PlantingInstructions:
    """One sentence per available milestone."""

    indoor_start: str | None = None
    transplant: str | None = None
    direct_sow: str | None = None
    harvest: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return only the instructions that are present."""
        data = {
            "indoor_start": self.indoor_start,
            "transplant": self.transplant,
            "direct_sow": self.direct_sow,
            "harvest": self.harvest,
        }
        return {key: value for key, value in data.items() if value is not None}


def _direct_sow_text(milestones: PlantingMilestones) -> str | None:
    earliest = milestones.direct_sow_earliest
    latest = milestones.direct_sow_latest
    if earliest is None:
        return None
    if latest is None:
        return f"Direct sow starting {format_long_date(earliest)}"
    if earliest == latest:
        return f"Direct sow on {format_long_date(earliest)}"
    return (
        f"Direct sow between {format_month_day(earliest)} "
        f"and {format_long_date(latest)}"
    )


def instructions_from_milestones(milestones: PlantingMilestones) -> PlantingInstructions:
    """Return instructions for already computed ``milestones``."""

    indoor = milestones.indoor_start_date
    transplant = milestones.transplant_date
    harvest = milestones.estimated_harvest_date
    return PlantingInstructions(
        indoor_start=(
            f"Start seeds indoors on {format_long_date(indoor)}" if indoor else None
        ),
        transplant=(
            f"Transplant outdoors on {format_long_date(transplant)}"
            if transplant
            else None
        ),
        direct_sow=_direct_sow_text(milestones),
        harvest=(
            f"Estimated harvest: {format_long_date(harvest)}" if harvest else None
        ),
    )


def format_instructions(
    profile: CropTimingProfile, reference_date: DateLike
) -> PlantingInstructions:
    """Return planting instructions for ``profile`` and the last frost date."""

    return instructions_from_milestones(compute_milestones(profile, reference_date))
