"""Map planting milestones onto calendar days."""

from __future__ import annotations

import calendar
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

import pandas as pd

from .crop_profile import CropTimingProfile
from .date_utils import DateLike, parse_date
from .milestones import PlantingMilestones, compute_milestones

__all__ = [
    "EventKind",
    "CalendarEvent",
    "events_for_crop",
    "event_kind_on",
    "month_events",
    "events_dataframe",
]


class EventKind(StrEnum):
    """Calendar event type, listed in display priority order."""

    INDOOR = "indoor"
    TRANSPLANT = "transplant"
    SOW = "sow"
    HARVEST = "harvest"


@dataclass(slots=True, frozen=True)
class CalendarEvent:
    """A single milestone of a crop placed on the calendar."""

    crop: str
    kind: EventKind
    date: date

    def as_dict(self) -> dict[str, str]:
        return {"crop": self.crop, "event": self.kind.value, "date": self.date.isoformat()}


def _milestone_days(milestones: PlantingMilestones) -> list[tuple[EventKind, date]]:
    pairs = (
        (EventKind.INDOOR, milestones.indoor_start_date),
        (EventKind.TRANSPLANT, milestones.transplant_date),
        (EventKind.SOW, milestones.direct_sow_earliest),
        (EventKind.HARVEST, milestones.estimated_harvest_date),
    )
    return [(kind, day) for kind, day in pairs if day is not None]


def events_for_crop(
    crop: str, profile: CropTimingProfile, reference_date: DateLike
) -> list[CalendarEvent]:
    """Return the calendar events of one crop in priority order."""

    milestones = compute_milestones(profile, reference_date)
    return [CalendarEvent(crop, kind, day) for kind, day in _milestone_days(milestones)]


def event_kind_on(
    profile: CropTimingProfile, reference_date: DateLike, day: date
) -> EventKind | None:
    """Return the first event kind of ``profile`` falling on ``day``."""

    for kind, event_day in _milestone_days(compute_milestones(profile, reference_date)):
        if event_day == day:
            return kind
    return None


def month_events(
    crops: Mapping[str, CropTimingProfile],
    reference_date: DateLike,
    year: int,
    month: int,
) -> dict[date, list[CalendarEvent]]:
    """Return every day of ``month`` mapped to the events falling on it.

    ``crops`` maps a crop name to its profile. Days without events map to an
    empty list so the result can drive a month grid directly. A crop shows up
    at most once per day, tagged with its first event kind on that day.
    """

    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")

    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    grid: dict[date, list[CalendarEvent]] = {
        first + timedelta(days=offset): [] for offset in range(days_in_month)
    }
    frost = parse_date(reference_date)
    for name, profile in crops.items():
        seen: set[date] = set()
        for event in events_for_crop(name, profile, frost):
            if event.date in grid and event.date not in seen:
                seen.add(event.date)
                grid[event.date].append(event)
    return grid


def events_dataframe(
    crops: Mapping[str, CropTimingProfile], reference_date: DateLike
) -> pd.DataFrame:
    """Return all events of ``crops`` as a :class:`pandas.DataFrame`.

    Columns are ``crop``, ``event`` and ``date`` (as ``datetime64``), sorted
    chronologically.
    """

    frost = parse_date(reference_date)
    rows = [
        event.as_dict()
        for name, profile in crops.items()
        for event in events_for_crop(name, profile, frost)
    ]
    if not rows:
        return pd.DataFrame(
            {
                "crop": pd.Series(dtype="object"),
                "event": pd.Series(dtype="object"),
                "date": pd.Series(dtype="datetime64[ns]"),
            }
        )
    df = pd.DataFrame(rows)
    df["date"] = pd.to_datetime(df["date"])
    return df.sort_values(["date", "crop"], kind="stable").reset_index(drop=True)
