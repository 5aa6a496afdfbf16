#!/usr/bin/env python3
"""Print the planting schedule of a catalog crop for a last frost date."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

# Ensure project root is on the Python path when executed directly
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
from scripts import ensure_repo_root_on_path

ROOT = ensure_repo_root_on_path()

from planting_engine.crop_catalog import (
    get_crop_name,
    get_crop_profile,
    recommend_antagonists,
    recommend_companions,
)
from planting_engine.date_utils import parse_date
from planting_engine.instructions import instructions_from_milestones
from planting_engine.milestones import compute_milestones
from planting_engine.planting_window import classify_window, days_until_planting
from planting_engine.succession import succession_dates

_LOGGER = logging.getLogger(__name__)


def _date_arg(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_schedule(crop: str, last_frost: date, today: date, succession: int = 0) -> dict:
    """Return the JSON serialisable schedule for ``crop``.

    :class:`KeyError` is raised when ``crop`` is not in the catalog.
    """

    profile = get_crop_profile(crop)
    if profile is None:
        raise KeyError(crop)

    milestones = compute_milestones(profile, last_frost)
    return {
        "crop": get_crop_name(crop),
        "last_frost_date": last_frost.isoformat(),
        "today": today.isoformat(),
        "profile": profile.as_dict(),
        "milestones": milestones.as_dict(),
        "instructions": instructions_from_milestones(milestones).as_dict(),
        "window_status": classify_window(profile, last_frost, today).value,
        "days_until_planting": days_until_planting(profile, last_frost, today),
        "succession_dates": [
            d.isoformat() for d in succession_dates(profile, last_frost, succession)
        ],
        "companions": recommend_companions(crop),
        "antagonists": recommend_antagonists(crop),
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Show planting dates and instructions for a crop",
    )
    parser.add_argument("crop", help="Crop name as listed in the catalog")
    parser.add_argument("last_frost", type=_date_arg, help="Last frost date (YYYY-MM-DD)")
    parser.add_argument(
        "--today",
        type=_date_arg,
        default=None,
        help="Date used for the window status (defaults to the current date)",
    )
    parser.add_argument(
        "--succession",
        type=int,
        default=0,
        help="Number of succession sowings to list",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    today = args.today or date.today()

    try:
        schedule = build_schedule(args.crop, args.last_frost, today, args.succession)
    except KeyError:
        parser.error(f"unknown crop: {args.crop}")

    _LOGGER.debug("Computed schedule for %s", schedule["crop"])
    text = json.dumps(schedule, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text)
    else:
        print(text)


if __name__ == "__main__":  # pragma: no cover
    main()
