#!/usr/bin/env python3
"""Print the planting events of one month for catalog crops."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
from scripts import ensure_repo_root_on_path

ROOT = ensure_repo_root_on_path()

from planting_engine.calendar_events import month_events
from planting_engine.crop_catalog import crops_in_category, load_profiles
from planting_engine.date_utils import parse_date
from planting_engine.utils import normalize_key

_LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="List sowing, transplant and harvest events for a month",
    )
    parser.add_argument("last_frost", help="Last frost date (YYYY-MM-DD)")
    parser.add_argument("year", type=int)
    parser.add_argument("month", type=int, help="Month number 1-12")
    parser.add_argument(
        "--crop",
        action="append",
        dest="crops",
        help="Crop to include, may be repeated (defaults to the whole catalog)",
    )
    parser.add_argument("--category", help="Only include crops of this category")
    parser.add_argument("--output", type=Path, help="Optional path to write the JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        last_frost = parse_date(args.last_frost)
    except ValueError as exc:
        parser.error(str(exc))
    if not 1 <= args.month <= 12:
        parser.error("month must be between 1 and 12")

    names = args.crops
    if args.category:
        in_category = crops_in_category(args.category)
        names = (
            in_category
            if names is None
            else [n for n in names if normalize_key(n) in in_category]
        )
    profiles = load_profiles(names)
    _LOGGER.info("Building calendar for %d crops", len(profiles))

    grid = month_events(profiles, last_frost, args.year, args.month)
    result = {
        day.isoformat(): [{"crop": e.crop, "event": e.kind.value} for e in events]
        for day, events in grid.items()
        if events
    }
    text = json.dumps(result, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text)
    else:
        print(text)


if __name__ == "__main__":  # pragma: no cover
    main()
