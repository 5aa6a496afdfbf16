"""Planting date calculations anchored on the last frost date."""

from __future__ import annotations

from . import (
    calendar_events,
    crop_catalog,
    crop_profile,
    date_utils,
    garden_summary,
    instructions,
    milestones,
    planting_window,
    succession,
    utils,
)
from .calendar_events import *  # noqa: F401,F403
from .crop_catalog import *  # noqa: F401,F403
from .crop_profile import *  # noqa: F401,F403
from .date_utils import *  # noqa: F401,F403
from .garden_summary import *  # noqa: F401,F403
from .instructions import *  # noqa: F401,F403
from .milestones import *  # noqa: F401,F403
from .planting_window import *  # noqa: F401,F403
from .succession import *  # noqa: F401,F403
from .utils import clear_dataset_cache, normalize_key

__version__ = "0.1.0"

__all__ = sorted(
    set(calendar_events.__all__)
    | set(crop_catalog.__all__)
    | set(crop_profile.__all__)
    | set(date_utils.__all__)
    | set(garden_summary.__all__)
    | set(instructions.__all__)
    | set(milestones.__all__)
    | set(planting_window.__all__)
    | set(succession.__all__)
    | {"clear_dataset_cache", "normalize_key"}
)
