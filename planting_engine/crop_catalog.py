"""Lookups against the bundled crop timing catalog."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .crop_profile import CropTimingProfile
from .log_utils import warn_once
from .utils import lazy_dataset, list_dataset_entries, normalize_key

DATA_FILE = "crops/crop_timing.json"

_data = lazy_dataset(DATA_FILE)

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "list_supported_crops",
    "get_crop_info",
    "get_crop_name",
    "get_crop_profile",
    "get_category",
    "crops_in_category",
    "search_crops",
    "recommend_companions",
    "recommend_antagonists",
    "load_profiles",
]


def list_supported_crops() -> list[str]:
    """Return catalog keys of all crops with timing data."""
    return list_dataset_entries(_data())


def get_crop_info(crop: str) -> dict[str, Any]:
    """Return the raw catalog entry for ``crop`` or an empty dict."""
    info = _data().get(normalize_key(crop), {})
    return dict(info) if isinstance(info, Mapping) else {}


def get_crop_name(crop: str) -> str:
    """Return the display name of ``crop``, falling back to the given key."""
    return str(get_crop_info(crop).get("name") or crop)


def get_crop_profile(crop: str) -> CropTimingProfile | None:
    """Return the validated timing profile for ``crop``.

    Unknown crops return ``None``. Entries that fail validation are logged
    and treated as unknown.
    """

    key = normalize_key(crop)
    info = get_crop_info(key)
    if not info:
        return None
    try:
        return CropTimingProfile.from_mapping(info)
    except ValueError as exc:
        warn_once(_LOGGER, f"invalid_crop:{key}", "skipping catalog entry: %s", exc)
        return None


def get_category(crop: str) -> str | None:
    """Return the category (``Vegetable``, ``Herb`` ...) of ``crop``."""
    category = get_crop_info(crop).get("category")
    return str(category) if category else None


def crops_in_category(category: str) -> list[str]:
    """Return catalog keys of crops whose category matches ``category``."""

    wanted = normalize_key(category)
    return [
        key
        for key in list_supported_crops()
        if normalize_key(get_category(key) or "") == wanted
    ]


SORT_KEYS = ("name", "maturity")


def _maturity_sort_key(key: str) -> tuple[bool, int, str]:
    profile = get_crop_profile(key)
    days = profile.days_to_maturity if profile else None
    return (days is None, days or 0, get_crop_name(key).casefold())


def search_crops(
    query: str = "", category: str | None = None, sort: str = "name"
) -> list[str]:
    """Return catalog keys of crops matching ``query`` and ``category``.

    ``query`` is matched case-insensitively against the display and
    scientific names. ``sort`` is ``"name"`` or ``"maturity"``; crops without
    a maturity figure sort last.
    """

    if sort not in SORT_KEYS:
        raise ValueError(f"sort must be one of {', '.join(SORT_KEYS)}, got {sort!r}")

    needle = query.strip().casefold()
    keys = crops_in_category(category) if category else list_supported_crops()
    matches = []
    for key in keys:
        info = get_crop_info(key)
        names = (str(info.get("name") or key), str(info.get("scientific_name") or ""))
        if needle and not any(needle in name.casefold() for name in names):
            continue
        matches.append(key)

    if sort == "maturity":
        return sorted(matches, key=_maturity_sort_key)
    return sorted(matches, key=lambda key: get_crop_name(key).casefold())


def recommend_companions(crop: str) -> list[str]:
    """Return crops that grow well next to ``crop``."""
    return list(get_crop_info(crop).get("companions", []))


def recommend_antagonists(crop: str) -> list[str]:
    """Return crops to keep away from ``crop``."""
    return list(get_crop_info(crop).get("antagonists", []))


def load_profiles(crops: list[str] | None = None) -> dict[str, CropTimingProfile]:
    """Return display name to profile mapping for ``crops``.

    All catalog crops are used when ``crops`` is ``None``. Unknown or invalid
    crops are left out.
    """

    profiles: dict[str, CropTimingProfile] = {}
    for crop in crops if crops is not None else list_supported_crops():
        profile = get_crop_profile(crop)
        if profile is not None:
            profiles[get_crop_name(crop)] = profile
    return profiles
