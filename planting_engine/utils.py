"""Utility helpers for reading the datasets bundled with the planting engine."""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import Any, Dict, Mapping, TextIO, Union

import yaml

__all__ = [
    "load_data",
    "load_dataset",
    "lazy_dataset",
    "clear_dataset_cache",
    "dataset_paths",
    "get_data_dir",
    "get_extra_dirs",
    "overlay_dir",
    "deep_update",
    "normalize_key",
    "list_dataset_entries",
]

_LOGGER = logging.getLogger(__name__)

PathType = Union[str, PathLike]


def _open_text(path: Path) -> TextIO:
    return open(path, "r", encoding="utf-8")


def load_data(path: PathType) -> Any:
    """Return the parsed contents of ``path`` supporting JSON or YAML."""

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    try:
        with _open_text(p) as f:
            if p.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f) or {}
            return json.load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc


def deep_update(base: Dict[str, Any], other: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``other`` into ``base`` and return ``base``."""

    for key, value in other.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, Mapping)
        ):
            deep_update(base[key], value)
        else:
            base[key] = value
    return base


# The bundled ``data`` folder ships inside the package. ``PLANTING_DATA_DIR``
# replaces it, ``PLANTING_EXTRA_DATA_DIRS`` (an ``os.pathsep`` separated list)
# is merged after it and ``PLANTING_OVERLAY_DIR`` is merged last so a user can
# override single crops without copying the whole catalog.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
DATA_ENV = "PLANTING_DATA_DIR"
EXTRA_ENV = "PLANTING_EXTRA_DATA_DIRS"
OVERLAY_ENV = "PLANTING_OVERLAY_DIR"


def get_data_dir() -> Path:
    """Return base dataset directory honoring the ``PLANTING_DATA_DIR`` env."""

    env = os.getenv(DATA_ENV)
    return Path(env).expanduser() if env else DEFAULT_DATA_DIR


def get_extra_dirs() -> tuple[Path, ...]:
    """Return additional dataset directories from ``PLANTING_EXTRA_DATA_DIRS``."""

    env = os.getenv(EXTRA_ENV)
    if not env:
        return ()
    dirs: list[Path] = []
    for part in env.split(os.pathsep):
        path = Path(part).expanduser()
        if path.is_dir():
            dirs.append(path)
    return tuple(dirs)


def overlay_dir() -> Path | None:
    """Return the overlay directory defined via ``PLANTING_OVERLAY_DIR``."""

    env = os.getenv(OVERLAY_ENV)
    return Path(env).expanduser() if env else None


def dataset_paths() -> tuple[Path, ...]:
    """Return directories searched when loading datasets, overlay excluded."""

    return (get_data_dir(), *get_extra_dirs())


def _dataset_sources(filename: str) -> list[Path]:
    """Return existing copies of ``filename`` in merge order."""

    search = list(dataset_paths())
    overlay = overlay_dir()
    if overlay:
        search.append(overlay)
    return [base / filename for base in search if (base / filename).exists()]


def _merge_sources(filename: str, sources: list[Path]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for path in sources:
        _LOGGER.debug("Loading dataset %s from %s", filename, path.parent)
        extra = load_data(path)
        if isinstance(extra, dict) and isinstance(data, dict):
            deep_update(data, extra)
        else:
            data = extra
    return data


@lru_cache(maxsize=None)
def load_dataset(filename: str) -> Dict[str, Any]:
    """Return dataset ``filename`` merged across all search paths."""

    return _merge_sources(filename, _dataset_sources(filename))


def lazy_dataset(filename: str):
    """Return a cached loader callable for dataset ``filename``.

    The merged dataset is reloaded whenever the set of contributing files or
    any of their modification times changes, so new extra directories and
    edits to the base catalog are picked up as well as overlay changes.
    """

    cache_data: Dict[str, Any] | None = None
    cache_key: tuple[tuple[Path, float], ...] | None = None

    def _loader() -> Dict[str, Any]:
        nonlocal cache_data, cache_key
        sources = _dataset_sources(filename)
        key = tuple((path, path.stat().st_mtime) for path in sources)
        if cache_data is None or key != cache_key:
            cache_data = _merge_sources(filename, sources)
            cache_key = key
        return cache_data

    return _loader


def clear_dataset_cache() -> None:
    """Clear cached dataset lookups so environment changes take effect."""

    load_dataset.cache_clear()


def normalize_key(key: str) -> str:
    """Return ``key`` normalized for case-insensitive dataset lookups.

    Whitespace, hyphens and underscores collapse to a single underscore so
    ``"Swiss Chard"``, ``"swiss-chard"`` and ``"SWISS_CHARD"`` all match.
    """

    value = str(key).casefold()
    for sep in ("_", "-"):
        value = value.replace(sep, " ")
    parts = [p for p in value.strip().split() if p]
    return "_".join(parts)


def list_dataset_entries(dataset: Mapping[str, Any]) -> list[str]:
    """Return sorted top-level keys from a dataset mapping."""

    return sorted(str(k) for k in dataset.keys())
