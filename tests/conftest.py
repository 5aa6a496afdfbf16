from datetime import date

import pytest

from planting_engine.crop_profile import CropTimingProfile, FrostTolerance
from planting_engine.log_utils import reset_warnings
from planting_engine.utils import DATA_ENV, EXTRA_ENV, OVERLAY_ENV, clear_dataset_cache


@pytest.fixture(autouse=True)
def _isolated_datasets(monkeypatch):
    """Run every test against the bundled catalog with a fresh cache."""
    for env in (DATA_ENV, EXTRA_ENV, OVERLAY_ENV):
        monkeypatch.delenv(env, raising=False)
    clear_dataset_cache()
    reset_warnings()
    yield
    clear_dataset_cache()


@pytest.fixture
def frost() -> date:
    """Last frost date used by most scenarios."""
    return date(2024, 5, 15)


@pytest.fixture
def tomato() -> CropTimingProfile:
    return CropTimingProfile(
        days_to_maturity=70,
        frost_tolerance=FrostTolerance.SENSITIVE,
        indoor_start_weeks_before_frost=6,
        transplant_weeks_relative_to_frost=2,
    )
