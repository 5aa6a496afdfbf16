from datetime import date, timedelta

import pytest

from planting_engine.crop_profile import CropTimingProfile
from planting_engine.milestones import (
    PlantingMilestones,
    compute_milestones,
    earliest_plant_date,
    main_plant_date,
)


def test_indoor_start_and_transplant_with_harvest(tomato, frost):
    dates = compute_milestones(tomato, frost)
    assert dates.indoor_start_date == date(2024, 4, 3)
    assert dates.transplant_date == date(2024, 5, 29)
    # harvest counts from the indoor start, the earliest milestone
    assert dates.estimated_harvest_date == date(2024, 6, 12)
    assert dates.direct_sow_earliest is None
    assert dates.direct_sow_latest is None


def test_accepts_iso_reference_date(tomato):
    assert compute_milestones(tomato, "2024-05-15") == compute_milestones(
        tomato, date(2024, 5, 15)
    )


def test_invalid_reference_date_raises(tomato):
    with pytest.raises(ValueError):
        compute_milestones(tomato, "15/05/2024")


def test_no_timing_fields_gives_no_dates(frost):
    dates = compute_milestones(CropTimingProfile(days_to_maturity=60), frost)
    assert dates == PlantingMilestones()
    assert not dates.has_any
    assert dates.estimated_harvest_date is None


def test_direct_sow_earliest_only_gets_four_week_window():
    profile = CropTimingProfile(direct_sow_weeks_before_frost=2)
    dates = compute_milestones(profile, date(2024, 5, 1))
    assert dates.direct_sow_earliest == date(2024, 4, 17)
    assert dates.direct_sow_latest == date(2024, 5, 15)


def test_direct_sow_latest_only_collapses_to_single_day():
    profile = CropTimingProfile(direct_sow_weeks_after_frost=1)
    dates = compute_milestones(profile, date(2024, 5, 1))
    assert dates.direct_sow_earliest == date(2024, 5, 8)
    assert dates.direct_sow_latest == date(2024, 5, 8)


def test_direct_sow_both_bounds():
    profile = CropTimingProfile(
        direct_sow_weeks_before_frost=4, direct_sow_weeks_after_frost=2
    )
    dates = compute_milestones(profile, date(2024, 5, 1))
    assert dates.direct_sow_earliest == date(2024, 4, 3)
    assert dates.direct_sow_latest == date(2024, 5, 15)


@pytest.mark.parametrize(
    "profile",
    [
        CropTimingProfile(direct_sow_weeks_before_frost=weeks)
        for weeks in range(0, 12)
    ]
    + [CropTimingProfile(direct_sow_weeks_after_frost=weeks) for weeks in range(0, 12)]
    + [
        CropTimingProfile(direct_sow_weeks_before_frost=b, direct_sow_weeks_after_frost=a)
        for b in (0, 3, 8)
        for a in (0, 2, 6)
    ],
)
def test_direct_sow_window_is_ordered(profile, frost):
    dates = compute_milestones(profile, frost)
    assert dates.direct_sow_earliest <= dates.direct_sow_latest


def test_zero_offsets_are_not_treated_as_unset(frost):
    profile = CropTimingProfile(
        indoor_start_weeks_before_frost=0,
        transplant_weeks_relative_to_frost=0,
    )
    dates = compute_milestones(profile, frost)
    assert dates.indoor_start_date == frost
    assert dates.transplant_date == frost


def test_negative_transplant_offset(frost):
    profile = CropTimingProfile(transplant_weeks_relative_to_frost=-2)
    assert compute_milestones(profile, frost).transplant_date == date(2024, 5, 1)


@pytest.mark.parametrize("weeks", [1, 4, 6, 10, 16])
def test_indoor_start_is_exact_week_multiple(weeks, frost):
    profile = CropTimingProfile(indoor_start_weeks_before_frost=weeks)
    dates = compute_milestones(profile, frost)
    assert dates.indoor_start_date == frost - timedelta(days=7 * weeks)


def test_offsets_cross_year_and_leap_day():
    profile = CropTimingProfile(indoor_start_weeks_before_frost=10)
    assert compute_milestones(profile, date(2024, 1, 20)).indoor_start_date == date(
        2023, 11, 11
    )
    profile = CropTimingProfile(indoor_start_weeks_before_frost=1)
    assert compute_milestones(profile, date(2024, 3, 7)).indoor_start_date == date(
        2024, 2, 29
    )


def test_harvest_uses_earliest_milestone(frost):
    profile = CropTimingProfile(
        days_to_maturity=10,
        indoor_start_weeks_before_frost=2,
        direct_sow_weeks_before_frost=4,
    )
    dates = compute_milestones(profile, frost)
    assert dates.direct_sow_earliest == date(2024, 4, 17)
    assert dates.estimated_harvest_date == date(2024, 4, 27)


def test_harvest_requires_days_to_maturity(frost):
    profile = CropTimingProfile(transplant_weeks_relative_to_frost=1)
    assert compute_milestones(profile, frost).estimated_harvest_date is None


def test_zero_days_to_maturity_harvests_on_plant_date(frost):
    profile = CropTimingProfile(days_to_maturity=0, transplant_weeks_relative_to_frost=1)
    dates = compute_milestones(profile, frost)
    assert dates.estimated_harvest_date == dates.transplant_date


def test_compute_is_repeatable(tomato, frost):
    assert compute_milestones(tomato, frost) == compute_milestones(tomato, frost)


def test_main_plant_date_priority():
    d1, d2, d3 = date(2024, 3, 1), date(2024, 4, 1), date(2024, 5, 1)
    assert main_plant_date(PlantingMilestones(d1, d3, d2, d2)) == d3
    assert main_plant_date(PlantingMilestones(d1, None, d2, d2)) == d2
    assert main_plant_date(PlantingMilestones(d1)) == d1
    assert main_plant_date(PlantingMilestones()) is None


def test_earliest_plant_date_ignores_harvest_and_latest():
    dates = PlantingMilestones(
        transplant_date=date(2024, 6, 1),
        direct_sow_latest=date(2024, 1, 1),
        estimated_harvest_date=date(2023, 1, 1),
    )
    assert earliest_plant_date(dates) == date(2024, 6, 1)


def test_as_dict_serialises_iso_strings(tomato, frost):
    data = compute_milestones(tomato, frost).as_dict()
    assert data == {
        "indoor_start_date": "2024-04-03",
        "transplant_date": "2024-05-29",
        "direct_sow_earliest": None,
        "direct_sow_latest": None,
        "estimated_harvest_date": "2024-06-12",
    }
