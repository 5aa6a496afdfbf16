from datetime import date

from planting_engine.crop_profile import CropTimingProfile
from planting_engine.instructions import (
    PlantingInstructions,
    format_instructions,
    instructions_from_milestones,
)
from planting_engine.milestones import PlantingMilestones


def test_indoor_transplant_and_harvest(tomato, frost):
    text = format_instructions(tomato, frost)
    assert text.indoor_start == "Start seeds indoors on April 3, 2024"
    assert text.transplant == "Transplant outdoors on May 29, 2024"
    assert text.harvest == "Estimated harvest: June 12, 2024"
    assert text.direct_sow is None


def test_direct_sow_range():
    profile = CropTimingProfile(
        days_to_maturity=50,
        direct_sow_weeks_before_frost=4,
        direct_sow_weeks_after_frost=2,
    )
    text = format_instructions(profile, "2024-05-01")
    assert text.direct_sow == "Direct sow between April 3 and May 15, 2024"
    assert text.harvest == "Estimated harvest: May 23, 2024"


def test_direct_sow_single_day():
    profile = CropTimingProfile(direct_sow_weeks_after_frost=1)
    text = format_instructions(profile, date(2024, 5, 1))
    assert text.direct_sow == "Direct sow on May 8, 2024"


def test_direct_sow_starting_fallback():
    milestones = PlantingMilestones(direct_sow_earliest=date(2024, 4, 17))
    text = instructions_from_milestones(milestones)
    assert text.direct_sow == "Direct sow starting April 17, 2024"


def test_absent_milestones_are_left_out(frost):
    text = format_instructions(CropTimingProfile(days_to_maturity=30), frost)
    assert text == PlantingInstructions()
    assert text.as_dict() == {}


def test_as_dict_only_has_present_fields(tomato, frost):
    assert set(format_instructions(tomato, frost).as_dict()) == {
        "indoor_start",
        "transplant",
        "harvest",
    }
