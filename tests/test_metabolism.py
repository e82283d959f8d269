"""Tests for metabolic target calculations."""

import pytest

from diet_planner.domain.profiles import ActivityLevel, Goal, Sex
from diet_planner.errors import ConfigurationError
from diet_planner.services.metabolism import (
    GOAL_MACRO_RATIOS,
    MINIMUM_CALORIES,
    compute_bmi,
    compute_bmr,
    compute_daily_calories,
    compute_macros,
    compute_targets,
    compute_tdee,
    round_half_up,
)
from tests.conftest import make_profile


def test_reference_profile_targets() -> None:
    targets = compute_targets(make_profile())

    assert targets.bmr == 1780
    assert targets.tdee == 2136
    assert targets.daily_calories == 1709
    assert targets.macros.protein_g == 150
    assert targets.macros.carbs_g == 150
    assert targets.macros.fats_g == 57
    assert targets.ratios == GOAL_MACRO_RATIOS[Goal.WEIGHT_LOSS]


def test_female_bmr_uses_negative_offset() -> None:
    profile = make_profile(sex=Sex.FEMALE, weight_kg=60.0, height_cm=165.0, age=40)

    assert compute_bmr(profile) == round_half_up(600 + 1031.25 - 200 - 161)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(1708.8) == 1709
    assert round_half_up(1708.4) == 1708


@pytest.mark.parametrize(
    ("activity_level", "expected"),
    [
        (ActivityLevel.SEDENTARY, 1200),
        (ActivityLevel.LIGHTLY_ACTIVE, 1375),
        (ActivityLevel.MODERATELY_ACTIVE, 1550),
        (ActivityLevel.VERY_ACTIVE, 1725),
        (ActivityLevel.EXTREMELY_ACTIVE, 1900),
    ],
)
def test_tdee_multipliers(activity_level: ActivityLevel, expected: int) -> None:
    assert compute_tdee(1000, activity_level) == expected


def test_unknown_activity_level_raises() -> None:
    with pytest.raises(ConfigurationError):
        compute_tdee(1500, "couch_potato")


def test_unknown_goal_raises() -> None:
    with pytest.raises(ConfigurationError):
        compute_daily_calories(2000, "bulk_forever", Sex.MALE)
    with pytest.raises(ConfigurationError):
        compute_macros(2000, "bulk_forever")


@pytest.mark.parametrize("sex", [Sex.MALE, Sex.FEMALE])
def test_calorie_floor_applies_after_goal_adjustment(sex: Sex) -> None:
    profile = make_profile(
        sex=sex, age=60, weight_kg=45.0, height_cm=150.0, goal=Goal.WEIGHT_LOSS
    )

    targets = compute_targets(profile)

    assert targets.daily_calories == MINIMUM_CALORIES[sex]


def test_maintenance_keeps_tdee() -> None:
    assert compute_daily_calories(2400, Goal.MAINTENANCE, Sex.MALE) == 2400


@pytest.mark.parametrize("goal", list(Goal))
def test_macro_calories_stay_close_to_target(goal: Goal) -> None:
    for calories in (1200, 1709, 2500, 3333):
        macros = compute_macros(calories, goal)
        assert abs(macros.calories - calories) <= 10


def test_bmi_value_and_category() -> None:
    bmi = compute_bmi(make_profile())

    assert bmi.value == 24.7
    assert bmi.category == "normal"


@pytest.mark.parametrize(
    ("weight_kg", "category"),
    [(50.0, "underweight"), (85.0, "overweight"), (110.0, "obese")],
)
def test_bmi_categories(weight_kg: float, category: str) -> None:
    assert compute_bmi(make_profile(weight_kg=weight_kg)).category == category


@pytest.mark.parametrize("activity_level", list(ActivityLevel))
@pytest.mark.parametrize("sex", list(Sex))
def test_tdee_never_below_bmr(activity_level: ActivityLevel, sex: Sex) -> None:
    profile = make_profile(
        sex=sex, age=100, weight_kg=30.0, height_cm=100.0, activity_level=activity_level
    )

    targets = compute_targets(profile)

    assert targets.bmr > 0
    assert targets.tdee >= targets.bmr
