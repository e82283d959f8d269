"""Metabolic formulas: BMR, TDEE, calorie and macro targets.

Each macro is rounded to whole grams on its own, so the calories implied by the
gram targets can differ from ``daily_calories`` by a few kcal. That drift is
expected and is never corrected.
"""

import math
from enum import Enum
from typing import TypeVar

from diet_planner.domain.nutrition import (
    Bmi,
    MacroRatios,
    MacroTargets,
    NutritionTargets,
)
from diet_planner.domain.profiles import ActivityLevel, Goal, Sex, UserProfile
from diet_planner.errors import ConfigurationError

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

GOAL_CALORIE_FACTORS: dict[Goal, float] = {
    Goal.WEIGHT_LOSS: 0.8,
    Goal.WEIGHT_GAIN: 1.2,
    Goal.MUSCLE_GAIN: 1.15,
    Goal.MAINTENANCE: 1.0,
}

GOAL_MACRO_RATIOS: dict[Goal, MacroRatios] = {
    Goal.WEIGHT_LOSS: MacroRatios(protein_pct=35, carbs_pct=35, fats_pct=30),
    Goal.WEIGHT_GAIN: MacroRatios(protein_pct=25, carbs_pct=45, fats_pct=30),
    Goal.MUSCLE_GAIN: MacroRatios(protein_pct=40, carbs_pct=35, fats_pct=25),
    Goal.MAINTENANCE: MacroRatios(protein_pct=30, carbs_pct=40, fats_pct=30),
}

MINIMUM_CALORIES: dict[Sex, int] = {
    Sex.MALE: 1500,
    Sex.FEMALE: 1200,
}

_SEX_OFFSETS: dict[Sex, int] = {
    Sex.MALE: 5,
    Sex.FEMALE: -161,
}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

_K = TypeVar("_K", bound=Enum)
_V = TypeVar("_V")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def compute_bmr(profile: UserProfile) -> int:
    """Basal metabolic rate using the Mifflin-St Jeor equation."""
    offset = _lookup(_SEX_OFFSETS, Sex, profile.sex, "sex")
    bmr = (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + offset
    )
    return round_half_up(bmr)


def compute_tdee(bmr: int, activity_level: ActivityLevel | str) -> int:
    """Scale BMR by the activity multiplier."""
    multiplier = _lookup(
        ACTIVITY_MULTIPLIERS, ActivityLevel, activity_level, "activity level"
    )
    return round_half_up(bmr * multiplier)


def compute_daily_calories(tdee: int, goal: Goal | str, sex: Sex | str) -> int:
    """Adjust TDEE for the goal, then apply the minimum intake floor."""
    factor = _lookup(GOAL_CALORIE_FACTORS, Goal, goal, "goal")
    floor = _lookup(MINIMUM_CALORIES, Sex, sex, "sex")
    return max(round_half_up(tdee * factor), floor)


def compute_macros(daily_calories: int, goal: Goal | str) -> MacroTargets:
    """Convert the goal's macro split into gram targets."""
    ratios = _lookup(GOAL_MACRO_RATIOS, Goal, goal, "goal")
    return MacroTargets(
        protein_g=round_half_up(
            daily_calories * ratios.protein_pct / 100 / KCAL_PER_GRAM_PROTEIN
        ),
        carbs_g=round_half_up(
            daily_calories * ratios.carbs_pct / 100 / KCAL_PER_GRAM_CARBS
        ),
        fats_g=round_half_up(
            daily_calories * ratios.fats_pct / 100 / KCAL_PER_GRAM_FAT
        ),
    )


def compute_targets(profile: UserProfile) -> NutritionTargets:
    """Derive BMR, TDEE, daily calories and macro targets for a profile."""
    bmr = compute_bmr(profile)
    tdee = compute_tdee(bmr, profile.activity_level)
    daily_calories = compute_daily_calories(tdee, profile.goal, profile.sex)
    return NutritionTargets(
        bmr=bmr,
        tdee=tdee,
        daily_calories=daily_calories,
        macros=compute_macros(daily_calories, profile.goal),
        ratios=_lookup(GOAL_MACRO_RATIOS, Goal, profile.goal, "goal"),
    )


def compute_bmi(profile: UserProfile) -> Bmi:
    """Body mass index rounded to one decimal, with its category."""
    height_m = profile.height_cm / 100
    value = round_half_up(profile.weight_kg / (height_m * height_m) * 10) / 10
    if value < 18.5:  # noqa: PLR2004
        category = "underweight"
    elif value < 25:  # noqa: PLR2004
        category = "normal"
    elif value < 30:  # noqa: PLR2004
        category = "overweight"
    else:
        category = "obese"
    return Bmi(value=value, category=category)


def _lookup(
    table: dict[_K, _V], enum_type: type[_K], value: object, label: str
) -> _V:
    """Resolve an enumerated value in a table, failing loudly when unknown."""
    try:
        key = enum_type(value)  # type: ignore[call-arg]
    except ValueError as exc:
        raise ConfigurationError(f"Unknown {label}: {value!r}") from exc
    if key not in table:
        raise ConfigurationError(f"No {label} entry configured for {key.value!r}")
    return table[key]
