"""Weekly plan assembly."""

import random
from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID, uuid4

from diet_planner.domain.foods import FoodItem, MealType
from diet_planner.domain.nutrition import NutritionTargets
from diet_planner.domain.plans import DAYS_OF_WEEK, DayPlan, DietPlan
from diet_planner.domain.profiles import DietaryConstraints, Goal
from diet_planner.services.meals import select_meal
from diet_planner.services.shopping import build_shopping_list

MEAL_CALORIE_SPLIT: dict[MealType, float] = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.10,
}


def assemble_days(
    daily_calories: int,
    catalog: Sequence[FoodItem],
    constraints: DietaryConstraints,
    rng: random.Random,
) -> tuple[DayPlan, ...]:
    """Generate every meal slot of the week independently."""
    days = []
    for day in DAYS_OF_WEEK:
        meals = {
            meal_type: select_meal(
                meal_type,
                daily_calories * MEAL_CALORIE_SPLIT[meal_type],
                catalog,
                constraints,
                rng,
            )
            for meal_type in MealType
        }
        days.append(DayPlan(day=day, meals=meals))
    return tuple(days)


def assemble_week(  # noqa: PLR0913
    targets: NutritionTargets,
    catalog: Sequence[FoodItem],
    constraints: DietaryConstraints,
    rng: random.Random,
    *,
    profile_id: UUID,
    goal: Goal,
) -> DietPlan:
    """Build a seven-day plan with its shopping list."""
    days = assemble_days(targets.daily_calories, catalog, constraints, rng)
    return DietPlan(
        id=uuid4(),
        profile_id=profile_id,
        name=plan_name(goal),
        goal=goal,
        diet_type=constraints.diet_type,
        allergies=constraints.allergies,
        targets=targets,
        days=days,
        shopping_list=build_shopping_list(days),
        created_at=datetime.now(tz=UTC),
    )


def plan_name(goal: Goal) -> str:
    """Display name of a plan for a goal."""
    return f"{goal.value.replace('_', ' ').title()} Plan"
