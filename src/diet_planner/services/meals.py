"""Random meal selection from the food catalog."""

import logging
import math
import random
from collections.abc import Iterable

from diet_planner.domain.foods import FoodItem, MealType
from diet_planner.domain.plans import MealInstance, MealItem
from diet_planner.domain.profiles import DietaryConstraints
from diet_planner.services.catalog import compatible_foods

MIN_ITEMS_PER_MEAL = 2
MAX_ITEMS_PER_MEAL = 4
MIN_PORTION_GRAMS = 50
MAX_PORTION_GRAMS = 200

_logger = logging.getLogger(__name__)


def select_meal(
    meal_type: MealType,
    target_calories: float,
    catalog: Iterable[FoodItem],
    constraints: DietaryConstraints,
    rng: random.Random,
) -> MealInstance:
    """Pick 2-4 compatible foods and portion them toward a calorie target.

    Each portion is the smaller of the grams that fit the remaining calorie
    budget and a random 50-200 g cap. Selection stops once the target is
    reached or the drawn item count is used up. Totals are the plain sum of
    the portions, so the meal may land above or below the target.

    Returns an empty placeholder meal when no food suits the slot.
    """
    candidates = [
        food
        for food in compatible_foods(catalog, constraints)
        if food.suits(meal_type)
    ]
    if not candidates:
        _logger.warning(
            "No compatible foods for meal slot: meal_type=%s diet=%s",
            meal_type.value,
            constraints.diet_type.value,
        )
        return empty_meal(meal_type)

    item_count = rng.randint(MIN_ITEMS_PER_MEAL, MAX_ITEMS_PER_MEAL)
    available = list(candidates)
    items: list[MealItem] = []
    current_calories = 0.0
    picks = 0
    while (
        picks < item_count and available and current_calories < target_calories
    ):
        picks += 1
        food = available.pop(rng.randrange(len(available)))
        random_cap = rng.randint(MIN_PORTION_GRAMS, MAX_PORTION_GRAMS)
        quantity = _portion_grams(
            food, target_calories - current_calories, random_cap
        )
        if quantity <= 0:
            continue
        nutrition = food.per_100g.scaled(quantity)
        current_calories += nutrition.calories
        items.append(
            MealItem(
                name=food.name,
                category=food.category,
                quantity=quantity,
                unit="g",
                nutrition=nutrition,
            )
        )

    if not items:
        return empty_meal(meal_type)

    names = [item.name for item in items]
    return MealInstance(
        meal_type=meal_type,
        name=f"{meal_type.value.capitalize()}: {', '.join(names)}",
        items=tuple(items),
        instructions=(f"Prepare {', '.join(names)}",),
        prep_minutes=rng.randint(10, 40),
        cook_minutes=rng.randint(5, 35),
    )


def empty_meal(meal_type: MealType) -> MealInstance:
    """Placeholder meal with no items and zero nutrition."""
    return MealInstance(
        meal_type=meal_type,
        name=f"Simple {meal_type.value}",
        instructions=("No compatible foods were found - please customize",),
    )


def _portion_grams(food: FoodItem, remaining_calories: float, random_cap: int) -> int:
    if food.per_100g.calories <= 0:
        return random_cap
    budget_grams = math.floor(remaining_calories / food.per_100g.calories * 100)
    return min(budget_grams, random_cap)
