"""Tests for shopping list aggregation."""

import random
from collections import defaultdict

from diet_planner.domain.foods import MealType
from diet_planner.domain.nutrition import NutritionFacts
from diet_planner.domain.plans import DAYS_OF_WEEK, DayPlan, MealInstance, MealItem
from diet_planner.domain.profiles import DietaryConstraints, DietType
from diet_planner.services.catalog import SEED_FOODS
from diet_planner.services.meals import empty_meal
from diet_planner.services.planner import assemble_days
from diet_planner.services.shopping import build_shopping_list


def _item(name: str, quantity: float, unit: str = "g") -> MealItem:
    return MealItem(
        name=name,
        category="vegetables",
        quantity=quantity,
        unit=unit,
        nutrition=NutritionFacts(),
    )


def _day(day: str, lunch_items: tuple[MealItem, ...]) -> DayPlan:
    meals = {meal_type: empty_meal(meal_type) for meal_type in MealType}
    meals[MealType.LUNCH] = MealInstance(
        meal_type=MealType.LUNCH, name="Lunch", items=lunch_items
    )
    return DayPlan(day=day, meals=meals)


def test_quantities_are_summed_by_name() -> None:
    days = [
        _day("monday", (_item("Broccoli", 100), _item("Spinach", 50))),
        _day("tuesday", (_item("Broccoli", 80),)),
    ]

    shopping_list = build_shopping_list(days)

    assert shopping_list.entries["Broccoli"].quantity == 180
    assert shopping_list.entries["Spinach"].quantity == 50
    assert list(shopping_list.entries) == ["Broccoli", "Spinach"]


def test_names_are_case_sensitive() -> None:
    days = [_day("monday", (_item("Tofu", 100), _item("tofu", 40)))]

    assert len(build_shopping_list(days)) == 2


def test_first_unit_wins() -> None:
    days = [_day("monday", (_item("Rice", 100), _item("Rice", 1, unit="kg")))]

    entry = build_shopping_list(days).entries["Rice"]

    assert entry.unit == "g"
    assert entry.quantity == 101


def test_list_matches_assembled_week() -> None:
    days = assemble_days(
        2000,
        SEED_FOODS,
        DietaryConstraints(diet_type=DietType.NON_VEGETARIAN),
        random.Random(11),
    )
    expected: dict[str, float] = defaultdict(float)
    for day in days:
        for meal in day.meals.values():
            for item in meal.items:
                expected[item.name] += item.quantity

    shopping_list = build_shopping_list(days)

    assert len(days) == len(DAYS_OF_WEEK)
    assert {name: e.quantity for name, e in shopping_list.entries.items()} == expected


def test_by_category_groups_entries() -> None:
    days = [_day("monday", (_item("Broccoli", 100), _item("Spinach", 50)))]

    grouped = build_shopping_list(days).by_category()

    assert [entry.name for entry in grouped["vegetables"]] == ["Broccoli", "Spinach"]


def test_list_is_no_longer_than_item_entries() -> None:
    days = assemble_days(
        1800,
        SEED_FOODS,
        DietaryConstraints(diet_type=DietType.KETO),
        random.Random(21),
    )
    entries = sum(len(meal.items) for day in days for meal in day.meals.values())

    assert len(build_shopping_list(days)) <= entries
