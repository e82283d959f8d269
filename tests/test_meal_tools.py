"""Tests for custom meal calculation and suggestions."""

import pytest

from diet_planner.domain.foods import MealType
from diet_planner.domain.profiles import Allergen, DietaryConstraints, DietType
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.meal_tools import (
    MealEntry,
    MealToolsService,
    suitability_score,
)


def test_calculate_meal_converts_units(catalog: FoodCatalog) -> None:
    service = MealToolsService(catalog)

    result = service.calculate_meal(
        [
            MealEntry("Chicken Breast", 150),
            MealEntry("brown rice", 0.5, unit="kg"),
            MealEntry("Unicorn", 100),
        ]
    )

    assert [item.name for item in result.items] == ["Chicken Breast", "Brown Rice"]
    assert result.items[1].unit == "kg"
    assert result.items[0].nutrition.calories == pytest.approx(247.5)
    assert result.items[1].nutrition.calories == pytest.approx(615)
    assert result.totals.calories == pytest.approx(862.5)
    assert result.unknown_foods == ["Unicorn"]


def test_calculate_meal_imperial_units(catalog: FoodCatalog) -> None:
    result = MealToolsService(catalog).calculate_meal(
        [MealEntry("Apple", 1, unit="lb"), MealEntry("Almonds", 1, unit="oz")]
    )

    assert result.items[0].nutrition.calories == pytest.approx(52 * 4.536)
    assert result.items[1].nutrition.calories == pytest.approx(579 * 0.2835)


def test_suitability_score(catalog: FoodCatalog) -> None:
    broccoli = catalog.get("Broccoli")
    apple = catalog.get("Apple")
    olive_oil = catalog.get("Olive Oil")
    assert broccoli and apple and olive_oil

    assert suitability_score(broccoli, MealType.LUNCH, 300) == 63
    assert suitability_score(apple, MealType.DINNER, 300) == 45
    assert suitability_score(olive_oil, MealType.SNACK, 150) == 0


def test_suggestions_are_ranked_and_filtered(catalog: FoodCatalog) -> None:
    constraints = DietaryConstraints(
        diet_type=DietType.VEGETARIAN, allergies=frozenset({Allergen.NUTS})
    )

    suggestions = MealToolsService(catalog).suggest_foods(
        MealType.SNACK, 200, constraints, limit=5
    )

    scores = [suggestion.suitability for suggestion in suggestions]
    assert len(suggestions) == 5
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= score <= 100 for score in scores)
    assert "Almonds" not in {suggestion.food.name for suggestion in suggestions}
