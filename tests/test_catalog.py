"""Tests for the food catalog."""

from diet_planner.domain.foods import DietTag
from diet_planner.domain.profiles import Allergen, DietaryConstraints, DietType
from diet_planner.services.catalog import (
    SEED_FOODS,
    FoodCatalog,
    compatible_foods,
    is_compatible,
)


def test_get_ignores_case(catalog: FoodCatalog) -> None:
    food = catalog.get("  chicken breast ")

    assert food is not None
    assert food.name == "Chicken Breast"
    assert catalog.get("Unicorn Steak") is None


def test_search_matches_name_and_category(catalog: FoodCatalog) -> None:
    by_name = [food.name for food in catalog.search("rice")]
    by_category = [food.name for food in catalog.search("vegetables")]

    assert by_name == ["Brown Rice"]
    assert by_category == ["Broccoli", "Spinach", "Sweet Potato"]
    assert len(catalog.search("", limit=3)) == 3


def test_categories_are_distinct_and_ordered(catalog: FoodCatalog) -> None:
    categories = catalog.categories()

    assert categories[:3] == ["grains", "vegetables", "poultry"]
    assert len(categories) == len(set(categories))


def test_vegan_filter_requires_tag() -> None:
    vegan = compatible_foods(SEED_FOODS, DietaryConstraints(diet_type=DietType.VEGAN))

    assert vegan
    assert all(DietTag.VEGAN in food.diet_tags for food in vegan)
    assert "Chicken Breast" not in {food.name for food in vegan}


def test_unrestricted_diets_allow_everything() -> None:
    for diet_type in (
        DietType.NON_VEGETARIAN,
        DietType.MEDITERRANEAN,
        DietType.INTERMITTENT_FASTING,
    ):
        constraints = DietaryConstraints(diet_type=diet_type)
        assert len(compatible_foods(SEED_FOODS, constraints)) == len(SEED_FOODS)


def test_allergens_exclude_foods(catalog: FoodCatalog) -> None:
    salmon = catalog.get("Salmon")
    assert salmon is not None
    constraints = DietaryConstraints(
        diet_type=DietType.KETO, allergies=frozenset({Allergen.SEAFOOD})
    )

    assert not is_compatible(salmon, constraints)
    assert is_compatible(salmon, DietaryConstraints(diet_type=DietType.KETO))
