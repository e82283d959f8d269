"""Seeded food catalog and catalog queries."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from diet_planner.domain.foods import DietTag, FoodItem, MealType
from diet_planner.domain.nutrition import NutritionFacts
from diet_planner.domain.profiles import Allergen, DietaryConstraints, DietType

_PLANT = frozenset(
    {DietTag.VEGETARIAN, DietTag.VEGAN, DietTag.GLUTEN_FREE, DietTag.DAIRY_FREE}
)
_MAIN_MEALS = frozenset({MealType.LUNCH, MealType.DINNER})
_LIGHT_MEALS = frozenset({MealType.BREAKFAST, MealType.SNACK})

SEED_FOODS: tuple[FoodItem, ...] = (
    FoodItem(
        name="Brown Rice",
        category="grains",
        per_100g=NutritionFacts(123, 2.6, 23, 0.9, fiber_g=1.8, sodium_mg=5),
        diet_tags=_PLANT,
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Broccoli",
        category="vegetables",
        per_100g=NutritionFacts(34, 2.8, 7, 0.4, fiber_g=2.6, sodium_mg=33),
        diet_tags=_PLANT | {DietTag.KETO, DietTag.PALEO},
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Chicken Breast",
        category="poultry",
        per_100g=NutritionFacts(165, 31, 0, 3.6, fiber_g=0, sodium_mg=74),
        diet_tags=frozenset(
            {DietTag.GLUTEN_FREE, DietTag.DAIRY_FREE, DietTag.KETO, DietTag.PALEO}
        ),
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Apple",
        category="fruits",
        per_100g=NutritionFacts(52, 0.3, 14, 0.2, fiber_g=2.4, sodium_mg=1),
        diet_tags=_PLANT | {DietTag.PALEO},
        meal_types=_LIGHT_MEALS,
    ),
    FoodItem(
        name="Greek Yogurt",
        category="dairy",
        per_100g=NutritionFacts(59, 10, 3.6, 0.4, fiber_g=0, sodium_mg=36),
        diet_tags=frozenset(
            {DietTag.VEGETARIAN, DietTag.GLUTEN_FREE, DietTag.KETO}
        ),
        allergens=frozenset({Allergen.DAIRY}),
        meal_types=_LIGHT_MEALS,
    ),
    FoodItem(
        name="Almonds",
        category="nuts_seeds",
        per_100g=NutritionFacts(579, 21.15, 21.55, 49.93, fiber_g=12.5, sodium_mg=1),
        diet_tags=_PLANT | {DietTag.KETO, DietTag.PALEO},
        allergens=frozenset({Allergen.NUTS}),
        meal_types=_LIGHT_MEALS,
    ),
    FoodItem(
        name="Black Beans",
        category="legumes",
        per_100g=NutritionFacts(132, 8.86, 23.71, 0.54, fiber_g=8.7, sodium_mg=1),
        diet_tags=_PLANT,
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Salmon",
        category="seafood",
        per_100g=NutritionFacts(208, 22.1, 0, 12.4, fiber_g=0, sodium_mg=59),
        diet_tags=frozenset(
            {DietTag.GLUTEN_FREE, DietTag.DAIRY_FREE, DietTag.KETO, DietTag.PALEO}
        ),
        allergens=frozenset({Allergen.SEAFOOD}),
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Olive Oil",
        category="oils_fats",
        per_100g=NutritionFacts(884, 0, 0, 100, fiber_g=0, sodium_mg=2),
        diet_tags=_PLANT | {DietTag.KETO, DietTag.PALEO},
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Spinach",
        category="vegetables",
        per_100g=NutritionFacts(23, 2.9, 3.6, 0.4, fiber_g=2.2, sodium_mg=79),
        diet_tags=_PLANT | {DietTag.KETO, DietTag.PALEO},
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Sweet Potato",
        category="vegetables",
        per_100g=NutritionFacts(86, 1.6, 20.1, 0.1, fiber_g=3, sodium_mg=55),
        diet_tags=_PLANT | {DietTag.PALEO},
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Quinoa",
        category="grains",
        per_100g=NutritionFacts(120, 4.4, 22, 1.9, fiber_g=2.8, sodium_mg=7),
        diet_tags=_PLANT,
        meal_types=_MAIN_MEALS,
    ),
    FoodItem(
        name="Rolled Oats",
        category="grains",
        per_100g=NutritionFacts(389, 16.9, 66.3, 6.9, fiber_g=10.6, sodium_mg=2),
        diet_tags=frozenset(
            {DietTag.VEGETARIAN, DietTag.VEGAN, DietTag.DAIRY_FREE}
        ),
        allergens=frozenset({Allergen.GLUTEN}),
        meal_types=frozenset({MealType.BREAKFAST}),
    ),
    FoodItem(
        name="Eggs",
        category="protein",
        per_100g=NutritionFacts(155, 13, 1.1, 11, fiber_g=0, sodium_mg=124),
        diet_tags=frozenset(
            {
                DietTag.VEGETARIAN,
                DietTag.GLUTEN_FREE,
                DietTag.DAIRY_FREE,
                DietTag.KETO,
                DietTag.PALEO,
            }
        ),
        allergens=frozenset({Allergen.EGGS}),
        meal_types=frozenset({MealType.BREAKFAST}),
    ),
    FoodItem(
        name="Banana",
        category="fruits",
        per_100g=NutritionFacts(89, 1.1, 22.8, 0.3, fiber_g=2.6, sodium_mg=1),
        diet_tags=_PLANT | {DietTag.PALEO},
        meal_types=_LIGHT_MEALS,
    ),
    FoodItem(
        name="Tofu",
        category="legumes",
        per_100g=NutritionFacts(76, 8, 1.9, 4.8, fiber_g=0.3, sodium_mg=7),
        diet_tags=_PLANT | {DietTag.KETO},
        allergens=frozenset({Allergen.SOY}),
        meal_types=_MAIN_MEALS,
    ),
)

# Diet types without an entry impose no restriction.
_REQUIRED_DIET_TAGS: dict[DietType, DietTag] = {
    DietType.VEGETARIAN: DietTag.VEGETARIAN,
    DietType.VEGAN: DietTag.VEGAN,
    DietType.KETO: DietTag.KETO,
    DietType.PALEO: DietTag.PALEO,
}


def is_compatible(food: FoodItem, constraints: DietaryConstraints) -> bool:
    """Return true when a food fits the diet type and avoids every allergen."""
    required = _REQUIRED_DIET_TAGS.get(constraints.diet_type)
    if required is not None and required not in food.diet_tags:
        return False
    return not (food.allergens & constraints.allergies)


def compatible_foods(
    catalog: Iterable[FoodItem], constraints: DietaryConstraints
) -> list[FoodItem]:
    """Filter a catalog down to foods compatible with the constraints."""
    return [food for food in catalog if is_compatible(food, constraints)]


@dataclass
class FoodCatalog:
    """Read-only catalog of reference foods."""

    foods: tuple[FoodItem, ...] = SEED_FOODS

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self.foods)

    def __len__(self) -> int:
        return len(self.foods)

    def get(self, name: str) -> FoodItem | None:
        """Return a food by exact name, ignoring case."""
        lowered = name.strip().lower()
        for food in self.foods:
            if food.name.lower() == lowered:
                return food
        return None

    def search(self, query: str, limit: int = 20) -> list[FoodItem]:
        """Return foods whose name or category contains the query."""
        lowered = query.strip().lower()
        matches = [
            food
            for food in self.foods
            if lowered in food.name.lower() or lowered in food.category.lower()
        ]
        return matches[:limit]

    def categories(self) -> list[str]:
        """Return distinct categories in catalog order."""
        seen: list[str] = []
        for food in self.foods:
            if food.category not in seen:
                seen.append(food.category)
        return seen
