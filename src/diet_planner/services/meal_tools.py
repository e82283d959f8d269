"""Custom meal calculations and food suggestions."""

from dataclasses import dataclass

from diet_planner.domain.foods import FoodItem, MealType
from diet_planner.domain.nutrition import NutritionFacts, sum_nutrition
from diet_planner.domain.plans import MealItem
from diet_planner.domain.profiles import DietaryConstraints
from diet_planner.services.catalog import FoodCatalog, compatible_foods

GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.35,
    "lb": 453.6,
}


@dataclass(frozen=True)
class MealEntry:
    """A requested food portion."""

    food_name: str
    quantity: float
    unit: str = "g"


@dataclass(frozen=True)
class MealCalculation:
    """Nutrition of a custom meal."""

    items: list[MealItem]
    totals: NutritionFacts
    unknown_foods: list[str]


@dataclass(frozen=True)
class FoodSuggestion:
    """A catalog food scored for a meal slot."""

    food: FoodItem
    suitability: int


@dataclass
class MealToolsService:
    """Helpers for building meals by hand."""

    catalog: FoodCatalog

    def calculate_meal(self, entries: list[MealEntry]) -> MealCalculation:
        """Compute per-item and total nutrition for a list of portions."""
        items: list[MealItem] = []
        unknown: list[str] = []
        for entry in entries:
            food = self.catalog.get(entry.food_name)
            if food is None:
                unknown.append(entry.food_name)
                continue
            grams = entry.quantity * GRAMS_PER_UNIT[entry.unit]
            items.append(
                MealItem(
                    name=food.name,
                    category=food.category,
                    quantity=entry.quantity,
                    unit=entry.unit,
                    nutrition=food.per_100g.scaled(grams),
                )
            )
        return MealCalculation(
            items=items,
            totals=sum_nutrition(item.nutrition for item in items),
            unknown_foods=unknown,
        )

    def suggest_foods(
        self,
        meal_type: MealType,
        target_calories: float,
        constraints: DietaryConstraints,
        limit: int = 20,
    ) -> list[FoodSuggestion]:
        """Rank compatible foods by how well they fit a meal slot."""
        suggestions = [
            FoodSuggestion(
                food=food,
                suitability=suitability_score(food, meal_type, target_calories),
            )
            for food in compatible_foods(self.catalog, constraints)
        ]
        suggestions.sort(key=lambda suggestion: suggestion.suitability, reverse=True)
        return suggestions[:limit]


def suitability_score(
    food: FoodItem, meal_type: MealType, target_calories: float
) -> int:
    """Score 0-100: meal tag match and closeness to a 300 g portion's density."""
    score = 50.0
    if meal_type in food.meal_types:
        score += 20
    calories_per_gram = food.per_100g.calories / 100
    ideal_calories_per_gram = target_calories / 300
    score -= abs(calories_per_gram - ideal_calories_per_gram) * 10
    return max(0, min(100, round(score)))
