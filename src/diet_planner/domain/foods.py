"""Domain models for the food catalog."""

from dataclasses import dataclass
from enum import Enum

from diet_planner.domain.nutrition import NutritionFacts
from diet_planner.domain.profiles import Allergen


class MealType(str, Enum):
    """Meal slots of a day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class DietTag(str, Enum):
    """Diet compatibility flags carried by foods."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    PALEO = "paleo"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"


@dataclass(frozen=True)
class FoodItem:
    """Reference food with nutrition per 100 g."""

    name: str
    category: str
    per_100g: NutritionFacts
    diet_tags: frozenset[DietTag] = frozenset()
    allergens: frozenset[Allergen] = frozenset()
    meal_types: frozenset[MealType] = frozenset()

    def suits(self, meal_type: MealType) -> bool:
        """Return true when the food is tagged for the meal, or untagged."""
        return not self.meal_types or meal_type in self.meal_types
