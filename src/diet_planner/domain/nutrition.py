"""Nutrition domain models."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrient amounts, either per 100 g of a food or for a portion."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fats_g: float = 0.0
    fiber_g: float = 0.0
    sodium_mg: float = 0.0

    def __add__(self, other: "NutritionFacts") -> "NutritionFacts":
        return NutritionFacts(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fats_g=self.fats_g + other.fats_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sodium_mg=self.sodium_mg + other.sodium_mg,
        )

    def scaled(self, grams: float) -> "NutritionFacts":
        """Return the nutrients of a portion, treating self as per-100g values."""
        factor = grams / 100
        return NutritionFacts(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fats_g=self.fats_g * factor,
            fiber_g=self.fiber_g * factor,
            sodium_mg=self.sodium_mg * factor,
        )

    def divided(self, divisor: float) -> "NutritionFacts":
        """Return every nutrient divided by a constant."""
        return NutritionFacts(
            calories=self.calories / divisor,
            protein_g=self.protein_g / divisor,
            carbs_g=self.carbs_g / divisor,
            fats_g=self.fats_g / divisor,
            fiber_g=self.fiber_g / divisor,
            sodium_mg=self.sodium_mg / divisor,
        )


ZERO_NUTRITION = NutritionFacts()


def sum_nutrition(values: Iterable[NutritionFacts]) -> NutritionFacts:
    """Sum nutrition values in iteration order."""
    total = ZERO_NUTRITION
    for value in values:
        total = total + value
    return total


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fats_g: int

    @property
    def calories(self) -> int:
        """Calories implied by the gram targets."""
        return self.protein_g * 4 + self.carbs_g * 4 + self.fats_g * 9


@dataclass(frozen=True)
class MacroRatios:
    """Macronutrient split in percent of daily calories."""

    protein_pct: int
    carbs_pct: int
    fats_pct: int


@dataclass(frozen=True)
class NutritionTargets:
    """Calculated energy and macronutrient targets for a profile."""

    bmr: int
    tdee: int
    daily_calories: int
    macros: MacroTargets
    ratios: MacroRatios


@dataclass(frozen=True)
class Bmi:
    """Body mass index with its category."""

    value: float
    category: str
