"""Domain models for generated diet plans."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from diet_planner.domain.foods import MealType
from diet_planner.domain.nutrition import (
    NutritionFacts,
    NutritionTargets,
    sum_nutrition,
)
from diet_planner.domain.profiles import Allergen, DietType, Goal

DAYS_OF_WEEK = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass(frozen=True)
class MealItem:
    """A food portion inside a meal."""

    name: str
    category: str
    quantity: float
    unit: str
    nutrition: NutritionFacts


@dataclass(frozen=True)
class MealInstance:
    """A generated meal for one slot of a day."""

    meal_type: MealType
    name: str
    items: tuple[MealItem, ...] = ()
    instructions: tuple[str, ...] = ()
    prep_minutes: int = 0
    cook_minutes: int = 0

    @property
    def totals(self) -> NutritionFacts:
        """Sum of the scaled nutrition of every item."""
        return sum_nutrition(item.nutrition for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class DayPlan:
    """One day of a weekly plan with one meal per meal type."""

    day: str
    meals: dict[MealType, MealInstance]

    def __post_init__(self) -> None:
        missing = [meal_type for meal_type in MealType if meal_type not in self.meals]
        if missing or len(self.meals) != len(MealType):
            raise ValueError(f"Day {self.day} must have exactly one meal per type")

    @property
    def totals(self) -> NutritionFacts:
        """Sum of the four meal totals."""
        return sum_nutrition(self.meals[meal_type].totals for meal_type in MealType)


@dataclass(frozen=True)
class ShoppingListEntry:
    """Aggregated quantity of one food across a plan."""

    name: str
    quantity: float
    unit: str
    category: str


@dataclass(frozen=True)
class ShoppingList:
    """Food name to aggregated entry, in first-seen order."""

    entries: dict[str, ShoppingListEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def by_category(self) -> dict[str, list[ShoppingListEntry]]:
        """Group entries by food category."""
        grouped: dict[str, list[ShoppingListEntry]] = {}
        for entry in self.entries.values():
            grouped.setdefault(entry.category, []).append(entry)
        return grouped


@dataclass(frozen=True)
class DietPlan:
    """A full week of meals generated for a profile."""

    id: UUID
    profile_id: UUID
    name: str
    goal: Goal
    diet_type: DietType
    allergies: frozenset[Allergen]
    targets: NutritionTargets
    days: tuple[DayPlan, ...]
    shopping_list: ShoppingList
    created_at: datetime

    def __post_init__(self) -> None:
        if len(self.days) != len(DAYS_OF_WEEK):
            raise ValueError("A diet plan must contain exactly 7 days")

    @property
    def weekly_totals(self) -> NutritionFacts:
        """Sum of the seven daily totals."""
        return sum_nutrition(day.totals for day in self.days)

    @property
    def daily_average(self) -> NutritionFacts:
        return self.weekly_totals.divided(len(self.days))

    def meals(self) -> list[MealInstance]:
        """Return every meal of the week in day and slot order."""
        return [day.meals[meal_type] for day in self.days for meal_type in MealType]


@dataclass(frozen=True)
class PlanPage:
    """A page of plans for a profile."""

    plans: list[DietPlan]
    total: int
    page: int
    total_pages: int
