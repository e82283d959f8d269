"""Shopping list aggregation."""

from collections.abc import Iterable

from diet_planner.domain.foods import MealType
from diet_planner.domain.plans import DayPlan, ShoppingList, ShoppingListEntry


def build_shopping_list(days: Iterable[DayPlan]) -> ShoppingList:
    """Sum item quantities across the week, grouped by exact food name.

    The unit and category of the first occurrence are kept; later units for
    the same name are not reconciled.
    """
    entries: dict[str, ShoppingListEntry] = {}
    for day in days:
        for meal_type in MealType:
            for item in day.meals[meal_type].items:
                existing = entries.get(item.name)
                if existing is None:
                    entries[item.name] = ShoppingListEntry(
                        name=item.name,
                        quantity=item.quantity,
                        unit=item.unit,
                        category=item.category,
                    )
                else:
                    entries[item.name] = ShoppingListEntry(
                        name=existing.name,
                        quantity=existing.quantity + item.quantity,
                        unit=existing.unit,
                        category=existing.category,
                    )
    return ShoppingList(entries=entries)
