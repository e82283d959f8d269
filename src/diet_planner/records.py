"""Conversions between domain objects and JSON-compatible records."""

from datetime import datetime
from uuid import UUID

from diet_planner.domain.foods import FoodItem, MealType
from diet_planner.domain.nutrition import (
    MacroRatios,
    MacroTargets,
    NutritionFacts,
    NutritionTargets,
)
from diet_planner.domain.plans import (
    DayPlan,
    DietPlan,
    MealInstance,
    MealItem,
    ShoppingList,
    ShoppingListEntry,
)
from diet_planner.domain.profiles import (
    ActivityLevel,
    Allergen,
    DietType,
    Goal,
    Sex,
    UserProfile,
)

_NUTRITION_KEYS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fats_g",
    "fiber_g",
    "sodium_mg",
)


def nutrition_to_record(facts: NutritionFacts) -> dict[str, float]:
    return {key: getattr(facts, key) for key in _NUTRITION_KEYS}


def nutrition_from_record(row: dict[str, object]) -> NutritionFacts:
    return NutritionFacts(**{key: float(row.get(key, 0.0)) for key in _NUTRITION_KEYS})


def food_to_record(food: FoodItem) -> dict[str, object]:
    """Public view of a catalog food."""
    return {
        "name": food.name,
        "category": food.category,
        "nutrition_per_100g": nutrition_to_record(food.per_100g),
        "diet_tags": sorted(tag.value for tag in food.diet_tags),
        "allergens": sorted(allergen.value for allergen in food.allergens),
        "meal_types": [m.value for m in MealType if m in food.meal_types],
    }


def profile_to_record(profile: UserProfile) -> dict[str, object]:
    return {
        "id": str(profile.id) if profile.id else None,
        "version": profile.version,
        "previous_version_id": (
            str(profile.previous_version_id) if profile.previous_version_id else None
        ),
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
        "full_name": profile.full_name,
        "email": profile.email,
        "age": profile.age,
        "sex": profile.sex.value,
        "weight_kg": profile.weight_kg,
        "height_cm": profile.height_cm,
        "activity_level": profile.activity_level.value,
        "goal": profile.goal.value,
        "diet_type": profile.diet_type.value,
        "allergies": sorted(allergen.value for allergen in profile.allergies),
    }


def profile_from_record(row: dict[str, object]) -> UserProfile:
    previous = row.get("previous_version_id")
    created_at = row.get("created_at")
    return UserProfile(
        id=UUID(str(row["id"])),
        version=int(row.get("version") or 1),
        previous_version_id=UUID(str(previous)) if previous else None,
        created_at=datetime.fromisoformat(str(created_at)) if created_at else None,
        full_name=row.get("full_name"),
        email=row.get("email"),
        age=int(row["age"]),
        sex=Sex(row["sex"]),
        weight_kg=float(row["weight_kg"]),
        height_cm=float(row["height_cm"]),
        activity_level=ActivityLevel(row["activity_level"]),
        goal=Goal(row["goal"]),
        diet_type=DietType(row["diet_type"]),
        allergies=frozenset(Allergen(value) for value in row.get("allergies") or []),
    )


def targets_to_record(targets: NutritionTargets) -> dict[str, object]:
    return {
        "bmr": targets.bmr,
        "tdee": targets.tdee,
        "daily_calories": targets.daily_calories,
        "macros": {
            "protein_g": targets.macros.protein_g,
            "carbs_g": targets.macros.carbs_g,
            "fats_g": targets.macros.fats_g,
        },
        "ratios": {
            "protein_pct": targets.ratios.protein_pct,
            "carbs_pct": targets.ratios.carbs_pct,
            "fats_pct": targets.ratios.fats_pct,
        },
    }


def _targets_from_record(row: dict[str, object]) -> NutritionTargets:
    macros = row["macros"]
    ratios = row["ratios"]
    return NutritionTargets(
        bmr=int(row["bmr"]),
        tdee=int(row["tdee"]),
        daily_calories=int(row["daily_calories"]),
        macros=MacroTargets(**{key: int(value) for key, value in macros.items()}),
        ratios=MacroRatios(**{key: int(value) for key, value in ratios.items()}),
    )


def _meal_to_record(meal: MealInstance) -> dict[str, object]:
    return {
        "meal_type": meal.meal_type.value,
        "name": meal.name,
        "items": [
            {
                "name": item.name,
                "category": item.category,
                "quantity": item.quantity,
                "unit": item.unit,
                "nutrition": nutrition_to_record(item.nutrition),
            }
            for item in meal.items
        ],
        "instructions": list(meal.instructions),
        "prep_minutes": meal.prep_minutes,
        "cook_minutes": meal.cook_minutes,
        "totals": nutrition_to_record(meal.totals),
    }


def _meal_from_record(row: dict[str, object]) -> MealInstance:
    return MealInstance(
        meal_type=MealType(row["meal_type"]),
        name=str(row["name"]),
        items=tuple(
            MealItem(
                name=str(item["name"]),
                category=str(item.get("category", "general")),
                quantity=float(item["quantity"]),
                unit=str(item.get("unit", "g")),
                nutrition=nutrition_from_record(item["nutrition"]),
            )
            for item in row.get("items") or []
        ),
        instructions=tuple(row.get("instructions") or ()),
        prep_minutes=int(row.get("prep_minutes") or 0),
        cook_minutes=int(row.get("cook_minutes") or 0),
    )


def plan_to_record(plan: DietPlan, *, include_totals: bool = True) -> dict[str, object]:
    """Serialize a plan; derived totals are output-only."""
    record: dict[str, object] = {
        "id": str(plan.id),
        "profile_id": str(plan.profile_id),
        "name": plan.name,
        "goal": plan.goal.value,
        "diet_type": plan.diet_type.value,
        "allergies": sorted(allergen.value for allergen in plan.allergies),
        "created_at": plan.created_at.isoformat(),
        "targets": targets_to_record(plan.targets),
        "days": [
            {
                "day": day.day,
                "meals": {
                    meal_type.value: _meal_to_record(day.meals[meal_type])
                    for meal_type in MealType
                },
                "totals": nutrition_to_record(day.totals),
            }
            for day in plan.days
        ],
        "shopping_list": [
            {
                "name": entry.name,
                "quantity": entry.quantity,
                "unit": entry.unit,
                "category": entry.category,
            }
            for entry in plan.shopping_list.entries.values()
        ],
    }
    if include_totals:
        record["weekly_totals"] = nutrition_to_record(plan.weekly_totals)
        record["daily_average"] = nutrition_to_record(plan.daily_average)
    return record


def plan_from_record(row: dict[str, object]) -> DietPlan:
    """Rebuild a plan; stored totals are ignored and recomputed from meals."""
    days = tuple(
        DayPlan(
            day=str(day["day"]),
            meals={
                MealType(key): _meal_from_record(meal)
                for key, meal in day["meals"].items()
            },
        )
        for day in row["days"]
    )
    entries = {
        str(entry["name"]): ShoppingListEntry(
            name=str(entry["name"]),
            quantity=float(entry["quantity"]),
            unit=str(entry.get("unit", "g")),
            category=str(entry.get("category", "general")),
        )
        for entry in row.get("shopping_list") or []
    }
    return DietPlan(
        id=UUID(str(row["id"])),
        profile_id=UUID(str(row["profile_id"])),
        name=str(row["name"]),
        goal=Goal(row["goal"]),
        diet_type=DietType(row["diet_type"]),
        allergies=frozenset(Allergen(value) for value in row.get("allergies") or []),
        targets=_targets_from_record(row["targets"]),
        days=days,
        shopping_list=ShoppingList(entries=entries),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
