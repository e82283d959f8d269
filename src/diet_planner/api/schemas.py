"""Pydantic models for request payloads."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from diet_planner.domain.foods import MealType
from diet_planner.domain.profiles import (
    ActivityLevel,
    Allergen,
    DietType,
    Goal,
    Sex,
    UserProfile,
)
from diet_planner.errors import ProfileValidationError
from diet_planner.services.meal_tools import MealEntry

KG_PER_LB = 0.453592
CM_PER_FT = 30.48
MIN_WEIGHT_KG = 30
MAX_WEIGHT_KG = 500
MIN_HEIGHT_CM = 100
MAX_HEIGHT_CM = 300
CLEARABLE_FIELDS = frozenset({"full_name", "email"})


def weight_in_kg(weight: float, unit: str) -> float:
    return round(weight * KG_PER_LB, 2) if unit == "lbs" else weight


def height_in_cm(height: float, unit: str) -> float:
    return round(height * CM_PER_FT, 1) if unit == "ft" else height


def _check_body_ranges(
    weight_kg: float | None, height_cm: float | None
) -> list[dict[str, str]]:
    errors: list[dict[str, str]] = []
    if weight_kg is not None and not MIN_WEIGHT_KG <= weight_kg <= MAX_WEIGHT_KG:
        errors.append(
            {
                "field": "weight",
                "message": f"Weight must be between {MIN_WEIGHT_KG} and "
                f"{MAX_WEIGHT_KG} kg",
            }
        )
    if height_cm is not None and not MIN_HEIGHT_CM <= height_cm <= MAX_HEIGHT_CM:
        errors.append(
            {
                "field": "height",
                "message": f"Height must be between {MIN_HEIGHT_CM} and "
                f"{MAX_HEIGHT_CM} cm",
            }
        )
    return errors


class ProfilePayload(BaseModel):
    """Profile form submitted by a user."""

    full_name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    age: int = Field(ge=18, le=100)
    sex: Sex
    weight: float = Field(gt=0)
    weight_unit: Literal["kg", "lbs"] = "kg"
    height: float = Field(gt=0)
    height_unit: Literal["cm", "ft"] = "cm"
    activity_level: ActivityLevel
    goal: Goal
    diet_type: DietType = DietType.NON_VEGETARIAN
    allergies: list[Allergen] = Field(default_factory=list)

    def to_profile(self) -> UserProfile:
        """Convert units and build an unsaved profile."""
        weight_kg = weight_in_kg(self.weight, self.weight_unit)
        height_cm = height_in_cm(self.height, self.height_unit)
        errors = _check_body_ranges(weight_kg, height_cm)
        if errors:
            raise ProfileValidationError(errors)
        return UserProfile(
            full_name=self.full_name,
            email=self.email,
            age=self.age,
            sex=self.sex,
            weight_kg=weight_kg,
            height_cm=height_cm,
            activity_level=self.activity_level,
            goal=self.goal,
            diet_type=self.diet_type,
            allergies=frozenset(self.allergies),
        )


class ProfileUpdatePayload(BaseModel):
    """Partial profile edit; omitted fields keep their value."""

    full_name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    age: int | None = Field(default=None, ge=18, le=100)
    sex: Sex | None = None
    weight: float | None = Field(default=None, gt=0)
    weight_unit: Literal["kg", "lbs"] = "kg"
    height: float | None = Field(default=None, gt=0)
    height_unit: Literal["cm", "ft"] = "cm"
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
    diet_type: DietType | None = None
    allergies: list[Allergen] | None = None

    def to_changes(self) -> dict[str, object]:
        """Return the edited profile fields in storage units.

        An explicit null clears ``full_name`` or ``email``. Any other null,
        or a unit sent without its measurement, is rejected.
        """
        sent = self.model_fields_set
        errors: list[dict[str, str]] = []
        for unit, measurement in (("weight_unit", "weight"), ("height_unit", "height")):
            if unit in sent and measurement not in sent:
                errors.append(
                    {"field": unit, "message": f"{unit} requires {measurement}"}
                )
        provided = self.model_dump(
            exclude_unset=True, exclude={"weight_unit", "height_unit"}
        )
        changes: dict[str, object] = {}
        for name, value in provided.items():
            if value is None:
                if name in CLEARABLE_FIELDS:
                    changes[name] = None
                else:
                    errors.append({"field": name, "message": "Field cannot be null"})
            elif name == "weight":
                changes["weight_kg"] = weight_in_kg(value, self.weight_unit)
            elif name == "height":
                changes["height_cm"] = height_in_cm(value, self.height_unit)
            elif name == "allergies":
                changes["allergies"] = frozenset(value)
            else:
                changes[name] = value
        errors.extend(
            _check_body_ranges(changes.get("weight_kg"), changes.get("height_cm"))
        )
        if errors:
            raise ProfileValidationError(errors)
        return changes


class GeneratePlanPayload(BaseModel):
    """Request to generate a plan for a profile."""

    profile_id: UUID


class MealEntryPayload(BaseModel):
    food_name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    unit: Literal["g", "kg", "oz", "lb"] = "g"

    def to_entry(self) -> MealEntry:
        return MealEntry(
            food_name=self.food_name, quantity=self.quantity, unit=self.unit
        )


class MealCalculationPayload(BaseModel):
    """Foods and portions of a custom meal."""

    items: list[MealEntryPayload] = Field(min_length=1)


class MealSuggestionPayload(BaseModel):
    """Meal slot to score catalog foods against."""

    meal_type: MealType
    target_calories: float = Field(gt=0, le=5000)
    diet_type: DietType = DietType.NON_VEGETARIAN
    allergies: list[Allergen] = Field(default_factory=list)
    limit: int = Field(default=10, ge=1, le=50)
