"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class Sex(str, Enum):
    """Biological sex used by the metabolic formulas."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Ordinal activity tiers."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class Goal(str, Enum):
    """Primary goal of a diet plan."""

    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"


class DietType(str, Enum):
    """Diet styles a user can pick."""

    NON_VEGETARIAN = "non_vegetarian"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    MEDITERRANEAN = "mediterranean"
    PALEO = "paleo"
    INTERMITTENT_FASTING = "intermittent_fasting"


class Allergen(str, Enum):
    """Allergens shared by profiles and foods."""

    DAIRY = "dairy"
    GLUTEN = "gluten"
    NUTS = "nuts"
    SEAFOOD = "seafood"
    EGGS = "eggs"
    SOY = "soy"


@dataclass(frozen=True)
class UserProfile:
    """A stored questionnaire answer set; edits produce a new version."""

    age: int
    sex: Sex
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel
    goal: Goal
    diet_type: DietType
    allergies: frozenset[Allergen] = frozenset()
    full_name: str | None = None
    email: str | None = None
    id: UUID | None = None
    version: int = 1
    previous_version_id: UUID | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class DietaryConstraints:
    """Diet type and allergies that filter the food catalog."""

    diet_type: DietType
    allergies: frozenset[Allergen] = frozenset()

    @classmethod
    def for_profile(cls, profile: UserProfile) -> "DietaryConstraints":
        """Build constraints from a profile."""
        return cls(diet_type=profile.diet_type, allergies=profile.allergies)
