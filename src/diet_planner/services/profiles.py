"""Profile lifecycle: creation and versioned edits."""

import dataclasses
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from diet_planner.domain.profiles import UserProfile
from diet_planner.errors import NotFoundError, ProfileValidationError

EDITABLE_FIELDS = frozenset(
    {
        "age",
        "sex",
        "weight_kg",
        "height_cm",
        "activity_level",
        "goal",
        "diet_type",
        "allergies",
        "full_name",
        "email",
    }
)


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Store a profile and return it as persisted."""

    def get_profile(self, profile_id: UUID) -> UserProfile | None:
        """Return a profile by id, if present."""

    def ping(self) -> bool:
        """Return true when the store is reachable."""


@dataclass
class ProfileService:
    """Application service for user profiles."""

    repository: ProfileRepository

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Store a new profile as version 1."""
        stored = dataclasses.replace(
            profile,
            id=uuid4(),
            version=1,
            previous_version_id=None,
            created_at=datetime.now(tz=UTC),
        )
        return self.repository.create_profile(stored)

    def get_profile(self, profile_id: UUID) -> UserProfile | None:
        """Return a profile by id."""
        return self.repository.get_profile(profile_id)

    def update_profile(
        self, profile_id: UUID, changes: dict[str, object]
    ) -> UserProfile:
        """Store an edited copy as a new version; the original is kept."""
        current = self.repository.get_profile(profile_id)
        if current is None:
            raise NotFoundError(f"Profile {profile_id} not found")
        unknown = sorted(set(changes) - EDITABLE_FIELDS)
        if unknown:
            raise ProfileValidationError(
                [
                    {"field": name, "message": "Field cannot be edited"}
                    for name in unknown
                ]
            )
        edited = dataclasses.replace(
            current,
            **changes,
            id=uuid4(),
            version=current.version + 1,
            previous_version_id=current.id,
            created_at=datetime.now(tz=UTC),
        )
        return self.repository.create_profile(edited)
