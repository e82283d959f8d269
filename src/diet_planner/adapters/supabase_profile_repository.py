"""Supabase-backed profile repository."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_planner.domain.profiles import UserProfile
from diet_planner.records import profile_from_record, profile_to_record
from diet_planner.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Insert a profile row and return it as stored."""
        response = (
            self.client.table("profiles").insert(profile_to_record(profile)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return profile_from_record(response.data[0])

    def get_profile(self, profile_id: UUID) -> UserProfile | None:
        """Return a profile by id, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(profile_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return profile_from_record(response.data[0])

    def ping(self) -> bool:
        """Run a cheap query to check connectivity."""
        try:
            self.client.table("profiles").select("id").limit(1).execute()
        except Exception:
            _logger.warning("Supabase ping failed", exc_info=True)
            return False
        return True
