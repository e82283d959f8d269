"""Supabase repository for diet plans."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_planner.domain.plans import DietPlan
from diet_planner.records import plan_from_record, plan_to_record
from diet_planner.services.plans import PlanRepository

_logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, profile_id, name, goal, diet_type, allergies, created_at, targets, days, "
    "shopping_list"
)


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for plan persistence.

    Days and the shopping list are stored as JSON columns.
    """

    client: Client

    def save_plan(self, plan: DietPlan) -> None:
        """Insert a plan row."""
        response = (
            self.client.table("diet_plans")
            .insert(plan_to_record(plan, include_totals=False))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diet plan")

    def get_plan(self, plan_id: UUID) -> DietPlan | None:
        """Return a plan by id."""
        response = (
            self.client.table("diet_plans")
            .select(_COLUMNS)
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return plan_from_record(response.data[0])

    def list_plans(self, profile_id: UUID, limit: int, offset: int) -> list[DietPlan]:
        """Return a profile's plans, newest first."""
        response = (
            self.client.table("diet_plans")
            .select(_COLUMNS)
            .eq("profile_id", str(profile_id))
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [plan_from_record(row) for row in response.data or []]

    def count_plans(self, profile_id: UUID) -> int:
        """Return how many plans a profile has."""
        response = (
            self.client.table("diet_plans")
            .select("id", count="exact")
            .eq("profile_id", str(profile_id))
            .execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def ping(self) -> bool:
        """Return true when the plans table answers."""
        try:
            self.client.table("diet_plans").select("id").limit(1).execute()
        except Exception:
            _logger.warning("Supabase ping failed", exc_info=True)
            return False
        return True
