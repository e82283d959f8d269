"""Diet plan generation and retrieval."""

import logging
import math
import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_planner.domain.plans import DietPlan, PlanPage
from diet_planner.domain.profiles import DietaryConstraints
from diet_planner.errors import NotFoundError
from diet_planner.services.cache import Cache
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.metabolism import compute_targets
from diet_planner.services.planner import assemble_week
from diet_planner.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for generated plans."""

    def save_plan(self, plan: DietPlan) -> None:
        """Persist a plan."""

    def get_plan(self, plan_id: UUID) -> DietPlan | None:
        """Return a plan by id, if present."""

    def list_plans(self, profile_id: UUID, limit: int, offset: int) -> list[DietPlan]:
        """Return plans for a profile, newest first."""

    def count_plans(self, profile_id: UUID) -> int:
        """Return how many plans a profile has."""

    def ping(self) -> bool:
        """Return true when the store is reachable."""


@dataclass
class DietPlanService:
    """Orchestrates targets, weekly assembly and persistence."""

    profile_repository: ProfileRepository
    plan_repository: PlanRepository
    catalog: FoodCatalog
    cache: Cache
    rng_factory: Callable[[], random.Random] = random.Random
    cache_ttl_seconds: int = 60

    def generate_plan(self, profile_id: UUID) -> DietPlan:
        """Generate and store a new plan for a profile.

        Every call produces a fresh plan; earlier plans are kept.
        """
        profile = self.profile_repository.get_profile(profile_id)
        if profile is None:
            raise NotFoundError(f"Profile {profile_id} not found")
        targets = compute_targets(profile)
        plan = assemble_week(
            targets,
            self.catalog.foods,
            DietaryConstraints.for_profile(profile),
            self.rng_factory(),
            profile_id=profile_id,
            goal=profile.goal,
        )
        self.plan_repository.save_plan(plan)
        self.cache.set(_cache_key(plan.id), plan, ttl_seconds=self.cache_ttl_seconds)
        empty_meals = sum(1 for meal in plan.meals() if meal.is_empty)
        _logger.info(
            "Generated diet plan: plan_id=%s profile_id=%s calories=%s empty_meals=%s",
            plan.id,
            profile_id,
            targets.daily_calories,
            empty_meals,
        )
        return plan

    def get_plan(self, plan_id: UUID) -> DietPlan | None:
        """Return a plan, served from the cache when recently read."""
        cached = self.cache.get(_cache_key(plan_id))
        if isinstance(cached, DietPlan):
            return cached
        plan = self.plan_repository.get_plan(plan_id)
        if plan is not None:
            self.cache.set(
                _cache_key(plan_id), plan, ttl_seconds=self.cache_ttl_seconds
            )
        return plan

    def list_plans(self, profile_id: UUID, page: int = 1, limit: int = 10) -> PlanPage:
        """Return one page of a profile's plans, newest first."""
        page = max(page, 1)
        limit = max(limit, 1)
        total = self.plan_repository.count_plans(profile_id)
        plans = self.plan_repository.list_plans(
            profile_id, limit=limit, offset=(page - 1) * limit
        )
        return PlanPage(
            plans=plans,
            total=total,
            page=page,
            total_pages=math.ceil(total / limit),
        )

    def latest_plan(self, profile_id: UUID) -> DietPlan | None:
        """Return the most recent plan for a profile."""
        plans = self.plan_repository.list_plans(profile_id, limit=1, offset=0)
        return plans[0] if plans else None


def _cache_key(plan_id: UUID) -> str:
    return f"plan:{plan_id}"
