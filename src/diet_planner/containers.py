"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from diet_planner.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from diet_planner.config import Settings
from diet_planner.services.cache import InMemoryCache
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.health import HealthService
from diet_planner.services.meal_tools import MealToolsService
from diet_planner.services.plans import DietPlanService
from diet_planner.services.profiles import ProfileService
from diet_planner.services.rendering import DietPlanPdfRenderer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    profile_service: ProfileService
    plan_service: DietPlanService
    meal_tools_service: MealToolsService
    renderer: DietPlanPdfRenderer
    health_service: HealthService
    close_resources: Callable[[], Awaitable[None]]


def rng_factory_for(seed: int | None) -> Callable[[], random.Random]:
    """Return a factory of random sources; a seed makes every plan repeatable."""
    if seed is None:
        return random.Random

    def seeded() -> random.Random:
        return random.Random(seed)

    return seeded


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    plan_repository = SupabasePlanRepository(supabase_client)
    catalog = FoodCatalog()
    cache = InMemoryCache()
    plan_service = DietPlanService(
        profile_repository=profile_repository,
        plan_repository=plan_repository,
        catalog=catalog,
        cache=cache,
        rng_factory=rng_factory_for(resolved_settings.meal_seed),
        cache_ttl_seconds=resolved_settings.plan_cache_ttl_seconds,
    )
    renderer = DietPlanPdfRenderer(
        brand_name=resolved_settings.brand_name,
        support_email=resolved_settings.support_email,
    )

    async def close_resources() -> None:
        cache.clear()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        profile_service=ProfileService(profile_repository),
        plan_service=plan_service,
        meal_tools_service=MealToolsService(catalog),
        renderer=renderer,
        health_service=HealthService((profile_repository, plan_repository)),
        close_resources=close_resources,
    )
