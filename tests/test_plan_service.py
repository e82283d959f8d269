"""Tests for diet plan generation and retrieval."""

import random
from uuid import uuid4

import pytest

from diet_planner.domain.profiles import DietType
from diet_planner.errors import NotFoundError
from diet_planner.services.cache import InMemoryCache
from diet_planner.services.catalog import FoodCatalog
from diet_planner.services.plans import DietPlanService
from diet_planner.services.profiles import ProfileService
from tests.conftest import (
    InMemoryPlanRepository,
    InMemoryProfileRepository,
    make_profile,
)


def test_generate_plan_persists(
    profile_service: ProfileService,
    plan_service: DietPlanService,
    plan_repository: InMemoryPlanRepository,
) -> None:
    profile = profile_service.create_profile(make_profile())

    plan = plan_service.generate_plan(profile.id)

    assert plan.profile_id == profile.id
    assert plan_repository.plans == [plan]
    assert plan.targets.daily_calories == 1709


def test_generate_plan_unknown_profile(plan_service: DietPlanService) -> None:
    with pytest.raises(NotFoundError):
        plan_service.generate_plan(uuid4())


def test_regeneration_keeps_targets_and_varies_meals(
    profile_service: ProfileService, plan_service: DietPlanService
) -> None:
    profile = profile_service.create_profile(make_profile())

    plans = [plan_service.generate_plan(profile.id) for _ in range(3)]

    assert len({plan.id for plan in plans}) == 3
    assert all(plan.targets == plans[0].targets for plan in plans)
    meal_names = {tuple(meal.name for meal in plan.meals()) for plan in plans}
    assert len(meal_names) > 1


def test_seeded_factory_is_deterministic(
    profile_repository: InMemoryProfileRepository, catalog: FoodCatalog
) -> None:
    service = DietPlanService(
        profile_repository=profile_repository,
        plan_repository=InMemoryPlanRepository(),
        catalog=catalog,
        cache=InMemoryCache(),
        rng_factory=lambda: random.Random(5),
    )
    profile = ProfileService(profile_repository).create_profile(make_profile())

    first = service.generate_plan(profile.id)
    second = service.generate_plan(profile.id)

    assert [m.name for m in first.meals()] == [m.name for m in second.meals()]


def test_get_plan_is_cached(
    profile_service: ProfileService,
    plan_service: DietPlanService,
    plan_repository: InMemoryPlanRepository,
) -> None:
    profile = profile_service.create_profile(make_profile())
    plan = plan_service.generate_plan(profile.id)
    plan_service.cache.delete(f"plan:{plan.id}")

    assert plan_service.get_plan(plan.id) == plan
    assert plan_service.get_plan(plan.id) == plan
    assert plan_repository.reads == 1
    assert plan_service.get_plan(uuid4()) is None


def test_list_plans_paginates_newest_first(
    profile_service: ProfileService, plan_service: DietPlanService
) -> None:
    profile = profile_service.create_profile(make_profile(diet_type=DietType.VEGAN))
    plans = [plan_service.generate_plan(profile.id) for _ in range(3)]

    page = plan_service.list_plans(profile.id, page=1, limit=2)
    second_page = plan_service.list_plans(profile.id, page=2, limit=2)

    assert page.total == 3
    assert page.total_pages == 2
    assert [plan.id for plan in page.plans] == [plans[2].id, plans[1].id]
    assert [plan.id for plan in second_page.plans] == [plans[0].id]
    assert plan_service.latest_plan(profile.id) == plans[2]


def test_list_plans_for_profile_without_plans(plan_service: DietPlanService) -> None:
    page = plan_service.list_plans(uuid4())

    assert page.plans == []
    assert page.total == 0
    assert page.total_pages == 0
    assert plan_service.latest_plan(uuid4()) is None
