"""Tests for PDF rendering."""

import random
from uuid import uuid4

import pytest

from diet_planner.domain.foods import FoodItem
from diet_planner.domain.nutrition import NutritionFacts
from diet_planner.domain.profiles import DietaryConstraints, DietType
from diet_planner.errors import RenderingError
from diet_planner.services.catalog import SEED_FOODS
from diet_planner.services.metabolism import compute_targets
from diet_planner.services.planner import assemble_week
from diet_planner.services.rendering import DietPlanPdfRenderer
from tests.conftest import make_profile


def _plan(profile, catalog: tuple[FoodItem, ...] = SEED_FOODS):  # type: ignore[no-untyped-def]
    return assemble_week(
        compute_targets(profile),
        catalog,
        DietaryConstraints.for_profile(profile),
        random.Random(9),
        profile_id=uuid4(),
        goal=profile.goal,
    )


def test_render_returns_pdf_bytes() -> None:
    profile = make_profile(full_name="Sam Rivera <sam>", email="sam@example.com")

    content = DietPlanPdfRenderer().render(_plan(profile), profile)

    assert content.startswith(b"%PDF")
    assert content.count(b"/Type /Page") > 6


def test_render_plan_with_only_placeholder_meals() -> None:
    profile = make_profile(diet_type=DietType.VEGAN)

    content = DietPlanPdfRenderer(brand_name="Test Kitchen").render(
        _plan(profile, catalog=()), profile
    )

    assert content.startswith(b"%PDF")


def test_render_failure_raises_rendering_error(monkeypatch) -> None:
    profile = make_profile()

    def fail(*_args, **_kwargs) -> None:  # type: ignore[no-untyped-def]
        raise ValueError("layout exploded")

    monkeypatch.setattr(
        "diet_planner.services.rendering.SimpleDocTemplate.build", fail
    )

    with pytest.raises(RenderingError):
        DietPlanPdfRenderer().render(_plan(profile), profile)


def test_render_escapes_markup_in_shopping_categories() -> None:
    profile = make_profile()
    food = FoodItem(
        name="Battered cod",
        category="fish & <chips>",
        per_100g=NutritionFacts(calories=230, protein_g=15, carbs_g=17, fats_g=11),
    )

    content = DietPlanPdfRenderer().render(_plan(profile, catalog=(food,)), profile)

    assert content.startswith(b"%PDF")


def test_story_failure_raises_rendering_error(monkeypatch) -> None:
    profile = make_profile()

    def fail(*_args, **_kwargs) -> None:  # type: ignore[no-untyped-def]
        raise ValueError("bad paragraph markup")

    monkeypatch.setattr(DietPlanPdfRenderer, "_cover", fail)

    with pytest.raises(RenderingError):
        DietPlanPdfRenderer().render(_plan(profile), profile)
