"""Food catalog and meal helper endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from diet_planner.api.schemas import (  # noqa: TC001
    MealCalculationPayload,
    MealSuggestionPayload,
)
from diet_planner.domain.profiles import DietaryConstraints, DietType
from diet_planner.errors import NotFoundError
from diet_planner.records import food_to_record, nutrition_to_record
from diet_planner.services.catalog import compatible_foods

if TYPE_CHECKING:
    from diet_planner.containers import AppContainer

foods_router = APIRouter(prefix="/api/foods", tags=["foods"])
meals_router = APIRouter(prefix="/api/meals", tags=["meals"])


@foods_router.get("/search")
async def search_foods(
    request: Request,
    q: str = "",
    category: str | None = None,
    diet: DietType | None = None,
    limit: int = Query(default=20, ge=1, le=100),
) -> dict[str, object]:
    """Search the catalog by text, category and diet."""
    container: AppContainer = request.app.state.container
    catalog = container.catalog
    foods = catalog.search(q, limit=len(catalog)) if q else list(catalog)
    if category:
        foods = [food for food in foods if food.category == category]
    if diet is not None:
        foods = compatible_foods(foods, DietaryConstraints(diet_type=diet))
    foods = foods[:limit]
    return {
        "success": True,
        "data": [food_to_record(food) for food in foods],
        "count": len(foods),
    }


@foods_router.get("/categories")
async def food_categories(request: Request) -> dict[str, object]:
    """List the catalog's food categories."""
    container: AppContainer = request.app.state.container
    return {"success": True, "data": container.catalog.categories()}


@foods_router.get("/{name}")
async def get_food(name: str, request: Request) -> dict[str, object]:
    """Return one food by name."""
    container: AppContainer = request.app.state.container
    food = container.catalog.get(name)
    if food is None:
        raise NotFoundError(f"Food {name!r} not found")
    return {"success": True, "data": food_to_record(food)}


@meals_router.post("/calculate")
async def calculate_meal(
    payload: MealCalculationPayload, request: Request
) -> dict[str, object]:
    """Compute the nutrition of a custom meal."""
    container: AppContainer = request.app.state.container
    result = container.meal_tools_service.calculate_meal(
        [item.to_entry() for item in payload.items]
    )
    return {
        "success": True,
        "data": {
            "items": [
                {
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit": item.unit,
                    "nutrition": nutrition_to_record(item.nutrition),
                }
                for item in result.items
            ],
            "totals": nutrition_to_record(result.totals),
            "unknown_foods": result.unknown_foods,
        },
    }


@meals_router.post("/suggestions")
async def suggest_foods(
    payload: MealSuggestionPayload, request: Request
) -> dict[str, object]:
    """Rank compatible foods for a meal slot."""
    container: AppContainer = request.app.state.container
    constraints = DietaryConstraints(
        diet_type=payload.diet_type, allergies=frozenset(payload.allergies)
    )
    suggestions = container.meal_tools_service.suggest_foods(
        payload.meal_type,
        payload.target_calories,
        constraints,
        limit=payload.limit,
    )
    return {
        "success": True,
        "data": [
            {**food_to_record(item.food), "suitability": item.suitability}
            for item in suggestions
        ],
    }
