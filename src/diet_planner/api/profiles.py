"""Profile and plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, status

from diet_planner.api.schemas import (  # noqa: TC001
    GeneratePlanPayload,
    ProfilePayload,
    ProfileUpdatePayload,
)
from diet_planner.errors import NotFoundError
from diet_planner.records import plan_to_record, profile_to_record, targets_to_record
from diet_planner.services.metabolism import compute_bmi, compute_targets

if TYPE_CHECKING:
    from diet_planner.containers import AppContainer
    from diet_planner.domain.profiles import UserProfile

profiles_router = APIRouter(prefix="/api/profiles", tags=["profiles"])
plans_router = APIRouter(prefix="/api/plans", tags=["plans"])


def _profile_body(profile: UserProfile) -> dict[str, object]:
    bmi = compute_bmi(profile)
    return {
        "profile": profile_to_record(profile),
        "targets": targets_to_record(compute_targets(profile)),
        "bmi": {"value": bmi.value, "category": bmi.category},
    }


@profiles_router.post("", status_code=status.HTTP_201_CREATED)
async def create_profile(
    payload: ProfilePayload, request: Request
) -> dict[str, object]:
    """Store a profile and return it with its nutrition targets."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.create_profile(payload.to_profile())
    return {"success": True, "data": _profile_body(profile)}


@profiles_router.get("/{profile_id}")
async def get_profile(profile_id: UUID, request: Request) -> dict[str, object]:
    """Return a stored profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(profile_id)
    if profile is None:
        raise NotFoundError(f"Profile {profile_id} not found")
    return {"success": True, "data": _profile_body(profile)}


@profiles_router.put("/{profile_id}")
async def update_profile(
    profile_id: UUID, payload: ProfileUpdatePayload, request: Request
) -> dict[str, object]:
    """Store an edited profile as a new version."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.update_profile(
        profile_id, payload.to_changes()
    )
    return {"success": True, "data": _profile_body(profile)}


@profiles_router.get("/{profile_id}/plans")
async def list_profile_plans(
    profile_id: UUID,
    request: Request,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
) -> dict[str, object]:
    """Return a page of plans for a profile, newest first."""
    container: AppContainer = request.app.state.container
    result = container.plan_service.list_plans(profile_id, page=page, limit=limit)
    return {
        "success": True,
        "data": [plan_to_record(plan) for plan in result.plans],
        "pagination": {
            "page": result.page,
            "limit": limit,
            "total": result.total,
            "total_pages": result.total_pages,
        },
    }


@plans_router.post("/generate", status_code=status.HTTP_201_CREATED)
async def generate_plan(
    payload: GeneratePlanPayload, request: Request
) -> dict[str, object]:
    """Generate a new weekly plan for a profile."""
    container: AppContainer = request.app.state.container
    plan = container.plan_service.generate_plan(payload.profile_id)
    return {"success": True, "data": plan_to_record(plan)}


@plans_router.get("/{plan_id}")
async def get_plan(plan_id: UUID, request: Request) -> dict[str, object]:
    """Return a stored plan."""
    container: AppContainer = request.app.state.container
    plan = container.plan_service.get_plan(plan_id)
    if plan is None:
        raise NotFoundError(f"Plan {plan_id} not found")
    return {"success": True, "data": plan_to_record(plan)}
