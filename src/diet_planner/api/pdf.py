"""PDF download endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request
from fastapi.responses import Response

from diet_planner.errors import NotFoundError

if TYPE_CHECKING:
    from diet_planner.containers import AppContainer
    from diet_planner.domain.plans import DietPlan

router = APIRouter(prefix="/pdf", tags=["pdf"])


def _pdf_response(
    container: AppContainer, plan: DietPlan, disposition: str
) -> Response:
    profile = container.profile_service.get_profile(plan.profile_id)
    if profile is None:
        raise NotFoundError(f"Profile {plan.profile_id} not found")
    content = container.renderer.render(plan, profile)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'{disposition}; filename="diet-plan-{plan.id}.pdf"'
        },
    )


def _load_plan(container: AppContainer, plan_id: UUID) -> DietPlan:
    plan = container.plan_service.get_plan(plan_id)
    if plan is None:
        raise NotFoundError(f"Plan {plan_id} not found")
    return plan


@router.get("/plans/{plan_id}")
async def download_plan(plan_id: UUID, request: Request) -> Response:
    """Return a plan as a PDF attachment."""
    container: AppContainer = request.app.state.container
    return _pdf_response(container, _load_plan(container, plan_id), "attachment")


@router.get("/plans/{plan_id}/preview")
async def preview_plan(plan_id: UUID, request: Request) -> Response:
    """Return a plan as an inline PDF."""
    container: AppContainer = request.app.state.container
    return _pdf_response(container, _load_plan(container, plan_id), "inline")


@router.get("/profiles/{profile_id}/current-plan")
async def download_current_plan(profile_id: UUID, request: Request) -> Response:
    """Return the newest plan of a profile as a PDF attachment."""
    container: AppContainer = request.app.state.container
    plan = container.plan_service.latest_plan(profile_id)
    if plan is None:
        raise NotFoundError(f"No plan found for profile {profile_id}")
    return _pdf_response(container, plan, "attachment")
