"""Profile, recommendation and statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder

from fitness_tracker.api.deps import current_profile, require_user
from fitness_tracker.api.schemas import ProfileUpdateRequest
from fitness_tracker.services.energy import activity_level_description
from fitness_tracker.services.stats import daily_progress

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.profiles import Recommendation, UserProfile

router = APIRouter(tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile, creating it on first sign-in."""
    container: AppContainer = request.app.state.container
    return {"profile": _profile_payload(current_profile(container, user_id))}


@router.patch("/profile")
async def update_profile(
    body: ProfileUpdateRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Update profile fields that were sent."""
    container: AppContainer = request.app.state.container
    current_profile(container, user_id)
    profile = container.profile_service.update_profile(
        user_id, body.model_dump(exclude_none=True)
    )
    return {"profile": _profile_payload(profile)}


@router.get("/profile/recommendation")
async def get_recommendation(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return calorie and macro suggestions, or null when stats are missing."""
    container: AppContainer = request.app.state.container
    current_profile(container, user_id)
    suggestion = container.profile_service.recommendation(user_id)
    return {"recommendation": _recommendation_payload(suggestion)}


@router.post("/profile/recommendation/apply")
async def apply_recommendation(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Adopt the recommended calorie and macro goals."""
    container: AppContainer = request.app.state.container
    profile = current_profile(container, user_id)
    updated = container.profile_service.apply_recommendation(user_id)
    return {
        "applied": updated is not None,
        "profile": _profile_payload(updated or profile),
    }


@router.get("/stats/today")
async def stats_today(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return today's totals and calorie progress."""
    container: AppContainer = request.app.state.container
    profile = current_profile(container, user_id)
    totals = container.stats_service.get_today(user_id, profile.timezone)
    return {
        "totals": jsonable_encoder(totals),
        "progress": jsonable_encoder(
            daily_progress(totals.calories, profile.calorie_goal)
        ),
    }


@router.get("/stats/week")
async def stats_week(
    request: Request,
    start: str | None = None,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Return the Sunday-to-Saturday week containing ``start``."""
    container: AppContainer = request.app.state.container
    profile = current_profile(container, user_id)
    summary = container.stats_service.get_week(user_id, profile.timezone, start)
    return {
        "week": jsonable_encoder(summary),
        "is_current_week": container.stats_service.is_current_week(
            summary.start, profile.timezone
        ),
        "calorie_goal": profile.calorie_goal,
    }


def _profile_payload(profile: UserProfile) -> dict[str, object]:
    payload = jsonable_encoder(profile)
    payload["activity_description"] = (
        activity_level_description(profile.activity_level)
        if profile.activity_level
        else ""
    )
    return payload


def _recommendation_payload(
    suggestion: Recommendation | None,
) -> dict[str, object] | None:
    if suggestion is None:
        return None
    return jsonable_encoder(suggestion)
