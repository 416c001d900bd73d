"""Workout, plan and exercise catalog endpoints."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder

from fitness_tracker.api.deps import require_user, user_today
from fitness_tracker.api.schemas import PlanStartRequest, WorkoutCreateRequest
from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.workouts import Difficulty, ExerciseCategory

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.workouts import ActivePlan, Workout

router = APIRouter(tags=["training"])


@router.get("/exercises")
async def list_exercises(
    request: Request,
    category: str | None = None,
    max_difficulty: str | None = None,
    q: str | None = None,
) -> dict[str, object]:
    """Browse the exercise catalog."""
    container: AppContainer = request.app.state.container
    catalog = container.catalog
    if q:
        exercises = catalog.search_exercises(q)
    elif category:
        parsed = _parse_enum(ExerciseCategory, category, "category")
        if max_difficulty:
            level = _parse_enum(Difficulty, max_difficulty, "max_difficulty")
            exercises = catalog.exercises_for_level(parsed, level)
        else:
            exercises = catalog.exercises_by_category(parsed)
    else:
        exercises = list(catalog.exercises)
    return {"exercises": jsonable_encoder(exercises)}


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def create_workout(
    body: WorkoutCreateRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Save a finished workout."""
    container: AppContainer = request.app.state.container
    workout = container.workout_service.record_workout(
        user_id=user_id,
        name=body.name,
        day=body.day or user_today(container, user_id),
        duration_minutes=body.duration_minutes,
        entries=[
            (item.exercise_id, [entry.to_set() for entry in item.sets])
            for item in body.exercises
        ],
    )
    return {"workout": _workout_payload(workout)}


@router.get("/workouts/recent")
async def recent_workouts(
    request: Request, limit: int = 10, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's latest workouts."""
    container: AppContainer = request.app.state.container
    workouts = container.workout_service.list_recent(user_id, limit)
    return {"workouts": [_workout_payload(workout) for workout in workouts]}


@router.get("/plans")
async def list_plans(
    request: Request,
    difficulty: str | None = None,
    days_per_week: int | None = None,
) -> dict[str, object]:
    """List plan templates, optionally with a suggestion."""
    container: AppContainer = request.app.state.container
    catalog = container.catalog
    if difficulty is None:
        return {"plans": jsonable_encoder(catalog.plans)}
    level = _parse_enum(Difficulty, difficulty, "difficulty")
    suggested = (
        catalog.suggested_plan(days_per_week, level) if days_per_week else None
    )
    return {
        "plans": jsonable_encoder(catalog.plans_by_difficulty(level)),
        "suggested": jsonable_encoder(suggested),
    }


@router.get("/plans/active")
async def active_plan(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's plan progress, or null."""
    container: AppContainer = request.app.state.container
    active = container.plan_service.get_active_plan(user_id)
    return {"active": _active_payload(active) if active else None}


@router.post("/plans/active/complete-day")
async def complete_plan_day(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Mark the current plan day done."""
    container: AppContainer = request.app.state.container
    return {"active": _active_payload(container.plan_service.complete_day(user_id))}


@router.delete("/plans/active", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_plan(request: Request, user_id: str = Depends(require_user)) -> None:
    """Stop the active plan."""
    container: AppContainer = request.app.state.container
    container.plan_service.cancel_plan(user_id)


@router.get("/plans/{plan_id}")
async def get_plan(plan_id: str, request: Request) -> dict[str, object]:
    """Return one plan template."""
    container: AppContainer = request.app.state.container
    return {"plan": jsonable_encoder(container.plan_service.get_plan(plan_id))}


@router.post("/plans/{plan_id}/start", status_code=status.HTTP_201_CREATED)
async def start_plan(
    plan_id: str,
    request: Request,
    body: PlanStartRequest | None = None,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Start following a plan."""
    container: AppContainer = request.app.state.container
    start_date = (body and body.start_date) or user_today(container, user_id)
    active = container.plan_service.start_plan(user_id, plan_id, start_date)
    return {"active": _active_payload(active)}


def _workout_payload(workout: Workout) -> dict[str, object]:
    payload = jsonable_encoder(workout)
    payload["completed_sets"] = workout.completed_sets
    payload["total_volume"] = workout.total_volume
    return payload


def _active_payload(active: ActivePlan) -> dict[str, object]:
    return {
        "progress": jsonable_encoder(active.progress),
        "plan": jsonable_encoder(active.plan),
        "current_day": jsonable_encoder(active.current_day),
        "week_number": active.week_number,
    }


def _parse_enum(enum: type[StrEnum], value: str, field: str) -> StrEnum:
    try:
        return enum(value)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid {field} {value!r}", field=field) from exc
