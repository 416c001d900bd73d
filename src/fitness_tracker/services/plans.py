"""Workout plan progress tracking."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.catalog import Catalog
from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.domain.workouts import ActivePlan, UserWorkoutPlan, WorkoutPlan

logger = logging.getLogger(__name__)


class UserPlanRepository(Protocol):
    """Persistence interface for a user's plan progress."""

    def create_user_plan(
        self, user_id: str, plan_id: str, start_date: date
    ) -> UserWorkoutPlan:
        """Create plan progress starting on day 1."""

    def get_user_plan(self, user_id: str) -> UserWorkoutPlan | None:
        """Return the user's plan progress, if any."""

    def update_progress(
        self, user_plan_id: UUID, current_day: int, completed_days: tuple[int, ...]
    ) -> UserWorkoutPlan:
        """Store the current day and completed days."""

    def delete_user_plan(self, user_plan_id: UUID) -> None:
        """Delete plan progress."""


def next_plan_day(current_day: int, plan: WorkoutPlan) -> int:
    """Advance to the next day, wrapping to 1 after the last day."""
    if current_day >= len(plan.days):
        return 1
    return current_day + 1


@dataclass
class PlanService:
    """Service for starting and advancing workout plans."""

    repository: UserPlanRepository
    catalog: Catalog

    def get_plan(self, plan_id: str) -> WorkoutPlan:
        """Return a plan template or raise ``NotFoundError``."""
        plan = self.catalog.plan(plan_id)
        if plan is None:
            raise NotFoundError("plan", plan_id)
        return plan

    def start_plan(self, user_id: str, plan_id: str, start_date: date) -> ActivePlan:
        """Bind the user to a plan, replacing any plan already in progress."""
        plan = self.get_plan(plan_id)
        existing = self.repository.get_user_plan(user_id)
        if existing is not None:
            self.repository.delete_user_plan(existing.id)
        progress = self.repository.create_user_plan(user_id, plan.id, start_date)
        logger.info("User %s started plan %s", user_id, plan.id)
        return ActivePlan(progress=progress, plan=plan)

    def get_active_plan(self, user_id: str) -> ActivePlan | None:
        """Return the user's plan with its template, if one is active."""
        progress = self.repository.get_user_plan(user_id)
        if progress is None:
            return None
        plan = self.catalog.plan(progress.plan_id)
        if plan is None:
            logger.warning(
                "User %s has progress for unknown plan %s", user_id, progress.plan_id
            )
            return None
        return ActivePlan(progress=progress, plan=plan)

    def complete_day(self, user_id: str) -> ActivePlan:
        """Mark the current day done and move to the next one."""
        active = self._require_active(user_id)
        progress = active.progress
        completed = progress.completed_days
        if progress.current_day not in completed:
            completed = (*completed, progress.current_day)
        next_day = next_plan_day(progress.current_day, active.plan)
        updated = self.repository.update_progress(progress.id, next_day, completed)
        logger.info(
            "User %s completed day %d of plan %s",
            user_id,
            progress.current_day,
            active.plan.id,
        )
        return ActivePlan(progress=updated, plan=active.plan)

    def cancel_plan(self, user_id: str) -> None:
        """Stop following the active plan."""
        active = self._require_active(user_id)
        self.repository.delete_user_plan(active.progress.id)
        logger.info("User %s cancelled plan %s", user_id, active.plan.id)

    def _require_active(self, user_id: str) -> ActivePlan:
        active = self.get_active_plan(user_id)
        if active is None:
            raise NotFoundError("active plan", user_id)
        return active
