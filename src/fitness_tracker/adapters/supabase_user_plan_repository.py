"""Supabase repository for workout plan progress."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.snapshots import parse_date
from fitness_tracker.domain.workouts import UserWorkoutPlan
from fitness_tracker.services.plans import UserPlanRepository


@dataclass
class SupabaseUserPlanRepository(UserPlanRepository):
    """Supabase implementation for user plan progress."""

    client: Client

    def create_user_plan(
        self, user_id: str, plan_id: str, start_date: date
    ) -> UserWorkoutPlan:
        """Insert plan progress on day 1 with nothing completed."""
        response = (
            self.client.table("user_plans")
            .insert(
                {
                    "user_id": user_id,
                    "plan_id": plan_id,
                    "start_date": start_date.isoformat(),
                    "current_day": 1,
                    "completed_days": [],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user plan")
        return _parse_row(response.data[0])

    def get_user_plan(self, user_id: str) -> UserWorkoutPlan | None:
        """Return plan progress for a user."""
        response = (
            self.client.table("user_plans")
            .select("id, user_id, plan_id, start_date, current_day, completed_days")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_progress(
        self, user_plan_id: UUID, current_day: int, completed_days: tuple[int, ...]
    ) -> UserWorkoutPlan:
        """Store progress and return the updated row."""
        response = (
            self.client.table("user_plans")
            .update(
                {"current_day": current_day, "completed_days": list(completed_days)}
            )
            .eq("id", str(user_plan_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user plan")
        return _parse_row(response.data[0])

    def delete_user_plan(self, user_plan_id: UUID) -> None:
        """Delete plan progress."""
        self.client.table("user_plans").delete().eq("id", str(user_plan_id)).execute()


def _parse_row(row: dict[str, object]) -> UserWorkoutPlan:
    return UserWorkoutPlan(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        plan_id=str(row.get("plan_id", "")),
        start_date=parse_date(row.get("start_date")),
        current_day=int(row.get("current_day") or 1),
        completed_days=tuple(int(day) for day in row.get("completed_days") or []),
    )
