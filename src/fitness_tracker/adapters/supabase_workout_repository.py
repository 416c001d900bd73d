"""Supabase repository for finished workouts."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.snapshots import (
    parse_date,
    parse_datetime,
    workout_exercise_from_json,
    workout_exercise_to_json,
)
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.workouts import WorkoutRepository

WORKOUT_COLUMNS = (
    "id, user_id, name, exercises, day, duration_minutes, completed, logged_at"
)


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workouts."""

    client: Client

    def create_workout(self, workout: Workout) -> Workout:
        """Insert a workout row with its exercises as JSON."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": workout.user_id,
                    "name": workout.name,
                    "exercises": [
                        workout_exercise_to_json(entry) for entry in workout.exercises
                    ],
                    "day": workout.day.isoformat(),
                    "duration_minutes": workout.duration_minutes,
                    "completed": workout.completed,
                    "logged_at": workout.logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout")
        return parse_workout_row(response.data[0])

    def list_recent_workouts(self, user_id: str, limit: int) -> list[Workout]:
        """Return the newest workouts for a user."""
        response = (
            self.client.table("workouts")
            .select(WORKOUT_COLUMNS)
            .eq("user_id", user_id)
            .order("logged_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_workout_row(row) for row in response.data or []]

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        """Return workouts dated within the inclusive range."""
        response = (
            self.client.table("workouts")
            .select(WORKOUT_COLUMNS)
            .eq("user_id", user_id)
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [parse_workout_row(row) for row in response.data or []]


def parse_workout_row(row: dict[str, object]) -> Workout:
    """Build a workout from a row."""
    return Workout(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        name=str(row.get("name") or "Workout"),
        exercises=tuple(
            workout_exercise_from_json(entry) for entry in row.get("exercises") or []
        ),
        day=parse_date(row.get("day")),
        duration_minutes=int(row.get("duration_minutes") or 0),
        completed=bool(row.get("completed", True)),
        logged_at=parse_datetime(row.get("logged_at")),
    )
