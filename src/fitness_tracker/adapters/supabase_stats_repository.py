"""Supabase repository for statistics queries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from fitness_tracker.adapters.supabase_meal_repository import (
    MEAL_COLUMNS,
    parse_meal_row,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    WORKOUT_COLUMNS,
    parse_workout_row,
)
from fitness_tracker.domain.meals import MealEntry
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for date-range reads."""

    client: Client

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        """Return meals dated within the inclusive range."""
        rows = self._rows("meals", MEAL_COLUMNS, user_id, start, end)
        return [parse_meal_row(row) for row in rows]

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        """Return workouts dated within the inclusive range."""
        rows = self._rows("workouts", WORKOUT_COLUMNS, user_id, start, end)
        return [parse_workout_row(row) for row in rows]

    def _rows(
        self, table: str, columns: str, user_id: str, start: date, end: date
    ) -> list[dict[str, object]]:
        response = (
            self.client.table(table)
            .select(columns)
            .eq("user_id", user_id)
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .execute()
        )
        return response.data or []
