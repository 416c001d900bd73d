"""Supabase repository for meal entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.snapshots import (
    food_from_json,
    food_to_json,
    parse_date,
    parse_datetime,
)
from fitness_tracker.domain.meals import MealDraft, MealEntry, MealType
from fitness_tracker.domain.nutrition import ServingUnit
from fitness_tracker.services.meals import MealRepository

MEAL_COLUMNS = (
    "id, user_id, food, quantity, unit, grams_consumed, meal_type, day, logged_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal entries."""

    client: Client

    def create_meal(
        self, user_id: str, draft: MealDraft, logged_at: datetime
    ) -> MealEntry:
        """Insert a meal row and return the stored entry."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": user_id,
                    "food": food_to_json(draft.food),
                    "quantity": draft.quantity,
                    "unit": draft.unit.value,
                    "grams_consumed": draft.grams_consumed,
                    "meal_type": draft.meal_type.value,
                    "day": draft.day.isoformat(),
                    "logged_at": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return parse_meal_row(response.data[0])

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a meal entry by id."""
        response = (
            self.client.table("meals")
            .select(MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal_row(response.data[0])

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        """Return meals dated within the inclusive range."""
        response = (
            self.client.table("meals")
            .select(MEAL_COLUMNS)
            .eq("user_id", user_id)
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [parse_meal_row(row) for row in response.data or []]

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()

    def list_legacy_meals(self, user_id: str) -> list[MealEntry]:
        """Return meals stored without grams, with grams filled in on read."""
        response = (
            self.client.table("meals")
            .select(MEAL_COLUMNS)
            .eq("user_id", user_id)
            .is_("grams_consumed", "null")
            .execute()
        )
        return [parse_meal_row(row) for row in response.data or []]

    def set_grams_consumed(self, meal_id: UUID, grams: float) -> None:
        """Store grams for a meal row."""
        self.client.table("meals").update({"grams_consumed": grams}).eq(
            "id", str(meal_id)
        ).execute()


def parse_meal_row(row: dict[str, object]) -> MealEntry:
    """Build a meal entry; rows without grams count ``quantity`` servings."""
    food = food_from_json(row.get("food") or {})
    quantity = float(row.get("quantity") or 1)
    grams = row.get("grams_consumed")
    try:
        unit = ServingUnit(str(row.get("unit")))
    except ValueError:
        unit = food.default_unit
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        food=food,
        quantity=quantity,
        unit=unit,
        grams_consumed=(
            float(grams) if grams is not None else quantity * food.serving_grams
        ),
        meal_type=MealType(str(row.get("meal_type") or MealType.SNACK.value)),
        day=parse_date(row.get("day")),
        logged_at=parse_datetime(row.get("logged_at")),
    )
