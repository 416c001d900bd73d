"""Supabase repository for saved recipes."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.snapshots import (
    ingredient_from_json,
    ingredient_to_json,
    parse_datetime,
)
from fitness_tracker.domain.meals import MealType
from fitness_tracker.domain.recipes import Recipe, RecipeIngredient
from fitness_tracker.services.recipes import RecipeRepository, recipe_totals

RECIPE_COLUMNS = "id, user_id, name, ingredients, default_meal_type, created_at"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def create_recipe(
        self,
        user_id: str,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
        created_at: datetime,
    ) -> Recipe:
        """Insert a recipe row."""
        row = _payload(name, ingredients, default_meal_type)
        row["user_id"] = user_id
        row["created_at"] = created_at.isoformat()
        response = self.client.table("recipes").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_row(response.data[0])

    def update_recipe(
        self,
        recipe_id: UUID,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
    ) -> Recipe:
        """Replace a recipe's contents."""
        response = (
            self.client.table("recipes")
            .update(_payload(name, ingredients, default_meal_type))
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update recipe")
        return _parse_row(response.data[0])

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id."""
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_recipes(self, user_id: str) -> list[Recipe]:
        """Return a user's recipes, newest first."""
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe row."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()


def _payload(
    name: str, ingredients: Sequence[RecipeIngredient], default_meal_type: MealType
) -> dict[str, object]:
    totals = recipe_totals(ingredients)
    return {
        "name": name,
        "ingredients": [ingredient_to_json(item) for item in ingredients],
        "default_meal_type": default_meal_type.value,
        "total_calories": totals.calories,
        "total_protein_g": totals.protein_g,
        "total_carbs_g": totals.carbs_g,
        "total_fat_g": totals.fat_g,
    }


def _parse_row(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        name=str(row.get("name", "")),
        ingredients=tuple(
            ingredient_from_json(item) for item in row.get("ingredients") or []
        ),
        default_meal_type=MealType(str(row.get("default_meal_type") or "breakfast")),
        created_at=parse_datetime(row.get("created_at")),
    )
