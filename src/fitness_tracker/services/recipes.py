"""Recipe building and persistence."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.meals import MealType
from fitness_tracker.domain.nutrition import (
    ZERO_MACROS,
    FoodItem,
    MacroProfile,
    ServingUnit,
)
from fitness_tracker.domain.recipes import Recipe, RecipeIngredient
from fitness_tracker.services.meals import parse_quantity, parse_unit
from fitness_tracker.services.portions import calculate_nutrition, convert_to_grams

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(
        self,
        user_id: str,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
        created_at: datetime,
    ) -> Recipe:
        """Persist a recipe and return it."""

    def update_recipe(
        self,
        recipe_id: UUID,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
    ) -> Recipe:
        """Replace a recipe's name, ingredients and meal type."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id."""

    def list_recipes(self, user_id: str) -> list[Recipe]:
        """Return a user's recipes, newest first."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe."""


def build_ingredient(
    food: FoodItem, quantity: object, unit: ServingUnit | str
) -> RecipeIngredient:
    """Validate an ingredient amount and fix its grams."""
    amount = parse_quantity(quantity)
    parsed_unit = parse_unit(food, unit)
    return RecipeIngredient(
        food=food,
        quantity=amount,
        unit=parsed_unit,
        grams_consumed=convert_to_grams(amount, parsed_unit, food),
    )


def recipe_totals(ingredients: Sequence[RecipeIngredient]) -> MacroProfile:
    """Sum the display nutrition of every ingredient."""
    total = ZERO_MACROS
    for ingredient in ingredients:
        total = total + calculate_nutrition(ingredient.food, ingredient.grams_consumed)
    return total


@dataclass
class RecipeService:
    """Service for saved recipes."""

    repository: RecipeRepository

    def save_recipe(
        self,
        user_id: str,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType | str = MealType.BREAKFAST,
        recipe_id: UUID | None = None,
    ) -> Recipe:
        """Create a recipe, or replace one when ``recipe_id`` is given."""
        clean_name = name.strip()
        if not clean_name:
            raise InvalidInputError("Please enter a recipe name", field="name")
        if not ingredients:
            raise InvalidInputError(
                "Please add at least one ingredient", field="ingredients"
            )
        try:
            meal_type = MealType(default_meal_type)
        except ValueError as exc:
            raise InvalidInputError(
                f"Unknown meal type {default_meal_type!r}", field="default_meal_type"
            ) from exc

        if recipe_id is not None:
            self.get_recipe(user_id, recipe_id)
            recipe = self.repository.update_recipe(
                recipe_id, clean_name, ingredients, meal_type
            )
            logger.info("Updated recipe %s for user %s", recipe_id, user_id)
            return recipe

        recipe = self.repository.create_recipe(
            user_id, clean_name, ingredients, meal_type, datetime.now(tz=UTC)
        )
        logger.info("Saved recipe %s for user %s", recipe.id, user_id)
        return recipe

    def get_recipe(self, user_id: str, recipe_id: UUID) -> Recipe:
        """Return one of the user's recipes."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None or recipe.user_id != user_id:
            raise NotFoundError("recipe", recipe_id)
        return recipe

    def list_recipes(self, user_id: str) -> list[Recipe]:
        """Return the user's recipes."""
        return self.repository.list_recipes(user_id)

    def delete_recipe(self, user_id: str, recipe_id: UUID) -> None:
        """Delete one of the user's recipes."""
        self.get_recipe(user_id, recipe_id)
        self.repository.delete_recipe(recipe_id)
        logger.info("Deleted recipe %s for user %s", recipe_id, user_id)
