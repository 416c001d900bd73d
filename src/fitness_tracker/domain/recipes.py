"""Domain models for saved recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from fitness_tracker.domain.meals import MealType
from fitness_tracker.domain.nutrition import FoodItem, ServingUnit


@dataclass(frozen=True)
class RecipeIngredient:
    """A food amount inside a recipe, with grams fixed at creation."""

    food: FoodItem
    quantity: float
    unit: ServingUnit
    grams_consumed: float


@dataclass(frozen=True)
class Recipe:
    """A user-owned combination of ingredients logged together."""

    id: UUID
    user_id: str
    name: str
    ingredients: tuple[RecipeIngredient, ...]
    default_meal_type: MealType
    created_at: datetime
