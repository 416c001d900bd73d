"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from fitness_tracker.domain.nutrition import FoodItem, MacroProfile, ServingUnit


class MealType(StrEnum):
    """Meal slot a food was eaten in."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealDraft:
    """A validated meal entry that has not been persisted yet."""

    food: FoodItem
    quantity: float
    unit: ServingUnit
    grams_consumed: float
    meal_type: MealType
    day: date


@dataclass(frozen=True)
class MealEntry:
    """A persisted consumption event.

    ``grams_consumed`` is computed once when the entry is created and is the
    only input used for nutrition afterwards.
    """

    id: UUID
    user_id: str
    food: FoodItem
    quantity: float
    unit: ServingUnit
    grams_consumed: float
    meal_type: MealType
    day: date
    logged_at: datetime


@dataclass(frozen=True)
class MealPreview:
    """Grams and nutrition shown to the user before saving an entry."""

    grams: float
    nutrition: MacroProfile
