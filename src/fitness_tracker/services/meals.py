"""Meal logging service."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.meals import MealDraft, MealEntry, MealPreview, MealType
from fitness_tracker.domain.nutrition import FoodItem, ServingUnit
from fitness_tracker.domain.recipes import Recipe
from fitness_tracker.services.portions import calculate_nutrition, convert_to_grams
from fitness_tracker.services.stats import parse_day

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal entries."""

    def create_meal(
        self, user_id: str, draft: MealDraft, logged_at: datetime
    ) -> MealEntry:
        """Persist a meal entry and return it."""

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a meal entry by id."""

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        """Return meals dated between start and end, inclusive."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal entry."""

    def list_legacy_meals(self, user_id: str) -> list[MealEntry]:
        """Return meals whose stored row has no gram quantity."""

    def set_grams_consumed(self, meal_id: UUID, grams: float) -> None:
        """Store the gram quantity for a meal entry."""


def parse_quantity(value: object) -> float:
    """Return a positive quantity or raise ``InvalidInputError``."""
    if isinstance(value, bool):
        raise InvalidInputError("Quantity must be a number", field="quantity")
    if isinstance(value, int | float):
        quantity = float(value)
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError as exc:
            raise InvalidInputError(
                f"Quantity must be a number, got {value!r}", field="quantity"
            ) from exc
    else:
        raise InvalidInputError("Quantity must be a number", field="quantity")
    if not math.isfinite(quantity) or quantity <= 0:
        raise InvalidInputError("Quantity must be greater than zero", field="quantity")
    return quantity


def parse_unit(food: FoodItem, unit: ServingUnit | str) -> ServingUnit:
    """Return the unit when the food permits it."""
    try:
        parsed = ServingUnit(unit)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown unit {unit!r}", field="unit") from exc
    if not food.allows(parsed):
        raise InvalidInputError(
            f"Unit '{parsed}' is not available for {food.name}", field="unit"
        )
    return parsed


@dataclass
class MealLogService:
    """Service that converts portions and persists meal entries."""

    repository: MealRepository

    def preview(
        self, food: FoodItem, quantity: object, unit: ServingUnit | str
    ) -> MealPreview:
        """Return grams and nutrition for a portion without saving it."""
        amount = parse_quantity(quantity)
        parsed_unit = parse_unit(food, unit)
        grams = convert_to_grams(amount, parsed_unit, food)
        return MealPreview(grams=grams, nutrition=calculate_nutrition(food, grams))

    def build_draft(
        self,
        food: FoodItem,
        quantity: object,
        unit: ServingUnit | str,
        meal_type: MealType | str,
        day: date | str,
    ) -> MealDraft:
        """Validate input and fix the gram quantity for a new entry."""
        amount = parse_quantity(quantity)
        parsed_unit = parse_unit(food, unit)
        return MealDraft(
            food=food,
            quantity=amount,
            unit=parsed_unit,
            grams_consumed=convert_to_grams(amount, parsed_unit, food),
            meal_type=_parse_meal_type(meal_type),
            day=parse_day(day),
        )

    def log_meal(
        self,
        user_id: str,
        food: FoodItem,
        quantity: object,
        unit: ServingUnit | str,
        meal_type: MealType | str,
        day: date | str,
    ) -> MealEntry:
        """Validate, convert, and persist one meal entry."""
        draft = self.build_draft(food, quantity, unit, meal_type, day)
        entry = self.repository.create_meal(user_id, draft, datetime.now(tz=UTC))
        logger.info(
            "Logged %s (%.1f g) for user %s on %s",
            food.name,
            draft.grams_consumed,
            user_id,
            draft.day.isoformat(),
        )
        return entry

    def log_recipe(
        self,
        user_id: str,
        recipe: Recipe,
        day: date | str,
        meal_type: MealType | str | None = None,
    ) -> list[MealEntry]:
        """Log every ingredient of a recipe using its stored grams."""
        slot = (
            recipe.default_meal_type
            if meal_type is None
            else _parse_meal_type(meal_type)
        )
        target_day = parse_day(day)
        logged_at = datetime.now(tz=UTC)
        entries = [
            self.repository.create_meal(
                user_id,
                MealDraft(
                    food=ingredient.food,
                    quantity=ingredient.quantity,
                    unit=ingredient.unit,
                    grams_consumed=ingredient.grams_consumed,
                    meal_type=slot,
                    day=target_day,
                ),
                logged_at,
            )
            for ingredient in recipe.ingredients
        ]
        logger.info(
            "Logged recipe %s (%d items) for user %s",
            recipe.name,
            len(entries),
            user_id,
        )
        return entries

    def list_for_day(self, user_id: str, day: date | str) -> list[MealEntry]:
        """Return a user's meals for one day."""
        target = parse_day(day)
        return self.repository.list_meals(user_id, target, target)

    def list_for_range(
        self, user_id: str, start: date | str, end: date | str
    ) -> list[MealEntry]:
        """Return a user's meals between two days, inclusive."""
        first = parse_day(start)
        last = parse_day(end)
        if last < first:
            raise InvalidInputError("Range end is before its start", field="end")
        return self.repository.list_meals(user_id, first, last)

    def delete_meal(self, user_id: str, meal_id: UUID) -> None:
        """Delete one of the user's meals."""
        entry = self.repository.get_meal(meal_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError("meal", meal_id)
        self.repository.delete_meal(meal_id)
        logger.info("Deleted meal %s for user %s", meal_id, user_id)

    def migrate_legacy_meals(self, user_id: str) -> int:
        """Persist gram quantities for entries stored before grams were tracked."""
        legacy = self.repository.list_legacy_meals(user_id)
        for entry in legacy:
            self.repository.set_grams_consumed(entry.id, entry.grams_consumed)
        if legacy:
            logger.info("Migrated %d legacy meals for user %s", len(legacy), user_id)
        return len(legacy)


def _parse_meal_type(value: MealType | str) -> MealType:
    try:
        return MealType(value)
    except ValueError as exc:
        raise InvalidInputError(
            f"Unknown meal type {value!r}", field="meal_type"
        ) from exc
