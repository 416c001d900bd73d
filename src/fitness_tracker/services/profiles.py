"""User profile and calorie recommendation service."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import StrEnum
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.profiles import (
    DEFAULT_CALORIE_GOAL,
    ActivityLevel,
    Gender,
    Recommendation,
    UserProfile,
)
from fitness_tracker.services.energy import calculate_calories_for_profile
from fitness_tracker.services.macros import goal_type_for, suggest_macros

logger = logging.getLogger(__name__)

_POSITIVE_FLOATS = frozenset({"current_weight", "goal_weight"})
_POSITIVE_INTS = frozenset({"height_feet", "age", "goal_weeks", "calorie_goal"})
_NON_NEGATIVE_INTS = frozenset({"protein_goal", "carbs_goal", "fat_goal"})
_TEXT_FIELDS = frozenset({"email", "display_name"})
MAX_HEIGHT_INCHES = 12


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Persist a new profile."""

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Overwrite a stored profile."""


@dataclass
class ProfileService:
    """Application service for profiles and energy targets."""

    repository: ProfileRepository
    default_calorie_goal: int = DEFAULT_CALORIE_GOAL

    def ensure_profile(
        self, user_id: str, email: str = "", display_name: str = ""
    ) -> UserProfile:
        """Return the user's profile, creating one with defaults on first sign-in."""
        existing = self.repository.get_profile(user_id)
        if existing:
            return existing

        created = self.repository.create_profile(
            UserProfile(
                user_id=user_id,
                email=email,
                display_name=display_name,
                calorie_goal=self.default_calorie_goal,
                created_at=datetime.now(tz=UTC),
            )
        )
        logger.info("Created profile for user %s", user_id)
        return created

    def get_profile(self, user_id: str) -> UserProfile:
        """Return the user's profile or raise ``NotFoundError``."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("profile", user_id)
        return profile

    def update_profile(
        self, user_id: str, updates: Mapping[str, object]
    ) -> UserProfile:
        """Apply validated partial updates; ``None`` values are ignored."""
        profile = self.get_profile(user_id)
        changes = {
            name: _validate_field(name, value)
            for name, value in updates.items()
            if value is not None
        }
        updated = replace(profile, **changes)
        if updated.current_weight and updated.goal_weight:
            updated = replace(
                updated,
                goal_type=goal_type_for(updated.current_weight, updated.goal_weight),
            )
        saved = self.repository.save_profile(updated)
        logger.info("Updated profile fields %s for user %s", sorted(changes), user_id)
        return saved

    def recommendation(self, user_id: str) -> Recommendation | None:
        """Return calorie and macro suggestions, or None when stats are missing."""
        return recommendation_for(self.get_profile(user_id))

    def apply_recommendation(self, user_id: str) -> UserProfile | None:
        """Store the recommended calorie goal, macro goals and goal type."""
        profile = self.get_profile(user_id)
        suggestion = recommendation_for(profile)
        if suggestion is None:
            return None
        updated = replace(
            profile,
            calorie_goal=suggestion.calculation.target_calories,
            goal_type=suggestion.goal_type,
            protein_goal=suggestion.macros.protein_g,
            carbs_goal=suggestion.macros.carbs_g,
            fat_goal=suggestion.macros.fat_g,
        )
        saved = self.repository.save_profile(updated)
        logger.info(
            "Applied %d kcal goal for user %s",
            suggestion.calculation.target_calories,
            user_id,
        )
        return saved


def recommendation_for(profile: UserProfile) -> Recommendation | None:
    """Combine the calorie calculation with suggested macros."""
    calculation = calculate_calories_for_profile(profile)
    if calculation is None or profile.current_weight is None:
        return None
    goal_type = goal_type_for(
        profile.current_weight, profile.goal_weight or profile.current_weight
    )
    return Recommendation(
        calculation=calculation,
        goal_type=goal_type,
        macros=suggest_macros(
            calculation.target_calories, profile.current_weight, goal_type
        ),
    )


def _validate_field(name: str, value: object) -> object:  # noqa: PLR0911
    if name in _POSITIVE_FLOATS:
        number = _to_number(name, value)
        if number <= 0:
            raise InvalidInputError(f"{name} must be greater than zero", field=name)
        return number
    if name in _POSITIVE_INTS or name in _NON_NEGATIVE_INTS:
        number = int(_to_number(name, value))
        minimum = 1 if name in _POSITIVE_INTS else 0
        if number < minimum:
            raise InvalidInputError(f"{name} must be at least {minimum}", field=name)
        return number
    if name == "height_inches":
        number = _to_number(name, value)
        if not 0 <= number < MAX_HEIGHT_INCHES:
            raise InvalidInputError(
                "height_inches must be between 0 and 11", field=name
            )
        return number
    if name == "gender":
        return _to_enum(Gender, name, value)
    if name == "activity_level":
        return _to_enum(ActivityLevel, name, value)
    if name == "timezone":
        try:
            ZoneInfo(str(value))
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidInputError(f"Unknown timezone {value!r}", field=name) from exc
        return str(value)
    if name in _TEXT_FIELDS:
        return str(value).strip()
    raise InvalidInputError(f"Field {name!r} cannot be updated", field=name)


def _to_number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise InvalidInputError(f"{name} must be a number", field=name)
    try:
        number = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidInputError(f"{name} must be a number", field=name) from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be a finite number", field=name)
    return number


def _to_enum(enum: type[StrEnum], name: str, value: object) -> StrEnum:
    try:
        return enum(value)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid {name} {value!r}", field=name) from exc
