"""Domain models for user profiles and energy targets."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

DEFAULT_CALORIE_GOAL = 2000


class Gender(StrEnum):
    """Sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class GoalType(StrEnum):
    """Direction of the user's weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class UserProfile:
    """Body stats and goals for a user.

    Weight is in pounds and height in feet plus inches. Any body stat may be
    missing until the user fills in their settings.
    """

    user_id: str
    email: str = ""
    display_name: str = ""
    calorie_goal: int = DEFAULT_CALORIE_GOAL
    timezone: str = "UTC"
    current_weight: float | None = None
    height_feet: int | None = None
    height_inches: float | None = None
    age: int | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    goal_weight: float | None = None
    goal_weeks: int | None = None
    goal_type: GoalType | None = None
    protein_goal: int | None = None
    carbs_goal: int | None = None
    fat_goal: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CalorieCalculation:
    """Derived energy numbers for a profile, never persisted."""

    bmr: int
    tdee: int
    target_calories: int
    deficit: int
    weekly_change: float


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class Recommendation:
    """Calorie calculation paired with suggested macros."""

    calculation: CalorieCalculation
    goal_type: GoalType
    macros: MacroTargets
