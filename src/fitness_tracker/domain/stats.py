"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from fitness_tracker.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    meal_count: int = 0
    workout_count: int = 0

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )


@dataclass(frozen=True)
class WeekSummary:
    """Seven Sunday-to-Saturday daily totals with week totals and averages."""

    start: date
    end: date
    daily: list[DailyTotals]
    total: MacroProfile
    average: MacroProfile
    workout_count: int


@dataclass(frozen=True)
class DailyProgress:
    """Consumed calories measured against the user's goal."""

    consumed: float
    goal: int
    remaining: float
    progress_percent: float

    @property
    def is_over(self) -> bool:
        return self.remaining < 0
