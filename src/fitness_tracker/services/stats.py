"""Date-range aggregation of meal and workout records."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.meals import MealEntry, MealType
from fitness_tracker.domain.nutrition import ZERO_MACROS, MacroProfile
from fitness_tracker.domain.stats import DailyProgress, DailyTotals, WeekSummary
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.portions import calculate_nutrition

DAYS_PER_WEEK = 7
SUNDAY = 6


class StatsRepository(Protocol):
    """Read interface for records that feed statistics."""

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        """Return meals dated between start and end, inclusive."""

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        """Return workouts dated between start and end, inclusive."""


def parse_day(value: date | str) -> date:
    """Accept a date or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid date: {value!r}", field="day") from exc


def today_in(timezone_name: str) -> date:
    """Return the calendar date right now in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def week_start_for(day: date) -> date:
    """Return the Sunday that starts the week containing ``day``."""
    offset = (day.weekday() - SUNDAY) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


def entry_nutrition(entry: MealEntry) -> MacroProfile:
    """Nutrition for a logged meal, derived from its stored grams."""
    return calculate_nutrition(entry.food, entry.grams_consumed)


def filter_meals(
    meals: Iterable[MealEntry], start: date, end: date | None = None
) -> list[MealEntry]:
    """Keep meals dated within ``[start, end]``; a single day when end is None."""
    last = start if end is None else end
    return [meal for meal in meals if start <= meal.day <= last]


def aggregate_day(
    day: date, meals: Iterable[MealEntry], workouts: Iterable[Workout] = ()
) -> DailyTotals:
    """Sum nutrition and count records dated on ``day``."""
    total = ZERO_MACROS
    meal_count = 0
    for meal in meals:
        if meal.day != day:
            continue
        total = total + entry_nutrition(meal)
        meal_count += 1
    workout_count = sum(1 for workout in workouts if workout.day == day)
    return DailyTotals(
        day=day,
        calories=total.calories,
        protein_g=total.protein_g,
        fat_g=total.fat_g,
        carbs_g=total.carbs_g,
        meal_count=meal_count,
        workout_count=workout_count,
    )


def aggregate_range(
    start: date,
    days: int,
    meals: Iterable[MealEntry],
    workouts: Iterable[Workout] = (),
) -> list[DailyTotals]:
    """Return one ``DailyTotals`` per consecutive day starting at ``start``."""
    meal_list = list(meals)
    workout_list = list(workouts)
    return [
        aggregate_day(start + timedelta(days=offset), meal_list, workout_list)
        for offset in range(days)
    ]


def aggregate_week(
    start: date, meals: Iterable[MealEntry], workouts: Iterable[Workout] = ()
) -> WeekSummary:
    """Aggregate the Sunday-to-Saturday week that contains ``start``."""
    week_start = week_start_for(start)
    daily = aggregate_range(week_start, DAYS_PER_WEEK, meals, workouts)
    total = ZERO_MACROS
    for entry in daily:
        total = total + entry.macros
    average = MacroProfile(
        calories=total.calories / DAYS_PER_WEEK,
        protein_g=total.protein_g / DAYS_PER_WEEK,
        fat_g=total.fat_g / DAYS_PER_WEEK,
        carbs_g=total.carbs_g / DAYS_PER_WEEK,
    )
    return WeekSummary(
        start=week_start,
        end=week_start + timedelta(days=DAYS_PER_WEEK - 1),
        daily=daily,
        total=total,
        average=average,
        workout_count=sum(entry.workout_count for entry in daily),
    )


def meals_by_type(meals: Iterable[MealEntry]) -> dict[MealType, list[MealEntry]]:
    """Group meals by meal slot, keeping every slot present."""
    grouped: dict[MealType, list[MealEntry]] = {meal_type: [] for meal_type in MealType}
    for meal in meals:
        grouped[meal.meal_type].append(meal)
    return grouped


def daily_progress(consumed: float, goal: int) -> DailyProgress:
    """Compare consumed calories with the goal; percent is capped at 100."""
    percent = min(consumed / goal * 100, 100.0) if goal > 0 else 0.0
    return DailyProgress(
        consumed=consumed,
        goal=goal,
        remaining=goal - consumed,
        progress_percent=percent,
    )


@dataclass
class StatsService:
    """Service for computing user stats by timezone."""

    repository: StatsRepository

    def get_day(self, user_id: str, day: date | str) -> DailyTotals:
        """Return totals for one calendar day."""
        target = parse_day(day)
        meals = self.repository.list_meals(user_id, target, target)
        workouts = self.repository.list_workouts(user_id, target, target)
        return aggregate_day(target, meals, workouts)

    def get_today(self, user_id: str, timezone_name: str) -> DailyTotals:
        """Return today's totals in the user's timezone."""
        return self.get_day(user_id, today_in(timezone_name))

    def get_week(
        self,
        user_id: str,
        timezone_name: str,
        start: date | str | None = None,
    ) -> WeekSummary:
        """Return the week containing ``start``, or the current week."""
        anchor = today_in(timezone_name) if start is None else parse_day(start)
        week_start = week_start_for(anchor)
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)
        meals = self.repository.list_meals(user_id, week_start, week_end)
        workouts = self.repository.list_workouts(user_id, week_start, week_end)
        return aggregate_week(week_start, meals, workouts)

    def is_current_week(self, week_start: date, timezone_name: str) -> bool:
        """Return True when ``week_start`` begins the current week."""
        return week_start_for(today_in(timezone_name)) == week_start
