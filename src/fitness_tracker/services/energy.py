"""Energy expenditure and calorie target calculations.

All inputs use imperial units: weight in pounds, height in inches. A pound of
body weight is treated as 3500 kcal.
"""

from fitness_tracker.domain.numbers import round_half_up, round_int
from fitness_tracker.domain.profiles import (
    ActivityLevel,
    CalorieCalculation,
    Gender,
    UserProfile,
)

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
KCAL_PER_LB = 3500
MAX_DAILY_DEFICIT = -1000
MAX_DAILY_SURPLUS = 500
MIN_TARGET_CALORIES = 1400

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_ACTIVITY_DESCRIPTIONS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Little or no exercise, desk job",
    ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
    ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
    ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
    ActivityLevel.VERY_ACTIVE: "Very intense exercise, physical job",
}


def calculate_bmr(
    weight_lbs: float, height_inches: float, age: int, gender: Gender
) -> float:
    """Basal metabolic rate via the Mifflin-St Jeor equation."""
    weight_kg = weight_lbs * KG_PER_LB
    height_cm = height_inches * CM_PER_INCH
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender is Gender.MALE:
        return base + 5
    return base - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> int:
    """Total daily energy expenditure, rounded to whole calories."""
    return round_int(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def clamp_daily_change(daily_change: float) -> float:
    """Keep a daily calorie change within the safe deficit/surplus band."""
    return max(MAX_DAILY_DEFICIT, min(MAX_DAILY_SURPLUS, daily_change))


def calculate_target_calories(
    tdee: int, current_weight: float, goal_weight: float, goal_weeks: int
) -> tuple[int, int, float]:
    """Return ``(target_calories, deficit, weekly_change_lbs)`` for a goal."""
    total_change = (goal_weight - current_weight) * KCAL_PER_LB
    daily_change = clamp_daily_change(total_change / (goal_weeks * 7))
    target = round_int(tdee + daily_change)
    final_target = max(MIN_TARGET_CALORIES, target)
    deficit = round_int(tdee - final_target)
    weekly_change = round_half_up(daily_change * 7 / KCAL_PER_LB, 1)
    return final_target, deficit, weekly_change


def total_height_inches(profile: UserProfile) -> float | None:
    """Return the profile height in inches, or None when feet are unset."""
    if not profile.height_feet:
        return None
    return profile.height_feet * 12 + (profile.height_inches or 0)


def calculate_calories_for_profile(profile: UserProfile) -> CalorieCalculation | None:
    """Compute energy numbers for a profile.

    Returns None when weight, height, age, gender or activity level is
    missing; that means "not yet computable", not an error.
    """
    height_inches = total_height_inches(profile)
    if (
        not profile.current_weight
        or height_inches is None
        or not profile.age
        or profile.gender is None
        or profile.activity_level is None
    ):
        return None

    bmr = calculate_bmr(
        profile.current_weight, height_inches, profile.age, profile.gender
    )
    tdee = calculate_tdee(bmr, profile.activity_level)
    if not profile.goal_weight or not profile.goal_weeks:
        return CalorieCalculation(
            bmr=round_int(bmr),
            tdee=tdee,
            target_calories=tdee,
            deficit=0,
            weekly_change=0.0,
        )

    target, deficit, weekly_change = calculate_target_calories(
        tdee, profile.current_weight, profile.goal_weight, profile.goal_weeks
    )
    return CalorieCalculation(
        bmr=round_int(bmr),
        tdee=tdee,
        target_calories=target,
        deficit=deficit,
        weekly_change=weekly_change,
    )


def activity_level_description(level: ActivityLevel | str) -> str:
    """Return the settings-screen blurb for an activity level."""
    try:
        return _ACTIVITY_DESCRIPTIONS[ActivityLevel(level)]
    except ValueError:
        return ""
