"""Macronutrient target suggestions."""

from fitness_tracker.domain.numbers import round_int
from fitness_tracker.domain.profiles import GoalType, MacroTargets

PROTEIN_G_PER_LB: dict[GoalType, float] = {
    GoalType.LOSE: 1.0,
    GoalType.GAIN: 0.9,
    GoalType.MAINTAIN: 0.8,
}

FAT_SHARE: dict[GoalType, float] = {
    GoalType.LOSE: 0.25,
    GoalType.GAIN: 0.30,
    GoalType.MAINTAIN: 0.30,
}

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def suggest_macros(
    target_calories: float, weight_lbs: float, goal: GoalType
) -> MacroTargets:
    """Split target calories into protein, fat, and carbs (the remainder)."""
    protein = round_int(weight_lbs * PROTEIN_G_PER_LB[goal])
    protein_calories = protein * KCAL_PER_G_PROTEIN
    fat_calories = target_calories * FAT_SHARE[goal]
    fat = round_int(fat_calories / KCAL_PER_G_FAT)
    carbs = round_int(
        (target_calories - protein_calories - fat_calories) / KCAL_PER_G_CARBS
    )
    return MacroTargets(protein_g=protein, carbs_g=carbs, fat_g=fat)


def goal_type_for(current_weight: float, goal_weight: float) -> GoalType:
    """Derive the goal direction from current and goal weight."""
    if goal_weight < current_weight:
        return GoalType.LOSE
    if goal_weight > current_weight:
        return GoalType.GAIN
    return GoalType.MAINTAIN
