"""Portion math: unit conversion to grams and nutrition scaling."""

from fitness_tracker.domain.nutrition import FoodItem, MacroProfile, ServingUnit
from fitness_tracker.domain.numbers import round_half_up

DEFAULT_GRAMS_PER_CUP = 240.0

# Milliliters assume the density of water.
GRAMS_PER_UNIT: dict[ServingUnit, float] = {
    ServingUnit.GRAM: 1.0,
    ServingUnit.OUNCE: 28.35,
    ServingUnit.TABLESPOON: 15.0,
    ServingUnit.TEASPOON: 5.0,
    ServingUnit.MILLILITER: 1.0,
}

_PER_SERVING_UNITS = frozenset({ServingUnit.PIECE, ServingUnit.SLICE})


def grams_per_unit(unit: ServingUnit, food: FoodItem) -> float:
    """Return how many grams one ``unit`` of ``food`` weighs."""
    if unit in _PER_SERVING_UNITS:
        return food.serving_grams
    if unit is ServingUnit.CUP:
        return food.grams_per_cup or DEFAULT_GRAMS_PER_CUP
    return GRAMS_PER_UNIT[unit]


def convert_to_grams(quantity: float, unit: ServingUnit, food: FoodItem) -> float:
    """Convert a user-entered amount of food to grams."""
    return quantity * grams_per_unit(unit, food)


def scale_macros(food: FoodItem, grams: float) -> MacroProfile:
    """Scale a food's per-serving nutrition linearly to ``grams``."""
    factor = grams / food.serving_grams
    return MacroProfile(
        calories=food.calories * factor,
        protein_g=food.protein_g * factor,
        fat_g=food.fat_g * factor,
        carbs_g=food.carbs_g * factor,
    )


def calculate_nutrition(food: FoodItem, grams: float) -> MacroProfile:
    """Return display nutrition: whole calories, macros to one decimal."""
    scaled = scale_macros(food, grams)
    return MacroProfile(
        calories=round_half_up(scaled.calories),
        protein_g=round_half_up(scaled.protein_g, 1),
        fat_g=round_half_up(scaled.fat_g, 1),
        carbs_g=round_half_up(scaled.carbs_g, 1),
    )
