"""Tests for unit conversion and nutrition scaling."""

import pytest

from fitness_tracker.domain.nutrition import ServingUnit
from fitness_tracker.services.portions import (
    DEFAULT_GRAMS_PER_CUP,
    calculate_nutrition,
    convert_to_grams,
    scale_macros,
)
from tests.conftest import make_food


@pytest.mark.parametrize(
    ("unit", "grams"),
    [
        (ServingUnit.GRAM, 1.0),
        (ServingUnit.OUNCE, 28.35),
        (ServingUnit.TABLESPOON, 15.0),
        (ServingUnit.TEASPOON, 5.0),
        (ServingUnit.MILLILITER, 1.0),
    ],
)
def test_fixed_units_ignore_the_food(unit: ServingUnit, grams: float) -> None:
    small = make_food(serving_grams=30, grams_per_cup=80)
    large = make_food(serving_grams=250)

    assert convert_to_grams(1, unit, small) == grams
    assert convert_to_grams(1, unit, large) == grams


@pytest.mark.parametrize("unit", [ServingUnit.PIECE, ServingUnit.SLICE])
def test_piece_and_slice_use_serving_grams(unit: ServingUnit) -> None:
    food = make_food(serving_grams=50)

    assert convert_to_grams(1, unit, food) == 50
    assert convert_to_grams(3, unit, food) == 150
    assert convert_to_grams(0.5, unit, food) == 25


def test_cup_prefers_food_override() -> None:
    food = make_food(grams_per_cup=150)

    assert convert_to_grams(2, ServingUnit.CUP, food) == 300


def test_cup_falls_back_to_default() -> None:
    food = make_food()

    assert convert_to_grams(1, ServingUnit.CUP, food) == DEFAULT_GRAMS_PER_CUP


def test_scaling_is_linear_before_rounding() -> None:
    food = make_food(calories=200, protein_g=10, carbs_g=20, fat_g=5)

    scaled = scale_macros(food, 300)

    assert scaled.calories == 600
    assert scaled.protein_g == 30
    assert scaled.carbs_g == 60
    assert scaled.fat_g == 15


def test_calculate_nutrition_rounds_for_display() -> None:
    food = make_food(calories=52, protein_g=0.26, carbs_g=13.81, fat_g=0.17)

    nutrition = calculate_nutrition(food, 150)

    assert nutrition.calories == 78
    assert nutrition.protein_g == 0.4
    assert nutrition.carbs_g == 20.7
    assert nutrition.fat_g == 0.3


def test_calculate_nutrition_rounds_halves_up() -> None:
    food = make_food(calories=25, protein_g=0.5, carbs_g=0, fat_g=0)

    nutrition = calculate_nutrition(food, 50)

    assert nutrition.calories == 13
    assert nutrition.protein_g == 0.3


@pytest.mark.parametrize(
    "overrides",
    [
        {"calories": float("nan")},
        {"protein_g": float("inf")},
        {"serving_grams": float("inf")},
        {"grams_per_cup": float("nan")},
    ],
)
def test_food_rejects_non_finite_values(overrides: dict[str, float]) -> None:
    with pytest.raises(ValueError, match="finite"):
        make_food(**overrides)
