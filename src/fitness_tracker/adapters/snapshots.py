"""JSON snapshots of foods and exercises stored inside Supabase rows.

Rows written before gram tracking carry an older food shape
(``protein``/``carbs``/``fat``/``servingSize`` with nutrition per serving and
no gram weight). Those rows are read as foods whose serving weighs
``serving_grams`` and whose meals consumed ``quantity`` servings.
"""

import re
from datetime import date, datetime

from fitness_tracker.domain.nutrition import FoodItem, ServingUnit
from fitness_tracker.domain.recipes import RecipeIngredient
from fitness_tracker.domain.workouts import (
    Difficulty,
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    WorkoutExercise,
)

LEGACY_SERVING_GRAMS = 100.0
_GRAMS_LABEL = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*g\s*$", re.IGNORECASE)


def food_to_json(food: FoodItem) -> dict[str, object]:
    """Serialize a food item for a JSON column."""
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "protein_g": food.protein_g,
        "carbs_g": food.carbs_g,
        "fat_g": food.fat_g,
        "serving_grams": food.serving_grams,
        "serving_label": food.serving_label,
        "default_unit": food.default_unit.value,
        "available_units": [unit.value for unit in food.available_units],
        "grams_per_cup": food.grams_per_cup,
        "barcode": food.barcode,
    }


def food_from_json(data: dict[str, object]) -> FoodItem:
    """Parse a food snapshot, accepting the legacy per-serving shape."""
    if is_legacy_food(data):
        return _legacy_food(data)
    units = tuple(
        ServingUnit(str(unit))
        for unit in data.get("available_units") or [ServingUnit.GRAM.value]
    )
    grams_per_cup = data.get("grams_per_cup")
    return FoodItem(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        calories=_to_float(data.get("calories")),
        protein_g=_to_float(data.get("protein_g")),
        carbs_g=_to_float(data.get("carbs_g")),
        fat_g=_to_float(data.get("fat_g")),
        serving_grams=_to_float(data.get("serving_grams")) or LEGACY_SERVING_GRAMS,
        serving_label=str(data.get("serving_label") or "100g"),
        default_unit=ServingUnit(str(data.get("default_unit") or units[0].value)),
        available_units=units,
        grams_per_cup=_to_float(grams_per_cup) if grams_per_cup else None,
        barcode=str(data["barcode"]) if data.get("barcode") else None,
    )


def is_legacy_food(data: dict[str, object]) -> bool:
    """Return True for food snapshots stored without a gram weight."""
    return "serving_grams" not in data


def legacy_serving_grams(label: object) -> float:
    """Grams in a legacy serving label such as ``"100g"``; 100 otherwise."""
    match = _GRAMS_LABEL.match(str(label or ""))
    if match and float(match.group(1)) > 0:
        return float(match.group(1))
    return LEGACY_SERVING_GRAMS


def _legacy_food(data: dict[str, object]) -> FoodItem:
    label = str(data.get("servingSize") or data.get("serving_label") or "1 serving")
    return FoodItem(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        calories=_to_float(data.get("calories")),
        protein_g=_to_float(data.get("protein", data.get("protein_g"))),
        carbs_g=_to_float(data.get("carbs", data.get("carbs_g"))),
        fat_g=_to_float(data.get("fat", data.get("fat_g"))),
        serving_grams=legacy_serving_grams(label),
        serving_label=label,
        default_unit=ServingUnit.PIECE,
        available_units=(ServingUnit.PIECE, ServingUnit.GRAM, ServingUnit.OUNCE),
    )


def exercise_to_json(exercise: Exercise) -> dict[str, object]:
    """Serialize an exercise for a JSON column."""
    return {
        "id": exercise.id,
        "name": exercise.name,
        "category": exercise.category.value,
        "equipment": exercise.equipment,
        "difficulty": exercise.difficulty.value,
        "muscle_groups": list(exercise.muscle_groups),
    }


def exercise_from_json(data: dict[str, object]) -> Exercise:
    """Parse an exercise snapshot."""
    return Exercise(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        category=ExerciseCategory(str(data.get("category", "cardio"))),
        equipment=str(data.get("equipment", "")),
        difficulty=Difficulty(str(data.get("difficulty") or "beginner")),
        muscle_groups=tuple(str(item) for item in data.get("muscle_groups") or []),
    )


def workout_exercise_to_json(entry: WorkoutExercise) -> dict[str, object]:
    """Serialize an exercise and its sets."""
    return {
        "exercise": exercise_to_json(entry.exercise),
        "sets": [
            {"reps": item.reps, "weight": item.weight, "completed": item.completed}
            for item in entry.sets
        ],
    }


def workout_exercise_from_json(data: dict[str, object]) -> WorkoutExercise:
    """Parse an exercise and its sets."""
    return WorkoutExercise(
        exercise=exercise_from_json(data.get("exercise") or {}),
        sets=tuple(
            ExerciseSet(
                reps=int(_to_float(item.get("reps"))),
                weight=_to_float(item.get("weight")),
                completed=bool(item.get("completed", False)),
            )
            for item in data.get("sets") or []
        ),
    )


def ingredient_to_json(ingredient: RecipeIngredient) -> dict[str, object]:
    """Serialize a recipe ingredient."""
    return {
        "food": food_to_json(ingredient.food),
        "quantity": ingredient.quantity,
        "unit": ingredient.unit.value,
        "grams_consumed": ingredient.grams_consumed,
    }


def ingredient_from_json(data: dict[str, object]) -> RecipeIngredient:
    """Parse a recipe ingredient."""
    food = food_from_json(data.get("food") or {})
    quantity = _to_float(data.get("quantity"))
    grams = data.get("grams_consumed")
    return RecipeIngredient(
        food=food,
        quantity=quantity,
        unit=ServingUnit(str(data.get("unit") or food.default_unit.value)),
        grams_consumed=(
            _to_float(grams) if grams is not None else quantity * food.serving_grams
        ),
    )


def parse_date(value: object) -> date:
    """Parse an ISO date column."""
    return date.fromisoformat(str(value)[:10])


def parse_datetime(value: object) -> datetime:
    """Parse an ISO timestamp column."""
    return datetime.fromisoformat(str(value))


def _to_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
