"""Request bodies accepted by the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.nutrition import FoodItem, ServingUnit
from fitness_tracker.domain.workouts import ExerciseSet


class FoodPayload(BaseModel):
    """A food item as returned by search, echoed back when logging."""

    id: str
    name: str
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    serving_grams: float = 100.0
    serving_label: str = "100g"
    default_unit: ServingUnit = ServingUnit.GRAM
    available_units: list[ServingUnit] = Field(
        default_factory=lambda: [ServingUnit.GRAM, ServingUnit.OUNCE]
    )
    grams_per_cup: float | None = None
    barcode: str | None = None

    def to_food(self) -> FoodItem:
        """Build a domain food item."""
        try:
            return FoodItem(
                id=self.id,
                name=self.name,
                calories=self.calories,
                protein_g=self.protein_g,
                carbs_g=self.carbs_g,
                fat_g=self.fat_g,
                serving_grams=self.serving_grams,
                serving_label=self.serving_label,
                default_unit=self.default_unit,
                available_units=tuple(self.available_units),
                grams_per_cup=self.grams_per_cup,
                barcode=self.barcode,
            )
        except ValueError as exc:
            raise InvalidInputError(str(exc), field="food") from exc


class PortionRequest(BaseModel):
    """A food amount as typed by the user."""

    food: FoodPayload
    quantity: float | str
    unit: str


class MealCreateRequest(PortionRequest):
    """A meal entry to log."""

    meal_type: str
    day: date | None = None


class ProfileUpdateRequest(BaseModel):
    """Profile fields a user can change; omitted fields are left alone."""

    display_name: str | None = None
    email: str | None = None
    timezone: str | None = None
    calorie_goal: int | None = None
    current_weight: float | None = None
    height_feet: int | None = None
    height_inches: float | None = None
    age: int | None = None
    gender: str | None = None
    activity_level: str | None = None
    goal_weight: float | None = None
    goal_weeks: int | None = None
    protein_goal: int | None = None
    carbs_goal: int | None = None
    fat_goal: int | None = None


class SetPayload(BaseModel):
    """One performed set."""

    reps: int = 0
    weight: float = 0.0
    completed: bool = False

    def to_set(self) -> ExerciseSet:
        return ExerciseSet(reps=self.reps, weight=self.weight, completed=self.completed)


class WorkoutExercisePayload(BaseModel):
    """A catalog exercise with its sets."""

    exercise_id: str
    sets: list[SetPayload] = Field(default_factory=list)


class WorkoutCreateRequest(BaseModel):
    """A finished workout."""

    name: str = ""
    day: date | None = None
    duration_minutes: int = 0
    exercises: list[WorkoutExercisePayload]


class PlanStartRequest(BaseModel):
    start_date: date | None = None


class IngredientPayload(PortionRequest):
    """A recipe ingredient."""


class RecipeCreateRequest(BaseModel):
    """A recipe to save."""

    name: str
    default_meal_type: str = "breakfast"
    ingredients: list[IngredientPayload]


class RecipeLogRequest(BaseModel):
    """Where to log a recipe; defaults to today and the recipe's meal type."""

    day: date | None = None
    meal_type: str | None = None
