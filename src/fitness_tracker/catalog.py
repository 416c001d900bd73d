"""Static exercise, workout plan, and common food data.

The catalog is built once by ``build_catalog`` and handed to the services
that need it; nothing here is mutated after construction.
"""

from dataclasses import dataclass, field
from functools import cache

from fitness_tracker.domain.nutrition import FoodItem, ServingUnit
from fitness_tracker.domain.workouts import (
    Difficulty,
    Exercise,
    ExerciseCategory,
    PlanExercise,
    WorkoutPlan,
    WorkoutPlanDay,
)

_B = Difficulty.BEGINNER
_I = Difficulty.INTERMEDIATE
_A = Difficulty.ADVANCED


def _ex(
    exercise_id: str,
    name: str,
    equipment: str,
    difficulty: Difficulty,
    *muscle_groups: str,
) -> Exercise:
    category = ExerciseCategory(exercise_id.split("-", maxsplit=1)[0])
    return Exercise(
        id=exercise_id,
        name=name,
        category=category,
        equipment=equipment,
        difficulty=difficulty,
        muscle_groups=muscle_groups,
    )


EXERCISES: tuple[Exercise, ...] = (
    _ex("chest-1", "Push-ups", "bodyweight", _B, "chest", "triceps", "shoulders"),
    _ex("chest-2", "Incline Push-ups", "bodyweight", _B, "chest", "triceps"),
    _ex(
        "chest-3", "Dumbbell Bench Press", "dumbbells", _B,
        "chest", "triceps", "shoulders",
    ),
    _ex("chest-4", "Dumbbell Flyes", "dumbbells", _I, "chest"),
    _ex(
        "chest-5", "Barbell Bench Press", "barbell", _I,
        "chest", "triceps", "shoulders",
    ),
    _ex("chest-6", "Incline Barbell Press", "barbell", _I, "chest", "shoulders"),
    _ex("chest-7", "Cable Crossovers", "cables", _I, "chest"),
    _ex("chest-8", "Decline Bench Press", "barbell", _A, "chest", "triceps"),
    _ex("chest-9", "Weighted Dips", "weighted", _A, "chest", "triceps", "shoulders"),
    _ex("back-1", "Lat Pulldowns", "cable machine", _B, "lats", "biceps"),
    _ex(
        "back-2", "Seated Cable Rows", "cable machine", _B,
        "lats", "rhomboids", "biceps",
    ),
    _ex("back-3", "Dumbbell Rows", "dumbbells", _B, "lats", "rhomboids", "biceps"),
    _ex("back-4", "Assisted Pull-ups", "assisted machine", _B, "lats", "biceps"),
    _ex("back-5", "Barbell Rows", "barbell", _I, "lats", "rhomboids", "biceps"),
    _ex("back-6", "Pull-ups", "bodyweight", _I, "lats", "biceps"),
    _ex("back-7", "T-Bar Rows", "barbell", _I, "lats", "rhomboids"),
    _ex(
        "back-8", "Deadlifts", "barbell", _A,
        "lats", "lower back", "glutes", "hamstrings",
    ),
    _ex("back-9", "Weighted Pull-ups", "weighted", _A, "lats", "biceps"),
    _ex(
        "shoulders-1", "Dumbbell Shoulder Press", "dumbbells", _B,
        "shoulders", "triceps",
    ),
    _ex("shoulders-2", "Lateral Raises", "dumbbells", _B, "shoulders"),
    _ex("shoulders-3", "Front Raises", "dumbbells", _B, "shoulders"),
    _ex("shoulders-4", "Rear Delt Flyes", "dumbbells", _B, "shoulders"),
    _ex(
        "shoulders-5", "Barbell Overhead Press", "barbell", _I,
        "shoulders", "triceps",
    ),
    _ex("shoulders-6", "Arnold Press", "dumbbells", _I, "shoulders", "triceps"),
    _ex("shoulders-7", "Face Pulls", "cables", _I, "shoulders", "upper back"),
    _ex("shoulders-8", "Push Press", "barbell", _A, "shoulders", "triceps", "legs"),
    _ex("arms-1", "Dumbbell Bicep Curls", "dumbbells", _B, "biceps"),
    _ex("arms-2", "Tricep Pushdowns", "cables", _B, "triceps"),
    _ex("arms-3", "Hammer Curls", "dumbbells", _B, "biceps", "forearms"),
    _ex("arms-4", "Tricep Dips (Bench)", "bodyweight", _B, "triceps"),
    _ex("arms-5", "Barbell Curls", "barbell", _I, "biceps"),
    _ex("arms-6", "Skull Crushers", "barbell", _I, "triceps"),
    _ex("arms-7", "Preacher Curls", "barbell", _I, "biceps"),
    _ex("arms-8", "Close-Grip Bench Press", "barbell", _A, "triceps", "chest"),
    _ex("legs-1", "Bodyweight Squats", "bodyweight", _B, "quads", "glutes"),
    _ex("legs-2", "Leg Press", "machine", _B, "quads", "glutes"),
    _ex("legs-3", "Leg Curls", "machine", _B, "hamstrings"),
    _ex("legs-4", "Leg Extensions", "machine", _B, "quads"),
    _ex("legs-5", "Lunges", "bodyweight", _B, "quads", "glutes"),
    _ex("legs-6", "Goblet Squats", "dumbbells", _I, "quads", "glutes"),
    _ex("legs-7", "Romanian Deadlifts", "barbell", _I, "hamstrings", "glutes"),
    _ex(
        "legs-8", "Barbell Squats", "barbell", _I,
        "quads", "glutes", "hamstrings",
    ),
    _ex("legs-9", "Bulgarian Split Squats", "dumbbells", _I, "quads", "glutes"),
    _ex("legs-10", "Front Squats", "barbell", _A, "quads", "core"),
    _ex("legs-11", "Hip Thrusts", "barbell", _I, "glutes", "hamstrings"),
    _ex("core-1", "Plank", "bodyweight", _B, "core"),
    _ex("core-2", "Crunches", "bodyweight", _B, "abs"),
    _ex("core-3", "Dead Bug", "bodyweight", _B, "core"),
    _ex("core-4", "Mountain Climbers", "bodyweight", _B, "core", "shoulders"),
    _ex("core-5", "Russian Twists", "bodyweight", _I, "obliques"),
    _ex("core-6", "Hanging Leg Raises", "pull-up bar", _I, "abs", "hip flexors"),
    _ex("core-7", "Cable Woodchops", "cables", _I, "obliques", "core"),
    _ex("core-8", "Ab Wheel Rollouts", "ab wheel", _A, "core", "lats"),
    _ex("core-9", "Dragon Flags", "bodyweight", _A, "core"),
    _ex("cardio-1", "Walking", "none", _B),
    _ex("cardio-2", "Stationary Bike", "bike", _B, "legs"),
    _ex("cardio-3", "Elliptical", "elliptical", _B, "legs", "arms"),
    _ex("cardio-4", "Jogging", "none", _I, "legs"),
    _ex("cardio-5", "Rowing Machine", "rower", _I, "back", "legs", "arms"),
    _ex("cardio-6", "Jump Rope", "jump rope", _I, "calves", "shoulders"),
    _ex("cardio-7", "Stair Climber", "stair climber", _I, "legs", "glutes"),
    _ex("cardio-8", "HIIT Sprints", "none", _A, "legs"),
    _ex("cardio-9", "Battle Ropes", "battle ropes", _A, "arms", "shoulders", "core"),
)

_EXERCISES_BY_ID = {exercise.id: exercise for exercise in EXERCISES}


def _day(
    day_number: int, name: str, *targets: tuple[str, int, str]
) -> WorkoutPlanDay:
    return WorkoutPlanDay(
        day_number=day_number,
        name=name,
        is_rest_day=False,
        exercises=tuple(
            PlanExercise(
                exercise=_EXERCISES_BY_ID[exercise_id],
                target_sets=target_sets,
                target_reps=target_reps,
            )
            for exercise_id, target_sets, target_reps in targets
        ),
    )


def _rest(day_number: int) -> WorkoutPlanDay:
    return WorkoutPlanDay(day_number=day_number, name="Rest Day", is_rest_day=True)


WORKOUT_PLANS: tuple[WorkoutPlan, ...] = (
    WorkoutPlan(
        id="beginner-fullbody",
        name="Beginner Full Body",
        description=(
            "Perfect for beginners. Full body workout 3 days per week "
            "with rest days between."
        ),
        days_per_week=3,
        difficulty=_B,
        days=(
            _day(
                1,
                "Full Body A",
                ("legs-1", 3, "10-12"),
                ("chest-1", 3, "8-10"),
                ("back-3", 3, "10-12"),
                ("shoulders-2", 3, "12-15"),
                ("core-1", 3, "30 sec"),
            ),
            _rest(2),
            _day(
                3,
                "Full Body B",
                ("legs-2", 3, "10-12"),
                ("chest-3", 3, "10-12"),
                ("back-1", 3, "10-12"),
                ("arms-1", 3, "10-12"),
                ("arms-2", 3, "10-12"),
            ),
            _rest(4),
            _day(
                5,
                "Full Body C",
                ("legs-5", 3, "10 each"),
                ("back-2", 3, "10-12"),
                ("shoulders-1", 3, "10-12"),
                ("core-2", 3, "15-20"),
                ("cardio-1", 1, "15 min"),
            ),
            _rest(6),
            _rest(7),
        ),
    ),
    WorkoutPlan(
        id="intermediate-ppl",
        name="Push Pull Legs",
        description=(
            "Classic PPL split for intermediate lifters. "
            "6 days per week for maximum gains."
        ),
        days_per_week=6,
        difficulty=_I,
        days=(
            _day(
                1,
                "Push (Chest, Shoulders, Triceps)",
                ("chest-5", 4, "6-8"),
                ("chest-6", 3, "8-10"),
                ("shoulders-5", 3, "8-10"),
                ("shoulders-2", 3, "12-15"),
                ("arms-6", 3, "10-12"),
                ("arms-2", 3, "12-15"),
            ),
            _day(
                2,
                "Pull (Back, Biceps)",
                ("back-8", 4, "5-6"),
                ("back-5", 4, "6-8"),
                ("back-6", 3, "8-10"),
                ("shoulders-7", 3, "15-20"),
                ("arms-5", 3, "10-12"),
                ("arms-3", 3, "10-12"),
            ),
            _day(
                3,
                "Legs",
                ("legs-8", 4, "6-8"),
                ("legs-7", 4, "8-10"),
                ("legs-2", 3, "10-12"),
                ("legs-3", 3, "10-12"),
                ("legs-4", 3, "12-15"),
                ("core-6", 3, "10-15"),
            ),
            _day(
                4,
                "Push (Chest, Shoulders, Triceps)",
                ("chest-3", 4, "8-10"),
                ("chest-7", 3, "12-15"),
                ("shoulders-6", 3, "10-12"),
                ("shoulders-4", 3, "15-20"),
                ("arms-8", 3, "8-10"),
            ),
            _day(
                5,
                "Pull (Back, Biceps)",
                ("back-1", 4, "10-12"),
                ("back-7", 3, "8-10"),
                ("back-2", 3, "10-12"),
                ("arms-7", 3, "10-12"),
                ("arms-1", 3, "12-15"),
            ),
            _day(
                6,
                "Legs",
                ("legs-10", 4, "6-8"),
                ("legs-9", 3, "10 each"),
                ("legs-11", 4, "10-12"),
                ("legs-3", 3, "12-15"),
                ("core-5", 3, "20 each"),
            ),
            _rest(7),
        ),
    ),
    WorkoutPlan(
        id="intermediate-upper-lower",
        name="Upper Lower Split",
        description=(
            "Great balance of volume and recovery. "
            "4 days per week hitting each muscle twice."
        ),
        days_per_week=4,
        difficulty=_I,
        days=(
            _day(
                1,
                "Upper Body A",
                ("chest-5", 4, "6-8"),
                ("back-5", 4, "6-8"),
                ("shoulders-5", 3, "8-10"),
                ("arms-5", 3, "10-12"),
                ("arms-6", 3, "10-12"),
            ),
            _day(
                2,
                "Lower Body A",
                ("legs-8", 4, "6-8"),
                ("legs-7", 4, "8-10"),
                ("legs-2", 3, "10-12"),
                ("legs-3", 3, "12-15"),
                ("core-1", 3, "45 sec"),
            ),
            _rest(3),
            _day(
                4,
                "Upper Body B",
                ("chest-3", 4, "8-10"),
                ("back-6", 4, "6-10"),
                ("shoulders-2", 3, "12-15"),
                ("chest-4", 3, "12-15"),
                ("arms-3", 3, "10-12"),
                ("arms-2", 3, "12-15"),
            ),
            _day(
                5,
                "Lower Body B",
                ("legs-6", 4, "10-12"),
                ("legs-9", 3, "10 each"),
                ("legs-11", 4, "10-12"),
                ("legs-4", 3, "12-15"),
                ("core-6", 3, "10-15"),
            ),
            _rest(6),
            _rest(7),
        ),
    ),
    WorkoutPlan(
        id="advanced-ppl",
        name="Advanced PPL",
        description=(
            "High volume PPL for experienced lifters. "
            "Heavy compounds with isolation work."
        ),
        days_per_week=6,
        difficulty=_A,
        days=(
            _day(
                1,
                "Push (Heavy)",
                ("chest-5", 5, "5"),
                ("shoulders-8", 4, "5-6"),
                ("chest-6", 4, "8-10"),
                ("chest-7", 3, "12-15"),
                ("shoulders-2", 4, "12-15"),
                ("chest-9", 3, "8-12"),
                ("arms-6", 4, "10-12"),
            ),
            _day(
                2,
                "Pull (Heavy)",
                ("back-8", 5, "5"),
                ("back-9", 4, "6-8"),
                ("back-5", 4, "6-8"),
                ("back-7", 3, "8-10"),
                ("shoulders-7", 4, "15-20"),
                ("arms-5", 4, "8-10"),
                ("arms-3", 3, "10-12"),
            ),
            _day(
                3,
                "Legs (Heavy)",
                ("legs-8", 5, "5"),
                ("legs-10", 4, "6-8"),
                ("legs-7", 4, "8-10"),
                ("legs-2", 3, "10-12"),
                ("legs-3", 4, "10-12"),
                ("core-8", 3, "10-12"),
            ),
            _day(
                4,
                "Push (Volume)",
                ("chest-3", 4, "10-12"),
                ("chest-8", 4, "8-10"),
                ("chest-4", 3, "12-15"),
                ("shoulders-6", 4, "10-12"),
                ("shoulders-4", 3, "15-20"),
                ("arms-8", 4, "8-10"),
                ("arms-2", 3, "15-20"),
            ),
            _day(
                5,
                "Pull (Volume)",
                ("back-1", 4, "10-12"),
                ("back-2", 4, "10-12"),
                ("back-6", 4, "8-12"),
                ("shoulders-3", 3, "12-15"),
                ("arms-7", 4, "10-12"),
                ("arms-1", 3, "12-15"),
            ),
            _day(
                6,
                "Legs (Volume)",
                ("legs-6", 4, "10-12"),
                ("legs-9", 4, "10 each"),
                ("legs-11", 4, "12-15"),
                ("legs-4", 4, "12-15"),
                ("legs-3", 4, "12-15"),
                ("core-9", 3, "6-10"),
            ),
            _rest(7),
        ),
    ),
)

_WEIGHED = (ServingUnit.GRAM, ServingUnit.OUNCE)

COMMON_FOODS: tuple[FoodItem, ...] = (
    FoodItem(
        id="egg",
        name="Egg (large)",
        calories=72,
        protein_g=6,
        carbs_g=0,
        fat_g=5,
        serving_grams=50,
        serving_label="1 egg",
        default_unit=ServingUnit.PIECE,
        available_units=(ServingUnit.PIECE, *_WEIGHED),
    ),
    FoodItem(
        id="chicken-breast",
        name="Chicken Breast",
        calories=165,
        protein_g=31,
        carbs_g=0,
        fat_g=3.6,
        serving_grams=100,
    ),
    FoodItem(
        id="rice",
        name="White Rice (cooked)",
        calories=130,
        protein_g=2.7,
        carbs_g=28,
        fat_g=0.3,
        serving_grams=100,
        available_units=(*_WEIGHED, ServingUnit.CUP),
        grams_per_cup=158,
    ),
    FoodItem(
        id="banana",
        name="Banana (medium)",
        calories=105,
        protein_g=1.3,
        carbs_g=27,
        fat_g=0.4,
        serving_grams=118,
        serving_label="1 banana",
        default_unit=ServingUnit.PIECE,
        available_units=(ServingUnit.PIECE, *_WEIGHED),
    ),
    FoodItem(
        id="oatmeal",
        name="Oatmeal (cooked)",
        calories=150,
        protein_g=5,
        carbs_g=27,
        fat_g=3,
        serving_grams=234,
        serving_label="1 cup",
        default_unit=ServingUnit.CUP,
        available_units=(ServingUnit.CUP, *_WEIGHED),
        grams_per_cup=234,
    ),
    FoodItem(
        id="salmon",
        name="Salmon",
        calories=208,
        protein_g=20,
        carbs_g=0,
        fat_g=13,
        serving_grams=100,
    ),
    FoodItem(
        id="broccoli",
        name="Broccoli",
        calories=31,
        protein_g=2.5,
        carbs_g=6,
        fat_g=0.3,
        serving_grams=91,
        serving_label="1 cup chopped",
        default_unit=ServingUnit.CUP,
        available_units=(ServingUnit.CUP, *_WEIGHED),
        grams_per_cup=91,
    ),
    FoodItem(
        id="apple",
        name="Apple (medium)",
        calories=95,
        protein_g=0.5,
        carbs_g=25,
        fat_g=0.3,
        serving_grams=182,
        serving_label="1 apple",
        default_unit=ServingUnit.PIECE,
        available_units=(ServingUnit.PIECE, *_WEIGHED),
    ),
    FoodItem(
        id="whole-wheat-bread",
        name="Whole Wheat Bread",
        calories=80,
        protein_g=4,
        carbs_g=14,
        fat_g=1,
        serving_grams=32,
        serving_label="1 slice",
        default_unit=ServingUnit.SLICE,
        available_units=(ServingUnit.SLICE, *_WEIGHED),
    ),
    FoodItem(
        id="milk",
        name="Milk (2%)",
        calories=122,
        protein_g=8,
        carbs_g=12,
        fat_g=4.8,
        serving_grams=244,
        serving_label="1 cup",
        default_unit=ServingUnit.CUP,
        available_units=(ServingUnit.CUP, ServingUnit.MILLILITER, *_WEIGHED),
        grams_per_cup=244,
    ),
    FoodItem(
        id="peanut-butter",
        name="Peanut Butter",
        calories=94,
        protein_g=4,
        carbs_g=3,
        fat_g=8,
        serving_grams=16,
        serving_label="1 tbsp",
        default_unit=ServingUnit.TABLESPOON,
        available_units=(ServingUnit.TABLESPOON, ServingUnit.TEASPOON, *_WEIGHED),
    ),
    FoodItem(
        id="olive-oil",
        name="Olive Oil",
        calories=119,
        protein_g=0,
        carbs_g=0,
        fat_g=13.5,
        serving_grams=13.5,
        serving_label="1 tbsp",
        default_unit=ServingUnit.TABLESPOON,
        available_units=(
            ServingUnit.TABLESPOON,
            ServingUnit.TEASPOON,
            ServingUnit.MILLILITER,
            ServingUnit.GRAM,
        ),
    ),
)


@dataclass(frozen=True)
class Catalog:
    """Read-only exercise, plan and food tables with lookup helpers."""

    exercises: tuple[Exercise, ...]
    plans: tuple[WorkoutPlan, ...]
    foods: tuple[FoodItem, ...]
    _exercises_by_id: dict[str, Exercise] = field(
        init=False, repr=False, compare=False
    )
    _plans_by_id: dict[str, WorkoutPlan] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        exercises = {item.id: item for item in self.exercises}
        plans = {plan.id: plan for plan in self.plans}
        object.__setattr__(self, "_exercises_by_id", exercises)
        object.__setattr__(self, "_plans_by_id", plans)

    def exercise(self, exercise_id: str) -> Exercise | None:
        """Return an exercise by id."""
        return self._exercises_by_id.get(exercise_id)

    def exercises_by_category(self, category: ExerciseCategory) -> list[Exercise]:
        """Return exercises in a category."""
        return [item for item in self.exercises if item.category is category]

    def exercises_by_difficulty(self, difficulty: Difficulty) -> list[Exercise]:
        """Return exercises at exactly one difficulty."""
        return [item for item in self.exercises if item.difficulty is difficulty]

    def exercises_for_level(
        self, category: ExerciseCategory, max_difficulty: Difficulty
    ) -> list[Exercise]:
        """Return exercises in a category up to and including a difficulty."""
        return [
            item
            for item in self.exercises_by_category(category)
            if item.difficulty.rank <= max_difficulty.rank
        ]

    def search_exercises(self, query: str) -> list[Exercise]:
        """Case-insensitive substring search on exercise names."""
        needle = query.strip().lower()
        return [item for item in self.exercises if needle in item.name.lower()]

    def plan(self, plan_id: str) -> WorkoutPlan | None:
        """Return a plan by id."""
        return self._plans_by_id.get(plan_id)

    def plans_by_difficulty(self, difficulty: Difficulty) -> list[WorkoutPlan]:
        """Return plans at a difficulty."""
        return [plan for plan in self.plans if plan.difficulty is difficulty]

    def suggested_plan(
        self, days_per_week: int, difficulty: Difficulty
    ) -> WorkoutPlan | None:
        """Return the plan closest to ``days_per_week``; earlier plans win ties."""
        closest: WorkoutPlan | None = None
        for plan in self.plans_by_difficulty(difficulty):
            if closest is None or abs(plan.days_per_week - days_per_week) < abs(
                closest.days_per_week - days_per_week
            ):
                closest = plan
        return closest

    def food(self, food_id: str) -> FoodItem | None:
        """Return a common food by id."""
        return next((food for food in self.foods if food.id == food_id), None)

    def search_foods(self, query: str, limit: int = 10) -> list[FoodItem]:
        """Case-insensitive substring search on common food names."""
        needle = query.strip().lower()
        if not needle:
            return list(self.foods[:limit])
        return [food for food in self.foods if needle in food.name.lower()][:limit]


@cache
def build_catalog() -> Catalog:
    """Return the process-wide catalog."""
    return Catalog(exercises=EXERCISES, plans=WORKOUT_PLANS, foods=COMMON_FOODS)
