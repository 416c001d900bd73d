"""Domain models for workouts, exercises and plans."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class ExerciseCategory(StrEnum):
    """Muscle group an exercise is filed under."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    CARDIO = "cardio"


class Difficulty(StrEnum):
    """Training level, ordered from easiest to hardest."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return list(Difficulty).index(self)


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise."""

    id: str
    name: str
    category: ExerciseCategory
    equipment: str
    difficulty: Difficulty = Difficulty.BEGINNER
    muscle_groups: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExerciseSet:
    """One set of an exercise."""

    reps: int = 0
    weight: float = 0.0
    completed: bool = False


@dataclass(frozen=True)
class WorkoutExercise:
    """An exercise performed in a workout with its ordered sets."""

    exercise: Exercise
    sets: tuple[ExerciseSet, ...]


@dataclass(frozen=True)
class Workout:
    """A finished workout session."""

    id: UUID | None
    user_id: str
    name: str
    exercises: tuple[WorkoutExercise, ...]
    day: date
    duration_minutes: int
    completed: bool
    logged_at: datetime

    @property
    def completed_sets(self) -> int:
        """Number of sets marked complete."""
        return sum(
            1 for entry in self.exercises for item in entry.sets if item.completed
        )

    @property
    def total_volume(self) -> float:
        """Sum of reps times weight over completed sets."""
        return sum(
            item.reps * item.weight
            for entry in self.exercises
            for item in entry.sets
            if item.completed
        )


@dataclass(frozen=True)
class PlanExercise:
    """Target work for one exercise on a plan day."""

    exercise: Exercise
    target_sets: int
    target_reps: str


@dataclass(frozen=True)
class WorkoutPlanDay:
    """A day in a cyclic workout plan."""

    day_number: int
    name: str
    is_rest_day: bool
    exercises: tuple[PlanExercise, ...] = ()


@dataclass(frozen=True)
class WorkoutPlan:
    """Read-only plan template."""

    id: str
    name: str
    description: str
    days_per_week: int
    difficulty: Difficulty
    days: tuple[WorkoutPlanDay, ...]


@dataclass(frozen=True)
class UserWorkoutPlan:
    """A user's progress through a plan.

    ``current_day`` is 1-based and always within the plan's day count.
    """

    id: UUID
    user_id: str
    plan_id: str
    start_date: date
    current_day: int
    completed_days: tuple[int, ...]


@dataclass(frozen=True)
class ActivePlan:
    """A user's plan progress joined with the plan template."""

    progress: UserWorkoutPlan
    plan: WorkoutPlan

    @property
    def current_day(self) -> WorkoutPlanDay | None:
        """The plan day the user is on."""
        return next(
            (
                day
                for day in self.plan.days
                if day.day_number == self.progress.current_day
            ),
            None,
        )

    @property
    def week_number(self) -> int:
        """1-based week of the current day."""
        return -(-self.progress.current_day // 7)
