"""Workout sessions and workout history."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from typing import Literal, Protocol

from fitness_tracker.catalog import Catalog
from fitness_tracker.domain.errors import InvalidInputError, NotFoundError
from fitness_tracker.domain.numbers import round_int
from fitness_tracker.domain.workouts import (
    Exercise,
    ExerciseSet,
    Workout,
    WorkoutExercise,
)
from fitness_tracker.services.stats import parse_day

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


class WorkoutRepository(Protocol):
    """Persistence interface for finished workouts."""

    def create_workout(self, workout: Workout) -> Workout:
        """Persist a workout and return it with its id."""

    def list_recent_workouts(self, user_id: str, limit: int) -> list[Workout]:
        """Return the most recent workouts, newest first."""

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        """Return workouts dated between start and end, inclusive."""


@dataclass
class _SessionExercise:
    exercise: Exercise
    sets: list[ExerciseSet]


@dataclass
class WorkoutSession:
    """An in-progress workout that is edited until it is finished."""

    user_id: str
    started_at: datetime
    name: str = ""
    entries: list[_SessionExercise] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Workout - {self.started_at.date().isoformat()}"

    def add_exercise(self, exercise: Exercise) -> None:
        """Append an exercise with a single empty set."""
        self.entries.append(_SessionExercise(exercise=exercise, sets=[ExerciseSet()]))

    def add_set(self, exercise_index: int) -> None:
        """Append a set that repeats the previous set's reps and weight."""
        entry = self._entry(exercise_index)
        last = entry.sets[-1] if entry.sets else ExerciseSet()
        entry.sets.append(ExerciseSet(reps=last.reps, weight=last.weight))

    def update_set(
        self,
        exercise_index: int,
        set_index: int,
        field_name: Literal["reps", "weight"],
        value: object,
    ) -> None:
        """Set reps or weight; non-numeric input counts as zero."""
        entry = self._entry(exercise_index)
        current = self._set(entry, set_index)
        if field_name == "reps":
            entry.sets[set_index] = replace(current, reps=int(_to_number(value)))
        elif field_name == "weight":
            entry.sets[set_index] = replace(current, weight=_to_number(value))
        else:
            raise InvalidInputError(f"Unknown set field {field_name!r}", field="field")

    def toggle_set_complete(self, exercise_index: int, set_index: int) -> None:
        """Flip a set's completion flag."""
        entry = self._entry(exercise_index)
        current = self._set(entry, set_index)
        entry.sets[set_index] = replace(current, completed=not current.completed)

    def remove_exercise(self, exercise_index: int) -> None:
        """Drop an exercise and its sets."""
        self._entry(exercise_index)
        del self.entries[exercise_index]

    def finish(self, finished_at: datetime | None = None) -> Workout:
        """Freeze the session into a completed workout."""
        if not self.entries:
            raise InvalidInputError(
                "Add at least one exercise to save the workout", field="exercises"
            )
        ended = finished_at or datetime.now(tz=UTC)
        elapsed = max((ended - self.started_at).total_seconds(), 0.0)
        return Workout(
            id=None,
            user_id=self.user_id,
            name=self.name or "Workout",
            exercises=tuple(
                WorkoutExercise(exercise=entry.exercise, sets=tuple(entry.sets))
                for entry in self.entries
            ),
            day=self.started_at.date(),
            duration_minutes=round_int(elapsed / SECONDS_PER_MINUTE),
            completed=True,
            logged_at=ended,
        )

    def _entry(self, index: int) -> _SessionExercise:
        if not 0 <= index < len(self.entries):
            raise InvalidInputError(
                f"No exercise at position {index}", field="exercise"
            )
        return self.entries[index]

    @staticmethod
    def _set(entry: _SessionExercise, index: int) -> ExerciseSet:
        if not 0 <= index < len(entry.sets):
            raise InvalidInputError(f"No set at position {index}", field="set")
        return entry.sets[index]


@dataclass
class WorkoutService:
    """Service for starting, saving and listing workouts."""

    repository: WorkoutRepository
    catalog: Catalog

    def start_session(
        self, user_id: str, name: str = "", started_at: datetime | None = None
    ) -> WorkoutSession:
        """Begin a new workout session."""
        return WorkoutSession(
            user_id=user_id,
            started_at=started_at or datetime.now(tz=UTC),
            name=name,
        )

    def finish_session(
        self, session: WorkoutSession, finished_at: datetime | None = None
    ) -> Workout:
        """Finish a session and persist the workout."""
        workout = self.repository.create_workout(session.finish(finished_at))
        logger.info(
            "Saved workout %s for user %s (%d exercises, %d min)",
            workout.id,
            workout.user_id,
            len(workout.exercises),
            workout.duration_minutes,
        )
        return workout

    def record_workout(  # noqa: PLR0913
        self,
        user_id: str,
        name: str,
        day: date | str,
        duration_minutes: int,
        entries: Sequence[tuple[str, Sequence[ExerciseSet]]],
        logged_at: datetime | None = None,
    ) -> Workout:
        """Persist an already finished workout built from catalog exercise ids."""
        if not entries:
            raise InvalidInputError(
                "Add at least one exercise to save the workout", field="exercises"
            )
        if duration_minutes < 0:
            raise InvalidInputError(
                "Duration cannot be negative", field="duration_minutes"
            )
        exercises = []
        for exercise_id, sets in entries:
            exercise = self.catalog.exercise(exercise_id)
            if exercise is None:
                raise NotFoundError("exercise", exercise_id)
            exercises.append(
                WorkoutExercise(exercise=exercise, sets=tuple(sets) or (ExerciseSet(),))
            )
        workout = Workout(
            id=None,
            user_id=user_id,
            name=name.strip() or "Workout",
            exercises=tuple(exercises),
            day=parse_day(day),
            duration_minutes=duration_minutes,
            completed=True,
            logged_at=logged_at or datetime.now(tz=UTC),
        )
        saved = self.repository.create_workout(workout)
        logger.info("Recorded workout %s for user %s", saved.id, user_id)
        return saved

    def list_recent(self, user_id: str, limit: int = 10) -> list[Workout]:
        """Return the user's most recent workouts."""
        return self.repository.list_recent_workouts(user_id, limit)

    def list_for_day(self, user_id: str, day: date | str) -> list[Workout]:
        """Return workouts logged on a day."""
        target = parse_day(day)
        return self.repository.list_workouts(user_id, target, target)


def _to_number(value: object) -> float:
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
