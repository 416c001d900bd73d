"""Tests for workout plan progress."""

from datetime import date

import pytest

from fitness_tracker.catalog import Catalog
from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.services.plans import PlanService, next_plan_day
from tests.conftest import USER_ID, InMemoryUserPlanRepository

START = date(2024, 3, 10)


def test_next_plan_day_wraps(catalog: Catalog) -> None:
    plan = catalog.plan("beginner-fullbody")
    assert plan is not None

    assert next_plan_day(1, plan) == 2
    assert next_plan_day(6, plan) == 7
    assert next_plan_day(7, plan) == 1


def test_start_plan_begins_on_day_one(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)

    active = service.start_plan(USER_ID, "beginner-fullbody", START)

    assert active.progress.current_day == 1
    assert active.progress.completed_days == ()
    assert active.current_day is not None
    assert active.current_day.name == "Full Body A"
    assert active.week_number == 1


def test_complete_day_advances_and_wraps(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)
    service.start_plan(USER_ID, "beginner-fullbody", START)

    for _ in range(7):
        active = service.complete_day(USER_ID)

    assert active.progress.current_day == 1
    assert active.progress.completed_days == (1, 2, 3, 4, 5, 6, 7)
    assert active.week_number == 1


def test_completed_days_are_not_repeated_after_wrapping(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)
    service.start_plan(USER_ID, "beginner-fullbody", START)

    for _ in range(9):
        active = service.complete_day(USER_ID)

    assert active.progress.current_day == 3
    assert active.progress.completed_days == (1, 2, 3, 4, 5, 6, 7)


def test_rest_day_and_week_number(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)
    service.start_plan(USER_ID, "beginner-fullbody", START)

    active = service.complete_day(USER_ID)

    assert active.current_day is not None
    assert active.current_day.is_rest_day
    assert active.week_number == 1


def test_starting_a_new_plan_replaces_progress(catalog: Catalog) -> None:
    repository = InMemoryUserPlanRepository()
    service = PlanService(repository, catalog)
    service.start_plan(USER_ID, "beginner-fullbody", START)
    service.complete_day(USER_ID)

    active = service.start_plan(USER_ID, "intermediate-ppl", START)

    assert len(repository.plans) == 1
    assert active.plan.id == "intermediate-ppl"
    assert active.progress.current_day == 1


def test_unknown_plan_is_not_found(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)

    with pytest.raises(NotFoundError):
        service.start_plan(USER_ID, "couch-to-couch", START)


def test_cancel_plan(catalog: Catalog) -> None:
    service = PlanService(InMemoryUserPlanRepository(), catalog)
    service.start_plan(USER_ID, "advanced-ppl", START)

    service.cancel_plan(USER_ID)

    assert service.get_active_plan(USER_ID) is None
    with pytest.raises(NotFoundError):
        service.complete_day(USER_ID)


def test_progress_for_removed_plan_is_ignored(catalog: Catalog) -> None:
    repository = InMemoryUserPlanRepository()
    repository.create_user_plan(USER_ID, "retired-plan", START)
    service = PlanService(repository, catalog)

    assert service.get_active_plan(USER_ID) is None
