"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from fitness_tracker.adapters.open_food_facts_client import OpenFoodFactsClient
from fitness_tracker.catalog import Catalog, build_catalog
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.meals import MealDraft, MealEntry, MealType
from fitness_tracker.domain.nutrition import FoodItem, ServingUnit
from fitness_tracker.domain.profiles import UserProfile
from fitness_tracker.domain.recipes import Recipe, RecipeIngredient
from fitness_tracker.domain.workouts import UserWorkoutPlan, Workout
from fitness_tracker.services.cache import InMemoryCache
from fitness_tracker.services.meals import MealLogService, MealRepository
from fitness_tracker.services.nutrition import NutritionService
from fitness_tracker.services.plans import PlanService, UserPlanRepository
from fitness_tracker.services.profiles import ProfileRepository, ProfileService
from fitness_tracker.services.recipes import RecipeRepository, RecipeService
from fitness_tracker.services.stats import StatsRepository, StatsService
from fitness_tracker.services.workouts import WorkoutRepository, WorkoutService

USER_ID = "user-1"


def make_food(**overrides: object) -> FoodItem:
    """Return a 100 g reference food, overridable per test."""
    values: dict[str, object] = {
        "id": "test-food",
        "name": "Test Food",
        "calories": 200.0,
        "protein_g": 10.0,
        "carbs_g": 20.0,
        "fat_g": 5.0,
        "serving_grams": 100.0,
    }
    values.update(overrides)
    return FoodItem(**values)


def make_meal(  # noqa: PLR0913
    day: date,
    calories: float = 500.0,
    meal_type: MealType = MealType.LUNCH,
    user_id: str = USER_ID,
    grams: float = 100.0,
    food: FoodItem | None = None,
) -> MealEntry:
    """Return a stored meal whose nutrition is ``calories`` at ``grams``."""
    resolved_food = food or make_food(calories=calories, serving_grams=grams)
    return MealEntry(
        id=uuid4(),
        user_id=user_id,
        food=resolved_food,
        quantity=grams,
        unit=ServingUnit.GRAM,
        grams_consumed=grams,
        meal_type=meal_type,
        day=day,
        logged_at=datetime(day.year, day.month, day.day, 12, tzinfo=UTC),
    )


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealEntry] = field(default_factory=dict)
    legacy_ids: set[UUID] = field(default_factory=set)
    grams_updates: list[tuple[UUID, float]] = field(default_factory=list)

    def create_meal(
        self, user_id: str, draft: MealDraft, logged_at: datetime
    ) -> MealEntry:
        entry = MealEntry(
            id=uuid4(),
            user_id=user_id,
            food=draft.food,
            quantity=draft.quantity,
            unit=draft.unit,
            grams_consumed=draft.grams_consumed,
            meal_type=draft.meal_type,
            day=draft.day,
            logged_at=logged_at,
        )
        self.meals[entry.id] = entry
        return entry

    def add(self, entry: MealEntry, legacy: bool = False) -> MealEntry:
        self.meals[entry.id] = entry
        if legacy:
            self.legacy_ids.add(entry.id)
        return entry

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        return self.meals.get(meal_id)

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        return sorted(
            (
                meal
                for meal in self.meals.values()
                if meal.user_id == user_id and start <= meal.day <= end
            ),
            key=lambda meal: meal.logged_at,
        )

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)

    def list_legacy_meals(self, user_id: str) -> list[MealEntry]:
        return [
            meal
            for meal_id, meal in self.meals.items()
            if meal_id in self.legacy_ids and meal.user_id == user_id
        ]

    def set_grams_consumed(self, meal_id: UUID, grams: float) -> None:
        self.grams_updates.append((meal_id, grams))
        self.meals[meal_id] = replace(self.meals[meal_id], grams_consumed=grams)
        self.legacy_ids.discard(meal_id)


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: list[Workout] = field(default_factory=list)

    def create_workout(self, workout: Workout) -> Workout:
        saved = replace(workout, id=uuid4())
        self.workouts.append(saved)
        return saved

    def list_recent_workouts(self, user_id: str, limit: int) -> list[Workout]:
        owned = [item for item in self.workouts if item.user_id == user_id]
        return sorted(owned, key=lambda item: item.logged_at, reverse=True)[:limit]

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        return [
            item
            for item in self.workouts
            if item.user_id == user_id and start <= item.day <= end
        ]


@dataclass
class InMemoryStatsRepository(StatsRepository):
    """Stats reads served from the in-memory meal and workout repositories."""

    meal_repository: InMemoryMealRepository
    workout_repository: InMemoryWorkoutRepository

    def list_meals(self, user_id: str, start: date, end: date) -> list[MealEntry]:
        return self.meal_repository.list_meals(user_id, start, end)

    def list_workouts(self, user_id: str, start: date, end: date) -> list[Workout]:
        return self.workout_repository.list_workouts(user_id, start, end)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)

    def create_recipe(
        self,
        user_id: str,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
        created_at: datetime,
    ) -> Recipe:
        recipe = Recipe(
            id=uuid4(),
            user_id=user_id,
            name=name,
            ingredients=tuple(ingredients),
            default_meal_type=default_meal_type,
            created_at=created_at,
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def update_recipe(
        self,
        recipe_id: UUID,
        name: str,
        ingredients: Sequence[RecipeIngredient],
        default_meal_type: MealType,
    ) -> Recipe:
        recipe = replace(
            self.recipes[recipe_id],
            name=name,
            ingredients=tuple(ingredients),
            default_meal_type=default_meal_type,
        )
        self.recipes[recipe_id] = recipe
        return recipe

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def list_recipes(self, user_id: str) -> list[Recipe]:
        owned = [item for item in self.recipes.values() if item.user_id == user_id]
        return sorted(owned, key=lambda item: item.created_at, reverse=True)

    def delete_recipe(self, recipe_id: UUID) -> None:
        self.recipes.pop(recipe_id, None)


@dataclass
class InMemoryUserPlanRepository(UserPlanRepository):
    """In-memory plan progress repository for tests."""

    plans: dict[UUID, UserWorkoutPlan] = field(default_factory=dict)

    def create_user_plan(
        self, user_id: str, plan_id: str, start_date: date
    ) -> UserWorkoutPlan:
        progress = UserWorkoutPlan(
            id=uuid4(),
            user_id=user_id,
            plan_id=plan_id,
            start_date=start_date,
            current_day=1,
            completed_days=(),
        )
        self.plans[progress.id] = progress
        return progress

    def get_user_plan(self, user_id: str) -> UserWorkoutPlan | None:
        return next(
            (item for item in self.plans.values() if item.user_id == user_id), None
        )

    def update_progress(
        self, user_plan_id: UUID, current_day: int, completed_days: tuple[int, ...]
    ) -> UserWorkoutPlan:
        progress = replace(
            self.plans[user_plan_id],
            current_day=current_day,
            completed_days=completed_days,
        )
        self.plans[user_plan_id] = progress
        return progress

    def delete_user_plan(self, user_plan_id: UUID) -> None:
        self.plans.pop(user_plan_id, None)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, UserProfile] = field(default_factory=dict)
    saves: int = 0

    def get_profile(self, user_id: str) -> UserProfile | None:
        return self.profiles.get(user_id)

    def create_profile(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.user_id] = profile
        return profile

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self.saves += 1
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "products": [
                {
                    "code": "0001",
                    "product_name": "Greek Yogurt",
                    "nutriments": {
                        "energy-kcal_100g": 97,
                        "proteins_100g": 9,
                        "carbohydrates_100g": 3.98,
                        "fat_100g": 5,
                    },
                },
                {"code": "0002", "nutriments": {"energy-kcal_100g": 10}},
            ]
        }
    )
    product_payload: dict[str, object] = field(
        default_factory=lambda: {
            "status": 1,
            "product": {
                "product_name": "Peanut Butter Cups",
                "nutriments": {
                    "energy-kcal_100g": 515,
                    "proteins_100g": 10.2,
                    "carbohydrates_100g": 57.5,
                    "fat_100g": 29.1,
                },
            },
        }
    )
    search_calls: list[str] = field(default_factory=list)
    product_calls: list[str] = field(default_factory=list)

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        self.search_calls.append(query)
        return self.search_payload

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.product_calls.append(barcode)
        return self.product_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def catalog() -> Catalog:
    return build_catalog()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def workout_repository() -> InMemoryWorkoutRepository:
    return InMemoryWorkoutRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog: Catalog,
    meal_repository: InMemoryMealRepository,
    workout_repository: InMemoryWorkoutRepository,
    profile_repository: InMemoryProfileRepository,
    off_client: FakeOpenFoodFactsClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        nutrition_service=NutritionService(
            off_client=off_client, catalog=catalog, cache=InMemoryCache()
        ),
        meal_log_service=MealLogService(meal_repository),
        recipe_service=RecipeService(InMemoryRecipeRepository()),
        workout_service=WorkoutService(workout_repository, catalog),
        plan_service=PlanService(InMemoryUserPlanRepository(), catalog),
        profile_service=ProfileService(profile_repository),
        stats_service=StatsService(
            InMemoryStatsRepository(meal_repository, workout_repository)
        ),
        close_resources=close_resources,
    )
