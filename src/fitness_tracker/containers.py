"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from fitness_tracker.adapters.supabase_stats_repository import SupabaseStatsRepository
from fitness_tracker.adapters.supabase_user_plan_repository import (
    SupabaseUserPlanRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.catalog import Catalog, build_catalog
from fitness_tracker.config import Settings
from fitness_tracker.services.cache import InMemoryCache
from fitness_tracker.services.meals import MealLogService
from fitness_tracker.services.nutrition import NutritionService
from fitness_tracker.services.plans import PlanService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.recipes import RecipeService
from fitness_tracker.services.stats import StatsService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    nutrition_service: NutritionService
    meal_log_service: MealLogService
    recipe_service: RecipeService
    workout_service: WorkoutService
    plan_service: PlanService
    profile_service: ProfileService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog = build_catalog()
    off_client = HttpxOpenFoodFactsClient.create(resolved_settings.off_base_url)
    nutrition_service = NutritionService(
        off_client=off_client,
        catalog=catalog,
        cache=InMemoryCache(),
        page_size=resolved_settings.off_page_size,
        search_ttl_seconds=resolved_settings.food_search_ttl_seconds,
    )

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        nutrition_service=nutrition_service,
        meal_log_service=MealLogService(SupabaseMealRepository(supabase_client)),
        recipe_service=RecipeService(SupabaseRecipeRepository(supabase_client)),
        workout_service=WorkoutService(
            SupabaseWorkoutRepository(supabase_client), catalog
        ),
        plan_service=PlanService(SupabaseUserPlanRepository(supabase_client), catalog),
        profile_service=ProfileService(
            SupabaseProfileRepository(supabase_client),
            default_calorie_goal=resolved_settings.default_calorie_goal,
        ),
        stats_service=StatsService(SupabaseStatsRepository(supabase_client)),
        close_resources=close_resources,
    )
