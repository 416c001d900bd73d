"""Food search, meal logging and recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder

from fitness_tracker.api.deps import require_user, user_today
from fitness_tracker.api.schemas import (
    MealCreateRequest,
    PortionRequest,
    RecipeCreateRequest,
    RecipeLogRequest,
)
from fitness_tracker.domain.errors import NotFoundError
from fitness_tracker.services.recipes import build_ingredient, recipe_totals
from fitness_tracker.services.stats import aggregate_day, entry_nutrition, parse_day

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.meals import MealEntry
    from fitness_tracker.domain.recipes import Recipe, RecipeIngredient

router = APIRouter(tags=["nutrition"])


@router.get("/foods/search")
async def search_foods(q: str, request: Request, limit: int = 20) -> dict[str, object]:
    """Search common foods and Open Food Facts."""
    container: AppContainer = request.app.state.container
    foods = await container.nutrition_service.search(q, limit=limit)
    return {"foods": jsonable_encoder(foods)}


@router.get("/foods/barcode/{code}")
async def lookup_barcode(code: str, request: Request) -> dict[str, object]:
    """Look up a packaged food by barcode."""
    container: AppContainer = request.app.state.container
    food = await container.nutrition_service.lookup_barcode(code)
    if food is None:
        raise NotFoundError("barcode", code)
    return {"food": jsonable_encoder(food)}


@router.post("/meals/preview", dependencies=[Depends(require_user)])
async def preview_meal(body: PortionRequest, request: Request) -> dict[str, object]:
    """Return grams and nutrition for a portion before logging it."""
    container: AppContainer = request.app.state.container
    preview = container.meal_log_service.preview(
        body.food.to_food(), body.quantity, body.unit
    )
    return jsonable_encoder(preview)


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(
    body: MealCreateRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Log a meal entry."""
    container: AppContainer = request.app.state.container
    entry = container.meal_log_service.log_meal(
        user_id=user_id,
        food=body.food.to_food(),
        quantity=body.quantity,
        unit=body.unit,
        meal_type=body.meal_type,
        day=body.day or user_today(container, user_id),
    )
    return {"meal": _meal_payload(entry)}


@router.get("/meals")
async def list_meals(
    request: Request,
    day: str | None = None,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Return a day's meals with per-entry and total nutrition."""
    container: AppContainer = request.app.state.container
    target = parse_day(day) if day else user_today(container, user_id)
    meals = container.meal_log_service.list_for_day(user_id, target)
    return {
        "day": target.isoformat(),
        "meals": [_meal_payload(entry) for entry in meals],
        "totals": jsonable_encoder(aggregate_day(target, meals)),
    }


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, user_id: str = Depends(require_user)
) -> None:
    """Delete a meal entry."""
    container: AppContainer = request.app.state.container
    container.meal_log_service.delete_meal(user_id, meal_id)


@router.get("/recipes")
async def list_recipes(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's recipes with totals."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_service.list_recipes(user_id)
    return {"recipes": [_recipe_payload(recipe) for recipe in recipes]}


@router.post("/recipes", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    body: RecipeCreateRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Save a recipe."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.save_recipe(
        user_id, body.name, _ingredients(body), body.default_meal_type
    )
    return {"recipe": _recipe_payload(recipe)}


@router.put("/recipes/{recipe_id}")
async def update_recipe(
    recipe_id: UUID,
    body: RecipeCreateRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Replace the name, ingredients and default meal of an existing recipe."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.save_recipe(
        user_id,
        body.name,
        _ingredients(body),
        body.default_meal_type,
        recipe_id=recipe_id,
    )
    return {"recipe": _recipe_payload(recipe)}


@router.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: UUID, request: Request, user_id: str = Depends(require_user)
) -> None:
    """Delete a recipe."""
    container: AppContainer = request.app.state.container
    container.recipe_service.delete_recipe(user_id, recipe_id)


@router.post("/recipes/{recipe_id}/log", status_code=status.HTTP_201_CREATED)
async def log_recipe(
    recipe_id: UUID,
    request: Request,
    body: RecipeLogRequest | None = None,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Log every ingredient of a recipe as a meal entry."""
    container: AppContainer = request.app.state.container
    options = body or RecipeLogRequest()
    recipe = container.recipe_service.get_recipe(user_id, recipe_id)
    day = options.day or user_today(container, user_id)
    entries = container.meal_log_service.log_recipe(
        user_id, recipe, day, options.meal_type
    )
    return {"meals": [_meal_payload(entry) for entry in entries]}


def _meal_payload(entry: MealEntry) -> dict[str, object]:
    payload = jsonable_encoder(entry)
    payload["nutrition"] = jsonable_encoder(entry_nutrition(entry))
    return payload


def _recipe_payload(recipe: Recipe) -> dict[str, object]:
    payload = jsonable_encoder(recipe)
    payload["totals"] = jsonable_encoder(recipe_totals(recipe.ingredients))
    return payload


def _ingredients(body: RecipeCreateRequest) -> list[RecipeIngredient]:
    return [
        build_ingredient(item.food.to_food(), item.quantity, item.unit)
        for item in body.ingredients
    ]
