"""Food lookup from the common-food table and Open Food Facts."""

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fitness_tracker.adapters.open_food_facts_client import OpenFoodFactsClient
from fitness_tracker.catalog import Catalog
from fitness_tracker.domain.numbers import round_half_up
from fitness_tracker.domain.nutrition import FoodItem
from fitness_tracker.services.cache import Cache

_logger = logging.getLogger(__name__)

PER_100G = 100.0
PRODUCT_FOUND = 1

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for food lookups with caching."""

    off_client: OpenFoodFactsClient
    catalog: Catalog
    cache: Cache
    page_size: int = 20
    search_ttl_seconds: int = 3600
    product_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 20) -> list[FoodItem]:
        """Return matching common foods followed by Open Food Facts products."""
        term = query.strip()
        common = self.catalog.search_foods(term, limit=limit)
        if not term or len(common) >= limit:
            return common

        cache_key = f"off:search:{term.lower()}:{self.page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            remote = cached
        else:
            payload = await self._call_with_retry(
                lambda: self.off_client.search_products(term, page_size=self.page_size),
                action="search",
            )
            remote = [
                food
                for product in payload.get("products") or []
                if (food := product_to_food(product)) is not None
            ]
            self.cache.set(cache_key, remote, ttl_seconds=self.search_ttl_seconds)
            _logger.info("Food search: query=%s results=%s", term, len(remote))
        return (common + remote)[:limit]

    async def lookup_barcode(self, barcode: str) -> FoodItem | None:
        """Return the product for a barcode, or None when it is unknown."""
        code = barcode.strip()
        cache_key = f"off:product:{code}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached

        payload = await self._call_with_retry(
            lambda: self.off_client.get_product(code),
            action=f"product:{code}",
        )
        product = payload.get("product")
        if payload.get("status") != PRODUCT_FOUND or not isinstance(product, dict):
            _logger.info("Barcode not found: %s", code)
            return None
        food = product_to_food({"code": code, **product})
        if food is not None:
            self.cache.set(cache_key, food, ttl_seconds=self.product_ttl_seconds)
        return food

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Food lookup %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def product_to_food(product: dict[str, object]) -> FoodItem | None:
    """Map an Open Food Facts product to a per-100 g food item."""
    name = product.get("product_name")
    nutriments = product.get("nutriments")
    if not name or not isinstance(nutriments, dict):
        return None
    code = str(product.get("code") or "")
    return FoodItem(
        id=f"off:{code}" if code else f"off:{name}",
        name=str(name).strip(),
        calories=round_half_up(_nutrient(nutriments, "energy-kcal_100g")),
        protein_g=round_half_up(_nutrient(nutriments, "proteins_100g"), 1),
        carbs_g=round_half_up(_nutrient(nutriments, "carbohydrates_100g"), 1),
        fat_g=round_half_up(_nutrient(nutriments, "fat_100g"), 1),
        serving_grams=PER_100G,
        serving_label="100g",
        barcode=code or None,
    )


def _nutrient(nutriments: dict[str, object], key: str) -> float:
    value = nutriments.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return 0.0
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0
