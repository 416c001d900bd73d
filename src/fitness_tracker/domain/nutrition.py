"""Nutrition domain models."""

import math
from dataclasses import dataclass, field
from enum import StrEnum


class ServingUnit(StrEnum):
    """Units a user can enter a food quantity in."""

    GRAM = "g"
    OUNCE = "oz"
    CUP = "cup"
    TABLESPOON = "tbsp"
    TEASPOON = "tsp"
    PIECE = "piece"
    SLICE = "slice"
    MILLILITER = "ml"


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients for an amount of food."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    def __add__(self, other: "MacroProfile") -> "MacroProfile":
        return MacroProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            carbs_g=self.carbs_g + other.carbs_g,
        )


ZERO_MACROS = MacroProfile(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class FoodItem:
    """Reference food with nutrition for one serving of ``serving_grams``.

    Food items come from the static common-food table or from a nutrition
    lookup and are never mutated afterwards. ``serving_grams`` must be
    positive and ``default_unit`` must be one of ``available_units``.
    """

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    serving_grams: float
    serving_label: str = "100g"
    default_unit: ServingUnit = ServingUnit.GRAM
    available_units: tuple[ServingUnit, ...] = field(
        default=(ServingUnit.GRAM, ServingUnit.OUNCE)
    )
    grams_per_cup: float | None = None
    barcode: str | None = None

    def __post_init__(self) -> None:
        amounts = (
            self.calories,
            self.protein_g,
            self.carbs_g,
            self.fat_g,
            self.serving_grams,
            self.grams_per_cup if self.grams_per_cup is not None else 0.0,
        )
        if not all(math.isfinite(amount) for amount in amounts):
            raise ValueError(f"nutrition values must be finite for food {self.id!r}")
        if self.serving_grams <= 0:
            raise ValueError(f"serving_grams must be positive for food {self.id!r}")
        if not self.available_units:
            raise ValueError(f"food {self.id!r} has no available units")
        if self.default_unit not in self.available_units:
            raise ValueError(
                f"default unit {self.default_unit} is not available for {self.id!r}"
            )
        if self.grams_per_cup is not None and self.grams_per_cup <= 0:
            raise ValueError(f"grams_per_cup must be positive for food {self.id!r}")

    @property
    def macros(self) -> MacroProfile:
        """Nutrition for one reference serving."""
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )

    def allows(self, unit: ServingUnit) -> bool:
        """Return True when the unit can be used for this food."""
        return unit in self.available_units
