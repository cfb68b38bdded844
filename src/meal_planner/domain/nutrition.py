"""Nutrition domain models."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


def calories_from_macros(protein_g: float, carbs_g: float, fat_g: float) -> int:
    """Return total calories for macro grams, rounded to the nearest integer."""
    return round_half_up(
        protein_g * PROTEIN_KCAL_PER_G
        + carbs_g * CARBS_KCAL_PER_G
        + fat_g * FAT_KCAL_PER_G
    )


@dataclass(frozen=True)
class NutritionInfo:
    """Nutrient content of a food item per 100 grams."""

    protein: float
    fat: float
    carbs: float
    calories: float
    fiber: float | None = None
    sugar: float | None = None


@dataclass(frozen=True)
class MealMacros:
    """Absolute macros of a serving, meal, day or whole plan."""

    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    calories: float = 0.0

    def __add__(self, other: "MealMacros") -> "MealMacros":
        return MealMacros(
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
            calories=self.calories + other.calories,
        )

    @property
    def macro_grams(self) -> float:
        """Combined grams of protein, carbs and fats."""
        return self.protein + self.carbs + self.fats

    def scaled(self, factor: float) -> "MealMacros":
        """Return macros multiplied by a factor."""
        return MealMacros(
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fats=self.fats * factor,
            calories=self.calories * factor,
        )

    @classmethod
    def for_serving(cls, per_100g: NutritionInfo, serving_grams: float) -> "MealMacros":
        """Scale per-100g nutrition to a serving size."""
        multiplier = serving_grams / 100
        return cls(
            protein=per_100g.protein * multiplier,
            carbs=per_100g.carbs * multiplier,
            fats=per_100g.fat * multiplier,
            calories=per_100g.calories * multiplier,
        )

    @classmethod
    def total(cls, parts: Iterable["MealMacros"]) -> "MealMacros":
        """Sum macros from several parts."""
        result = cls()
        for part in parts:
            result = result + part
        return result


@dataclass(frozen=True)
class MacroBudget:
    """Grams of protein, carbs and fats still to be covered."""

    protein: float
    carbs: float
    fats: float

    @property
    def total(self) -> float:
        return self.protein + self.carbs + self.fats

    def remaining_after(self, consumed: MealMacros) -> "MacroBudget":
        """Return the unmet part of the budget, never below zero."""
        return MacroBudget(
            protein=max(0.0, self.protein - consumed.protein),
            carbs=max(0.0, self.carbs - consumed.carbs),
            fats=max(0.0, self.fats - consumed.fats),
        )

    def split(self, parts: int) -> "MacroBudget":
        """Spread the budget evenly over a number of meals."""
        return MacroBudget(
            protein=self.protein / parts,
            carbs=self.carbs / parts,
            fats=self.fats / parts,
        )


@dataclass(frozen=True)
class MacroTargets:
    """Daily macro targets entered by the user."""

    daily_protein: float
    daily_carbs: float
    daily_fats: float

    @property
    def daily_calories(self) -> int:
        """Daily calories derived from the macro targets."""
        return calories_from_macros(
            self.daily_protein, self.daily_carbs, self.daily_fats
        )

    def for_days(self, days: int) -> MacroBudget:
        """Return the macro budget for a number of days."""
        return MacroBudget(
            protein=self.daily_protein * days,
            carbs=self.daily_carbs * days,
            fats=self.daily_fats * days,
        )


@dataclass(frozen=True)
class NutritionSummary:
    """Plan nutrition compared against the daily targets."""

    daily_average: MealMacros
    daily_calorie_target: int
    calories_pct: float
    protein_pct: float
    carbs_pct: float
    fats_pct: float
    protein_calorie_share: int
    carbs_calorie_share: int
    fats_calorie_share: int
