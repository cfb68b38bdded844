"""Best-match scoring and serving size adjustment."""

from collections.abc import Sequence

from meal_planner.domain.catalog import Category, FoodItem
from meal_planner.domain.nutrition import MacroBudget, MealMacros, round_half_up

EQUAL_RATIO = 1 / 3
SERVING_MIN_FACTOR = 0.7
SERVING_MAX_FACTOR = 1.5


def find_best_match(
    candidates: Sequence[FoodItem], remaining: MacroBudget, category: Category
) -> FoodItem | None:
    """Return the candidate whose macro profile best fits the remaining budget.

    Items without any protein, carbs or fats cannot be ranked and are skipped.
    Returns ``None`` when no candidate can be ranked. Ties keep the first
    candidate in iteration order.
    """
    target = _target_ratios(remaining)
    best_item: FoodItem | None = None
    best_score = float("-inf")
    for item in candidates:
        macros = item.base_macros
        if macros.macro_grams == 0:
            continue
        score = -_distance(macros, target) * _category_multiplier(
            item, macros, category
        )
        if score > best_score:
            best_item = item
            best_score = score
    return best_item


def adjust_serving_size(
    target_macro: float,
    actual_macro: float,
    base_serving: float,
    min_factor: float = SERVING_MIN_FACTOR,
    max_factor: float = SERVING_MAX_FACTOR,
) -> float:
    """Scale a base serving toward a macro target within fixed bounds."""
    if actual_macro == 0:
        return base_serving
    ratio = target_macro / actual_macro
    return round_half_up(base_serving * min(max(ratio, min_factor), max_factor))


def _target_ratios(remaining: MacroBudget) -> tuple[float, float, float]:
    total = remaining.total
    if total == 0:
        return EQUAL_RATIO, EQUAL_RATIO, EQUAL_RATIO
    return (
        remaining.protein / total,
        remaining.carbs / total,
        remaining.fats / total,
    )


def _distance(macros: MealMacros, target: tuple[float, float, float]) -> float:
    """L1 distance between the item's macro ratios and the target ratios."""
    total = macros.macro_grams
    protein_ratio, carbs_ratio, fats_ratio = target
    return (
        abs(macros.protein / total - protein_ratio)
        + abs(macros.carbs / total - carbs_ratio)
        + abs(macros.fats / total - fats_ratio)
    )


def _category_multiplier(
    item: FoodItem, macros: MealMacros, category: Category
) -> float:
    if category == "protein" and macros.protein > 0:
        return 2.0
    if category == "carb" and macros.carbs > 0:
        return 2.0
    if category == "vegetable" and item.per_100g.fiber:
        return 1.5
    return 1.0
