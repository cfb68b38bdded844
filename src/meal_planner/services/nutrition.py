"""Nutrition calculations for servings and plans."""

from meal_planner.domain.catalog import FoodItem
from meal_planner.domain.nutrition import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroTargets,
    MealMacros,
    NutritionSummary,
    calories_from_macros,
)
from meal_planner.domain.plans import MealPlan

__all__ = ["calories_from_macros", "macros_for_serving", "summarize_plan"]


def macros_for_serving(item: FoodItem, serving_grams: float | None = None) -> MealMacros:
    """Return absolute macros for a serving, defaulting to the base serving."""
    grams = item.serving_grams if serving_grams is None else serving_grams
    return MealMacros.for_serving(item.per_100g, grams)


def summarize_plan(plan: MealPlan, targets: MacroTargets) -> NutritionSummary:
    """Compare a plan's daily average against the daily targets."""
    day_count = max(len(plan.days), 1)
    average = plan.macros.scaled(1 / day_count)
    calorie_target = targets.daily_calories

    return NutritionSummary(
        daily_average=average,
        daily_calorie_target=calorie_target,
        calories_pct=_progress(round(average.calories), calorie_target),
        protein_pct=_progress(round(average.protein), targets.daily_protein),
        carbs_pct=_progress(round(average.carbs), targets.daily_carbs),
        fats_pct=_progress(round(average.fats), targets.daily_fats),
        protein_calorie_share=_share(average.protein * PROTEIN_KCAL_PER_G, average),
        carbs_calorie_share=_share(average.carbs * CARBS_KCAL_PER_G, average),
        fats_calorie_share=_share(average.fats * FAT_KCAL_PER_G, average),
    )


def _progress(current: float, target: float) -> float:
    """Percentage of a target reached, capped at 100."""
    if target == 0:
        return 0.0
    return min(current / target * 100, 100.0)


def _share(calories: float, average: MealMacros) -> int:
    if average.calories == 0:
        return 0
    return round(calories / average.calories * 100)
