"""Meal plan generation across a fixed day and meal schedule."""

import logging
import random
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field

from meal_planner.domain.catalog import Category, FoodCatalog, FoodItem
from meal_planner.domain.nutrition import MacroBudget, MacroTargets, MealMacros
from meal_planner.domain.plans import (
    PREP_OVERHEAD_MINUTES,
    DailyMealPlan,
    Meal,
    MealComponent,
    MealPlan,
)
from meal_planner.domain.preferences import CookingPreferences
from meal_planner.errors import EmptyCatalogError
from meal_planner.services.catalog_filter import exclude_ids, filter_by_preferences
from meal_planner.services.rotation import RotationState
from meal_planner.services.selection import (
    SERVING_MAX_FACTOR,
    SERVING_MIN_FACTOR,
    adjust_serving_size,
    find_best_match,
)

MethodChooser = Callable[[Sequence[str]], str]

DEFAULT_DAYS = 3
DEFAULT_MEAL_NAMES = ("Lunch", "Dinner")

_logger = logging.getLogger(__name__)


@dataclass
class MealPlanService:
    """Builds meal plans from a catalog with greedy macro matching.

    Each slot spreads the unmet plan budget over the slots left, picks one
    protein, one carb and two vegetables, scales their servings toward the
    per-meal target and records the picks in per-category usage windows so
    items rotate. Cooking methods come from ``choose_method``, which defaults
    to an unseeded uniform choice.
    """

    catalog: FoodCatalog
    days: int = DEFAULT_DAYS
    meal_names: Sequence[str] = DEFAULT_MEAL_NAMES
    serving_min_factor: float = SERVING_MIN_FACTOR
    serving_max_factor: float = SERVING_MAX_FACTOR
    protein_window: int = 2
    carb_window: int = 2
    vegetable_window: int = 4
    prep_overhead_minutes: int = PREP_OVERHEAD_MINUTES
    choose_method: MethodChooser = field(default=random.choice)
    debug: bool = False

    def generate(
        self, targets: MacroTargets, preferences: CookingPreferences
    ) -> MealPlan:
        """Generate a plan, raising ``EmptyCatalogError`` for an empty category."""
        self._ensure_catalog()
        meals_per_day = len(self.meal_names)
        slot_count = self.days * meals_per_day
        budget = targets.for_days(self.days)
        rotation = RotationState.create(
            self.protein_window, self.carb_window, self.vegetable_window
        )

        consumed = MealMacros()
        days: list[list[Meal]] = [[] for _ in range(self.days)]
        for slot in range(slot_count):
            remaining = budget.remaining_after(consumed)
            per_meal = remaining.split(slot_count - slot)
            meal = self._build_meal(slot, remaining, per_meal, preferences, rotation)
            consumed = consumed + meal.macros
            rotation.protein.record(meal.protein.id)
            rotation.carb.record(meal.carb.id)
            rotation.vegetable.record(*(veg.id for veg in meal.vegetables))
            days[slot // meals_per_day].append(meal)
            if self.debug:
                _logger.info(
                    "Planned %s: protein=%s carb=%s vegetables=%s",
                    meal.label,
                    meal.protein.id,
                    meal.carb.id,
                    [veg.id for veg in meal.vegetables],
                )

        plan = MealPlan(
            days=tuple(
                DailyMealPlan(day=index + 1, meals=tuple(meals))
                for index, meals in enumerate(days)
            )
        )
        _logger.info(
            "Generated meal plan: days=%s meals=%s calories=%.0f target=%s/day",
            self.days,
            slot_count,
            plan.macros.calories,
            targets.daily_calories,
        )
        return plan

    def _ensure_catalog(self) -> None:
        for category, items in (
            ("protein", self.catalog.proteins),
            ("carb", self.catalog.carbs),
            ("vegetable", self.catalog.vegetables),
        ):
            if not items:
                raise EmptyCatalogError(category)
        if not self.meal_names or self.days < 1:
            raise ValueError("A meal plan needs at least one day and one meal")

    def _build_meal(
        self,
        slot: int,
        remaining: MacroBudget,
        per_meal: MacroBudget,
        preferences: CookingPreferences,
        rotation: RotationState,
    ) -> Meal:
        protein = self._require(
            "protein",
            self.catalog.proteins,
            rotation.protein.snapshot(),
            remaining,
            preferences,
        )
        carb = self._require(
            "carb",
            self.catalog.carbs,
            rotation.carb.snapshot(),
            remaining,
            preferences,
        )
        first_veg = self._require(
            "vegetable",
            self.catalog.vegetables,
            rotation.vegetable.snapshot(),
            remaining,
            preferences,
        )
        others = exclude_ids(self.catalog.vegetables, {first_veg.id})
        second_veg = (
            self._pick(
                "vegetable",
                others,
                rotation.vegetable.snapshot(),
                remaining,
                preferences,
            )
            or first_veg
        )

        protein_serving = self._adjust(
            protein, per_meal.protein, protein.base_macros.protein
        )
        carb_serving = self._adjust(carb, per_meal.carbs, carb.base_macros.carbs)
        veg_target = per_meal.carbs / 2
        first_veg_serving = self._adjust(
            first_veg, veg_target, first_veg.base_macros.carbs
        )
        second_veg_serving = self._adjust(
            second_veg, veg_target, second_veg.base_macros.carbs
        )

        meals_per_day = len(self.meal_names)
        label = (
            f"Day {slot // meals_per_day + 1} - "
            f"{self.meal_names[slot % meals_per_day]}"
        )
        return Meal(
            index=slot + 1,
            label=label,
            protein=self._component(protein, protein_serving),
            carb=self._component(carb, carb_serving),
            vegetables=(
                self._component(first_veg, first_veg_serving),
                self._component(second_veg, second_veg_serving),
            ),
            prep_overhead_minutes=self.prep_overhead_minutes,
        )

    def _require(
        self,
        category: Category,
        items: Sequence[FoodItem],
        used_ids: Collection[str],
        remaining: MacroBudget,
        preferences: CookingPreferences,
    ) -> FoodItem:
        item = self._pick(category, items, used_ids, remaining, preferences)
        if item is None:
            raise EmptyCatalogError(category)
        return item

    @staticmethod
    def _pick(
        category: Category,
        items: Sequence[FoodItem],
        used_ids: Collection[str],
        remaining: MacroBudget,
        preferences: CookingPreferences,
    ) -> FoodItem | None:
        """Select the best unused item, reusing recent items when all are used.

        Pools that hold only zero-macro items cannot be ranked, so the search
        widens to the unfiltered unused pool and then to the whole category.
        """
        available = exclude_ids(items, used_ids)
        if not available:
            _logger.debug("All %s items recently used; allowing repeats", category)
            available = list(items)
        candidates = filter_by_preferences(available, preferences)
        for pool in (candidates, available, items):
            best = find_best_match(pool, remaining, category)
            if best is not None:
                return best
            _logger.debug("No rankable %s items in pool; widening search", category)
        return None

    def _adjust(self, item: FoodItem, target: float, actual: float) -> float:
        return adjust_serving_size(
            target,
            actual,
            item.serving_grams,
            min_factor=self.serving_min_factor,
            max_factor=self.serving_max_factor,
        )

    def _component(self, item: FoodItem, serving_grams: float) -> MealComponent:
        return MealComponent(
            id=item.id,
            name=item.name,
            category=item.category,
            serving_grams=serving_grams,
            method=self.choose_method(item.methods),
            recipe_steps=item.recipe_steps,
            cooking_time_minutes=item.cooking_time_minutes,
            complexity=item.complexity,
            per_100g=item.per_100g,
        )


def generate_meal_plan(
    catalog: FoodCatalog,
    targets: MacroTargets,
    preferences: CookingPreferences,
    choose_method: MethodChooser = random.choice,
) -> MealPlan:
    """Generate a plan with the default three-day lunch and dinner schedule."""
    service = MealPlanService(catalog=catalog, choose_method=choose_method)
    return service.generate(targets, preferences)
