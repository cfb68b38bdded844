"""Domain models for generated meal plans."""

from dataclasses import dataclass

from meal_planner.domain.catalog import Category
from meal_planner.domain.nutrition import MealMacros, NutritionInfo

PREP_OVERHEAD_MINUTES = 5


@dataclass(frozen=True)
class MealComponent:
    """Snapshot of a catalog item bound to one meal."""

    id: str
    name: str
    category: Category
    serving_grams: float
    method: str
    recipe_steps: tuple[str, ...]
    cooking_time_minutes: int
    complexity: str
    per_100g: NutritionInfo

    @property
    def macros(self) -> MealMacros:
        return MealMacros.for_serving(self.per_100g, self.serving_grams)


@dataclass(frozen=True)
class Meal:
    """One lunch or dinner slot of a plan."""

    index: int
    label: str
    protein: MealComponent
    carb: MealComponent
    vegetables: tuple[MealComponent, MealComponent]
    prep_overhead_minutes: int = PREP_OVERHEAD_MINUTES

    @property
    def components(self) -> tuple[MealComponent, ...]:
        return (self.protein, self.carb, *self.vegetables)

    @property
    def macros(self) -> MealMacros:
        """Sum of the component macros."""
        return MealMacros.total(component.macros for component in self.components)

    @property
    def total_cooking_time(self) -> int:
        """Longest component cooking time plus fixed preparation."""
        longest = max(c.cooking_time_minutes for c in self.components)
        return longest + self.prep_overhead_minutes


@dataclass(frozen=True)
class DailyMealPlan:
    """Meals planned for one day."""

    day: int
    meals: tuple[Meal, ...]

    @property
    def macros(self) -> MealMacros:
        return MealMacros.total(meal.macros for meal in self.meals)


@dataclass(frozen=True)
class MealPlan:
    """A generated multi-day plan."""

    days: tuple[DailyMealPlan, ...]

    @property
    def meals(self) -> list[Meal]:
        """All meals in schedule order."""
        return [meal for day in self.days for meal in day.meals]

    @property
    def macros(self) -> MealMacros:
        return MealMacros.total(day.macros for day in self.days)


@dataclass(frozen=True)
class ShoppingListItem:
    """Total quantity of one catalog item across a plan."""

    id: str
    name: str
    category: Category
    total: float
    unit: str = "g"
