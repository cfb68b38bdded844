"""Domain models for the food catalog."""

from dataclasses import dataclass
from typing import Literal

from meal_planner.domain.nutrition import MealMacros, NutritionInfo

Category = Literal["protein", "carb", "vegetable"]
Complexity = Literal["easy", "medium", "complex"]
SpiceLevel = Literal["mild", "medium", "spicy"]

CATEGORIES: tuple[Category, ...] = ("protein", "carb", "vegetable")


@dataclass(frozen=True)
class FoodItem:
    """Immutable catalog entry."""

    id: str
    name: str
    serving_grams: float
    per_100g: NutritionInfo
    methods: tuple[str, ...]
    cooking_time_minutes: int
    complexity: Complexity
    spice_level: SpiceLevel
    category: Category
    recipe_steps: tuple[str, ...] = ()
    allergens: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.methods:
            raise ValueError(f"Food item {self.id!r} has no cooking methods")

    @property
    def base_macros(self) -> MealMacros:
        """Macros at the catalog base serving."""
        return MealMacros.for_serving(self.per_100g, self.serving_grams)


@dataclass(frozen=True)
class FoodCatalog:
    """Food items grouped by category."""

    proteins: tuple[FoodItem, ...]
    carbs: tuple[FoodItem, ...]
    vegetables: tuple[FoodItem, ...]

    def items_for(self, category: Category) -> tuple[FoodItem, ...]:
        """Return the items of one category."""
        if category == "protein":
            return self.proteins
        if category == "carb":
            return self.carbs
        return self.vegetables

    def all_items(self) -> list[FoodItem]:
        """Return every item in category order."""
        return [*self.proteins, *self.carbs, *self.vegetables]

    def find(self, item_id: str) -> FoodItem | None:
        """Return an item by id, if present."""
        for item in self.all_items():
            if item.id == item_id:
                return item
        return None
