"""Errors raised by meal plan generation."""


class MealPlanError(Exception):
    """Base error for meal planning failures."""


class EmptyCatalogError(MealPlanError):
    """Raised when a required food category has nothing to choose from."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"No eligible {category} items available for a meal plan")


class CatalogFormatError(MealPlanError):
    """Raised when catalog data cannot be parsed."""
