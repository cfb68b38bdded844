"""Shopping list aggregation."""

from collections.abc import Iterable

from meal_planner.domain.plans import Meal, MealComponent, MealPlan, ShoppingListItem


def generate_shopping_list(plan: MealPlan | Iterable[Meal]) -> list[ShoppingListItem]:
    """Sum serving grams per catalog item across every meal of a plan."""
    meals = plan.meals if isinstance(plan, MealPlan) else plan
    totals: dict[str, float] = {}
    first_seen: dict[str, MealComponent] = {}
    for meal in meals:
        for component in meal.components:
            totals[component.id] = totals.get(component.id, 0) + component.serving_grams
            first_seen.setdefault(component.id, component)

    items = [
        ShoppingListItem(
            id=item_id,
            name=first_seen[item_id].name,
            category=first_seen[item_id].category,
            total=total,
        )
        for item_id, total in totals.items()
    ]
    return sorted(items, key=lambda item: (item.name.casefold(), item.id))
