"""Narrowing catalog items by usage and cooking preferences."""

import logging
from collections.abc import Collection, Sequence

from meal_planner.domain.catalog import FoodItem
from meal_planner.domain.preferences import PREPARATION_TIME_LIMITS, CookingPreferences

_logger = logging.getLogger(__name__)


def filter_by_preferences(
    items: Sequence[FoodItem], preferences: CookingPreferences
) -> list[FoodItem]:
    """Keep items matching the preferences, or all items when none match."""
    filtered = [item for item in items if matches_preferences(item, preferences)]
    if not filtered:
        if items:
            _logger.debug(
                "No items match preferences %s; using all %s candidates",
                preferences,
                len(items),
            )
        return list(items)
    return filtered


def matches_preferences(item: FoodItem, preferences: CookingPreferences) -> bool:
    """Return whether an item satisfies every preference."""
    limit = PREPARATION_TIME_LIMITS.get(preferences.preparation_time)
    if limit is not None and item.cooking_time_minutes > limit:
        return False
    if preferences.complexity != "any" and item.complexity != preferences.complexity:
        return False
    if (
        preferences.spice_level != "any"
        and item.spice_level != preferences.spice_level
    ):
        return False
    return True


def exclude_ids(items: Sequence[FoodItem], excluded: Collection[str]) -> list[FoodItem]:
    """Drop items whose id is in the excluded set."""
    return [item for item in items if item.id not in excluded]
