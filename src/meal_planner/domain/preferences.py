"""Cooking preference models."""

from dataclasses import dataclass
from typing import Literal

from meal_planner.domain.catalog import Complexity, SpiceLevel

PreparationTime = Literal["quick", "moderate", "any"]

PREPARATION_TIME_LIMITS: dict[str, int] = {
    "quick": 15,
    "moderate": 30,
}


@dataclass(frozen=True)
class CookingPreferences:
    """Soft constraints applied when choosing catalog items."""

    preparation_time: PreparationTime = "any"
    complexity: Complexity | Literal["any"] = "any"
    spice_level: SpiceLevel | Literal["any"] = "any"
