"""JSON-file backed food catalog."""

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Protocol

from meal_planner.domain.catalog import FoodCatalog, FoodItem
from meal_planner.domain.nutrition import NutritionInfo
from meal_planner.errors import CatalogFormatError

_SECTIONS = {
    "proteins": "protein",
    "carbs": "carb",
    "vegetables": "vegetable",
}


class CatalogSource(Protocol):
    """Source of the static food catalog."""

    def load(self) -> FoodCatalog:
        """Return the parsed catalog."""


@dataclass
class JsonCatalogSource(CatalogSource):
    """Reads the catalog from a JSON file, defaulting to the packaged data."""

    path: Path | None = None

    def load(self) -> FoodCatalog:
        """Read and parse the catalog file."""
        return parse_catalog(json.loads(self._read()))

    def _read(self) -> str:
        if self.path is None:
            return (
                resources.files("meal_planner")
                .joinpath("data")
                .joinpath("foods.json")
                .read_text(encoding="utf-8")
            )
        return self.path.read_text(encoding="utf-8")


def parse_catalog(payload: dict[str, object]) -> FoodCatalog:
    """Build a catalog from the raw JSON structure."""
    sections: dict[str, tuple[FoodItem, ...]] = {}
    for section, category in _SECTIONS.items():
        rows = payload.get(section) or []
        if not isinstance(rows, list):
            raise CatalogFormatError(f"Catalog section {section!r} must be a list")
        sections[section] = tuple(_parse_item(row, category) for row in rows)
    return FoodCatalog(**sections)


def _parse_item(row: object, category: str) -> FoodItem:
    if not isinstance(row, dict):
        raise CatalogFormatError(f"Catalog entry must be an object, got {row!r}")
    try:
        nutrition = row["per_100g"]
        return FoodItem(
            id=str(row["id"]),
            name=str(row["name"]),
            serving_grams=float(row["serving_grams"]),
            per_100g=NutritionInfo(
                protein=float(nutrition["protein"]),
                fat=float(nutrition["fat"]),
                carbs=float(nutrition["carbs"]),
                calories=float(nutrition["calories"]),
                fiber=_optional_float(nutrition.get("fiber")),
                sugar=_optional_float(nutrition.get("sugar")),
            ),
            methods=tuple(row["methods"]),
            cooking_time_minutes=int(row["cooking_time_minutes"]),
            complexity=row.get("complexity", "easy"),
            spice_level=row.get("spice_level", "mild"),
            category=row.get("category", category),
            recipe_steps=tuple(row.get("recipe_steps") or ()),
            allergens=tuple(row.get("allergens") or ()),
            tags=tuple(row.get("tags") or ()),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogFormatError(
            f"Invalid catalog entry {row.get('id', '?')!r}: {exc}"
        ) from exc


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
