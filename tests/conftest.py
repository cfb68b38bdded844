"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from meal_planner.adapters.json_catalog import CatalogSource
from meal_planner.config import Settings
from meal_planner.containers import AppContainer, build_container
from meal_planner.domain.catalog import FoodCatalog, FoodItem
from meal_planner.domain.nutrition import MacroTargets, NutritionInfo
from meal_planner.domain.preferences import CookingPreferences


def make_item(  # noqa: PLR0913
    item_id: str,
    category: str,
    *,
    protein: float,
    fat: float,
    carbs: float,
    calories: float,
    serving: float = 100,
    fiber: float | None = None,
    methods: tuple[str, ...] = ("Baked", "Grilled"),
    cooking_time: int = 10,
    complexity: str = "easy",
    spice_level: str = "mild",
    name: str | None = None,
    recipe_steps: tuple[str, ...] = (),
) -> FoodItem:
    """Build a catalog item with sensible defaults."""
    return FoodItem(
        id=item_id,
        name=name or item_id.replace("-", " ").title(),
        serving_grams=serving,
        per_100g=NutritionInfo(
            protein=protein, fat=fat, carbs=carbs, calories=calories, fiber=fiber
        ),
        methods=methods,
        cooking_time_minutes=cooking_time,
        complexity=complexity,
        spice_level=spice_level,
        category=category,
        recipe_steps=recipe_steps,
    )


def sample_catalog() -> FoodCatalog:
    """Three items per category taken from the shipped catalog."""
    return FoodCatalog(
        proteins=(
            make_item(
                "chicken-breast",
                "protein",
                protein=31,
                fat=3.6,
                carbs=0,
                calories=165,
                serving=180,
                fiber=0,
                methods=("Grilled", "Pan-fried", "Baked", "Poached"),
                cooking_time=20,
                recipe_steps=("Season chicken", "Cook until done"),
            ),
            make_item(
                "salmon-fillet",
                "protein",
                protein=20,
                fat=13,
                carbs=0,
                calories=208,
                serving=180,
                fiber=0,
                methods=("Baked", "Pan-seared", "Grilled"),
                cooking_time=15,
            ),
            make_item(
                "tofu-firm",
                "protein",
                protein=14,
                fat=4,
                carbs=2,
                calories=144,
                serving=150,
                fiber=1.2,
                methods=("Stir-fried", "Baked", "Grilled"),
                cooking_time=15,
                complexity="medium",
            ),
        ),
        carbs=(
            make_item(
                "brown-rice",
                "carb",
                protein=2.6,
                fat=0.9,
                carbs=23,
                calories=110,
                serving=125,
                fiber=1.8,
                methods=("Boiled", "Steamed"),
                cooking_time=30,
            ),
            make_item(
                "quinoa",
                "carb",
                protein=4.4,
                fat=1.9,
                carbs=21,
                calories=120,
                serving=125,
                fiber=2.8,
                methods=("Boiled",),
                cooking_time=20,
            ),
            make_item(
                "sweet-potato",
                "carb",
                protein=1.6,
                fat=0.1,
                carbs=20,
                calories=86,
                serving=150,
                fiber=3,
                methods=("Baked", "Roasted", "Boiled"),
                cooking_time=40,
            ),
        ),
        vegetables=(
            make_item(
                "broccoli",
                "vegetable",
                protein=2.8,
                fat=0.4,
                carbs=7,
                calories=34,
                serving=150,
                fiber=2.6,
                methods=("Steamed", "Roasted", "Stir-fried"),
                cooking_time=8,
            ),
            make_item(
                "green-beans",
                "vegetable",
                protein=1.8,
                fat=0.2,
                carbs=7,
                calories=31,
                serving=150,
                fiber=2.7,
                methods=("Steamed", "Boiled"),
                cooking_time=6,
            ),
            make_item(
                "spinach",
                "vegetable",
                protein=2.9,
                fat=0.4,
                carbs=3.6,
                calories=23,
                serving=100,
                fiber=2.2,
                methods=("Steamed", "Sautéed", "Raw"),
                cooking_time=3,
            ),
        ),
    )


def first_method(methods: Sequence[str]) -> str:
    """Deterministic cooking method chooser."""
    return methods[0]


@dataclass
class RecordingChooser:
    """Method chooser that records every call."""

    calls: list[tuple[str, ...]] = field(default_factory=list)

    def __call__(self, methods: Sequence[str]) -> str:
        self.calls.append(tuple(methods))
        return methods[-1]


@dataclass
class StaticCatalogSource(CatalogSource):
    """Catalog source returning a fixed catalog."""

    catalog: FoodCatalog

    def load(self) -> FoodCatalog:
        return self.catalog


@pytest.fixture
def catalog() -> FoodCatalog:
    return sample_catalog()


@pytest.fixture
def targets() -> MacroTargets:
    return MacroTargets(daily_protein=150, daily_carbs=200, daily_fats=60)


@pytest.fixture
def any_preferences() -> CookingPreferences:
    return CookingPreferences()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def container(settings: Settings, catalog: FoodCatalog) -> AppContainer:
    return build_container(settings, StaticCatalogSource(catalog))
