"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_planner.adapters.json_catalog import CatalogSource, JsonCatalogSource
from meal_planner.config import Settings
from meal_planner.domain.catalog import FoodCatalog
from meal_planner.services.planner import MealPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    meal_plan_service: MealPlanService


def build_container(
    settings: Settings | None = None, catalog_source: CatalogSource | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    source = catalog_source or JsonCatalogSource(resolved_settings.catalog_path)
    catalog = source.load()
    meal_plan_service = MealPlanService(
        catalog=catalog,
        days=resolved_settings.plan_days,
        meal_names=tuple(resolved_settings.meal_names),
        serving_min_factor=resolved_settings.serving_min_factor,
        serving_max_factor=resolved_settings.serving_max_factor,
        protein_window=resolved_settings.protein_window,
        carb_window=resolved_settings.carb_window,
        vegetable_window=resolved_settings.vegetable_window,
        prep_overhead_minutes=resolved_settings.prep_overhead_minutes,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        meal_plan_service=meal_plan_service,
    )
