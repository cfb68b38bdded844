"""Pydantic models for meal plan requests and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from meal_planner.domain.nutrition import MacroTargets
from meal_planner.domain.preferences import CookingPreferences
from meal_planner.services.export import MacrosDocument, PlanDocument


class MacroTargetsRequest(BaseModel):
    """Daily macro targets in grams."""

    daily_protein: float = Field(ge=0)
    daily_carbs: float = Field(ge=0)
    daily_fats: float = Field(ge=0)

    def to_domain(self) -> MacroTargets:
        return MacroTargets(
            daily_protein=self.daily_protein,
            daily_carbs=self.daily_carbs,
            daily_fats=self.daily_fats,
        )


class PreferencesRequest(BaseModel):
    """Cooking preferences; every field defaults to ``any``."""

    preparation_time: Literal["quick", "moderate", "any"] = "any"
    complexity: Literal["easy", "medium", "complex", "any"] = "any"
    spice_level: Literal["mild", "medium", "spicy", "any"] = "any"

    def to_domain(self) -> CookingPreferences:
        return CookingPreferences(
            preparation_time=self.preparation_time,
            complexity=self.complexity,
            spice_level=self.spice_level,
        )


class GenerateRequest(BaseModel):
    """Meal plan generation payload."""

    macro_targets: MacroTargetsRequest
    preferences: PreferencesRequest = Field(default_factory=PreferencesRequest)


class NutritionSummaryResponse(BaseModel):
    """Daily averages compared against targets."""

    model_config = ConfigDict(from_attributes=True)

    daily_average: MacrosDocument
    daily_calorie_target: int
    calories_pct: float
    protein_pct: float
    carbs_pct: float
    fats_pct: float
    protein_calorie_share: int
    carbs_calorie_share: int
    fats_calorie_share: int


class GenerateResponse(BaseModel):
    """Generated plan with its nutrition summary."""

    plan: PlanDocument
    nutrition: NutritionSummaryResponse


class FoodItemResponse(BaseModel):
    """Catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    serving_grams: float
    methods: list[str]
    cooking_time_minutes: int
    complexity: str
    spice_level: str
    category: str
    allergens: list[str]
    tags: list[str]


class CatalogResponse(BaseModel):
    """Catalog grouped by category."""

    proteins: list[FoodItemResponse]
    carbs: list[FoodItemResponse]
    vegetables: list[FoodItemResponse]
