"""Plan export documents: lossless JSON and print-formatted HTML."""

from collections.abc import Sequence
from datetime import datetime
from html import escape

from pydantic import BaseModel, ConfigDict, Field

from meal_planner.domain.nutrition import MacroTargets
from meal_planner.domain.plans import MealPlan, ShoppingListItem


class _ExportModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class MacrosDocument(_ExportModel):
    """Absolute macros."""

    protein: float
    carbs: float
    fats: float
    calories: float


class NutritionDocument(_ExportModel):
    """Per-100g nutrition snapshot."""

    protein: float
    fat: float
    carbs: float
    calories: float
    fiber: float | None = None
    sugar: float | None = None


class ComponentDocument(_ExportModel):
    """Meal component."""

    id: str
    name: str
    category: str
    serving_grams: float
    method: str
    recipe_steps: list[str] = Field(default_factory=list)
    cooking_time_minutes: int
    complexity: str
    per_100g: NutritionDocument
    macros: MacrosDocument


class MealDocument(_ExportModel):
    """Meal slot."""

    index: int
    label: str
    protein: ComponentDocument
    carb: ComponentDocument
    vegetables: list[ComponentDocument]
    macros: MacrosDocument
    total_cooking_time: int


class DayDocument(_ExportModel):
    """Meals for one day."""

    day: int
    meals: list[MealDocument]
    macros: MacrosDocument


class ShoppingItemDocument(_ExportModel):
    """Shopping list entry."""

    id: str
    name: str
    category: str
    total: float
    unit: str = "g"


class TargetsDocument(_ExportModel):
    """Daily macro targets with derived calories."""

    daily_protein: float
    daily_carbs: float
    daily_fats: float
    daily_calories: int


class PlanDocument(BaseModel):
    """Exportable snapshot of a generated plan."""

    macro_targets: TargetsDocument
    days: list[DayDocument]
    shopping_list: list[ShoppingItemDocument]
    exported_at: datetime | None = None

    @property
    def meals(self) -> list[MealDocument]:
        return [meal for day in self.days for meal in day.meals]


def build_plan_document(
    plan: MealPlan,
    targets: MacroTargets,
    shopping_list: Sequence[ShoppingListItem],
    exported_at: datetime | None = None,
) -> PlanDocument:
    """Snapshot a plan and its shopping list into an export document."""
    return PlanDocument(
        macro_targets=TargetsDocument.model_validate(targets),
        days=[DayDocument.model_validate(day) for day in plan.days],
        shopping_list=[
            ShoppingItemDocument.model_validate(item) for item in shopping_list
        ],
        exported_at=exported_at,
    )


def export_plan_json(document: PlanDocument) -> str:
    """Serialize a plan document to JSON."""
    return document.model_dump_json(indent=2)


def parse_plan_json(payload: str | bytes) -> PlanDocument:
    """Parse a JSON export back into a plan document."""
    return PlanDocument.model_validate_json(payload)


def render_print_html(document: PlanDocument) -> str:
    """Render a print-friendly HTML page for a plan document."""
    targets = document.macro_targets
    meals_html = "".join(_render_meal(meal) for meal in document.meals)
    shopping_html = "".join(
        f"<div><strong>{escape(item.name)}:</strong> "
        f"{round(item.total)}{escape(item.unit)}</div>"
        for item in document.shopping_list
    )
    return _PRINT_HTML.format(
        protein=_fmt(targets.daily_protein),
        carbs=_fmt(targets.daily_carbs),
        fats=_fmt(targets.daily_fats),
        calories=targets.daily_calories,
        meals=meals_html,
        shopping=shopping_html,
    )


def _render_meal(meal: MealDocument) -> str:
    vegetables = "".join(
        f"<li>{_render_component(veg)}</li>" for veg in meal.vegetables
    )
    macros = meal.macros
    return (
        '<div class="meal">'
        f"<h3>{escape(meal.label)}</h3>"
        f'<div class="item"><strong>Protein:</strong> '
        f"{_render_component(meal.protein)}</div>"
        f'<div class="item"><strong>Carbs:</strong> '
        f"{_render_component(meal.carb)}</div>"
        f'<div class="item"><strong>Vegetables:</strong><ul>{vegetables}</ul></div>'
        '<div class="macros">'
        f"<div><strong>Calories:</strong> {round(macros.calories)} kcal</div>"
        f"<div><strong>Protein:</strong> {round(macros.protein)}g</div>"
        f"<div><strong>Carbs:</strong> {round(macros.carbs)}g</div>"
        f"<div><strong>Fats:</strong> {round(macros.fats)}g</div>"
        "</div>"
        f"<div><strong>Total Cooking Time:</strong> "
        f"{meal.total_cooking_time} minutes</div>"
        "</div>"
    )


def _render_component(component: ComponentDocument) -> str:
    text = (
        f"{escape(component.method)} {escape(component.name)} "
        f"({_fmt(component.serving_grams)}g)"
    )
    if not component.recipe_steps:
        return text
    steps = "".join(f"<li>{escape(step)}</li>" for step in component.recipe_steps)
    return f'{text}<div class="recipe"><strong>Recipe:</strong><ol>{steps}</ol></div>'


def _fmt(value: float) -> str:
    return f"{value:g}"


_PRINT_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Meal Plan</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 20px; }}
      h1, h2, h3 {{ color: #333; }}
      .meal {{ margin-bottom: 30px; border-bottom: 1px solid #eee; padding-bottom: 20px; }}
      .item {{ margin-bottom: 10px; }}
      .macros {{ display: grid; grid-template-columns: repeat(4, 1fr); margin-top: 15px; }}
      .shopping-list {{ display: grid; grid-template-columns: repeat(2, 1fr); }}
      .recipe {{ background: #f9f9f9; padding: 10px; margin-top: 10px; border-left: 3px solid #ddd; }}
    </style>
  </head>
  <body>
    <h1>Your Custom Meal Plan</h1>
    <p>Macro Targets: {protein}g protein, {carbs}g carbs, {fats}g fats ({calories} kcal)</p>
    <h2>Meals</h2>
    {meals}
    <h2>Shopping List</h2>
    <div class="shopping-list">{shopping}</div>
  </body>
</html>
"""
