"""Tests for plan export documents."""

from datetime import UTC, datetime

from meal_planner.domain.catalog import FoodCatalog
from meal_planner.domain.nutrition import MacroTargets
from meal_planner.domain.preferences import CookingPreferences
from meal_planner.domain.plans import MealPlan
from meal_planner.services.export import (
    PlanDocument,
    build_plan_document,
    export_plan_json,
    parse_plan_json,
    render_print_html,
)
from meal_planner.services.planner import generate_meal_plan
from meal_planner.services.shopping import generate_shopping_list
from tests.conftest import first_method, make_item


def _document(
    catalog: FoodCatalog, targets: MacroTargets, preferences: CookingPreferences
) -> tuple[MealPlan, PlanDocument]:
    plan = generate_meal_plan(catalog, targets, preferences, first_method)
    shopping_list = generate_shopping_list(plan)
    return plan, build_plan_document(
        plan, targets, shopping_list, exported_at=datetime(2024, 5, 1, tzinfo=UTC)
    )


def test_document_snapshots_plan(
    catalog: FoodCatalog,
    targets: MacroTargets,
    any_preferences: CookingPreferences,
) -> None:
    plan, document = _document(catalog, targets, any_preferences)

    assert document.macro_targets.daily_calories == 1940
    assert len(document.days) == 3
    assert len(document.meals) == 6
    first = document.meals[0]
    assert first.label == plan.meals[0].label
    assert first.macros.calories == plan.meals[0].macros.calories
    assert first.total_cooking_time == plan.meals[0].total_cooking_time
    assert first.protein.macros.protein == plan.meals[0].protein.macros.protein


def test_json_round_trip_is_lossless(
    catalog: FoodCatalog,
    targets: MacroTargets,
    any_preferences: CookingPreferences,
) -> None:
    plan, document = _document(catalog, targets, any_preferences)

    parsed = parse_plan_json(export_plan_json(document))

    assert parsed.model_dump() == document.model_dump()
    for original, restored in zip(plan.meals, parsed.meals, strict=True):
        assert restored.macros.protein == original.macros.protein
        assert restored.macros.carbs == original.macros.carbs
        assert restored.macros.fats == original.macros.fats
        assert restored.macros.calories == original.macros.calories
    assert {item.id: item.total for item in parsed.shopping_list} == {
        item.id: item.total for item in generate_shopping_list(plan)
    }


def test_print_html_lists_meals_and_shopping(
    catalog: FoodCatalog,
    targets: MacroTargets,
    any_preferences: CookingPreferences,
) -> None:
    _, document = _document(catalog, targets, any_preferences)

    html = render_print_html(document)

    assert html.startswith("<!doctype html>")
    assert "Day 3 - Dinner" in html
    assert "150g protein, 200g carbs, 60g fats (1940 kcal)" in html
    assert "<h2>Shopping List</h2>" in html
    assert "Total Cooking Time:" in html


def test_print_html_escapes_text(
    targets: MacroTargets, any_preferences: CookingPreferences
) -> None:
    catalog = FoodCatalog(
        proteins=(
            make_item(
                "mystery",
                "protein",
                protein=20,
                fat=5,
                carbs=1,
                calories=130,
                name="Fish & <Chips>",
                recipe_steps=("Heat oil to >180C",),
            ),
        ),
        carbs=(make_item("rice", "carb", protein=3, fat=1, carbs=25, calories=120),),
        vegetables=(
            make_item("kale", "vegetable", protein=4, fat=1, carbs=9, calories=49),
        ),
    )
    _, document = _document(catalog, targets, any_preferences)

    html = render_print_html(document)

    assert "Fish &amp; &lt;Chips&gt;" in html
    assert "<li>Heat oil to &gt;180C</li>" in html
    assert "<Chips>" not in html
