"""FastAPI application factory."""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse, Response

from meal_planner.api.plan_models import (
    CatalogResponse,
    FoodItemResponse,
    GenerateRequest,
    GenerateResponse,
    NutritionSummaryResponse,
)
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.errors import MealPlanError
from meal_planner.services.export import (
    PlanDocument,
    build_plan_document,
    export_plan_json,
    render_print_html,
)
from meal_planner.services.nutrition import summarize_plan
from meal_planner.services.shopping import generate_shopping_list


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Planner")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog(request: Request) -> CatalogResponse:
        """Return the food catalog grouped by category."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.catalog
        return CatalogResponse(
            proteins=[FoodItemResponse.model_validate(i) for i in foods.proteins],
            carbs=[FoodItemResponse.model_validate(i) for i in foods.carbs],
            vegetables=[FoodItemResponse.model_validate(i) for i in foods.vegetables],
        )

    @app.post("/meal-plans")
    async def generate_meal_plan(
        payload: GenerateRequest, request: Request
    ) -> GenerateResponse:
        """Generate a meal plan, shopping list and nutrition summary."""
        state_container: AppContainer = request.app.state.container
        targets = payload.macro_targets.to_domain()
        try:
            plan = state_container.meal_plan_service.generate(
                targets, payload.preferences.to_domain()
            )
        except MealPlanError:
            logger.exception("Meal plan generation failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unable to generate a meal plan.",
            ) from None
        shopping_list = generate_shopping_list(plan)
        return GenerateResponse(
            plan=build_plan_document(plan, targets, shopping_list),
            nutrition=NutritionSummaryResponse.model_validate(
                summarize_plan(plan, targets)
            ),
        )

    @app.post("/exports/json")
    async def export_json(document: PlanDocument) -> Response:
        """Return the plan as a downloadable JSON document."""
        if document.exported_at is None:
            document = document.model_copy(
                update={"exported_at": datetime.now(tz=UTC)}
            )
        return Response(
            content=export_plan_json(document),
            media_type="application/json",
            headers={"Content-Disposition": "attachment; filename=meal-plan.json"},
        )

    @app.post("/exports/print", response_class=HTMLResponse)
    async def export_print(document: PlanDocument) -> HTMLResponse:
        """Return a print-formatted HTML page for the plan."""
        return HTMLResponse(render_print_html(document))

    return app
