"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from quickchef.api.admin import router as admin_router
from quickchef.api.models import (
    CalendarBody,
    MealTarget,
    ReplaceMealBody,
    RescheduleBody,
    RescheduleResult,
    SwapIngredientsBody,
)
from quickchef.app_logging import configure_logging
from quickchef.containers import AppContainer
from quickchef.domain.errors import GenerationError, ValidationError
from quickchef.domain.plans import Meal, MealPlan
from quickchef.domain.requests import CookingRequest
from quickchef.services.calendar import export_ics
from quickchef.services.scheduler import is_late_night, reschedule_task


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"errors": exc.errors},
        )

    @app.exception_handler(GenerationError)
    async def handle_generation_error(
        request: Request, exc: GenerationError
    ) -> JSONResponse:
        logger.warning("Generation failed for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Error generating plan. Please try again."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/plans")
    async def create_plan(body: CookingRequest, request: Request) -> MealPlan:
        """Return a plan for the request, generating it when not cached."""
        state_container: AppContainer = request.app.state.container
        return await state_container.plan_coordinator.obtain_plan(body)

    @app.post("/plans/meals/replace")
    async def replace_meal(body: ReplaceMealBody, request: Request) -> MealPlan:
        """Replace one meal and return the updated plan."""
        state_container: AppContainer = request.app.state.container
        meal = _target_meal(body)
        replacement = await state_container.plan_coordinator.replace_meal(
            meal, body.request, criteria=body.criteria
        )
        return body.plan.with_meal(body.day_index, body.slot, replacement)

    @app.post("/plans/meals/swap")
    async def swap_ingredients(
        body: SwapIngredientsBody, request: Request
    ) -> MealPlan:
        """Swap ingredients in one meal and return the updated plan."""
        state_container: AppContainer = request.app.state.container
        meal = _target_meal(body)
        swapped = await state_container.plan_coordinator.swap_ingredients(
            meal, body.swaps, body.request
        )
        return body.plan.with_meal(body.day_index, body.slot, swapped)

    @app.post("/plans/schedule/reschedule")
    async def reschedule(body: RescheduleBody) -> RescheduleResult:
        """Move one schedule task and return the re-sorted plan."""
        try:
            schedule = reschedule_task(
                body.plan.schedule, body.task_id, body.day, body.time_block
            )
        except KeyError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown task"
            ) from exc
        return RescheduleResult(
            plan=body.plan.model_copy(update={"schedule": schedule}),
            late_night=is_late_night(body.time_block),
        )

    @app.post("/plans/calendar")
    async def export_calendar(body: CalendarBody) -> Response:
        """Export the plan schedule as an iCalendar file."""
        return Response(
            content=export_ics(body.plan, body.start),
            media_type="text/calendar",
            headers={"Content-Disposition": 'attachment; filename="quickchef.ics"'},
        )

    return app


def _target_meal(body: MealTarget) -> Meal:
    """Return the meal a mutation body points at, or respond 404."""
    if body.day_index >= len(body.plan.days):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown day")
    return body.plan.days[body.day_index].meals.get(body.slot)
