"""Plan generation coordinator with caching and request deduplication."""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TypeVar

from quickchef.domain.errors import GenerationError, ValidationError
from quickchef.domain.plans import Meal, MealPlan, SwapRequest
from quickchef.domain.requests import CookingRequest
from quickchef.services.cache import PlanCache
from quickchef.services.generation import MealGenerationService
from quickchef.services.identity import request_identity
from quickchef.services.prompts import REPLACE_CRITERIA_DEFAULT
from quickchef.services.scheduler import DEFAULT_COOK_START_HOUR, refine_schedule
from quickchef.services.validation import validate_request

_logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass
class PlanCoordinator:
    """Obtains plans, sharing one generation among concurrent equivalent requests.

    The coordinator owns its in-flight map and is meant to live for the whole
    process, shared by every caller. All access happens on one event loop, so
    the lookup and insert in ``obtain_plan`` cannot interleave with another
    caller.
    """

    generator: MealGenerationService
    cache: PlanCache
    cook_start_hour: int = DEFAULT_COOK_START_HOUR
    timeout_seconds: float | None = 120.0
    _in_flight: dict[str, "asyncio.Task[MealPlan]"] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def in_flight_count(self) -> int:
        """Number of generations currently running."""
        return len(self._in_flight)

    def clear_cache(self) -> None:
        """Drop all cached plans; running generations are unaffected."""
        self.cache.clear()

    async def obtain_plan(self, request: CookingRequest) -> MealPlan:
        """Return a refined plan from cache, a running generation, or a new one.

        Raises ValidationError before any external call for unusable requests
        and GenerationError when the generation fails. Every caller joined onto
        the same generation observes the same plan or the same error.
        """
        errors = validate_request(request)
        if errors:
            raise ValidationError(errors)

        cached = self.cache.get(request)
        if cached is not None:
            _logger.info("Plan cache hit")
            return cached

        key = request_identity(request)
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.create_task(self._generate_and_store(key, request))
            task.add_done_callback(_mark_retrieved)
            self._in_flight[key] = task
        else:
            _logger.info("Joining in-flight plan generation")
        # A cancelled caller must not cancel the generation other callers share.
        return await asyncio.shield(task)

    async def replace_meal(
        self,
        meal: Meal,
        request: CookingRequest,
        criteria: str = REPLACE_CRITERIA_DEFAULT,
    ) -> Meal:
        """Generate a different meal in place of ``meal``."""
        return await self._bounded(
            self.generator.replace_meal(meal, criteria, request),
            action="replace_meal",
        )

    async def swap_ingredients(
        self, meal: Meal, swaps: list[SwapRequest], request: CookingRequest
    ) -> Meal:
        """Regenerate ``meal`` with the requested ingredient swaps."""
        if not swaps:
            raise ValidationError(["Select at least one ingredient to swap."])
        return await self._bounded(
            self.generator.swap_ingredients(meal, swaps, request),
            action="swap_ingredients",
        )

    async def _generate_and_store(self, key: str, request: CookingRequest) -> MealPlan:
        _logger.info(
            "Plan generation started: days=%s ingredients=%s",
            request.days,
            len(request.ingredients),
        )
        try:
            plan = await self._bounded(
                self.generator.generate_plan(request), action="generate_plan"
            )
            plan = plan.model_copy(
                update={
                    "schedule": refine_schedule(plan.schedule, self.cook_start_hour)
                }
            )
            self.cache.set(request, plan)
            _logger.info("Plan generation finished: days=%s", len(plan.days))
            return plan
        finally:
            self._in_flight.pop(key, None)

    async def _bounded(self, call: Awaitable[_T], *, action: str) -> _T:
        """Await an external call under the timeout, normalizing failures."""
        try:
            return await asyncio.wait_for(call, timeout=self.timeout_seconds)
        except GenerationError as exc:
            _logger.warning("Generation %s failed: %s", action, exc)
            raise
        except TimeoutError as exc:
            _logger.warning(
                "Generation %s timed out after %ss", action, self.timeout_seconds
            )
            raise GenerationError(f"Generation {action} timed out") from exc
        except Exception as exc:
            _logger.exception("Generation %s failed", action)
            raise GenerationError(f"Could not complete {action}") from exc


def _mark_retrieved(task: "asyncio.Task[MealPlan]") -> None:
    """Retrieve the outcome so an unawaited failure is not reported as lost."""
    if not task.cancelled():
        task.exception()
