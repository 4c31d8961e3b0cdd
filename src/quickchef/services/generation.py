"""Structured plan and meal generation using LLMs."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar
from uuid import uuid4

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quickchef.domain.errors import EmptyResponseError, SchemaMismatchError
from quickchef.domain.plans import Meal, MealPlan, SwapRequest
from quickchef.domain.requests import CookingRequest
from quickchef.services.prompts import (
    build_plan_prompt,
    build_replace_prompt,
    build_swap_prompt,
    build_system_instruction,
)
from quickchef.services.schema import MEAL_SCHEMA, PLAN_SCHEMA, to_json_schema

_logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class GenerationClient(Protocol):
    """Interface for schema-constrained text generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str | None,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> str | None:
        """Return the raw text payload, or None when the model returned nothing."""


@dataclass
class MealGenerationService:
    """Service that prepares prompts and validates structured results."""

    client: GenerationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def generate_plan(self, request: CookingRequest) -> MealPlan:
        """Generate a raw, unrefined plan for a request."""
        text = await self._call(
            instructions=build_system_instruction(request),
            prompt=build_plan_prompt(request),
            schema_name="meal_plan",
            schema=to_json_schema(PLAN_SCHEMA),
        )
        return _parse(text, MealPlan)

    async def replace_meal(
        self, meal: Meal, criteria: str, request: CookingRequest
    ) -> Meal:
        """Generate a different meal; the result always carries a new id."""
        text = await self._call(
            instructions=build_system_instruction(request),
            prompt=build_replace_prompt(meal, criteria, request),
            schema_name="meal",
            schema=to_json_schema(MEAL_SCHEMA),
        )
        replacement = _parse(text, Meal)
        if not replacement.id or replacement.id == meal.id:
            replacement = replacement.model_copy(update={"id": uuid4().hex})
        return replacement

    async def swap_ingredients(
        self, meal: Meal, swaps: list[SwapRequest], request: CookingRequest
    ) -> Meal:
        """Regenerate a meal with ingredients swapped; the id is preserved."""
        text = await self._call(
            instructions=build_system_instruction(request),
            prompt=build_swap_prompt(meal, swaps, request),
            schema_name="meal",
            schema=to_json_schema(MEAL_SCHEMA),
        )
        swapped = _parse(text, Meal)
        if swapped.id != meal.id:
            swapped = swapped.model_copy(update={"id": meal.id})
        return swapped

    async def _call(
        self,
        *,
        instructions: str,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> str | None:
        return await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            instructions=instructions,
            prompt=prompt,
            schema_name=schema_name,
            schema=schema,
        )


def _parse(text: str | None, model_type: type[_ModelT]) -> _ModelT:
    """Parse a JSON payload into a model, mapping failures to planner errors."""
    if text is None or not text.strip():
        raise EmptyResponseError("Generation returned an empty response")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        _logger.warning("Generation returned invalid JSON: %s", exc)
        raise SchemaMismatchError("Generation returned invalid JSON") from exc
    try:
        return model_type.model_validate(payload)
    except PydanticValidationError as exc:
        _logger.warning(
            "Generation payload does not match %s: %s errors",
            model_type.__name__,
            exc.error_count(),
        )
        raise SchemaMismatchError(
            f"Generation payload does not match {model_type.__name__}"
        ) from exc
