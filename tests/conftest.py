"""Shared test fixtures."""

import asyncio
import json
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from quickchef.config import Settings
from quickchef.containers import AppContainer
from quickchef.domain.requests import CookingRequest, IngredientInput
from quickchef.services.cache import InMemoryCache, PlanCache
from quickchef.services.generation import GenerationClient, MealGenerationService
from quickchef.services.planner import PlanCoordinator


def meal_payload(meal_id: str = "meal-1", name: str = "Veggie Poha") -> dict:
    return {
        "id": meal_id,
        "name": name,
        "description": "Flattened rice with peas and peanuts.",
        "cooking_method": "Stovetop",
        "equipment_alternatives": None,
        "prep_time_minutes": 10,
        "cooking_time_minutes": 15,
        "todo_list": ["Rinse poha", "Chop onion"],
        "step_by_step_recipe": [
            "Rinse poha",
            "Heat oil",
            "Add mustard seeds",
            "Add onion",
            "Add poha",
            "Garnish",
        ],
        "prep_checklist": {
            "washing": ["poha"],
            "chopping": ["onion"],
            "marinating": [],
        },
        "cooking_sequence": ["Temper", "Saute", "Steam"],
        "used_ingredients": ["poha 1 cup", "onion 1", "peas 1/2 cup"],
        "nutrition": {"calories_range": "300-350", "protein_range": "8-10g"},
        "leftover_strategy": None,
        "swap_options": ["Use upma instead"],
    }


def plan_payload(days: int = 1) -> dict:
    return {
        "days": [
            {
                "day": day,
                "meals": {
                    "breakfast": meal_payload(f"d{day}-b", "Veggie Poha"),
                    "lunch": meal_payload(f"d{day}-l", "Dal Rice"),
                    "dinner": meal_payload(f"d{day}-d", "Paneer Bhurji"),
                },
            }
            for day in range(1, days + 1)
        ],
        "grocery_list": [
            {
                "ingredient": "paneer",
                "needed": True,
                "used_in_meals": 1,
                "category": "dairy",
            }
        ],
        "schedule": [
            {
                "id": "task-cook",
                "type": "cook",
                "day": 1,
                "time_block": "Evening",
                "description": "Cook dinner",
                "duration_minutes": 40,
            },
            {
                "id": "task-shop",
                "type": "shop",
                "day": 1,
                "time_block": "Day 1 @ 10:00",
                "description": "Buy paneer",
                "duration_minutes": 30,
            },
            {
                "id": "task-prep",
                "type": "prep",
                "day": 1,
                "time_block": "Day 1 @ 16:00",
                "description": "Chop vegetables",
                "duration_minutes": 20,
            },
        ],
        "substitutions": [],
        "budget_summary": {
            "level": "medium",
            "verdict": "feasible",
            "strategy": ["Reuse onions across meals"],
        },
        "nutrition_summary": {
            "per_day": [
                {"day": 1, "calories_range": "1800-2000", "protein_range": "60-70g"}
            ]
        },
    }


def make_request(
    ingredients: tuple[str, ...] = ("a", "b", "c"), **overrides: object
) -> CookingRequest:
    return CookingRequest(
        ingredients=tuple(IngredientInput(name=name) for name in ingredients),
        **overrides,
    )


@dataclass
class FakeGenerationClient(GenerationClient):
    """Fake generation client replaying scripted outcomes.

    Each call pops the next outcome; exceptions are raised, anything else is
    returned. When the script is exhausted ``default`` is returned. An
    optional gate holds every call until it is set.
    """

    outcomes: list[object] = field(default_factory=list)
    default: str = field(default_factory=lambda: json.dumps(plan_payload()))
    gate: asyncio.Event | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

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
        self.calls.append(
            {
                "model": model,
                "instructions": instructions,
                "prompt": prompt,
                "schema_name": schema_name,
                "schema": schema,
            }
        )
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0) if self.outcomes else self.default
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def build_coordinator(
    client: FakeGenerationClient,
    clock: FakeClock | None = None,
    timeout_seconds: float | None = 5.0,
) -> PlanCoordinator:
    service = MealGenerationService(
        client=client, model="gpt-5.2", reasoning_effort="low", store=False
    )
    cache = InMemoryCache(max_entries=16, clock=clock or FakeClock())
    return PlanCoordinator(
        generator=service,
        cache=PlanCache(cache),
        timeout_seconds=timeout_seconds,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        admin_token="admin-token",
    )


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def container(
    settings: Settings, generation_client: FakeGenerationClient
) -> AppContainer:
    coordinator = build_coordinator(generation_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        generation_service=coordinator.generator,
        plan_coordinator=coordinator,
        close_resources=close_resources,
    )
