"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from quickchef.adapters.openai_generation_client import OpenAIGenerationClient
from quickchef.config import Settings
from quickchef.services.cache import InMemoryCache, PlanCache
from quickchef.services.generation import MealGenerationService
from quickchef.services.planner import PlanCoordinator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    generation_service: MealGenerationService
    plan_coordinator: PlanCoordinator
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIGenerationClient.create(resolved_settings.openai_api_key)
    generation_service = MealGenerationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    plan_cache = PlanCache(
        cache=InMemoryCache(max_entries=resolved_settings.plan_cache_max_entries),
        ttl_seconds=resolved_settings.plan_cache_ttl_seconds,
    )
    plan_coordinator = PlanCoordinator(
        generator=generation_service,
        cache=plan_cache,
        cook_start_hour=resolved_settings.cook_start_hour,
        timeout_seconds=resolved_settings.generation_timeout_seconds,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        generation_service=generation_service,
        plan_coordinator=plan_coordinator,
        close_resources=close_resources,
    )
