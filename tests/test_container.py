"""Tests for container wiring."""

import asyncio

from quickchef.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.plan_coordinator.generator is container.generation_service
    assert container.plan_coordinator.cache.ttl_seconds == 30 * 60
    assert container.plan_coordinator.in_flight_count == 0
    asyncio.run(container.close_resources())
