"""Tests for cache implementations."""

from quickchef.domain.plans import MealPlan
from quickchef.services.cache import InMemoryCache, PlanCache
from tests.conftest import FakeClock, make_request, plan_payload


def test_in_memory_cache_expires_entries() -> None:
    clock = FakeClock()
    cache = InMemoryCache(clock=clock)
    cache.set("key", "value", ttl_seconds=60)

    clock.advance(seconds=60)
    assert cache.get("key") == "value"

    clock.advance(seconds=1)
    assert cache.get("key") is None
    assert len(cache) == 0


def test_in_memory_cache_evicts_least_recently_used() -> None:
    cache = InMemoryCache(max_entries=2, clock=FakeClock())
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)
    assert cache.get("a") == 1

    cache.set("c", 3, ttl_seconds=60)

    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_in_memory_cache_clear() -> None:
    cache = InMemoryCache()
    cache.set("a", 1, ttl_seconds=60)

    cache.clear()

    assert cache.get("a") is None
    assert len(cache) == 0


def test_plan_cache_returns_plan_within_ttl() -> None:
    clock = FakeClock()
    cache = PlanCache(InMemoryCache(clock=clock))
    plan = MealPlan.model_validate(plan_payload())
    cache.set(make_request(("a", "b", "c")), plan)

    clock.advance(minutes=29)

    assert cache.get(make_request(("c", "b", "a"))) is plan


def test_plan_cache_evicts_after_ttl() -> None:
    clock = FakeClock()
    cache = PlanCache(InMemoryCache(clock=clock))
    request = make_request()
    cache.set(request, MealPlan.model_validate(plan_payload()))

    clock.advance(minutes=30, seconds=1)

    assert cache.get(request) is None
    assert len(cache) == 0


def test_plan_cache_set_overwrites_and_clear_empties() -> None:
    cache = PlanCache(InMemoryCache(clock=FakeClock()))
    request = make_request()
    first = MealPlan.model_validate(plan_payload())
    second = MealPlan.model_validate(plan_payload(days=2))

    cache.set(request, first)
    cache.set(request, second)

    assert cache.get(request) is second
    assert len(cache) == 1

    cache.clear()
    assert cache.get(request) is None
