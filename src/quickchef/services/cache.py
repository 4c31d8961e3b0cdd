"""Simple cache abstractions."""

from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from quickchef.domain.plans import MealPlan
from quickchef.domain.requests import CookingRequest
from quickchef.services.identity import request_identity

PLAN_TTL_SECONDS = 30 * 60


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""

    def clear(self) -> None:
        """Remove every cached value."""

    def __len__(self) -> int:
        """Return the number of stored entries, expired or not."""


@dataclass
class _CacheEntry:
    value: object
    created_at: datetime
    ttl: timedelta


class InMemoryCache(Cache):
    """In-memory TTL cache with least-recently-used eviction."""

    def __init__(
        self,
        max_entries: int | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._entries: OrderedDict[str, _CacheEntry] = OrderedDict()
        self._max_entries = max_entries
        self._clock = clock

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.created_at > entry.ttl:
            self._entries.pop(key, None)
            return None
        self._entries.move_to_end(key)
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL, evicting the oldest entry if full."""
        self._entries[key] = _CacheEntry(
            value=value,
            created_at=self._clock(),
            ttl=timedelta(seconds=ttl_seconds),
        )
        self._entries.move_to_end(key)
        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        """Remove every cached value."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class PlanCache:
    """Meal plan cache keyed by request identity."""

    cache: Cache
    ttl_seconds: int = PLAN_TTL_SECONDS

    def get(self, request: CookingRequest) -> MealPlan | None:
        """Return the cached plan for an equivalent request, if still fresh."""
        cached = self.cache.get(request_identity(request))
        if isinstance(cached, MealPlan):
            return cached
        return None

    def set(self, request: CookingRequest, plan: MealPlan) -> None:
        """Store a plan, replacing any prior entry for the same identity."""
        self.cache.set(request_identity(request), plan, ttl_seconds=self.ttl_seconds)

    def clear(self) -> None:
        """Drop every cached plan."""
        self.cache.clear()

    def __len__(self) -> int:
        return len(self.cache)
