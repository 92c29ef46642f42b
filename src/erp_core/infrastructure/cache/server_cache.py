"""In-process TTL cache with bounded capacity and prefix invalidation.

Meant for short-lived, read-heavy aggregates (dashboard KPIs, paginated
listings) on a single process. It is not shared across processes and offers
no atomicity across calls: ``has`` followed by ``get`` may disagree if the
entry expires in between.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from itertools import islice
from typing import Any, Protocol, TypeVar

from erp_core.config import settings
from erp_core.domain.value_objects.cache_tiers import CACHE_TTL
from erp_core.infrastructure.metrics import CACHE_EVICTIONS, CACHE_REQUESTS

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Clock(Protocol):
    def now(self) -> float: ...


class SystemClock:
    """Monotonic clock in milliseconds."""

    def now(self) -> float:
        return time.monotonic() * 1000


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class ServerCache:
    """Key/value store where every entry carries its own expiry.

    ``None`` is the miss sentinel of :meth:`get`. Caching an actual ``None``
    is therefore indistinguishable from a miss, and :meth:`get_or_set` will
    call the fetcher again for such a key. Other falsy values (``0``,
    ``False``, ``""``) are returned as-is.
    """

    def __init__(
        self,
        max_size: int | None = None,
        *,
        name: str = "default",
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self.max_size = settings.cache_max_size if max_size is None else max_size
        if self.max_size < 1:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        self.clock = clock or SystemClock()
        # dict order doubles as write order for eviction
        self._store: dict[str, CacheEntry] = {}

    @property
    def size(self) -> int:
        """Entry count, including expired entries not yet removed."""
        return len(self._store)

    def keys(self) -> list[str]:
        return list(self._store)

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            CACHE_REQUESTS.labels(self.name, "miss").inc()
            return None
        if self.clock.now() >= entry.expires_at:
            del self._store[key]
            CACHE_REQUESTS.labels(self.name, "expired").inc()
            return None
        CACHE_REQUESTS.labels(self.name, "hit").inc()
        return entry.value

    def set(self, key: str, value: Any, ttl_ms: int = CACHE_TTL.MEDIUM) -> None:
        if len(self._store) >= self.max_size:
            self._evict()
        # re-inserting moves the key to the newest position
        self._store.pop(key, None)
        self._store[key] = CacheEntry(value, self.clock.now() + ttl_ms)

    def has(self, key: str) -> bool:
        entry = self._store.get(key)
        return entry is not None and self.clock.now() < entry.expires_at

    async def get_or_set(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[V]],
        ttl_ms: int = CACHE_TTL.MEDIUM,
    ) -> V:
        """Return the cached value or await ``fetcher`` once and cache its result.

        Exceptions raised by ``fetcher`` propagate and nothing is stored.
        There is no single-flight protection: concurrent callers missing the
        same key while the fetcher is suspended will each run it.
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        value = await fetcher()
        self.set(key, value, ttl_ms)
        return value

    def invalidate(self, key: str) -> None:
        if self._store.pop(key, None) is not None:
            logger.debug("invalidated key", extra={"cache": self.name, "key": key})

    def invalidate_pattern(self, prefix: str) -> None:
        """Drop every key starting with ``prefix`` (plain prefix, no globbing)."""
        matching = [k for k in self._store if k.startswith(prefix)]
        for k in matching:
            del self._store[k]
        if matching:
            logger.debug(
                "invalidated %d keys",
                len(matching),
                extra={"cache": self.name, "prefix": prefix, "removed": len(matching)},
            )

    def clear(self) -> None:
        self._store.clear()

    def _evict(self) -> None:
        now = self.clock.now()
        expired = [k for k, e in self._store.items() if now >= e.expires_at]
        for k in expired:
            del self._store[k]
        if expired:
            CACHE_EVICTIONS.labels(self.name, "expired").inc(len(expired))

        if len(self._store) < self.max_size:
            return

        # drop a quarter at once so a full cache does not evict on every set
        oldest = list(islice(self._store, max(1, self.max_size // 4)))
        for k in oldest:
            del self._store[k]
        CACHE_EVICTIONS.labels(self.name, "oldest").inc(len(oldest))
        logger.debug(
            "evicted %d oldest entries",
            len(oldest),
            extra={"cache": self.name, "removed": len(oldest)},
        )


class CacheRegistry:
    """Lazily created, named :class:`ServerCache` instances.

    The first call for a name fixes its capacity; later ``max_size``
    arguments for the same name are ignored.
    """

    def __init__(self, default_max_size: int | None = None, clock: Clock | None = None) -> None:
        self._default_max_size = default_max_size
        self._clock = clock
        self._caches: dict[str, ServerCache] = {}

    def get(self, name: str, max_size: int | None = None) -> ServerCache:
        cache = self._caches.get(name)
        if cache is None:
            size = self._default_max_size if max_size is None else max_size
            cache = ServerCache(size, name=name, clock=self._clock)
            self._caches[name] = cache
            logger.debug("created named cache", extra={"cache": name})
        return cache

    def names(self) -> list[str]:
        return list(self._caches)

    def snapshot(self) -> dict[str, int]:
        return {name: cache.size for name, cache in self._caches.items()}


_registry = CacheRegistry()


def get_registry() -> CacheRegistry:
    return _registry


def get_named_cache(name: str, max_size: int | None = None) -> ServerCache:
    """Process-wide named cache; same name, same instance."""
    return _registry.get(name, max_size)


server_cache = get_named_cache("default")
