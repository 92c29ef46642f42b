from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

V = TypeVar("V")


class CachePort(Protocol):
    """Key/value cache with per-entry TTL (milliseconds).

    ``get`` uses ``None`` as the miss sentinel: a cached ``None`` cannot be
    told apart from a miss. ``0``, ``False`` and ``""`` are ordinary hits.
    """

    @property
    def size(self) -> int: ...
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any, ttl_ms: int = ...) -> None: ...
    def has(self, key: str) -> bool: ...
    async def get_or_set(
        self, key: str, fetcher: Callable[[], Awaitable[V]], ttl_ms: int = ...
    ) -> V: ...
    def invalidate(self, key: str) -> None: ...
    def invalidate_pattern(self, prefix: str) -> None: ...
    def clear(self) -> None: ...
