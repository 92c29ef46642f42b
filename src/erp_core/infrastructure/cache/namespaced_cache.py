from __future__ import annotations

from collections.abc import Callable
from typing import Any

from erp_core.application.ports.cache_port import CachePort
from erp_core.domain.value_objects.cache_tiers import CACHE_TTL
from erp_core.infrastructure.cache.server_cache import server_cache


class NamespacedCache:
    """Prefixes every key before delegating to a shared cache.

    ``company_scope`` turns a company id into the start of that company's
    keys (after the namespace prefix), so invalidating one company never
    touches another.
    """

    def __init__(
        self,
        prefix: str,
        company_scope: Callable[[int], str],
        cache: CachePort | None = None,
        *,
        default_ttl_ms: int = CACHE_TTL.MEDIUM,
    ) -> None:
        self.prefix = prefix
        self.company_scope = company_scope
        self.cache: CachePort = cache if cache is not None else server_cache
        self.default_ttl_ms = default_ttl_ms

    def storage_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get_cache(self, key: str) -> Any | None:
        return self.cache.get(self.storage_key(key))

    def set_cache(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        self.cache.set(self.storage_key(key), value, self.default_ttl_ms if ttl_ms is None else ttl_ms)

    def invalidate_cache(self, company_id: int) -> None:
        self.cache.invalidate_pattern(self.storage_key(self.company_scope(company_id)))
