"""Cache for payment-order listings (``ordenes-pago:ordenes-<company>-...``)."""

from __future__ import annotations

from typing import Any

from erp_core.infrastructure.cache.namespaced_cache import NamespacedCache

PREFIX = "ordenes-pago:"

_cache = NamespacedCache(PREFIX, lambda company_id: f"ordenes-{company_id}-")


def listing_key(company_id: int, page: int) -> str:
    return f"ordenes-{company_id}-page{page}"


def get_cache(key: str) -> Any | None:
    return _cache.get_cache(key)


def set_cache(key: str, value: Any, ttl_ms: int | None = None) -> None:
    _cache.set_cache(key, value, ttl_ms)


def invalidate_cache(company_id: int) -> None:
    _cache.invalidate_cache(company_id)
