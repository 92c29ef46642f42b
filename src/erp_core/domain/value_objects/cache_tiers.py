"""Cache duration tiers, all in milliseconds.

``CACHE_TTL`` drives the in-process server cache. ``STALE_TIMES`` and
``GC_TIMES`` describe, per data-volatility category, how long a client-side
query result stays fresh and how long an unused one is retained. Categories
go from most to least volatile.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import astuple, dataclass, fields


@dataclass(frozen=True)
class CacheTTL:
    SHORT: int = 30_000
    MEDIUM: int = 60_000
    LONG: int = 300_000
    VERY_LONG: int = 600_000


@dataclass(frozen=True)
class VolatilityTiers:
    TRANSACTIONAL: int
    DASHBOARD: int
    COMPUTED: int
    CATALOG: int
    CONFIG: int

    def __iter__(self) -> Iterator[int]:
        return iter(astuple(self))

    def items(self) -> list[tuple[str, int]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


CACHE_TTL = CacheTTL()

STALE_TIMES = VolatilityTiers(
    TRANSACTIONAL=15_000,
    DASHBOARD=30_000,
    COMPUTED=120_000,
    CATALOG=300_000,
    CONFIG=600_000,
)

GC_TIMES = VolatilityTiers(
    TRANSACTIONAL=300_000,
    DASHBOARD=600_000,
    COMPUTED=900_000,
    CATALOG=1_800_000,
    CONFIG=3_600_000,
)
