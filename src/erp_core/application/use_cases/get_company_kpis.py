from __future__ import annotations

import logging
from typing import Any

from erp_core.application.ports.cache_port import CachePort
from erp_core.application.ports.kpi_source_port import KpiSourcePort
from erp_core.domain.value_objects.cache_tiers import CACHE_TTL

logger = logging.getLogger(__name__)


def kpis_key(company_id: int) -> str:
    return f"pedidos-kpis-{company_id}"


class GetCompanyKpisUseCase:
    """Serves dashboard KPIs from the cache, computing them on a miss.

    Writes that change the underlying data call :meth:`invalidate` so the next
    read recomputes.
    """

    def __init__(
        self,
        source: KpiSourcePort,
        cache: CachePort,
        *,
        ttl_ms: int = CACHE_TTL.SHORT,
    ) -> None:
        self.source = source
        self.cache = cache
        self.ttl_ms = ttl_ms

    async def execute(self, company_id: int) -> dict[str, Any]:
        async def fetch() -> dict[str, Any]:
            logger.debug("computing KPIs", extra={"company_id": company_id})
            return await self.source.fetch(company_id)

        return await self.cache.get_or_set(kpis_key(company_id), fetch, self.ttl_ms)

    def invalidate(self, company_id: int) -> None:
        self.cache.invalidate(kpis_key(company_id))
