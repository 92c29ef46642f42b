from fastapi import APIRouter

from erp_core.application.use_cases.get_company_kpis import kpis_key
from erp_core.infrastructure.cache import comprobantes_cache, ordenes_pago_cache
from erp_core.infrastructure.cache.server_cache import get_registry, server_cache

router = APIRouter(prefix="/v1/cache", tags=["cache"])


@router.get("/stats")
def cache_stats() -> dict[str, dict[str, int]]:  # type: ignore[misc]
    return {"caches": get_registry().snapshot()}


@router.delete("/companies/{company_id}")
def invalidate_company(company_id: int) -> dict[str, int | str]:  # type: ignore[misc]
    # Same entry points the purchasing routes call after POST/PUT/DELETE
    ordenes_pago_cache.invalidate_cache(company_id)
    comprobantes_cache.invalidate_cache(company_id)
    server_cache.invalidate(kpis_key(company_id))
    return {"status": "invalidated", "company_id": company_id}
