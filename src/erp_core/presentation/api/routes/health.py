from fastapi import APIRouter

from erp_core.infrastructure.cache.server_cache import get_registry

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str | int]:  # type: ignore[misc]
    return {"status": "ok", "caches": len(get_registry().names())}
