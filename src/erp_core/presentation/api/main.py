from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from erp_core.infrastructure.metrics import registry
from erp_core.logging_config import configure_logging
from erp_core.presentation.api.routes.cache import router as cache_router
from erp_core.presentation.api.routes.cuit import router as cuit_router
from erp_core.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="ERP Core", version="0.1.0")
app.include_router(health_router)
app.include_router(cuit_router)
app.include_router(cache_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
