import pytest
from fastapi.testclient import TestClient

from erp_core.application.use_cases.get_company_kpis import kpis_key
from erp_core.infrastructure.cache import comprobantes_cache, ordenes_pago_cache
from erp_core.infrastructure.cache.server_cache import server_cache
from erp_core.presentation.api.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _clear_shared_cache():
    server_cache.clear()
    yield
    server_cache.clear()


def test_health():
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_validate_valid_cuit():
    res = client.post("/v1/cuit/validate", json={"cuit": "20123456786"})
    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is True
    assert body["formatted"] == "20-12345678-6"
    assert body["details"]["type"] == "CUIL Masculino"
    assert body["details"]["calculated_check_digit"] == 6


def test_validate_invalid_cuit_is_not_an_http_error():
    res = client.post("/v1/cuit/validate", json={"cuit": "20-12345678-0"})
    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is False
    assert "formatted" not in body
    assert body["details"]["check_digit"] == 0


def test_normalize_returns_canonical_form():
    res = client.post("/v1/cuit/normalize", json={"cuit": "30 71234568 9"})
    assert res.status_code == 200
    assert res.json() == {"cuit": "30-71234568-9"}


def test_normalize_rejects_with_tagged_detail():
    res = client.post("/v1/cuit/normalize", json={"cuit": "20-99999999-0"})
    assert res.status_code == 400
    assert res.json()["detail"].startswith("INVALID_CUIT:")


def test_normalize_optional_blank():
    res = client.post("/v1/cuit/normalize", json={"cuit": "", "required": False})
    assert res.status_code == 200
    assert res.json() == {"cuit": None}


def test_generate():
    res = client.get("/v1/cuit/generate", params={"dni": "12345678", "gender": "F"})
    assert res.status_code == 200
    assert res.json() == {"cuit": "27-12345678-0"}
    assert client.get("/v1/cuit/generate", params={"dni": "1", "gender": "X"}).status_code == 422


def test_cache_stats_and_company_invalidation():
    ordenes_pago_cache.set_cache("ordenes-3-page1", "a")
    comprobantes_cache.set_cache("3-page1", "b")
    comprobantes_cache.set_cache("4-page1", "c")
    server_cache.set(kpis_key(3), {"enviadas": 1})

    stats = client.get("/v1/cache/stats").json()["caches"]
    assert stats["default"] == 4

    res = client.delete("/v1/cache/companies/3")
    assert res.status_code == 200
    assert ordenes_pago_cache.get_cache("ordenes-3-page1") is None
    assert comprobantes_cache.get_cache("3-page1") is None
    assert server_cache.get(kpis_key(3)) is None
    assert comprobantes_cache.get_cache("4-page1") == "c"


def test_metrics_exposes_cache_counters():
    client.post("/v1/cuit/validate", json={"cuit": "20123456786"})
    server_cache.get("nothing-here")
    res = client.get("/metrics")
    assert res.status_code == 200
    assert "erp_cache_requests_total" in res.text
    assert "erp_cuit_validations_total" in res.text
