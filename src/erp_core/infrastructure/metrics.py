from prometheus_client import CollectorRegistry, Counter

registry = CollectorRegistry()

CACHE_REQUESTS = Counter(
    "erp_cache_requests_total",
    "Cache lookups by cache name and outcome (hit|miss|expired).",
    ["cache", "result"],
    registry=registry,
)

CACHE_EVICTIONS = Counter(
    "erp_cache_evictions_total",
    "Entries removed under capacity pressure (expired|oldest).",
    ["cache", "reason"],
    registry=registry,
)

CUIT_VALIDATIONS = Counter(
    "erp_cuit_validations_total",
    "CUIT validations served by the API, by outcome.",
    ["valid"],
    registry=registry,
)
