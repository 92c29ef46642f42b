from erp_core.domain.value_objects.cache_tiers import CACHE_TTL, GC_TIMES, STALE_TIMES

TIER_ORDER = ["TRANSACTIONAL", "DASHBOARD", "COMPUTED", "CATALOG", "CONFIG"]


def test_ttl_values():
    assert CACHE_TTL.SHORT == 30_000
    assert CACHE_TTL.MEDIUM == 60_000
    assert CACHE_TTL.LONG == 300_000
    assert CACHE_TTL.VERY_LONG == 600_000


def test_stale_and_gc_values():
    assert list(STALE_TIMES) == [15_000, 30_000, 120_000, 300_000, 600_000]
    assert list(GC_TIMES) == [300_000, 600_000, 900_000, 1_800_000, 3_600_000]


def test_tiers_are_in_volatility_order():
    assert [name for name, _ in STALE_TIMES.items()] == TIER_ORDER
    assert [name for name, _ in GC_TIMES.items()] == TIER_ORDER
    stale, gc = list(STALE_TIMES), list(GC_TIMES)
    assert all(a < b for a, b in zip(stale, stale[1:]))
    assert all(a < b for a, b in zip(gc, gc[1:]))


def test_gc_time_exceeds_stale_time_per_tier():
    for name in TIER_ORDER:
        assert getattr(GC_TIMES, name) > getattr(STALE_TIMES, name)
