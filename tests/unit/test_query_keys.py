from erp_core.infrastructure.cache.query_keys import matches_prefix, query_keys

COMPANY_ID = 1


def test_admin_keys():
    assert query_keys.admin.catalogs(COMPANY_ID) == ("admin", "catalogs", 1)


def test_productos_keys():
    assert query_keys.productos.all(COMPANY_ID) == ("productos", 1)
    assert query_keys.productos.categories(COMPANY_ID) == ("productos", "categories", 1)
    assert query_keys.productos.products(COMPANY_ID) == ("productos", "products", 1)
    assert query_keys.productos.detail(42) == ("productos", "detail", 42)


def test_insumos_keys_with_optional_supply():
    assert query_keys.insumos.all(COMPANY_ID) == ("insumos", 1)
    assert query_keys.insumos.suppliers(COMPANY_ID) == ("insumos", "suppliers", 1)
    assert query_keys.insumos.supplies(COMPANY_ID) == ("insumos", "supplies", 1)
    assert query_keys.insumos.prices(COMPANY_ID) == ("insumos", "prices", 1)
    assert query_keys.insumos.prices(COMPANY_ID, 5) == ("insumos", "prices", 1, 5)
    assert query_keys.insumos.history(COMPANY_ID) == ("insumos", "history", 1)
    assert query_keys.insumos.history(COMPANY_ID, 3) == ("insumos", "history", 1, 3)


def test_recetas_keys():
    assert query_keys.recetas.all(COMPANY_ID) == ("recetas", 1)
    assert query_keys.recetas.detail(10, COMPANY_ID) == ("recetas", "detail", 10, 1)


def test_family_shares_module_prefix():
    keys = [
        query_keys.insumos.suppliers(1),
        query_keys.insumos.supplies(1),
        query_keys.insumos.prices(1),
        query_keys.insumos.history(1, 7),
    ]
    assert query_keys.insumos.suppliers(1)[0] == query_keys.insumos.supplies(1)[0] == "insumos"
    for key in keys:
        assert matches_prefix(key, query_keys.insumos.root())
        assert not matches_prefix(key, query_keys.productos.root())


def test_optional_id_extends_without_reordering():
    base = query_keys.insumos.prices(1)
    scoped = query_keys.insumos.prices(1, 9)
    assert matches_prefix(scoped, base)
    assert not matches_prefix(base, scoped)


def test_keys_are_pure():
    assert query_keys.recetas.detail(10, 1) == query_keys.recetas.detail(10, 1)
    assert query_keys.recetas.detail(10, 1) != query_keys.recetas.detail(1, 10)
