"""Hierarchical query keys for the client-side data-fetching layer.

Every key starts with its module name, followed by an optional sub-resource
and then scoping ids (company first, secondary ids after). A shorter key is
a prefix of every longer key in the same family, so ``("insumos",)`` matches
all ``insumos`` keys when invalidating.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

QueryKey = tuple[Hashable, ...]


def matches_prefix(key: Sequence[Hashable], prefix: Sequence[Hashable]) -> bool:
    """Element-wise prefix match, as used by hierarchical invalidation."""
    return len(prefix) <= len(key) and tuple(key[: len(prefix)]) == tuple(prefix)


class AdminKeys:
    MODULE = "admin"

    @classmethod
    def root(cls) -> QueryKey:
        return (cls.MODULE,)

    @classmethod
    def catalogs(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, "catalogs", company_id)


class ProductosKeys:
    MODULE = "productos"

    @classmethod
    def root(cls) -> QueryKey:
        return (cls.MODULE,)

    @classmethod
    def all(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, company_id)

    @classmethod
    def categories(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, "categories", company_id)

    @classmethod
    def products(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, "products", company_id)

    @classmethod
    def detail(cls, product_id: int) -> QueryKey:
        return (cls.MODULE, "detail", product_id)


class InsumosKeys:
    MODULE = "insumos"

    @classmethod
    def root(cls) -> QueryKey:
        return (cls.MODULE,)

    @classmethod
    def all(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, company_id)

    @classmethod
    def suppliers(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, "suppliers", company_id)

    @classmethod
    def supplies(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, "supplies", company_id)

    @classmethod
    def prices(cls, company_id: int, supply_id: int | None = None) -> QueryKey:
        key: QueryKey = (cls.MODULE, "prices", company_id)
        return key if supply_id is None else (*key, supply_id)

    @classmethod
    def history(cls, company_id: int, supply_id: int | None = None) -> QueryKey:
        key: QueryKey = (cls.MODULE, "history", company_id)
        return key if supply_id is None else (*key, supply_id)


class RecetasKeys:
    MODULE = "recetas"

    @classmethod
    def root(cls) -> QueryKey:
        return (cls.MODULE,)

    @classmethod
    def all(cls, company_id: int) -> QueryKey:
        return (cls.MODULE, company_id)

    @classmethod
    def detail(cls, recipe_id: int, company_id: int) -> QueryKey:
        return (cls.MODULE, "detail", recipe_id, company_id)


class QueryKeys:
    admin = AdminKeys
    productos = ProductosKeys
    insumos = InsumosKeys
    recetas = RecetasKeys


query_keys = QueryKeys()
