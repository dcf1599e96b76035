"""
Catalog fallbacks.

Tried in order after a failed remote fetch. The default chain is
durable cache (any age), then the built-in product set.
"""

import asyncio
from typing import Optional, Sequence

from .interfaces import IDurableCatalogStore
from .models import CatalogQuery, CatalogSource, Product, ProductCollection
from .static_products import STATIC_PRODUCTS


class DurableCacheFallback:
    """Last successfully fetched copy of the page, regardless of age."""

    name = "durable"

    def __init__(self, store: IDurableCatalogStore):
        self._store = store

    async def lookup(self, query: CatalogQuery) -> Optional[ProductCollection]:
        cached = await asyncio.to_thread(self._store.load, query.cache_key)
        if cached is None:
            return None
        return cached.with_source(CatalogSource.DURABLE)


class StaticCatalogFallback:
    """Built-in products. Only answers for the first page."""

    name = "static"

    def __init__(self, products: Sequence[Product] = STATIC_PRODUCTS):
        self._products = list(products)

    async def lookup(self, query: CatalogQuery) -> Optional[ProductCollection]:
        if query.after is not None or not self._products:
            return None
        return ProductCollection(
            products=self._products[: query.first],
            source=CatalogSource.STATIC,
        )
