"""
Catalog service implementation.

Fronts the remote product source with two cache layers:

1. A short-TTL in-memory layer (seconds), so edits made in the Shopify
   admin show up almost immediately without refetching on every view.
2. A durable layer, written on every successful fetch and read only
   when the remote fetch fails.

After a failed fetch the fallbacks are tried in order; if all miss, an
empty collection is returned. Readers never see a remote exception.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from shared.exceptions import StorefrontError

from .cache import MemoryCatalogCache
from .fallbacks import DurableCacheFallback, StaticCatalogFallback
from .exceptions import ShopifyNotConfiguredError
from .interfaces import (
    ICatalogFallback,
    ICatalogService,
    IDurableCatalogStore,
    IProductAdmin,
    IProductSource,
)
from .models import (
    CatalogQuery,
    CatalogSource,
    CreateProductRequest,
    CreatedProduct,
    Product,
    ProductCollection,
)

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = timedelta(seconds=5)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CatalogService(ICatalogService):
    """
    Implementation of the catalog service.

    Remote fetches are serialized per page, so concurrent cold reads of
    the same page trigger a single upstream call while other pages are
    fetched independently. Every clear bumps a generation counter; a
    fetch that started before the clear is served but not cached.
    """

    def __init__(
        self,
        source: IProductSource,
        durable: IDurableCatalogStore,
        admin: Optional[IProductAdmin] = None,
        fallbacks: Optional[Sequence[ICatalogFallback]] = None,
        ttl: timedelta = DEFAULT_CACHE_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._source = source
        self._durable = durable
        self._admin = admin
        self._memory = MemoryCatalogCache(ttl)
        self._fallbacks: list[ICatalogFallback] = (
            list(fallbacks)
            if fallbacks is not None
            else [DurableCacheFallback(durable), StaticCatalogFallback()]
        )
        self._clock = clock
        self._fetch_locks: dict[str, asyncio.Lock] = {}
        self._generation = 0
        self._durable_lock = asyncio.Lock()

    @property
    def fallbacks(self) -> list[ICatalogFallback]:
        return list(self._fallbacks)

    async def get_catalog(self, query: Optional[CatalogQuery] = None) -> ProductCollection:
        query = query or CatalogQuery()
        cached = self._memory.get_fresh(query.cache_key, self._clock())
        if cached is not None:
            logger.debug(f"Catalog cache hit for {query.cache_key}")
            return cached.with_source(CatalogSource.CACHE)

        async with self._lock_for(query.cache_key):
            # Another request may have filled the cache while we waited.
            cached = self._memory.get_fresh(query.cache_key, self._clock())
            if cached is not None:
                return cached.with_source(CatalogSource.CACHE)
            return await self._fetch_and_populate(query)

    async def force_refresh(self, query: Optional[CatalogQuery] = None) -> ProductCollection:
        query = query or CatalogQuery()
        async with self._lock_for(query.cache_key):
            await self._clear_layers()
            logger.info("Catalog cache cleared, force refreshing")
            return await self._fetch_and_populate(query)

    async def clear(self) -> None:
        await self._clear_layers()
        logger.info("Catalog cache cleared")

    async def get_product(self, product_id: str, query: Optional[CatalogQuery] = None) -> Optional[Product]:
        catalog = await self.get_catalog(query)
        product = catalog.get_product_by_id(product_id)
        if product is not None or product_id.startswith("gid://"):
            return product

        try:
            return await self._source.fetch_product_by_handle(product_id)
        except StorefrontError as e:
            logger.warning(f"Product lookup for '{product_id}' failed: {e.message}")
        except Exception:
            logger.exception(f"Unexpected error looking up product '{product_id}'")
        return None

    async def create_product(self, request: CreateProductRequest) -> CreatedProduct:
        """Create upstream, then clear so the next read sees the new product."""
        if self._admin is None:
            raise ShopifyNotConfiguredError("admin")
        created = await self._admin.create_product(request)
        await self.clear()
        return created

    def _lock_for(self, key: str) -> asyncio.Lock:
        return self._fetch_locks.setdefault(key, asyncio.Lock())

    async def _clear_layers(self) -> None:
        self._generation += 1
        self._memory.clear()
        async with self._durable_lock:
            await asyncio.to_thread(self._durable.clear)

    async def _fetch_and_populate(self, query: CatalogQuery) -> ProductCollection:
        generation = self._generation
        try:
            collection = await self._source.fetch_products(query)
        except StorefrontError as e:
            logger.warning(f"Catalog fetch failed for {query.cache_key}: {e.message}")
            return await self._degrade(query)
        except Exception:
            logger.exception(f"Unexpected error fetching catalog for {query.cache_key}")
            return await self._degrade(query)

        if collection.fetched_at is None:
            collection = collection.model_copy(update={"fetched_at": self._clock()})

        async with self._durable_lock:
            if generation != self._generation:
                logger.info(f"Catalog cleared while fetching {query.cache_key}, not caching result")
                return collection

            self._memory.put(query.cache_key, collection)
            try:
                # File stores block; keep them off the event loop
                await asyncio.to_thread(self._durable.save, query.cache_key, collection)
            except OSError:
                logger.exception("Could not write durable catalog cache")
        return collection

    async def _degrade(self, query: CatalogQuery) -> ProductCollection:
        for fallback in self._fallbacks:
            try:
                collection = await fallback.lookup(query)
            except Exception:
                logger.exception(f"Catalog fallback '{fallback.name}' failed")
                continue
            if collection is not None:
                logger.warning(
                    f"Serving catalog from '{fallback.name}' fallback "
                    f"({len(collection.products)} products)"
                )
                return collection

        logger.warning("No catalog fallback available, serving empty catalog")
        return ProductCollection(source=CatalogSource.EMPTY)
