"""
Catalog module interfaces.

The service is assembled from small parts: a remote product source,
a durable store for last-known-good pages, and an ordered list of
fallbacks consulted when the remote source fails.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CatalogQuery, CreateProductRequest, CreatedProduct, Product, ProductCollection


@runtime_checkable
class IProductSource(Protocol):
    """The live catalog (Shopify in production)."""

    async def fetch_products(self, query: CatalogQuery) -> ProductCollection:
        """
        Fetch one page of products.

        Raises:
            ExternalServiceError: On any remote failure, including timeouts
        """
        ...

    async def fetch_product_by_handle(self, handle: str) -> Optional[Product]:
        """Fetch one product by handle, or None when the store has none."""
        ...


@runtime_checkable
class IProductAdmin(Protocol):
    """Write side of the remote catalog."""

    async def create_product(self, request: CreateProductRequest) -> CreatedProduct:
        ...


@runtime_checkable
class IDurableCatalogStore(Protocol):
    """Longer-lived copy of every successfully fetched page."""

    def load(self, key: str) -> Optional[ProductCollection]:
        ...

    def save(self, key: str, collection: ProductCollection) -> None:
        ...

    def clear(self) -> None:
        ...


@runtime_checkable
class ICatalogFallback(Protocol):
    """
    One step in the degradation chain.

    Returns a collection, or None for a miss so the next step is tried.
    """

    name: str

    async def lookup(self, query: CatalogQuery) -> Optional[ProductCollection]:
        ...


@runtime_checkable
class ICatalogService(Protocol):
    """Interface for catalog reads and cache control."""

    async def get_catalog(self, query: CatalogQuery) -> ProductCollection:
        """
        Return a page of the catalog.

        Serves the short-TTL cache when fresh, otherwise fetches. On fetch
        failure walks the fallbacks. Never raises for remote failures.
        """
        ...

    async def force_refresh(self, query: CatalogQuery) -> ProductCollection:
        """Clear every cache layer for every key, then fetch as if cold."""
        ...

    async def clear(self) -> None:
        """Drop every cached entry without fetching."""
        ...

    async def get_product(self, product_id: str, query: Optional[CatalogQuery] = None) -> Optional[Product]:
        """
        Find a product by id, Shopify id or handle.

        Checks the cached page first, then asks the remote source by handle.
        Remote failures read as a miss.
        """
        ...

    async def create_product(self, request: CreateProductRequest) -> CreatedProduct:
        """Create a product upstream and invalidate the cache."""
        ...
