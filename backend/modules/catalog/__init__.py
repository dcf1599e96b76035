"""
Catalog module.

Serves the product catalog from Shopify through a short-TTL cache, a
durable last-known-good layer and a built-in product set.

Public API:
- ICatalogService: Interface for catalog reads and cache control
- CatalogService: Default implementation
- ShopifyClient: Storefront/Admin API client
- ProductCollection, Product, CatalogQuery: Data models
"""

from .interfaces import (
    ICatalogService,
    IProductSource,
    IProductAdmin,
    IDurableCatalogStore,
    ICatalogFallback,
)
from .models import (
    CatalogQuery,
    CatalogSource,
    Product,
    ProductVariant,
    ProductCollection,
    CreateProductRequest,
    CreatedProduct,
)
from .cache import MemoryCatalogCache, InMemoryDurableStore, JsonFileDurableStore
from .fallbacks import DurableCacheFallback, StaticCatalogFallback
from .service import CatalogService
from .shopify import ShopifyClient, format_products
from .exceptions import (
    CatalogFetchError,
    ShopifyNotConfiguredError,
    ProductCreateError,
    InvalidProductError,
    ProductNotFoundError,
)

__all__ = [
    # Interfaces
    "ICatalogService",
    "IProductSource",
    "IProductAdmin",
    "IDurableCatalogStore",
    "ICatalogFallback",
    # Models
    "CatalogQuery",
    "CatalogSource",
    "Product",
    "ProductVariant",
    "ProductCollection",
    "CreateProductRequest",
    "CreatedProduct",
    # Implementations
    "MemoryCatalogCache",
    "InMemoryDurableStore",
    "JsonFileDurableStore",
    "DurableCacheFallback",
    "StaticCatalogFallback",
    "CatalogService",
    "ShopifyClient",
    "format_products",
    # Exceptions
    "CatalogFetchError",
    "ShopifyNotConfiguredError",
    "ProductCreateError",
    "InvalidProductError",
    "ProductNotFoundError",
]
