"""
Catalog module data models.

Products are the storefront's normalized shape; the raw Shopify
Storefront response is mapped into them by the Shopify client.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from shared.models import CamelModel


class CatalogSource(str, Enum):
    """Where a collection came from."""

    REMOTE = "remote"
    CACHE = "cache"
    DURABLE = "durable"
    STATIC = "static"
    EMPTY = "empty"


class ProductVariant(CamelModel):
    id: str
    title: str = ""
    price: float = 0
    compare_at_price: Optional[float] = None
    available: bool = True
    quantity_available: Optional[int] = None
    options: list[dict[str, str]] = Field(default_factory=list)


class Product(CamelModel):
    """A sellable item as rendered by the storefront."""

    id: Union[str, int]
    shopify_id: Optional[str] = None
    name: str
    description: str = ""
    price: float = 0
    original_price: Optional[float] = None
    image: str = ""
    images: list[str] = Field(default_factory=list)
    category: str = "Uncategorized"
    tags: list[str] = Field(default_factory=list)
    in_stock: bool = True
    variant_id: Optional[str] = None
    variants: list[ProductVariant] = Field(default_factory=list)
    handle: Optional[str] = None
    vendor: Optional[str] = None
    emoji: Optional[str] = None


class CatalogQuery(BaseModel):
    """Cache key: page size plus pagination cursor."""

    model_config = {"frozen": True}

    first: int = Field(default=50, ge=1, le=250)
    after: Optional[str] = None

    @property
    def cache_key(self) -> str:
        return f"products_{self.first}_{self.after}"


class ProductCollection(CamelModel):
    """
    One page of the catalog.

    ``fetched_at`` is the time of the remote fetch that produced the data;
    it is None for the static and empty defaults.
    """

    model_config = {"frozen": True}

    products: list[Product] = Field(default_factory=list)
    has_next_page: bool = False
    end_cursor: Optional[str] = None
    fetched_at: Optional[datetime] = None
    source: CatalogSource = CatalogSource.REMOTE

    def with_source(self, source: CatalogSource) -> "ProductCollection":
        return self.model_copy(update={"source": source})

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        """Match on our id, the Shopify global id or the handle."""
        for product in self.products:
            if product_id in (str(product.id), product.shopify_id, product.handle):
                return product
        return None

    def search(self, query: str) -> list[Product]:
        """Case-insensitive match on name, description or any tag."""
        needle = query.lower()
        return [
            p for p in self.products
            if needle in p.name.lower()
            or needle in p.description.lower()
            or any(needle in tag.lower() for tag in p.tags)
        ]

    def filter_by_category(self, category: str) -> list[Product]:
        if category == "all":
            return list(self.products)
        return [p for p in self.products if p.category == category]


class CatalogResponse(CamelModel):
    success: bool = True
    catalog: ProductCollection


class ProductResponse(CamelModel):
    success: bool = True
    product: Product


class ProductListResponse(CamelModel):
    success: bool = True
    products: list[Product]
    total: int


class CacheClearedResponse(CamelModel):
    success: bool = True
    message: str = "Catalog cache cleared"


class NewVariant(CamelModel):
    option1: Optional[str] = None
    price: float
    compare_at_price: Optional[float] = None
    inventory: Optional[int] = None


class CreateProductRequest(CamelModel):
    """Admin product creation body."""

    title: str = ""
    description: str = ""
    price: Optional[float] = None
    compare_at_price: Optional[float] = None
    category: Optional[str] = None
    tags: Union[list[str], str, None] = None
    vendor: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    variants: list[NewVariant] = Field(default_factory=list)
    inventory: int = 100


class CreatedProduct(CamelModel):
    success: bool = True
    product: dict
    admin_url: str
    storefront: str
