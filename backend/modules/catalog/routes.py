"""
Catalog API endpoints.

Reads never fail because of Shopify: the service degrades to cached or
built-in products and reports where the data came from in ``source``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service
from api.middleware.auth import get_current_account
from shared.config import get_settings
from shared.models import Account

from .exceptions import ProductNotFoundError
from .interfaces import ICatalogService
from .models import (
    CacheClearedResponse,
    CatalogQuery,
    CatalogResponse,
    CreateProductRequest,
    CreatedProduct,
    ProductListResponse,
    ProductResponse,
)

router = APIRouter()


def catalog_query(
    first: Optional[int] = Query(default=None, ge=1, le=250, description="Page size"),
    after: Optional[str] = Query(default=None, description="Pagination cursor"),
) -> CatalogQuery:
    return CatalogQuery(first=first or get_settings().catalog_page_size, after=after)


def _first_page() -> CatalogQuery:
    return CatalogQuery(first=get_settings().catalog_page_size)


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(
    query: CatalogQuery = Depends(catalog_query),
    service: ICatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """Get one page of the catalog, served from cache when fresh."""
    return CatalogResponse(catalog=await service.get_catalog(query))


@router.post("/catalog/refresh", response_model=CatalogResponse)
async def refresh_catalog(
    query: CatalogQuery = Depends(catalog_query),
    service: ICatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """Drop every cached page and fetch this one fresh."""
    return CatalogResponse(catalog=await service.force_refresh(query))


@router.delete("/catalog/cache", response_model=CacheClearedResponse)
async def clear_catalog_cache(
    service: ICatalogService = Depends(get_catalog_service),
) -> CacheClearedResponse:
    await service.clear()
    return CacheClearedResponse()


@router.get("/catalog/products/{product_id:path}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ICatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Look a product up by id, Shopify id or handle."""
    product = await service.get_product(product_id, _first_page())
    if product is None:
        raise ProductNotFoundError(product_id)
    return ProductResponse(product=product)


@router.get("/catalog/search", response_model=ProductListResponse)
async def search_products(
    q: str = Query(default="", description="Matches name, description and tags"),
    category: str = Query(default="all"),
    service: ICatalogService = Depends(get_catalog_service),
) -> ProductListResponse:
    catalog = await service.get_catalog(_first_page())
    matches = catalog.filter_by_category(category)
    if q:
        hits = catalog.search(q)
        matches = [p for p in matches if p in hits]
    return ProductListResponse(products=matches, total=len(matches))


@router.post("/products", response_model=CreatedProduct)
async def create_product(
    request: CreateProductRequest,
    account: Account = Depends(get_current_account),
    service: ICatalogService = Depends(get_catalog_service),
) -> CreatedProduct:
    """
    Create and publish a product in Shopify.

    Requires a signed-in account. Clears the catalog cache on success.
    """
    return await service.create_product(request)
