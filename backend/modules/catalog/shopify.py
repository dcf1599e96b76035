"""
Shopify API client.

Reads the catalog through the Storefront GraphQL API and creates products
through the Admin REST API. Every call is bounded by a timeout; any
transport, HTTP or GraphQL error is raised as a catalog exception.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import httpx

from .exceptions import (
    CatalogFetchError,
    InvalidProductError,
    ProductCreateError,
    ShopifyNotConfiguredError,
)
from .models import (
    CatalogQuery,
    CatalogSource,
    CreateProductRequest,
    CreatedProduct,
    Product,
    ProductCollection,
    ProductVariant,
)

logger = logging.getLogger(__name__)


PRODUCTS_QUERY = """
query getProducts($first: Int!, $after: String) {
    products(first: $first, after: $after) {
        pageInfo {
            hasNextPage
            endCursor
        }
        edges {
            cursor
            node {
                id
                title
                description
                handle
                productType
                tags
                vendor
                availableForSale
                createdAt
                updatedAt
                images(first: 5) {
                    edges { node { id url altText width height } }
                }
                variants(first: 10) {
                    edges {
                        node {
                            id
                            title
                            price { amount currencyCode }
                            compareAtPrice { amount currencyCode }
                            availableForSale
                            quantityAvailable
                            selectedOptions { name value }
                        }
                    }
                }
            }
        }
    }
}
"""

PRODUCT_BY_HANDLE_QUERY = """
query getProduct($handle: String!) {
    product(handle: $handle) {
        id
        title
        description
        handle
        productType
        tags
        vendor
        availableForSale
        images(first: 10) {
            edges { node { id url altText width height } }
        }
        variants(first: 20) {
            edges {
                node {
                    id
                    title
                    price { amount currencyCode }
                    compareAtPrice { amount currencyCode }
                    availableForSale
                    quantityAvailable
                    selectedOptions { name value }
                }
            }
        }
    }
}
"""

DATA_URI_RE = re.compile(r"^data:image/(\w+);base64,")


class ShopifyClient:
    """
    Client for one Shopify store.

    A fresh ``httpx.AsyncClient`` is opened per call; the store is
    hit a few times a minute at most.
    """

    def __init__(
        self,
        domain: str,
        storefront_token: str = "",
        admin_token: str = "",
        api_version: str = "2024-01",
        timeout: float = 10.0,
        default_vendor: str = "The Merch Concept",
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._domain = domain
        self._storefront_token = storefront_token
        self._admin_token = admin_token
        self._api_version = api_version
        self._timeout = timeout
        self._default_vendor = default_vendor
        self._clock = clock

    @property
    def is_configured(self) -> bool:
        return bool(self._domain and self._storefront_token)

    @property
    def is_admin_configured(self) -> bool:
        return bool(self._domain and self._admin_token)

    @property
    def storefront_url(self) -> str:
        return f"https://{self._domain}/api/{self._api_version}/graphql.json"

    @property
    def admin_rest_url(self) -> str:
        return f"https://{self._domain}/admin/api/{self._api_version}"

    async def graphql(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict:
        """Run a Storefront GraphQL query and return its ``data`` member."""
        if not self.is_configured:
            raise ShopifyNotConfiguredError("storefront")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self.storefront_url,
                    headers={
                        "Content-Type": "application/json",
                        "X-Shopify-Storefront-Access-Token": self._storefront_token,
                    },
                    json={"query": query, "variables": variables or {}},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise CatalogFetchError(f"timed out after {self._timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise CatalogFetchError(
                f"API error {e.response.status_code}",
                details={"status": e.response.status_code},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogFetchError(str(e)) from e

        if payload.get("errors"):
            logger.error(f"GraphQL errors: {payload['errors']}")
            raise CatalogFetchError(
                payload["errors"][0].get("message", "GraphQL error"),
                details={"errors": payload["errors"]},
            )
        return payload.get("data") or {}

    async def fetch_products(self, query: CatalogQuery) -> ProductCollection:
        """Fetch and normalize one page of products."""
        data = await self.graphql(PRODUCTS_QUERY, {"first": query.first, "after": query.after})
        products = data.get("products")
        if products is None:
            raise CatalogFetchError("response has no products")

        page_info = products.get("pageInfo") or {}
        formatted = format_products(products)
        logger.info(
            f"Fetched {len(formatted)} products from Shopify "
            f"(has next page: {bool(page_info.get('hasNextPage'))})"
        )
        return ProductCollection(
            products=formatted,
            has_next_page=bool(page_info.get("hasNextPage")),
            end_cursor=page_info.get("endCursor"),
            fetched_at=self._clock(),
            source=CatalogSource.REMOTE,
        )

    async def fetch_product_by_handle(self, handle: str) -> Optional[Product]:
        data = await self.graphql(PRODUCT_BY_HANDLE_QUERY, {"handle": handle})
        node = data.get("product")
        if node is None:
            logger.info(f"No Shopify product with handle '{handle}'")
            return None
        return format_product(node)

    async def create_product(self, request: CreateProductRequest) -> CreatedProduct:
        """
        Create a product through the Admin REST API.

        Products are created active and published to the Online Store
        so they show up in the storefront immediately.
        """
        if not self.is_admin_configured:
            raise ShopifyNotConfiguredError("admin")
        if not request.title or request.price is None:
            raise InvalidProductError()

        product = build_admin_product(request, self._default_vendor, self._clock())
        logger.info(f"Creating product '{request.title}' with {len(request.images)} images")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self.admin_rest_url}/products.json",
                    headers={
                        "Content-Type": "application/json",
                        "X-Shopify-Access-Token": self._admin_token,
                    },
                    json={"product": product},
                )
        except httpx.HTTPError as e:
            raise ProductCreateError(f"Shopify request failed: {e}") from e

        if response.is_error:
            try:
                errors = response.json().get("errors")
            except ValueError:
                errors = response.text
            logger.error(f"Shopify rejected product ({response.status_code}): {errors}")
            raise ProductCreateError(
                "Failed to create product in Shopify",
                status=response.status_code,
                errors=errors,
            )

        created = response.json()["product"]
        logger.info(f"Product created: {created.get('id')}")
        return CreatedProduct(
            product=created,
            admin_url=f"https://{self._domain}/admin/products/{created.get('id')}",
            storefront=f"https://{self._domain}/products/{created.get('handle')}",
        )


def _money(value: Optional[dict]) -> Optional[float]:
    if not value:
        return None
    return float(value["amount"])


def format_product(node: dict) -> Product:
    """Map one Storefront product node to a storefront product."""
    variants = [v["node"] for v in node.get("variants", {}).get("edges", [])]
    images = [i["node"] for i in node.get("images", {}).get("edges", [])]
    first_variant = variants[0] if variants else None

    return Product(
        id=node["id"],
        shopify_id=node["id"],
        name=node.get("title", ""),
        description=node.get("description") or "",
        price=(_money(first_variant.get("price")) or 0) if first_variant else 0,
        original_price=_money(first_variant.get("compareAtPrice")) if first_variant else None,
        image=images[0]["url"] if images else "",
        images=[img["url"] for img in images],
        category=node.get("productType") or "Uncategorized",
        tags=node.get("tags") or [],
        in_stock=bool(node.get("availableForSale")),
        variant_id=first_variant["id"] if first_variant else None,
        variants=[
            ProductVariant(
                id=v["id"],
                title=v.get("title", ""),
                price=_money(v.get("price")) or 0,
                compare_at_price=_money(v.get("compareAtPrice")),
                available=bool(v.get("availableForSale")),
                quantity_available=v.get("quantityAvailable"),
                options=v.get("selectedOptions") or [],
            )
            for v in variants
        ],
        handle=node.get("handle"),
        vendor=node.get("vendor"),
    )


def format_products(products: dict) -> list[Product]:
    """Map a Storefront ``products`` connection to storefront products."""
    return [format_product(edge["node"]) for edge in products.get("edges", [])]


def _image_payload(image: str, index: int) -> dict[str, str]:
    """URL images pass through; base64 data URIs become attachments."""
    match = DATA_URI_RE.match(image)
    if image.startswith("data:image"):
        extension = match.group(1) if match else "png"
        return {
            "attachment": image.split(",", 1)[1],
            "filename": f"product-image-{index + 1}.{extension}",
        }
    return {"src": image}


def build_admin_product(
    request: CreateProductRequest,
    default_vendor: str,
    now: datetime,
) -> dict[str, Any]:
    """Build the Admin REST ``product`` payload."""
    tags = request.tags
    if isinstance(tags, list):
        tags = ", ".join(tags)

    product: dict[str, Any] = {
        "title": request.title,
        "body_html": request.description or "",
        "vendor": request.vendor or default_vendor,
        "product_type": request.category or "General",
        "tags": tags or "",
        "status": "active",
        "published": True,
        "published_scope": "web",
        "published_at": now.isoformat(),
    }

    if request.variants:
        product["variants"] = [
            {
                "option1": v.option1,
                "price": str(v.price),
                "compare_at_price": str(v.compare_at_price) if v.compare_at_price else None,
                "inventory_quantity": v.inventory if v.inventory is not None else request.inventory,
                "inventory_management": "shopify",
            }
            for v in request.variants
        ]
    else:
        product["variants"] = [
            {
                "price": str(request.price),
                "compare_at_price": str(request.compare_at_price) if request.compare_at_price else None,
                "inventory_quantity": request.inventory,
                "inventory_management": "shopify",
            }
        ]

    if request.images:
        product["images"] = [_image_payload(img, i) for i, img in enumerate(request.images)]

    return product
