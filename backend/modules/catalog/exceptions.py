"""
Catalog module exceptions.

Fetch failures never reach storefront readers: the catalog service
catches them and degrades to its fallbacks. They do surface from the
admin product endpoints.
"""

from typing import Any, Optional

from shared.exceptions import ExternalServiceError, NotFoundError, ValidationError


class CatalogFetchError(ExternalServiceError):
    """Raised when the remote catalog cannot be fetched."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(
            f"Failed to fetch catalog: {message}",
            service="shopify",
            code="CATALOG_FETCH_ERROR",
            details=details,
        )


class ShopifyNotConfiguredError(ExternalServiceError):
    """Raised when Shopify credentials are missing."""

    status_code = 503

    def __init__(self, api: str = "storefront"):
        super().__init__(
            f"Shopify {api} API is not configured",
            service="shopify",
            code="SHOPIFY_NOT_CONFIGURED",
            details={"api": api},
        )


class ProductCreateError(ExternalServiceError):
    """Raised when the Admin API rejects a product."""

    def __init__(self, message: str, status: Optional[int] = None, errors: Any = None):
        super().__init__(
            message,
            service="shopify",
            code="PRODUCT_CREATE_ERROR",
            details={"status": status, "errors": errors},
        )


class InvalidProductError(ValidationError):
    """Raised when a product creation request is incomplete."""

    def __init__(self, message: str = "Title and price are required"):
        super().__init__(message, code="INVALID_PRODUCT")


class ProductNotFoundError(NotFoundError):
    """Raised when a product id is not in the current catalog page."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )
