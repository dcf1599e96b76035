"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from settings.
"""

from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.catalog.interfaces import ICatalogService
    from modules.content.interfaces import IContentService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as
    singletons within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._content_service: "IContentService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service, backed by the configured account store."""
        if self._auth_service is None:
            from modules.auth.service import AuthService

            settings = get_settings()
            if settings.auth_store == "supabase":
                from modules.auth.repository import SupabaseAccountStore, SupabaseSessionStore
                from shared.database import get_supabase_client

                client = get_supabase_client()
                accounts, sessions = SupabaseAccountStore(client), SupabaseSessionStore(client)
            else:
                from modules.auth.store import InMemoryAccountStore, InMemorySessionStore

                accounts, sessions = InMemoryAccountStore(), InMemorySessionStore()

            self._auth_service = AuthService(
                accounts,
                sessions,
                session_ttl=timedelta(days=settings.session_ttl_days),
                min_password_length=settings.min_password_length,
            )
        return self._auth_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service, fronting Shopify."""
        if self._catalog_service is None:
            from modules.catalog.cache import InMemoryDurableStore, JsonFileDurableStore
            from modules.catalog.service import CatalogService
            from modules.catalog.shopify import ShopifyClient

            settings = get_settings()
            client = ShopifyClient(
                settings.shopify_domain,
                storefront_token=settings.shopify_storefront_token,
                admin_token=settings.shopify_admin_token,
                api_version=settings.shopify_api_version,
                timeout=settings.remote_timeout_seconds,
            )
            if settings.catalog_durable_path:
                durable = JsonFileDurableStore(Path(settings.catalog_durable_path))
            else:
                durable = InMemoryDurableStore()

            self._catalog_service = CatalogService(
                source=client,
                durable=durable,
                admin=client,
                ttl=timedelta(seconds=settings.catalog_cache_ttl_seconds),
            )
        return self._catalog_service

    @property
    def content(self) -> "IContentService":
        """Get the generative content service."""
        if self._content_service is None:
            from modules.content.service import GeminiService

            settings = get_settings()
            self._content_service = GeminiService(
                settings.gemini_api_key,
                image_model=settings.gemini_image_model,
                text_model=settings.gemini_text_model,
            )
        return self._content_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._catalog_service = None
        self._content_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_content_service() -> "IContentService":
    """FastAPI dependency for content service."""
    return get_container().content
