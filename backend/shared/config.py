"""
Centralized configuration for the storefront backend.

All settings are loaded from environment variables with sensible defaults.
Integration settings are namespaced (e.g., SHOPIFY_*, GEMINI_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Merch Storefront API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Shopify
    shopify_domain: str = ""
    shopify_storefront_token: str = ""
    shopify_admin_token: str = ""
    shopify_api_version: str = "2024-01"

    # Gemini
    gemini_api_key: str = ""
    gemini_text_model: str = "gemini-2.0-flash-exp"
    gemini_image_model: str = "gemini-2.5-flash-image"

    # Remote calls
    remote_timeout_seconds: float = 10.0

    # Sessions and accounts
    auth_store: Literal["memory", "supabase"] = "memory"
    session_ttl_days: int = 7
    min_password_length: int = 8
    demo_account_email: str = ""
    demo_account_password: str = ""

    # Catalog cache
    catalog_cache_ttl_seconds: float = 5.0
    catalog_page_size: int = 50
    catalog_durable_path: str = ""  # empty keeps the durable layer in memory

    # Supabase (only used when auth_store == "supabase")
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    @property
    def is_shopify_configured(self) -> bool:
        """Storefront reads need a domain and a storefront token."""
        return bool(self.shopify_domain and self.shopify_storefront_token)

    @property
    def is_shopify_admin_configured(self) -> bool:
        return bool(self.shopify_domain and self.shopify_admin_token)

    @property
    def is_gemini_configured(self) -> bool:
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
