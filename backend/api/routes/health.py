"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    shopify: str
    shopify_admin: str
    gemini: str
    auth_store: str


def _state(configured: bool) -> str:
    return "configured" if configured else "not_configured"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    The storefront still serves the built-in catalog without Shopify,
    so missing integrations are reported rather than failing the check.
    """
    settings = get_settings()
    return ReadinessResponse(
        status="ready",
        shopify=_state(settings.is_shopify_configured),
        shopify_admin=_state(settings.is_shopify_admin_configured),
        gemini=_state(settings.is_gemini_configured),
        auth_store=settings.auth_store,
    )
