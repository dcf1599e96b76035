"""
Database client factory for Supabase.

Only used when accounts and sessions are persisted outside the process
(``AUTH_STORE=supabase``). The default in-memory stores need no client.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with the service role key.

    The storefront backend is the only writer of account and session
    rows, so it talks to Supabase with full access.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """Reset the cached database client (for testing)."""
    global _service_client
    _service_client = None
