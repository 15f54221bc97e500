"""
Database client factory for Supabase.

The backend talks to Supabase with the service role key; row level
security is not used by this service.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role.

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
            or rejected by the client
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ConfigurationError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables.",
                code="SUPABASE_NOT_CONFIGURED",
            )
        try:
            _service_client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key,
            )
        except Exception as e:
            # create_client validates the URL and key format
            raise ConfigurationError(
                f"Supabase client could not be created: {e}",
                code="SUPABASE_NOT_CONFIGURED",
            ) from e

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
