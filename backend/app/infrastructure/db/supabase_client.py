"""
Supabase Client Factory

Single shared Supabase client for the repositories. Built lazily so the
application (and the test suite) can start without database credentials.
"""

import logging
from typing import Optional

from supabase import create_client, Client

from app.config.settings import get_settings
from app.infrastructure.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is missing
    """
    global _client
    if _client is None:
        settings = get_settings()
        missing = settings.missing_supabase_keys
        if missing:
            raise ConfigurationError(
                "Missing Supabase configuration",
                missing_keys=missing,
            )

        _client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        logger.info("Supabase client initialized")
    return _client


def reset_supabase_client() -> None:
    """Drop the cached client (used on shutdown and in tests)."""
    global _client
    _client = None
