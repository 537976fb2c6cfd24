"""Supabase async client creation.

The service key is preferred so server-side reads and writes bypass RLS;
the anon key works when the tables are readable and writable under the
project's policies.
"""

from __future__ import annotations

import logging

from supabase import AsyncClient, acreate_client

from starlist.errors import ConfigError
from starlist.models import SupabaseSettings

logger = logging.getLogger(__name__)


async def create_supabase_client(settings: SupabaseSettings) -> AsyncClient:
    """Create the async Supabase client. Call once at startup."""
    if not settings.url or not settings.key:
        raise ConfigError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY environment variables are required"
        )

    client = await acreate_client(settings.url, settings.key)
    logger.info("Supabase client initialized (%s)", settings.url)
    return client
