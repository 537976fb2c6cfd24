"""Build the configured StarredStore."""

from __future__ import annotations

import logging

from starlist.models import AppConfig
from starlist.store.base import StarredStore
from starlist.store.memory import MemoryStarredStore

logger = logging.getLogger(__name__)


async def build_store(config: AppConfig) -> StarredStore:
    """Pick the backend named by ``config.backend``."""
    if config.backend == "supabase":
        from starlist.store.supabase import SupabaseStarredStore
        from starlist.web.db import create_supabase_client

        client = await create_supabase_client(config.supabase)
        store: StarredStore = SupabaseStarredStore(
            client,
            starred_table=config.supabase.starred_table,
            restaurants_table=config.supabase.restaurants_table,
            restaurant_columns=config.supabase.restaurant_columns,
        )
    else:
        store = MemoryStarredStore(config.restaurants)

    logger.info("Using %s backend", store.backend_name)
    return store
