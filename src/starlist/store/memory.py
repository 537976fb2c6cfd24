"""In-process starred store.

Holds the catalog and the starred entries in containers owned by the store
instance. Every read and mutation runs under one asyncio.Lock so append,
remove and comment updates are applied atomically relative to each other.
Nothing here survives a restart.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Iterable

from starlist.errors import NotFoundError
from starlist.flatten import join_entry
from starlist.models import Restaurant, StarredEntry
from starlist.store.base import StarredStore

logger = logging.getLogger(__name__)


class MemoryStarredStore(StarredStore):
    """Memory-backed implementation of StarredStore."""

    backend_name = "memory"

    def __init__(self, restaurants: Iterable[Restaurant | dict] = ()) -> None:
        self._restaurants: dict[str, dict] = {}
        for r in restaurants:
            if not isinstance(r, Restaurant):
                r = Restaurant.model_validate(r)
            self._restaurants[str(r.id)] = r.model_dump()
        self._entries: list[StarredEntry] = []
        self._lock = asyncio.Lock()

    def _find(self, starred_id: str) -> StarredEntry | None:
        for entry in self._entries:
            if entry.id == starred_id:
                return entry
        return None

    def _present(self, entry: StarredEntry) -> dict | None:
        restaurant = self._restaurants.get(entry.restaurant_id)
        if restaurant is None:
            return None
        return join_entry(entry.model_dump(), restaurant)

    async def list_starred(self) -> list[dict]:
        async with self._lock:
            records = []
            for entry in self._entries:
                record = self._present(entry)
                if record is None:
                    logger.warning(
                        "Dropping starred entry %s: restaurant %s not in catalog",
                        entry.id, entry.restaurant_id,
                    )
                    continue
                records.append(record)
            return records

    async def get_starred(self, starred_id: str) -> dict:
        async with self._lock:
            entry = self._find(starred_id)
            record = self._present(entry) if entry else None
        if record is None:
            raise NotFoundError("Starred restaurant", starred_id)
        return record

    async def add_starred(self, restaurant_id: str, comment: str | None = None) -> dict:
        restaurant_id = str(restaurant_id)
        async with self._lock:
            restaurant = self._restaurants.get(restaurant_id)
            if restaurant is None:
                raise NotFoundError("Restaurant", restaurant_id)

            entry = StarredEntry(id=str(uuid.uuid4()), restaurant_id=restaurant_id)
            self._entries.append(entry)

        logger.info("Starred restaurant %s as %s", restaurant_id, entry.id)
        return join_entry(entry.model_dump(), restaurant)

    async def delete_starred(self, starred_id: str) -> None:
        async with self._lock:
            entry = self._find(starred_id)
            if entry is None:
                raise NotFoundError("Starred restaurant", starred_id)
            self._entries.remove(entry)
        logger.info("Removed starred restaurant %s", starred_id)

    async def update_comment(self, starred_id: str, new_comment: str | None) -> None:
        async with self._lock:
            entry = self._find(starred_id)
            if entry is None:
                raise NotFoundError("Starred restaurant", starred_id)
            entry.comment = new_comment

    async def list_restaurants(self) -> list[dict]:
        async with self._lock:
            return [dict(r) for r in self._restaurants.values()]

    async def get_restaurant(self, restaurant_id: str) -> dict | None:
        async with self._lock:
            restaurant = self._restaurants.get(str(restaurant_id))
            return dict(restaurant) if restaurant is not None else None
