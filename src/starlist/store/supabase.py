"""Supabase-backed starred store.

Starred entries live in the ``starred_restaurants`` table, each row pointing
at the catalog through its ``restaurantId`` column. Reads use an embedded
select so PostgREST does the join and returns the restaurant nested under
its table name; the nested shape is then flattened in process.

Each operation is a single roundtrip, except add, which checks the catalog
first and then inserts. Nothing is wrapped in a transaction.
"""

from __future__ import annotations

import logging

from postgrest.exceptions import APIError
from supabase import AsyncClient

from starlist.errors import NotFoundError, StoreError
from starlist.flatten import flatten_record, join_entry
from starlist.store.base import StarredStore

logger = logging.getLogger(__name__)

REFERENCE_COLUMN = "restaurantId"


def _store_error(e: APIError) -> StoreError:
    payload = e.json()
    logger.warning("Supabase request failed: %s", payload)
    return StoreError(payload)


class SupabaseStarredStore(StarredStore):
    """Starred store over a Supabase (PostgREST) database."""

    backend_name = "supabase"

    def __init__(
        self,
        client: AsyncClient,
        *,
        starred_table: str = "starred_restaurants",
        restaurants_table: str = "restaurants",
        restaurant_columns: str = "id, name",
    ) -> None:
        self.client = client
        self.starred_table = starred_table
        self.restaurants_table = restaurants_table
        self.restaurant_columns = restaurant_columns
        self.select_columns = f"id, comment, {restaurants_table} ({restaurant_columns})"

    def _present(self, row: dict) -> dict | None:
        """Flatten an embedded-select row; None if the restaurant is gone."""
        if not row.get(self.restaurants_table):
            return None
        return flatten_record(row)

    async def list_starred(self) -> list[dict]:
        try:
            resp = await self.client.table(self.starred_table).select(self.select_columns).execute()
        except APIError as e:
            raise _store_error(e) from e

        records = []
        for row in resp.data or []:
            record = self._present(row)
            if record is None:
                logger.warning("Dropping starred entry %s: restaurant not found", row.get("id"))
                continue
            records.append(record)
        return records

    async def get_starred(self, starred_id: str) -> dict:
        try:
            resp = await (
                self.client.table(self.starred_table)
                .select(self.select_columns)
                .eq("id", starred_id)
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e

        rows = resp.data or []
        record = self._present(rows[0]) if rows else None
        if record is None:
            raise NotFoundError("Starred restaurant", starred_id)
        return record

    async def add_starred(self, restaurant_id: str, comment: str | None = None) -> dict:
        # Same columns as the embedded select so add and get present one shape
        restaurant = await self._fetch_restaurant(restaurant_id, self.restaurant_columns)
        if restaurant is None:
            raise NotFoundError("Restaurant", restaurant_id)

        try:
            resp = await (
                self.client.table(self.starred_table)
                .insert({REFERENCE_COLUMN: restaurant_id, "comment": None})
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e

        rows = resp.data or []
        if len(rows) != 1:
            raise StoreError({"message": f"Insert returned {len(rows)} rows, expected 1"})

        logger.info("Starred restaurant %s as %s", restaurant_id, rows[0]["id"])
        return join_entry(rows[0], restaurant)

    async def delete_starred(self, starred_id: str) -> None:
        try:
            resp = await (
                self.client.table(self.starred_table)
                .delete()
                .eq("id", starred_id)
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e

        if not resp.data:
            raise NotFoundError("Starred restaurant", starred_id)
        logger.info("Removed starred restaurant %s", starred_id)

    async def update_comment(self, starred_id: str, new_comment: str | None) -> None:
        try:
            resp = await (
                self.client.table(self.starred_table)
                .update({"comment": new_comment})
                .eq("id", starred_id)
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e

        if not resp.data:
            raise NotFoundError("Starred restaurant", starred_id)

    async def list_restaurants(self) -> list[dict]:
        try:
            resp = await self.client.table(self.restaurants_table).select("*").execute()
        except APIError as e:
            raise _store_error(e) from e
        return resp.data or []

    async def get_restaurant(self, restaurant_id: str) -> dict | None:
        return await self._fetch_restaurant(restaurant_id, "*")

    async def _fetch_restaurant(self, restaurant_id: str, columns: str) -> dict | None:
        try:
            resp = await (
                self.client.table(self.restaurants_table)
                .select(columns)
                .eq("id", restaurant_id)
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e
        rows = resp.data
        return rows[0] if rows else None
