"""Tests for the in-memory starred store."""

import asyncio

import pytest

from starlist.errors import NotFoundError
from starlist.models import Restaurant
from starlist.store.memory import MemoryStarredStore


@pytest.mark.asyncio
class TestMemoryStarredStore:
    async def test_add_then_get(self, memory_store):
        created = await memory_store.add_starred("r1")

        assert created["comment"] is None
        assert created["name"] == "Pho Place"

        fetched = await memory_store.get_starred(created["id"])
        assert fetched == created

    async def test_add_ignores_initial_comment(self, memory_store):
        created = await memory_store.add_starred("r1", comment="ignored")
        assert created["comment"] is None

    async def test_add_unknown_restaurant(self, memory_store):
        with pytest.raises(NotFoundError):
            await memory_store.add_starred("nope")

        assert await memory_store.list_starred() == []

    async def test_ids_are_unique(self, memory_store):
        a = await memory_store.add_starred("r1")
        b = await memory_store.add_starred("r1")
        assert a["id"] != b["id"]

    async def test_integer_catalog_ids_match_string_refs(self, memory_store):
        created = await memory_store.add_starred("3")
        assert created["name"] == "Noodle Bar"
        assert created["neighborhood"] == "East Village"

    async def test_list_in_insertion_order(self, memory_store):
        first = await memory_store.add_starred("r2")
        second = await memory_store.add_starred("r1")

        records = await memory_store.list_starred()

        assert [r["id"] for r in records] == [first["id"], second["id"]]
        assert records[0]["cuisine"] == "Mexican"

    async def test_delete(self, memory_store):
        created = await memory_store.add_starred("r1")

        await memory_store.delete_starred(created["id"])

        with pytest.raises(NotFoundError):
            await memory_store.get_starred(created["id"])
        assert await memory_store.list_starred() == []

    async def test_delete_missing(self, memory_store):
        with pytest.raises(NotFoundError):
            await memory_store.delete_starred("missing")

    async def test_update_comment_changes_only_comment(self, memory_store):
        created = await memory_store.add_starred("r2")

        await memory_store.update_comment(created["id"], "Best tacos")

        fetched = await memory_store.get_starred(created["id"])
        assert fetched == {**created, "comment": "Best tacos"}

    async def test_update_missing(self, memory_store):
        with pytest.raises(NotFoundError):
            await memory_store.update_comment("missing", "hi")

    async def test_orphans_dropped_from_list(self):
        store = MemoryStarredStore([Restaurant(id="r1", name="Pho Place")])
        kept = await store.add_starred("r1")
        # Simulate the catalog losing a restaurant after it was starred
        store._restaurants["gone"] = {"id": "gone", "name": "Closed"}
        orphan = await store.add_starred("gone")
        del store._restaurants["gone"]

        records = await store.list_starred()

        assert [r["id"] for r in records] == [kept["id"]]
        with pytest.raises(NotFoundError):
            await store.get_starred(orphan["id"])

    async def test_concurrent_adds(self, memory_store):
        results = await asyncio.gather(*(memory_store.add_starred("r1") for _ in range(20)))

        assert len({r["id"] for r in results}) == 20
        assert len(await memory_store.list_starred()) == 20

    async def test_catalog_reads(self, memory_store, catalog):
        restaurants = await memory_store.list_restaurants()
        assert [r["name"] for r in restaurants] == [c["name"] for c in catalog]

        assert (await memory_store.get_restaurant("r2"))["cuisine"] == "Mexican"
        assert await memory_store.get_restaurant("missing") is None

    async def test_stores_do_not_share_state(self, catalog):
        a = MemoryStarredStore(catalog)
        b = MemoryStarredStore(catalog)

        await a.add_starred("r1")

        assert await b.list_starred() == []
