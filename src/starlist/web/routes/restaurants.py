"""Read-only restaurant catalog routes.

The catalog is owned elsewhere; these routes only expose it so clients can
pick a restaurant id to star.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from starlist.store.base import StarredStore
from starlist.web.deps import get_store

router = APIRouter()


@router.get("/")
async def list_restaurants(store: StarredStore = Depends(get_store)):
    return {"restaurants": await store.list_restaurants()}


@router.get("/{restaurant_id}")
async def get_restaurant(restaurant_id: str, store: StarredStore = Depends(get_store)):
    restaurant = await store.get_restaurant(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant
