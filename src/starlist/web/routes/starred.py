"""Starred restaurant routes: list, fetch, star, unstar, comment.

Every record is the starred entry joined with its restaurant and flattened,
e.g. ``{"id": ..., "comment": null, "name": "Pho Place"}``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from starlist.errors import NotFoundError, StoreError
from starlist.store.base import StarredStore
from starlist.web.deps import get_store
from starlist.web.schemas import CommentUpdateRequest, StarCreateRequest

router = APIRouter()


@router.get("/")
async def list_starred(store: StarredStore = Depends(get_store)):
    """All starred restaurants, in the order they were starred."""
    return await store.list_starred()


@router.get("/{starred_id}")
async def get_starred(starred_id: str, store: StarredStore = Depends(get_store)):
    try:
        return await store.get_starred(starred_id)
    except (NotFoundError, StoreError):
        raise HTTPException(status_code=404)


@router.post("/", status_code=201)
async def add_starred(body: StarCreateRequest, store: StarredStore = Depends(get_store)):
    """Star a restaurant from the catalog. 404 if it does not exist."""
    try:
        return await store.add_starred(str(body.restaurant_id), body.comment)
    except NotFoundError:
        raise HTTPException(status_code=404)
    except StoreError as e:
        return JSONResponse(status_code=400, content={"error": e.payload})


@router.delete("/{starred_id}", status_code=204)
async def delete_starred(starred_id: str, store: StarredStore = Depends(get_store)):
    try:
        await store.delete_starred(starred_id)
    except NotFoundError:
        raise HTTPException(status_code=404)
    except StoreError as e:
        # Store failures on delete are reported as 404 along with the payload
        return JSONResponse(status_code=404, content={"error": e.payload})
    return Response(status_code=204)


@router.put("/{starred_id}")
async def update_comment(
    starred_id: str,
    body: CommentUpdateRequest,
    store: StarredStore = Depends(get_store),
):
    """Replace the comment on a starred restaurant."""
    try:
        await store.update_comment(starred_id, body.new_comment)
    except NotFoundError:
        raise HTTPException(status_code=404)
    except StoreError as e:
        return JSONResponse(status_code=404, content={"error": e.payload})
    return Response(status_code=200)
