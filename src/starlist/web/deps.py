"""FastAPI dependencies.

The active store is created once per app (see ``starlist.web.app``) and kept
on ``app.state``. Routes use ``Depends(get_store)`` to reach it.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from starlist.store.base import StarredStore


def get_store(request: Request) -> StarredStore:
    """Return the app's StarredStore. 503 if startup did not create one."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    return store
