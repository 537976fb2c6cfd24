"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from starlist.config import load_config
from starlist.errors import StoreError
from starlist.models import AppConfig
from starlist.store.base import StarredStore
from starlist.store.factory import build_store

logger = logging.getLogger(__name__)
PROJECT_ROOT = Path(__file__).resolve().parents[3]  # src/starlist/web/app.py -> repo root


def _load_dotenv(*candidates: Path) -> Path | None:
    """Read KEY=VALUE lines from the first .env found into os.environ.

    Looks in the repository root, then the working directory. Variables that
    are already set are left alone.
    """
    candidates = candidates or (PROJECT_ROOT / ".env", Path.cwd() / ".env")
    env_path = next((p for p in candidates if p.exists()), None)
    if env_path is None:
        return None

    with open(env_path) as f:
        for raw in f:
            key, sep, value = raw.strip().partition("=")
            if not sep or not key.strip() or key.startswith("#"):
                continue
            os.environ.setdefault(key.strip(), value.strip())
    logger.info("Loaded .env from %s", env_path)
    return env_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store handed to create_app() is used as-is and not closed here
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        _load_dotenv()
        config = app.state.config
        if config is None:
            config = load_config(os.environ.get("STARLIST_CONFIG"))
        app.state.store = await build_store(config)

    yield

    if owns_store:
        await app.state.store.close()
        app.state.store = None


def create_app(config: AppConfig | None = None, store: StarredStore | None = None) -> FastAPI:
    """Build the app.

    Pass ``store`` to serve an existing store; otherwise one is built at
    startup from ``config`` (or from the file named by STARLIST_CONFIG).
    """
    app = FastAPI(title="Starlist", lifespan=lifespan)
    app.state.config = config
    app.state.store = store

    from starlist.web.routes import restaurants, starred

    app.include_router(starred.router, prefix="/api/starred-restaurants")
    app.include_router(restaurants.router, prefix="/api/restaurants")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=400, content={"error": exc.payload})

    @app.get("/health")
    async def health(request: Request):
        store = request.app.state.store
        return {"status": "ok", "backend": store.backend_name if store else None}

    return app
