"""Application factory for the Lions team hub HTTP API."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response

from lions_team.application.handlers import api_router, register_exception_handlers
from lions_team.application.ports.storage import Storage
from lions_team.infrastructure.storage import StorageSettings, create_storage
from utils.logger import get_logger, request_context
from utils.meta import APP_VERSION

logger = get_logger("lions_team.http")


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Record method, path, status and latency for every request."""

    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        latency_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            status_code,
            extra=request_context(request.method, request.url.path, status_code, latency_ms),
        )


def create_app(
    storage: Optional[Storage] = None,
    settings: Optional[StorageSettings] = None,
) -> FastAPI:
    """Build the API around ``storage``.

    When no storage is given one is created from ``settings`` (or the
    environment) on startup and closed again on shutdown. A storage passed in
    by the caller stays owned by the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if storage is not None:
            yield
            return

        owned = await create_storage(settings or StorageSettings.from_env())
        app.state.storage = owned
        logger.info("Storage backend ready: %s", type(owned).__name__)
        try:
            yield
        finally:
            await owned.close()

    app = FastAPI(title="Lions Team Hub", version=APP_VERSION, lifespan=lifespan)
    if storage is not None:
        app.state.storage = storage

    app.middleware("http")(log_requests)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app
