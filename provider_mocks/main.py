"""FastAPI app factory: health endpoint, Fink/Pearl routes and request logging."""
from __future__ import annotations

import os
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from provider_mocks.api import router as api_router
from provider_mocks.api.handlers import register_exception_handlers, unexpected_error_response
from provider_mocks.logging_conf import get_logger, setup_logging

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", extra={"event": "startup", "version": app.version})
    yield
    logger.info("shutdown", extra={"event": "shutdown"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Provider Mocks (Fink & Pearl)",
        version=os.getenv("APP_VERSION", "0.1.0"),
        lifespan=_lifespan,
    )

    @app.middleware("http")
    async def request_logger(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """JSON request logging with correlation id.

        - Reuses the client's X-Request-ID or mints one
        - Logs a start and end event with method/path/status/elapsed_ms
        - Turns any unhandled exception into the InternalError envelope
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                    "request_id": request_id,
                },
            )
            response = unexpected_error_response(request)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


# ASGI entrypoint for uvicorn: `uvicorn provider_mocks.main:app --port 8000`
app = create_app()
