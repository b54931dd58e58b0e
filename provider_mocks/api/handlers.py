"""Exception handlers that render every failure as the error envelope."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import (
    NOT_AN_OBJECT_MESSAGE,
    BadRequestError,
    InternalServerError,
    ProviderError,
)
from ..logging_conf import get_logger
from .models import REQUIRED_FIELD_MESSAGES

logger = get_logger("api.errors")


def _message_for_path(path: str) -> str | None:
    for key, message in REQUIRED_FIELD_MESSAGES:
        # "transaction.amount.int" (union member) and "sourceAccount" (parent
        # object) both resolve to their required field.
        if path == key or path.startswith(key + ".") or key.startswith(path + "."):
            return message
    return None


def validation_message(errors: Sequence[dict[str, Any]]) -> str:
    """Pick a single client-facing message for a list of pydantic errors.

    Errors arrive in model field order, so the first required field wins.
    """
    for err in errors:
        path = ".".join(part for part in err.get("loc", ()) if isinstance(part, str))
        message = _message_for_path(path)
        if message is not None:
            return message
    return NOT_AN_OBJECT_MESSAGE


def error_response(exc: ProviderError, request: Request) -> JSONResponse:
    headers = {}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers["X-Request-ID"] = request_id
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    logger.info(
        "request.rejected",
        extra={
            "event": "bad_request" if isinstance(exc, BadRequestError) else "provider_error",
            "path": request.url.path,
            "error": exc.error,
            "detail": exc.message,
        },
    )
    return error_response(exc, request)


def unexpected_error_response(request: Request) -> JSONResponse:
    """Envelope for an exception nothing else classified. The cause stays in the logs."""
    return error_response(InternalServerError(), request)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProviderError, provider_error_handler)
