from __future__ import annotations

from typing import Any

__all__ = [
    "ProviderError",
    "BadRequestError",
    "InternalServerError",
    "INVALID_JSON_MESSAGE",
    "NOT_AN_OBJECT_MESSAGE",
    "INTERNAL_MESSAGE",
    "error_body",
]

INVALID_JSON_MESSAGE = "Invalid JSON in request body"
NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"
INTERNAL_MESSAGE = "An unexpected error occurred"


class ProviderError(Exception):
    """Base class for errors rendered as the uniform error envelope.

    `error` is the stable category clients branch on; `status_code` is the
    HTTP status it maps to.
    """

    error: str = "InternalError"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict[str, Any]:
        return error_body(self.error, self.message)


class BadRequestError(ProviderError):
    error = "BadRequest"
    status_code = 400


class InternalServerError(ProviderError):
    error = "InternalError"
    status_code = 500

    def __init__(self, message: str = INTERNAL_MESSAGE) -> None:
        super().__init__(message)


def error_body(error: str, message: str) -> dict[str, Any]:
    return {"error": error, "message": message, "details": None}
