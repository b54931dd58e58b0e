"""Request body parsing shared by every endpoint.

The body is read as JSON whatever the Content-Type says, so `curl -d` and
`text/plain` clients behave like `application/json` ones.
"""
from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from ..errors import INVALID_JSON_MESSAGE, NOT_AN_OBJECT_MESSAGE, BadRequestError
from .handlers import validation_message

M = TypeVar("M", bound=BaseModel)


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"non-standard JSON token {token}")


def parse_json_object(raw: bytes) -> dict[str, Any]:
    """Decode a request body that must be a JSON object.

    Empty, undecodable and ``null`` bodies are malformed JSON; any other
    non-object value is rejected separately.
    """
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise BadRequestError(INVALID_JSON_MESSAGE) from e
    if payload is None:
        raise BadRequestError(INVALID_JSON_MESSAGE)
    if not isinstance(payload, dict):
        raise BadRequestError(NOT_AN_OBJECT_MESSAGE)
    return payload


def json_body(model: type[M]) -> Callable[[Request], Awaitable[M]]:
    """Dependency factory: parse the request body into `model`."""

    async def dependency(request: Request) -> M:
        payload = parse_json_object(await request.body())
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise BadRequestError(validation_message(e.errors())) from e

    return dependency
