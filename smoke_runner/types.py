from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Scenario:
    """One request to send and what the response must look like."""

    name: str
    path: str
    payload: Any
    expect_status: int
    expect_fields: dict[str, Any] = field(default_factory=dict)
    # When true, `payload` is sent verbatim as the request body.
    raw: bool = False


@dataclass
class CheckResult:
    """Outcome of running a single scenario."""

    name: str
    ok: bool
    status_code: int | None
    elapsed_ms: float
    problems: list[str] = field(default_factory=list)


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class FixtureError(SmokeError):
    """Raised when scenario fixtures are missing or unreadable."""


class RequestError(SmokeError):
    """Raised when a scenario request fails after retries."""
