from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable
from typing import Any

import httpx

from provider_mocks.logging_conf import get_logger
from smoke_runner.types import CheckResult, RequestError, Scenario, SmokeError
from smoke_runner.utils import evaluate

logger = get_logger("smoke_runner.client")


async def wait_for_health(client: httpx.AsyncClient, timeout_s: float = 20.0) -> None:
    """Ping /health until it returns ok or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = await client.get("/health")
            if r.status_code == 200 and r.json().get("ok") is True:
                logger.info("health.ok", extra={"event": "health_ok"})
                return
        except httpx.TransportError:
            pass
        await asyncio.sleep(0.25)
    raise SmokeError("Health check did not pass within timeout")


async def send_scenario(
    client: httpx.AsyncClient, scenario: Scenario, *, retries: int = 2
) -> httpx.Response:
    """POST one scenario, retrying transport failures only.

    HTTP error statuses are returned as-is: several scenarios expect a 400.
    """
    kwargs: dict[str, Any]
    if scenario.raw:
        kwargs = {
            "content": str(scenario.payload).encode("utf-8"),
            "headers": {"Content-Type": "application/json"},
        }
    else:
        kwargs = {"json": scenario.payload}

    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            return await client.post(scenario.path, **kwargs)
        except httpx.TransportError as e:  # pragma: no cover - network flakiness
            last_err = e
            logger.warning(
                "scenario.retry",
                extra={
                    "event": "scenario_retry",
                    "scenario": scenario.name,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
    raise RequestError(f"request failed for {scenario.name}: {last_err}")


async def run_scenario(client: httpx.AsyncClient, scenario: Scenario) -> CheckResult:
    start = time.perf_counter()
    try:
        r = await send_scenario(client, scenario)
    except RequestError as e:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        return CheckResult(scenario.name, False, None, elapsed_ms, [str(e)])
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    try:
        body = r.json()
    except ValueError:
        body = None
    problems = evaluate(scenario, r.status_code, body)
    if problems:
        logger.warning(
            "scenario.failed",
            extra={"event": "scenario_failed", "scenario": scenario.name, "problems": problems},
        )
    return CheckResult(scenario.name, not problems, r.status_code, elapsed_ms, problems)


async def run_all(client: httpx.AsyncClient, scenarios: Iterable[Scenario]) -> list[CheckResult]:
    """Run scenarios concurrently and return their results in input order."""
    scenarios = list(scenarios)
    results = await asyncio.gather(*(run_scenario(client, sc) for sc in scenarios))
    logger.info(
        "scenarios.done",
        extra={
            "event": "scenarios_done",
            "requested": len(scenarios),
            "passed": sum(1 for r in results if r.ok),
        },
    )
    return list(results)
