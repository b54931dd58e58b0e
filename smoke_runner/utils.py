from __future__ import annotations

from typing import Any

from provider_mocks.domain.sessions import decode_session_id
from smoke_runner.scenarios import SESSIONS
from smoke_runner.types import CheckResult, Scenario


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    d0 = s[f] * (c - k)
    d1 = s[c] * (k - f)
    return d0 + d1


def evaluate(scenario: Scenario, status_code: int, body: Any) -> list[str]:
    """Return the ways a response deviates from the scenario (empty when it passes)."""
    problems: list[str] = []
    if status_code != scenario.expect_status:
        problems.append(f"status {status_code} != {scenario.expect_status}")
    if not isinstance(body, dict):
        problems.append("response body is not a JSON object")
        return problems

    for key, expected in scenario.expect_fields.items():
        if key not in body:
            problems.append(f"missing field {key}")
        elif body[key] != expected:
            problems.append(f"{key}={body[key]!r} != {expected!r}")

    # The session id must carry the same tag the response advertises.
    if scenario.path == SESSIONS and status_code == 200:
        decoded = decode_session_id(str(body.get("sessionId", "")))
        hint = body.get("statusHint")
        if decoded.tag is None or decoded.tag.value != hint:
            problems.append(f"sessionId tag {decoded.tag!r} does not match statusHint {hint!r}")
    return problems


def summarize(results: list[CheckResult]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from scenario results."""
    durations_ms = [r.elapsed_ms for r in results]
    passed = [r for r in results if r.ok]
    failures = [
        {"scenario": r.name, "status_code": r.status_code, "problems": r.problems}
        for r in results
        if not r.ok
    ]
    avg_ms = (sum(durations_ms) / len(durations_ms)) if durations_ms else 0.0
    summary = {
        "component": "smoke_runner",
        "event": "summary",
        "scenarios": len(results),
        "passed": len(passed),
        "failed": len(failures),
        "timings": {
            "avg_ms": round(avg_ms, 2),
            "p95_ms": round(percentile(durations_ms, 0.95), 2),
            "max_ms": round(max(durations_ms), 2) if durations_ms else 0.0,
        },
        "failures": failures,
    }
    exit_code = 0 if (results and not failures) else 1
    return summary, exit_code
