"""Smoke runner tests, run in-process against the ASGI app."""
import asyncio
import json

import httpx
import pytest

from provider_mocks.main import app
from smoke_runner.scenarios import (
    SESSIONS,
    default_scenarios,
    load_scenarios,
    write_fixtures,
)
from smoke_runner.smoke import run_smoke
from smoke_runner.types import CheckResult, FixtureError, Scenario
from smoke_runner.utils import evaluate, percentile, summarize


def _asgi_client():
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


def test_fixture_files_round_trip_through_loader(tmp_path):
    written = write_fixtures(tmp_path)
    assert len(written) == len(default_scenarios())
    loaded = {sc.name: sc for sc in load_scenarios(tmp_path)}
    for sc in default_scenarios():
        assert loaded[sc.name] == sc


def test_load_scenarios_errors(tmp_path):
    with pytest.raises(FixtureError):
        load_scenarios(tmp_path / "missing")
    with pytest.raises(FixtureError):
        load_scenarios(tmp_path)
    (tmp_path / "bad.json").write_text(json.dumps({"payload": {}}))
    with pytest.raises(FixtureError, match="bad.json"):
        load_scenarios(tmp_path)


def test_full_smoke_run_passes(tmp_path):
    write_fixtures(tmp_path)

    async def go():
        async with _asgi_client() as client:
            return await run_smoke(client=client, fixtures_dir=tmp_path, timeout_s=2.0)

    assert asyncio.run(go()) == 0


def test_smoke_run_fails_on_wrong_expectation(tmp_path):
    (tmp_path / "wrong.json").write_text(
        json.dumps(
            {
                "path": "/api/pearl/student-verifications",
                "payload": {"personId": "p-000"},
                "expect": {"status": 200, "fields": {"verified": True}},
            }
        )
    )

    async def go():
        async with _asgi_client() as client:
            return await run_smoke(client=client, fixtures_dir=tmp_path, timeout_s=2.0)

    assert asyncio.run(go()) == 1


class TestEvaluate:
    def test_session_tag_must_match_hint(self):
        sc = Scenario(name="s", path=SESSIONS, payload={}, expect_status=200)
        body = {"sessionId": "abc::ACCOUNT_BLOCKED", "statusHint": "SUCCESS"}
        problems = evaluate(sc, 200, body)
        assert len(problems) == 1
        assert "statusHint" in problems[0]

    def test_reports_status_and_field_mismatches(self):
        sc = Scenario(
            name="s", path="/x", payload={}, expect_status=200, expect_fields={"a": 1, "b": 2}
        )
        problems = evaluate(sc, 400, {"a": 2})
        assert problems == ["status 400 != 200", "a=2 != 1", "missing field b"]

    def test_non_object_body(self):
        sc = Scenario(name="s", path="/x", payload={}, expect_status=200)
        assert evaluate(sc, 200, None) == ["response body is not a JSON object"]


def test_percentile():
    assert percentile([], 0.95) == 0.0
    assert percentile([5.0], 0.95) == 5.0
    assert percentile([1.0, 2.0, 3.0, 4.0, 5.0], 0.5) == 3.0
    assert percentile([0.0, 10.0], 0.95) == pytest.approx(9.5)


def test_summarize():
    results = [
        CheckResult("a", True, 200, 10.0),
        CheckResult("b", False, 500, 30.0, ["status 500 != 200"]),
    ]
    summary, code = summarize(results)
    assert code == 1
    assert summary["passed"] == 1
    assert summary["failed"] == 1
    assert summary["timings"]["avg_ms"] == 20.0
    assert summary["timings"]["max_ms"] == 30.0
    assert summary["failures"] == [
        {"scenario": "b", "status_code": 500, "problems": ["status 500 != 200"]}
    ]

    assert summarize([CheckResult("a", True, 200, 1.0)])[1] == 0
    assert summarize([])[1] == 1
