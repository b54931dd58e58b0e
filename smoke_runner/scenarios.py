"""Built-in smoke scenarios and their on-disk fixture layout.

Fixtures live at ``<root>/<group>/<name>.json``, each holding
``{"path", "payload", "expect": {"status", "fields"}}`` and optionally
``"raw": true`` for bodies that must be sent verbatim.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from smoke_runner.types import FixtureError, Scenario

SESSIONS = "/api/fink/sessions"
TRANSFERS = "/api/fink/transfers"
STUDENTS = "/api/pearl/student-verifications"
UNIVERSITIES = "/api/pearl/university-verifications"

# (group, name, path, payload, status, expected top-level fields, raw)
_DEFINITIONS: list[tuple[str, str, str, Any, int, dict[str, Any], bool]] = [
    ("fink_sessions", "success", SESSIONS, {"finkAccountId": " acct_123 "}, 200,
     {"finkAccountId": "acct_123", "statusHint": "SUCCESS"}, False),
    ("fink_sessions", "blocked", SESSIONS, {"finkAccountId": "acct_999"}, 200,
     {"statusHint": "ACCOUNT_BLOCKED"}, False),
    ("fink_sessions", "empty", SESSIONS, {"finkAccountId": "   "}, 200,
     {"finkAccountId": "", "statusHint": "INVALID_ACCOUNT"}, False),
    ("fink_sessions", "missing_id", SESSIONS, {"currency": "USD"}, 400,
     {"error": "BadRequest", "message": "finkAccountId is required"}, False),
    ("fink_sessions", "malformed_json", SESSIONS, "{not json", 400,
     {"error": "BadRequest", "message": "Invalid JSON in request body"}, True),
    ("fink_transfers", "success", TRANSFERS,
     {"sourceAccount": {"id": "acct_123"}, "transaction": {"amount": 125.5, "currency": "EUR"}},
     200, {"status": "SUCCESS", "failureCode": None}, False),
    ("fink_transfers", "blocked", TRANSFERS,
     {"sourceAccount": {"id": "acct_999"}, "transaction": {"amount": 10}},
     200, {"status": "FAILED", "failureCode": "ACCOUNT_BLOCKED", "transactionId": None}, False),
    ("fink_transfers", "bad_amount", TRANSFERS,
     {"sourceAccount": {"id": "acct_123"}, "transaction": {"amount": "10"}},
     400, {"error": "BadRequest"}, False),
    ("pearl_students", "verified", STUDENTS, {"personId": "p-123"}, 200,
     {"verified": True, "role": "STUDENT"}, False),
    ("pearl_students", "blocked", STUDENTS, {"personId": "p-000"}, 200,
     {"verified": False}, False),
    ("pearl_universities", "verified", UNIVERSITIES, {"student": {"universityId": "u-42"}}, 200,
     {"universityId": "u-42", "verified": True}, False),
    ("pearl_universities", "blocked", UNIVERSITIES, {"student": {"universityId": "u-1000"}}, 200,
     {"verified": False}, False),
]


def default_scenarios() -> list[Scenario]:
    return [
        Scenario(
            name=f"{group}/{name}",
            path=path,
            payload=payload,
            expect_status=status,
            expect_fields=fields,
            raw=raw,
        )
        for group, name, path, payload, status, fields, raw in _DEFINITIONS
    ]


def write_fixtures(root: Path) -> list[Path]:
    """Write every built-in scenario under `root` and return the file paths."""
    written: list[Path] = []
    for sc in default_scenarios():
        target = root / f"{sc.name}.json"
        target.parent.mkdir(parents=True, exist_ok=True)
        doc: dict[str, Any] = {
            "path": sc.path,
            "payload": sc.payload,
            "expect": {"status": sc.expect_status, "fields": sc.expect_fields},
        }
        if sc.raw:
            doc["raw"] = True
        target.write_text(json.dumps(doc, indent=2) + "\n", encoding="utf-8")
        written.append(target)
    return written


def load_scenarios(root: Path) -> list[Scenario]:
    """Read every ``*.json`` scenario below `root`, sorted by relative path."""
    if not root.exists():
        raise FixtureError(f"fixtures directory not found: {root}")
    files = sorted(p for p in root.rglob("*.json") if p.is_file())
    if not files:
        raise FixtureError(f"no scenario files under {root}")

    scenarios: list[Scenario] = []
    for path in files:
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
            expect = doc.get("expect", {})
            scenarios.append(
                Scenario(
                    name=path.relative_to(root).with_suffix("").as_posix(),
                    path=doc["path"],
                    payload=doc.get("payload"),
                    expect_status=int(expect.get("status", 200)),
                    expect_fields=dict(expect.get("fields", {})),
                    raw=bool(doc.get("raw", False)),
                )
            )
        except (ValueError, KeyError, TypeError) as e:
            raise FixtureError(f"invalid scenario file {path}: {e}") from e
    return scenarios
