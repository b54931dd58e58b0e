from __future__ import annotations

from ..domain.rules import IdentityOutcome, check_identity, get_identity_blocked_suffix
from ..logging_conf import get_logger
from .clock import utc_now_iso

logger = get_logger("service.pearl")

PROVIDER_NAME = "Pearl"
RULE_NAME = "simple-suffix-check"
STUDENT_ROLE = "STUDENT"

_STUDENT_REASONS = {
    IdentityOutcome.invalid: "Invalid or empty person ID",
    IdentityOutcome.blocked: "Student verification failed (blocked pattern)",
    IdentityOutcome.accepted: "Student ID accepted",
}

_UNIVERSITY_REASONS = {
    IdentityOutcome.invalid: "Invalid or empty university ID",
    IdentityOutcome.blocked: "University verification failed (blocked pattern)",
    IdentityOutcome.accepted: "University ID accepted",
}


def verify_student(*, person_id: str) -> dict:
    """Verify a person as a student. Empty ids are unverified, not errors."""
    pid = person_id.strip()
    outcome = check_identity(pid, blocked_suffix=get_identity_blocked_suffix())
    logger.info(
        "pearl.student",
        extra={"event": "pearl_student_verify", "person_id": pid, "outcome": outcome.value},
    )
    return {
        "person_id": pid,
        "verified": outcome is IdentityOutcome.accepted,
        "reason": _STUDENT_REASONS[outcome],
        "checked_at": utc_now_iso(),
        "role": STUDENT_ROLE,
    }


def verify_university(*, university_id: str) -> dict:
    """Verify a student's university id."""
    uid = university_id.strip()
    outcome = check_identity(uid, blocked_suffix=get_identity_blocked_suffix())
    logger.info(
        "pearl.university",
        extra={
            "event": "pearl_university_verify",
            "university_id": uid,
            "outcome": outcome.value,
        },
    )
    return {
        "university_id": uid,
        "verified": outcome is IdentityOutcome.accepted,
        "reason": _UNIVERSITY_REASONS[outcome],
        "checked_at": utc_now_iso(),
        "metadata": {"provider": PROVIDER_NAME, "rule": RULE_NAME},
    }
