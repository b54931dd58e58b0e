from __future__ import annotations

import os
from enum import Enum

from .sessions import SessionTag

__all__ = [
    "DEFAULT_ACCOUNT_BLOCKED_SUFFIX",
    "DEFAULT_IDENTITY_BLOCKED_SUFFIX",
    "IdentityOutcome",
    "get_account_blocked_suffix",
    "get_identity_blocked_suffix",
    "classify_account",
    "check_identity",
]

DEFAULT_ACCOUNT_BLOCKED_SUFFIX = "999"
DEFAULT_IDENTITY_BLOCKED_SUFFIX = "000"


class IdentityOutcome(str, Enum):
    accepted = "accepted"
    invalid = "invalid"
    blocked = "blocked"


def _suffix_from_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    suffix = raw.strip()
    if not suffix:
        raise ValueError(f"{name} must be a non-empty string")
    return suffix


def get_account_blocked_suffix() -> str:
    """Return FINK_BLOCKED_SUFFIX from environment, defaulting to "999"."""
    return _suffix_from_env("FINK_BLOCKED_SUFFIX", DEFAULT_ACCOUNT_BLOCKED_SUFFIX)


def get_identity_blocked_suffix() -> str:
    """Return PEARL_BLOCKED_SUFFIX from environment, defaulting to "000"."""
    return _suffix_from_env("PEARL_BLOCKED_SUFFIX", DEFAULT_IDENTITY_BLOCKED_SUFFIX)


def classify_account(account_id: str, *, blocked_suffix: str) -> SessionTag:
    """Map a (trimmed) Fink account id to its outcome tag.

      ""                  -> INVALID_ACCOUNT
      ends with suffix    -> ACCOUNT_BLOCKED
      anything else       -> SUCCESS
    """
    if not account_id:
        return SessionTag.invalid_account
    if account_id.endswith(blocked_suffix):
        return SessionTag.account_blocked
    return SessionTag.success


def check_identity(identifier: str, *, blocked_suffix: str) -> IdentityOutcome:
    """Same rule as `classify_account`, for Pearl person/university ids."""
    if not identifier:
        return IdentityOutcome.invalid
    if identifier.endswith(blocked_suffix):
        return IdentityOutcome.blocked
    return IdentityOutcome.accepted
