from __future__ import annotations

import secrets

__all__ = ["TRANSACTION_PREFIX", "TRANSACTION_ALPHABET", "generate_transaction_id"]

TRANSACTION_PREFIX = "tr_"
# Excludes I, O, 0 and 1.
TRANSACTION_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
_RANDOM_LENGTH = 16


def generate_transaction_id() -> str:
    """Return a display id such as ``tr_JK5ME5VQ3KQ2N8D9``."""
    body = "".join(secrets.choice(TRANSACTION_ALPHABET) for _ in range(_RANDOM_LENGTH))
    return TRANSACTION_PREFIX + body
