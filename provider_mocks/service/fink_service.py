from __future__ import annotations

from typing import Any, Optional, Union

from ..domain.rules import classify_account, get_account_blocked_suffix
from ..domain.sessions import SessionTag, encode_session_id
from ..domain.transactions import generate_transaction_id
from ..logging_conf import get_logger
from .clock import utc_now_iso

logger = get_logger("service.fink")

DEFAULT_CURRENCY = "USD"

TRANSFER_SUCCESS = "SUCCESS"
TRANSFER_FAILED = "FAILED"

_FAILURE_REASONS = {
    SessionTag.invalid_account: "Account ID is missing or empty",
    SessionTag.account_blocked: "Transfers from this account are blocked",
}


# ------------------------
# Use-cases
# ------------------------

def create_session(*, fink_account_id: str) -> dict:
    """Open a payment session whose id encodes the account outcome."""
    account_id = fink_account_id.strip()
    tag = classify_account(account_id, blocked_suffix=get_account_blocked_suffix())
    session_id = encode_session_id(tag)
    logger.info(
        "fink.session",
        extra={"event": "fink_session_create", "account_id": account_id, "tag": tag.value},
    )
    return {
        "session_id": session_id,
        "fink_account_id": account_id,
        "status_hint": tag,
    }


def create_transfer(
    *,
    source_account_id: str,
    amount: Union[int, float],
    currency: Any = None,
) -> dict:
    """Execute a transfer from `source_account_id`.

    Blocked or empty accounts produce a FAILED result (not an error); only
    successful transfers get a transaction id.
    """
    account_id = source_account_id.strip()
    currency = currency or DEFAULT_CURRENCY
    processed_at = utc_now_iso()

    tag = classify_account(account_id, blocked_suffix=get_account_blocked_suffix())
    if tag is SessionTag.success:
        status = TRANSFER_SUCCESS
        transaction_id: Optional[str] = generate_transaction_id()
        failure_code: Optional[str] = None
        failure_reason: Optional[str] = None
    else:
        status = TRANSFER_FAILED
        transaction_id = None
        failure_code = tag.value
        failure_reason = _FAILURE_REASONS[tag]

    logger.info(
        "fink.transfer",
        extra={
            "event": "fink_transfer",
            "account_id": account_id,
            "status": status,
            "failure_code": failure_code,
            "transaction_id": transaction_id,
        },
    )
    return {
        "status": status,
        "transaction_id": transaction_id,
        "processed_at": processed_at,
        "failure_code": failure_code,
        "failure_reason": failure_reason,
        "echo": {
            "source_account_id": account_id,
            "amount": amount,
            "currency": currency,
        },
    }
