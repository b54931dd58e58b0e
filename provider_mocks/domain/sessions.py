from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel

__all__ = [
    "SESSION_SEPARATOR",
    "SessionTag",
    "DecodedSession",
    "encode_session_id",
    "decode_session_id",
]

SESSION_SEPARATOR = "::"


class SessionTag(str, Enum):
    success = "SUCCESS"
    invalid_account = "INVALID_ACCOUNT"
    account_blocked = "ACCOUNT_BLOCKED"


_TAGS_BY_VALUE = {tag.value: tag for tag in SessionTag}


class DecodedSession(BaseModel):
    """Parts of a session id. `tag` is None when the id is not recognised."""

    uuid: str
    tag: Optional[SessionTag] = None


def encode_session_id(tag: SessionTag) -> str:
    """Return a fresh session id of the form ``<uuid4>::<TAG>``.

    Nothing is stored server-side; the id carries its own outcome.
    """
    return f"{uuid4()}{SESSION_SEPARATOR}{SessionTag(tag).value}"


def decode_session_id(session_id: str) -> DecodedSession:
    """Split a session id back into its uuid and tag.

    Never raises: anything that is not exactly ``<id>::<known tag>`` comes
    back with ``tag=None``. When the separator count is wrong the whole input
    is returned as ``uuid``.
    """
    parts = session_id.split(SESSION_SEPARATOR)
    if len(parts) != 2:
        return DecodedSession(uuid=session_id, tag=None)
    uuid_part, raw_tag = parts
    return DecodedSession(uuid=uuid_part, tag=_TAGS_BY_VALUE.get(raw_tag))
