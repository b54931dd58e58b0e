"""Tests for the session id codec."""
import re

import pytest

from provider_mocks.domain.sessions import (
    SESSION_SEPARATOR,
    DecodedSession,
    SessionTag,
    decode_session_id,
    encode_session_id,
)

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


@pytest.mark.parametrize("tag", list(SessionTag))
def test_decode_returns_encoded_tag(tag):
    decoded = decode_session_id(encode_session_id(tag))
    assert decoded.tag is tag
    assert UUID_RE.match(decoded.uuid)


def test_encoded_id_layout():
    session_id = encode_session_id(SessionTag.account_blocked)
    uuid_part, tag_part = session_id.split(SESSION_SEPARATOR)
    assert UUID_RE.match(uuid_part)
    assert tag_part == "ACCOUNT_BLOCKED"


def test_encode_mints_a_fresh_uuid_each_time():
    ids = {encode_session_id(SessionTag.success) for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "no-separator-here",
        "a::b::SUCCESS",
        "::::",
        "abc:SUCCESS",
        "SUCCESS",
    ],
)
def test_decode_without_exactly_one_separator_has_no_tag(raw):
    decoded = decode_session_id(raw)
    assert decoded.tag is None
    assert decoded.uuid == raw


def test_decode_unknown_tag_keeps_uuid_part():
    assert decode_session_id("abc::PENDING") == DecodedSession(uuid="abc", tag=None)


def test_decode_is_case_sensitive():
    assert decode_session_id("abc::success").tag is None


def test_decode_accepts_foreign_uuid_with_known_tag():
    decoded = decode_session_id("not-a-uuid::INVALID_ACCOUNT")
    assert decoded.uuid == "not-a-uuid"
    assert decoded.tag is SessionTag.invalid_account


def test_decode_empty_parts():
    assert decode_session_id("::SUCCESS") == DecodedSession(uuid="", tag=SessionTag.success)
    assert decode_session_id("abc::") == DecodedSession(uuid="abc", tag=None)
