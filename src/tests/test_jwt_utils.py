from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.config import JWT_ALGORITHM, JWT_EXPIRATION_MS
from src.utils.jwt_utils import (
    create_access_token,
    decode_token,
    extract_expiration,
    extract_username,
    get_expiration_in_seconds,
    get_token_payload,
    validate_token,
)


def test_token_carries_subject_and_timestamps():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    token = create_access_token("alice")
    payload = decode_token(token)

    assert payload["sub"] == "alice"
    issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
    expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    assert issued_at >= before
    assert expires_at - issued_at == timedelta(milliseconds=JWT_EXPIRATION_MS)


def test_token_validates_only_for_its_subject():
    token = create_access_token("alice")

    assert validate_token(token, "alice") is True
    assert validate_token(token, "bob") is False
    assert extract_username(token) == "alice"


def test_expired_token_is_invalid():
    token = create_access_token("alice", expires_delta=timedelta(seconds=-5))

    assert validate_token(token, "alice") is False
    assert get_token_payload(token) is None
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_token(token)


def test_token_signed_with_other_secret_is_invalid():
    forged = jwt.encode(
        {"sub": "alice", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "another-secret-that-is-long-enough-for-hs256",
        algorithm=JWT_ALGORITHM,
    )

    assert validate_token(forged, "alice") is False


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_is_invalid(token):
    assert validate_token(token, "alice") is False


def test_expiration_helpers():
    token = create_access_token("alice", expires_delta=timedelta(minutes=10))
    expiration = extract_expiration(token)

    assert expiration > datetime.now(timezone.utc)
    assert expiration <= datetime.now(timezone.utc) + timedelta(minutes=10, seconds=1)
    assert get_expiration_in_seconds() == JWT_EXPIRATION_MS // 1000


def test_token_payload_model():
    payload = get_token_payload(create_access_token("carol"))

    assert payload is not None
    assert payload.sub == "carol"
    assert payload.exp > payload.iat
