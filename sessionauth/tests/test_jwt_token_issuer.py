from __future__ import annotations

import time

import jwt
import pytest
from conftest import ACCESS_SECRET, REFRESH_SECRET, make_issuer

from sessionauth.domain.users.exceptions import InvalidTokenError
from sessionauth.infrastructure.tokens import JwtTokenIssuer
from sessionauth.shared.config import TokenConfig


def test_issue_access_carries_subject_and_username(issuer: JwtTokenIssuer) -> None:
    before = int(time.time())
    issued = issuer.issue_access(42, "Alice")

    claims = issuer.verify_access(issued.token)
    assert claims.sub == 42
    assert claims.username == "Alice"
    assert before + 900 <= claims.exp <= int(time.time()) + 900
    assert claims == issued.claims


def test_refresh_token_outlives_access_token(issuer: JwtTokenIssuer) -> None:
    access = issuer.issue_access(1, "Alice")
    refresh = issuer.issue_refresh(1, "Alice")

    assert refresh.claims.exp > access.claims.exp


def test_tokens_are_signed_with_distinct_secrets(issuer: JwtTokenIssuer) -> None:
    access = issuer.issue_access(1, "Alice")
    refresh = issuer.issue_refresh(1, "Alice")

    assert jwt.decode(access.token, ACCESS_SECRET, algorithms=["HS256"])["sub"] == "1"
    assert jwt.decode(refresh.token, REFRESH_SECRET, algorithms=["HS256"])["sub"] == "1"
    with pytest.raises(InvalidTokenError):
        issuer.verify_refresh(access.token)
    with pytest.raises(InvalidTokenError):
        issuer.verify_access(refresh.token)


def test_expired_token_fails_closed() -> None:
    expired = make_issuer(access_ttl=-5)
    token = expired.issue_access(1, "Alice").token

    with pytest.raises(InvalidTokenError) as exc_info:
        expired.verify_access(token)

    assert isinstance(exc_info.value.__cause__, jwt.ExpiredSignatureError)


@pytest.mark.parametrize(
    "payload",
    [
        {"sub": "not-a-number", "username": "Alice"},
        {"sub": "1"},
        {"username": "Alice"},
        {"sub": str(2**70), "username": "Alice"},
        {"sub": "0", "username": "Alice"},
        {"sub": "-3", "username": "Alice"},
    ],
)
def test_malformed_payload_is_rejected(payload: dict) -> None:
    now = int(time.time())
    token = jwt.encode(
        {**payload, "iat": now, "exp": now + 60}, ACCESS_SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidTokenError):
        make_issuer().verify_access(token)


def test_garbage_token_is_rejected(issuer: JwtTokenIssuer) -> None:
    with pytest.raises(InvalidTokenError):
        issuer.verify_refresh("definitely.not.a-token")


def test_identical_secrets_are_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer(
            access_secret="same-secret-value-0123456789abcdef",
            refresh_secret="same-secret-value-0123456789abcdef",
            access_ttl=60,
            refresh_ttl=120,
        )


def test_from_config_uses_configured_lifetimes() -> None:
    config = TokenConfig(
        ACCESS_TOKEN_SECRET="cfg-access-secret-0123456789abcdef0123",
        REFRESH_TOKEN_SECRET="cfg-refresh-secret-0123456789abcdef012",
        ACCESS_TOKEN_TTL=30,
        REFRESH_TOKEN_TTL=300,
    )
    issuer = JwtTokenIssuer.from_config(config)

    issued_at = int(time.time())
    access = issuer.issue_access(5, "Bob")
    refresh = issuer.issue_refresh(5, "Bob")

    assert issued_at + 30 <= access.claims.exp <= issued_at + 31
    assert issued_at + 300 <= refresh.claims.exp <= issued_at + 301
