"""
Unit tests for JwtTokenIssuer adapter.
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.domain.exceptions import InvalidToken
from src.domain.ports import Role, TokenClaims, TokenIssuer

SECRET = "unit-test-secret-with-at-least-32-bytes"
CLAIMS = TokenClaims(user_id=7, username="budi", role=Role.STUDENT)


@pytest.fixture
def issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(secret=SECRET, algorithm="HS256", ttl_seconds=3600)


def test_implements_protocol(issuer: JwtTokenIssuer) -> None:
    def accepts_issuer(i: TokenIssuer) -> None:
        pass

    accepts_issuer(issuer)
    assert JwtTokenIssuer.__bases__ == (object,)


def test_issue_then_verify_returns_claims(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue(CLAIMS)
    assert issuer.verify(token) == CLAIMS


def test_payload_fields(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue(CLAIMS)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["id"] == 7
    assert payload["username"] == "budi"
    assert payload["role"] == "mahasiswa"


def test_token_expires_after_ttl(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue(CLAIMS)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_rejected() -> None:
    issuer = JwtTokenIssuer(secret=SECRET, ttl_seconds=-10)
    token = issuer.issue(CLAIMS)

    with pytest.raises(InvalidToken):
        issuer.verify(token)


def test_wrong_secret_rejected(issuer: JwtTokenIssuer) -> None:
    forged = JwtTokenIssuer(secret="another-secret-with-at-least-32-bytes").issue(CLAIMS)

    with pytest.raises(InvalidToken):
        issuer.verify(forged)


def test_garbage_token_rejected(issuer: JwtTokenIssuer) -> None:
    with pytest.raises(InvalidToken):
        issuer.verify("not-a-jwt")


def test_missing_claims_rejected(issuer: JwtTokenIssuer) -> None:
    token = jwt.encode(
        {"id": 1, "exp": datetime.now(UTC) + timedelta(minutes=5)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidToken):
        issuer.verify(token)


def test_unknown_role_rejected(issuer: JwtTokenIssuer) -> None:
    token = jwt.encode(
        {
            "id": 1,
            "username": "x",
            "role": "superuser",
            "exp": datetime.now(UTC) + timedelta(minutes=5),
        },
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidToken):
        issuer.verify(token)
