"""Tests for the decoded token model."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from jwthandler.models.claims import ClaimKey, ClaimValue, RegisteredClaims
from jwthandler.models.token import JWTHeader, JWTToken

HEADER = JWTHeader(alg="HS256", typ="JWT")


def test_header() -> None:
    header = JWTHeader.model_validate(
        {"alg": "RS256", "typ": "JWT", "kid": "some-kid", "cty": "JWT"}
    )
    assert header.alg == "RS256"
    assert header.kid == "some-kid"
    assert header.model_extra == {"cty": "JWT"}
    assert HEADER.kid is None


def test_get_claim_value() -> None:
    body = RegisteredClaims.model_validate(
        {
            "iss": "issuer",
            "sub": "someuser",
            "aud": "api",
            "exp": 1516242622,
            "nbf": 1516239022,
            "iat": 1516239022,
            "jti": "some-id",
        }
    )
    token = JWTToken(HEADER, body, "sig", "a.b.sig")

    assert token.get_claim_value(ClaimKey.iss) == "issuer"
    assert token.get_claim_value(ClaimKey.sub) == "someuser"
    assert token.get_claim_value(ClaimKey.aud) == ["api"]
    assert token.get_claim_value(ClaimKey.exp) == datetime(
        2018, 1, 18, 2, 30, 22, tzinfo=UTC
    )
    assert token.get_claim_value(ClaimKey.nbf) == datetime(
        2018, 1, 18, 1, 30, 22, tzinfo=UTC
    )
    assert token.get_claim_value(ClaimKey.iat) == datetime(
        2018, 1, 18, 1, 30, 22, tzinfo=UTC
    )
    assert token.get_claim_value(ClaimKey.jti) == "some-id"
    assert len(token.claims) == 7

    empty = JWTToken(HEADER, RegisteredClaims(), None, "a.b.")
    for key in ClaimKey:
        assert empty.get_claim_value(key) is None
    assert empty.claims == []


def test_claims() -> None:
    body = RegisteredClaims.model_validate({"sub": "someuser", "exp": 0})
    token = JWTToken(HEADER, body, "sig", "a.b.sig")

    assert token.claims == [
        ClaimValue(ClaimKey.sub, "someuser"),
        ClaimValue(ClaimKey.exp, 0),
    ]
    assert token.get_claim(ClaimKey.exp) == ClaimValue(ClaimKey.exp, 0)
    assert token.get_claim(ClaimKey.jti) is None

    # The returned list is a copy.
    token.claims.clear()
    assert len(token.claims) == 2


def test_set_claims() -> None:
    body = RegisteredClaims.model_validate({"sub": "someuser", "exp": 0})
    token = JWTToken(HEADER, body, "sig", "a.b.sig")

    new_body = RegisteredClaims.model_validate({"jti": "other-id"})
    token.set_claims(new_body)
    assert token.body is new_body
    assert token.claims == [ClaimValue(ClaimKey.jti, "other-id")]
    assert token.get_claim_value(ClaimKey.sub) is None

    # Deriving again from the same body replaces rather than appends.
    token.set_claims(new_body)
    assert len(token.claims) == 1


def test_read_only() -> None:
    body = RegisteredClaims.model_validate({"sub": "someuser"})
    token = JWTToken(HEADER, body, "sig", "a.b.sig")

    with pytest.raises(AttributeError):
        token.string = "x.y.z"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        token.header = JWTHeader(alg="none", typ="JWT")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        token.signature = None  # type: ignore[misc]
    with pytest.raises(AttributeError):
        token.body = RegisteredClaims()  # type: ignore[misc]
    assert token.string == "a.b.sig"
    assert token.header == HEADER
    assert token.signature == "sig"
    assert token.body is body
