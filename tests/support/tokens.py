"""Create tokens for testing."""

from __future__ import annotations

import json
from typing import Any

import jwt

from jwthandler.util import base64url_encode

__all__ = [
    "EXAMPLE_TOKEN",
    "TEST_SECRET",
    "build_token",
    "create_token",
    "encode_segment",
]

EXAMPLE_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)
"""Well-known HS256 example token with ``sub``, ``name``, and ``iat``."""

TEST_SECRET = "some-shared-secret-that-is-long-enough-for-hs256"
"""HMAC key used to sign test tokens."""


def create_token(payload: dict[str, Any], *, kid: str | None = None) -> str:
    """Sign a payload into a token with PyJWT.

    Parameters
    ----------
    payload
        Claims for the token.
    kid
        Key ID to put in the header, if any.

    Returns
    -------
    str
        The encoded token.
    """
    headers = {"kid": kid} if kid else None
    return jwt.encode(
        payload, TEST_SECRET, algorithm="HS256", headers=headers
    )


def encode_segment(data: Any) -> str:
    """Encode JSON-serializable data as a base64url token segment."""
    return base64url_encode(json.dumps(data).encode())


def build_token(
    header: Any, payload: Any, signature: str = "c2lnbmF0dXJl"
) -> str:
    """Assemble a token from arbitrary, possibly invalid, parts.

    PyJWT refuses to create tokens with unusual claim shapes, so tests of
    those build the token by hand.

    Parameters
    ----------
    header
        Header data, or a `str` to use as the already-encoded segment.
    payload
        Payload data, or a `str` to use as the already-encoded segment.
    signature
        Signature segment.

    Returns
    -------
    str
        The assembled token. The signature is not valid.
    """
    if not isinstance(header, str):
        header = encode_segment(header)
    if not isinstance(payload, str):
        payload = encode_segment(payload)
    return f"{header}.{payload}.{signature}"
