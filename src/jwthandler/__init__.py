"""Decoder for JSON Web Tokens."""

from .decoder import TokenDecoder, decode_segment, decode_token, split_token
from .exceptions import (
    IncorrectSegmentCountError,
    InvalidBase64UrlError,
    InvalidTokenError,
    JWTError,
    UnableToGetBodyError,
    UnableToGetHeaderError,
    UnableToGetJWTError,
    UnableToGetSignatureError,
)
from .handler import JWTHandler
from .models.claims import ClaimKey, ClaimValue, RawClaim, RegisteredClaims
from .models.token import JWTComponents, JWTHeader, JWTToken
from .util import base64url_decode, base64url_encode

__all__ = [
    "ClaimKey",
    "ClaimValue",
    "IncorrectSegmentCountError",
    "InvalidBase64UrlError",
    "InvalidTokenError",
    "JWTComponents",
    "JWTError",
    "JWTHandler",
    "JWTHeader",
    "JWTToken",
    "RawClaim",
    "RegisteredClaims",
    "TokenDecoder",
    "UnableToGetBodyError",
    "UnableToGetHeaderError",
    "UnableToGetJWTError",
    "UnableToGetSignatureError",
    "base64url_decode",
    "base64url_encode",
    "decode_segment",
    "decode_token",
    "split_token",
]
