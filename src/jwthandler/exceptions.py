"""Exceptions for jwthandler."""

from __future__ import annotations

from typing import ClassVar

from .constants import SEGMENT_COUNT

__all__ = [
    "IncorrectSegmentCountError",
    "InvalidBase64UrlError",
    "InvalidTokenError",
    "JWTError",
    "UnableToGetBodyError",
    "UnableToGetHeaderError",
    "UnableToGetJWTError",
    "UnableToGetSignatureError",
]


class JWTError(Exception):
    """Base class for all jwthandler exceptions.

    Parameters
    ----------
    message
        Error message. If not given, the class default is used.
    """

    error: ClassVar[str] = "invalid_jwt"
    """Stable machine-readable code for this error."""

    message: ClassVar[str] = "Unable to decode JWT"
    """The summary message to use when no more specific one is given."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class IncorrectSegmentCountError(JWTError):
    """The token did not split into exactly three segments.

    Parameters
    ----------
    count
        Number of segments actually found.
    """

    error = "incorrect_segment_count"
    message = "Incorrect number of segments"

    def __init__(self, count: int) -> None:
        msg = f"Expected {SEGMENT_COUNT} segments, found {count}"
        super().__init__(msg)
        self.count = count


class InvalidBase64UrlError(JWTError):
    """A token segment could not be decoded as base64url.

    The offending text is kept on the exception but deliberately left out of
    the message so that token material does not end up in logs.

    Parameters
    ----------
    text
        The segment that failed to decode.
    part
        Which part of the token the segment was, if known.
    """

    error = "invalid_base64url"
    message = "Invalid base64url encoding"

    def __init__(self, text: str, part: str | None = None) -> None:
        msg = f"Invalid base64url encoding in {part}" if part else None
        super().__init__(msg)
        self.text = text
        self.part = part


class InvalidTokenError(JWTError):
    """A token segment decoded to bytes but was not the expected JSON.

    Covers malformed JSON, JSON that is not an object, missing required
    fields, and fields of the wrong type. The underlying error is available
    as ``__cause__``.

    Parameters
    ----------
    part
        Which part of the token failed, if known.
    """

    error = "invalid_token"
    message = "Invalid token"

    def __init__(self, part: str | None = None) -> None:
        msg = f"Invalid token {part}" if part else None
        super().__init__(msg)
        self.part = part


class UnableToGetJWTError(JWTError):
    """An accessor was called before any token was held."""

    error = "unable_to_get_jwt"
    message = "No JWT has been loaded"


class UnableToGetHeaderError(JWTError):
    """The header of the held token could not be decoded."""

    error = "unable_to_get_header"
    message = "Unable to get JWT header"


class UnableToGetBodyError(JWTError):
    """The body of the held token could not be decoded."""

    error = "unable_to_get_body"
    message = "Unable to get JWT body"


class UnableToGetSignatureError(JWTError):
    """The signature of the held token could not be extracted."""

    error = "unable_to_get_signature"
    message = "Unable to get JWT signature"
