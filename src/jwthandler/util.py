"""General utility functions."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime, timedelta

from .constants import EPOCH
from .exceptions import InvalidBase64UrlError

_INTEGER_REGEX = re.compile("[+-]?[0-9]+")
_NON_BASE64_REGEX = re.compile("[^A-Za-z0-9+/=]")

__all__ = [
    "add_padding",
    "base64url_decode",
    "base64url_encode",
    "parse_float",
    "parse_int",
    "seconds_to_datetime",
]


def add_padding(encoded: str) -> str:
    """Add padding to base64 encoded bytes.

    Parameters
    ----------
    encoded
        A base64-encoded string, possibly with the padding removed.

    Returns
    -------
    str
        A correctly-padded version of the encoded string.
    """
    underflow = len(encoded) % 4
    if underflow:
        return encoded + ("=" * (4 - underflow))
    else:
        return encoded


def base64url_decode(encoded: str) -> bytes:
    """Decode base64url text, with or without padding, into bytes.

    The URL-safe alphabet is mapped onto the standard one and padding is
    restored before decoding. Characters outside the base64 alphabet are
    discarded rather than rejected, so the length check applies to what is
    left after they are removed.

    Parameters
    ----------
    encoded
        Base64url-encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    InvalidBase64UrlError
        Raised if the text cannot be decoded, including when its length
        leaves a remainder of one modulo four, which no padding can repair.
    """
    standard = encoded.replace("-", "+").replace("_", "/")
    standard = _NON_BASE64_REGEX.sub("", standard)
    if len(standard) % 4 == 1:
        raise InvalidBase64UrlError(encoded)
    try:
        return base64.b64decode(add_padding(standard), validate=True)
    except binascii.Error as e:
        raise InvalidBase64UrlError(encoded) from e


def base64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding.

    Parameters
    ----------
    data
        Bytes to encode.

    Returns
    -------
    str
        URL-safe base64 encoding of the data with the trailing ``=``
        characters stripped, as used in each segment of a JWT.
    """
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def parse_float(value: str) -> float | None:
    """Parse a string as a floating point number.

    Surrounding whitespace and digit-group underscores, which Python's own
    parser tolerates, are rejected.

    Parameters
    ----------
    value
        String to parse.

    Returns
    -------
    float or None
        Parsed number, or `None` if the string is not a number.
    """
    if not value or value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int(value: str) -> int | None:
    """Parse a string holding an optionally-signed decimal integer.

    Parameters
    ----------
    value
        String to parse.

    Returns
    -------
    int or None
        Parsed number, or `None` if the string is not an integer literal.
        Strings with a fractional part such as ``1.5`` are not integers.
    """
    if not _INTEGER_REGEX.fullmatch(value):
        return None
    return int(value)


def seconds_to_datetime(seconds: float) -> datetime:
    """Convert seconds since the Unix epoch to a datetime.

    Parameters
    ----------
    seconds
        Seconds since 1970-01-01T00:00:00Z, possibly fractional or negative.

    Returns
    -------
    datetime
        Corresponding time in UTC with microsecond precision.

    Raises
    ------
    OverflowError
        Raised if the time is outside the range `datetime` can represent.
    ValueError
        Raised if the number of seconds is not finite.
    """
    return EPOCH + timedelta(seconds=seconds)
