"""Pydantic data types for jwthandler models."""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from .util import parse_float, seconds_to_datetime

__all__ = [
    "Audience",
    "Timestamp",
]


def _normalize_audience(v: Any) -> Any:
    """Pydantic validator for the ``aud`` claim.

    The audience may be either a single string or a list of strings. Convert
    the single string form to a one-element list so that callers only have to
    handle one representation.

    Parameters
    ----------
    v
        Field representing the audience.

    Returns
    -------
    typing.Any
        The audience as a list if it was a single string, otherwise the
        unchanged value for further validation.
    """
    if isinstance(v, str):
        return [v]
    else:
        return v


def _normalize_timestamp(v: Any) -> Any:
    """Pydantic validator for numeric date claims.

    Numbers and numeric strings are seconds since the Unix epoch. Pydantic
    would interpret large numbers as milliseconds, so the conversion is done
    here instead.

    Parameters
    ----------
    v
        Field representing a time.

    Returns
    -------
    typing.Any
        Converted `~datetime.datetime` for numeric input, otherwise the
        unchanged value for further validation.

    Raises
    ------
    ValueError
        Raised if the number is not representable as a date.
    """
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        seconds = parse_float(v)
        if seconds is None:
            return v
        v = seconds
    if isinstance(v, int | float):
        try:
            return seconds_to_datetime(v)
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Timestamp {v} out of range") from e
    return v


def _ensure_utc(v: datetime) -> datetime:
    if v.tzinfo is None:
        return v.replace(tzinfo=UTC)
    return v.astimezone(UTC)


def _serialize_timestamp(v: datetime) -> int | float:
    seconds = v.timestamp()
    return int(seconds) if seconds.is_integer() else seconds


type Audience = Annotated[list[str], BeforeValidator(_normalize_audience)]
"""Type for the ``aud`` claim, always a list of strings once validated."""


type Timestamp = Annotated[
    datetime,
    BeforeValidator(_normalize_timestamp),
    AfterValidator(_ensure_utc),
    PlainSerializer(_serialize_timestamp, return_type=int | float),
]
"""Type for a `datetime` field stored as seconds since epoch."""
