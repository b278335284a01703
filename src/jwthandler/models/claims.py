"""Representation of the registered claims of a JWT."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    model_validator,
)

from ..pydantic import Audience, Timestamp
from ..util import parse_float, parse_int, seconds_to_datetime

__all__ = [
    "ClaimKey",
    "ClaimValue",
    "RawClaim",
    "RegisteredClaims",
]

type RawClaim = str | int | float | list[str] | None
"""Shapes a registered claim may take in the JSON of a token payload."""


class ClaimKey(StrEnum):
    """Names of the registered JWT claims.

    Declaration order is the order in which claims are derived from a
    payload.
    """

    iss = "iss"
    """Issuer of the JWT."""

    sub = "sub"
    """Subject of the JWT (the user)."""

    aud = "aud"
    """Recipient for which the JWT is intended."""

    exp = "exp"
    """Time after which the JWT expires."""

    nbf = "nbf"
    """Time before which the JWT must not be accepted for processing."""

    iat = "iat"
    """Time at which the JWT was issued."""

    jti = "jti"
    """Unique identifier, usable to prevent the JWT from being replayed."""


def _to_raw_claim(value: Any) -> RawClaim:
    """Reduce a Python value to one of the JSON shapes of a claim.

    Used for payloads constructed directly in Python rather than from JSON,
    where a date claim may already be a `~datetime.datetime`. Anything that
    fits none of the shapes becomes `None`.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str | int | float):
        return value
    if isinstance(value, datetime):
        seconds = value.timestamp()
        return int(seconds) if seconds.is_integer() else seconds
    if isinstance(value, list | tuple) and all(
        isinstance(v, str) for v in value
    ):
        return list(value)
    return None


@dataclass(frozen=True, slots=True)
class ClaimValue:
    """The value of one claim with normalized views of it.

    Every view is total: if the underlying value does not have a suitable
    shape, the view is `None` rather than an error, since claims are
    optional.
    """

    key: ClaimKey | None
    """Claim this value was derived from, if known."""

    raw: RawClaim
    """Value of the claim as it appeared in the payload JSON."""

    def __getitem__(self, key: ClaimKey) -> str | list[str] | datetime | None:
        """Return the view of the value appropriate for a given claim."""
        if key == ClaimKey.aud:
            return self.string_array
        elif key in (ClaimKey.iss, ClaimKey.sub, ClaimKey.jti):
            return self.string
        else:
            return self.date

    @property
    def value(self) -> RawClaim:
        """Original claim value."""
        return self.raw

    @property
    def string(self) -> str | None:
        """Value of the claim as `str`."""
        return self.raw if isinstance(self.raw, str) else None

    @property
    def double(self) -> float | None:
        """Value of the claim as `float`."""
        if isinstance(self.raw, str):
            return parse_float(self.raw)
        if isinstance(self.raw, int | float) and not isinstance(
            self.raw, bool
        ):
            try:
                return float(self.raw)
            except OverflowError:
                return None
        return None

    @property
    def integer(self) -> int | None:
        """Value of the claim as `int`, truncating toward zero."""
        if isinstance(self.raw, str):
            return parse_int(self.raw)
        if isinstance(self.raw, bool):
            return None
        if isinstance(self.raw, float):
            return int(self.raw) if math.isfinite(self.raw) else None
        if isinstance(self.raw, int):
            return self.raw
        return None

    @property
    def date(self) -> datetime | None:
        """Value of the claim as seconds since the epoch, in UTC."""
        seconds = self.double
        if seconds is None:
            return None
        try:
            return seconds_to_datetime(seconds)
        except (OverflowError, ValueError):
            return None

    @property
    def string_array(self) -> list[str] | None:
        """Value of the claim as a list of strings.

        A single string is returned as a one-element list.
        """
        if isinstance(self.raw, list):
            return list(self.raw)
        if isinstance(self.raw, str):
            return [self.raw]
        return None


class RegisteredClaims(BaseModel):
    """Token payload exposing the registered claims.

    Subclass this model to describe an application payload. Every registered
    claim is optional and any additional claims in the token are retained as
    extra fields.

    Notes
    -----
    Validation turns the claims into convenient Python types, which loses
    the form they had in the token (a numeric string versus a number, or a
    bare string audience versus a list). The JSON value of each registered
    claim is therefore kept alongside so that `ClaimValue` can offer its
    views on the original data.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    iss: str | None = Field(None, title="Issuer")

    sub: str | None = Field(None, title="Subject")

    aud: Audience | None = Field(
        None,
        title="Audience",
        description="A single audience string is converted to a list",
    )

    exp: Timestamp | None = Field(None, title="Expiration time")

    nbf: Timestamp | None = Field(None, title="Not valid before")

    iat: Timestamp | None = Field(None, title="Issued at")

    jti: str | None = Field(None, title="JWT ID")

    _raw_claims: dict[ClaimKey, RawClaim] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _capture_raw_claims(
        cls, data: Any, handler: ModelWrapValidatorHandler[Self]
    ) -> Self:
        model = handler(data)
        if isinstance(data, dict):
            model._raw_claims = {
                k: _to_raw_claim(data[k.value])
                for k in ClaimKey
                if data.get(k.value) is not None
            }
        return model

    def raw_claim(self, key: ClaimKey) -> RawClaim:
        """Return the value of a registered claim as it appeared in JSON.

        Parameters
        ----------
        key
            Claim to return.

        Returns
        -------
        str, int, float, list of str, or None
            The claim value, or `None` if the claim is absent.
        """
        if getattr(self, key.value) is None:
            return None
        if key in self._raw_claims:
            return self._raw_claims[key]
        return _to_raw_claim(getattr(self, key.value))

    def claim_values(self) -> list[ClaimValue]:
        """Derive the values of the registered claims present in the payload.

        Returns
        -------
        list of ClaimValue
            One entry for each claim present, in `ClaimKey` order. Absent
            claims are skipped, so the list has between zero and seven
            entries.
        """
        return [
            ClaimValue(key=key, raw=self.raw_claim(key))
            for key in ClaimKey
            if getattr(self, key.value) is not None
        ]
