"""Representation of a decoded JWT."""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from .claims import ClaimKey, ClaimValue, RegisteredClaims

__all__ = [
    "JWTComponents",
    "JWTHeader",
    "JWTToken",
]


class JWTHeader(BaseModel):
    """The JOSE header of a JWT.

    Only the parameters of interest are named. Any other header parameters
    are retained as extra fields.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    alg: str = Field(..., title="Signing algorithm", examples=["HS256"])

    typ: str = Field(..., title="Token type", examples=["JWT"])

    kid: str | None = Field(None, title="Key ID")


class JWTComponents[P: RegisteredClaims](NamedTuple):
    """The three parts of a JWT after decoding."""

    header: JWTHeader
    """Decoded header."""

    payload: P
    """Decoded payload."""

    signature: str | None
    """Signature segment, exactly as it appeared in the token."""


class JWTToken[P: RegisteredClaims]:
    """A decoded but unverified JWT.

    Parameters
    ----------
    header
        Decoded header.
    body
        Decoded payload.
    signature
        Signature segment of the token. This is never decoded or verified.
    string
        The token in compact serialization.

    Notes
    -----
    The derived ``claims`` list only contains entries for the registered
    claims present in the body, so position in the list does not identify
    the claim. Use `get_claim_value` or `get_claim` to look up a claim by
    name.
    """

    def __init__(
        self,
        header: JWTHeader,
        body: P,
        signature: str | None,
        string: str,
    ) -> None:
        self._header = header
        self._signature = signature
        self._string = string
        self._body = body
        self._claims: list[ClaimValue] = []
        self.set_claims(body)

    def __repr__(self) -> str:
        return (
            f"JWTToken(header={self._header!r}, body={self._body!r},"
            f" claims={len(self._claims)})"
        )

    @property
    def header(self) -> JWTHeader:
        """Decoded header."""
        return self._header

    @property
    def signature(self) -> str | None:
        """Signature segment, never decoded or verified."""
        return self._signature

    @property
    def string(self) -> str:
        """The token in compact serialization."""
        return self._string

    @property
    def body(self) -> P:
        """Decoded payload."""
        return self._body

    @property
    def claims(self) -> list[ClaimValue]:
        """Registered claims present in the body, in `ClaimKey` order."""
        return list(self._claims)

    def set_claims(self, body: P) -> None:
        """Replace the body and derive the claims again from it.

        Parameters
        ----------
        body
            New payload for the token.
        """
        self._body = body
        self._claims = body.claim_values()

    def get_claim(self, key: ClaimKey) -> ClaimValue | None:
        """Return the derived value of a claim.

        Parameters
        ----------
        key
            Claim to look up.

        Returns
        -------
        ClaimValue or None
            The claim value, or `None` if the claim is absent from the body.
        """
        for claim in self._claims:
            if claim.key == key:
                return claim
        return None

    def get_claim_value(
        self, key: ClaimKey
    ) -> str | list[str] | datetime | None:
        """Return the typed value of a claim from the body.

        Parameters
        ----------
        key
            Claim to look up.

        Returns
        -------
        str, list of str, datetime, or None
            A list of strings for ``aud``, a datetime for ``exp``, ``nbf``
            and ``iat``, and a string for the others. `None` if the claim is
            absent.
        """
        if key == ClaimKey.aud:
            return self._body.aud
        elif key == ClaimKey.iss:
            return self._body.iss
        elif key == ClaimKey.sub:
            return self._body.sub
        elif key == ClaimKey.jti:
            return self._body.jti
        elif key == ClaimKey.exp:
            return self._body.exp
        elif key == ClaimKey.nbf:
            return self._body.nbf
        else:
            return self._body.iat
