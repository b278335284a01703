"""Holder for a decoded JWT."""

from __future__ import annotations

from datetime import datetime

from structlog.stdlib import BoundLogger

from .decoder import TokenDecoder
from .exceptions import (
    JWTError,
    UnableToGetBodyError,
    UnableToGetHeaderError,
    UnableToGetJWTError,
    UnableToGetSignatureError,
)
from .models.claims import ClaimKey, RegisteredClaims
from .models.token import JWTComponents, JWTHeader, JWTToken

__all__ = ["JWTHandler"]


class JWTHandler[P: RegisteredClaims]:
    """Decode a JWT and hold on to it for later access.

    The accessors for the header, body, and signature decode the held token
    string again rather than returning the parts stored on the token, so they
    report a failure if the held token has been replaced by one that cannot
    be decoded.

    Parameters
    ----------
    payload_model
        Model for the token payload.
    decoder
        Decoder to use. One is created from ``payload_model`` if not given.
    logger
        Logger passed to the decoder if one is created.
    """

    def __init__(
        self,
        payload_model: type[P],
        *,
        decoder: TokenDecoder[P] | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._decoder = decoder or TokenDecoder(payload_model, logger=logger)
        self.token: JWTToken[P] | None = None

    def clear(self) -> None:
        """Forget the held token."""
        self.token = None

    def decode(self, token: str) -> JWTToken[P]:
        """Decode a token without holding it.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        JWTToken
            The decoded token.

        Raises
        ------
        JWTError
            Raised if the token cannot be decoded.
        """
        return self._decoder.decode(token)

    def get_components(self, token: str) -> JWTComponents[P]:
        """Decode the parts of a token without holding it.

        Raises
        ------
        JWTError
            Raised if the token cannot be decoded.
        """
        return self._decoder.get_components(token)

    def load(self, token: str) -> JWTToken[P]:
        """Decode a token and hold it.

        The previously held token, if any, is kept if decoding fails.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        JWTToken
            The decoded token.

        Raises
        ------
        JWTError
            Raised if the token cannot be decoded.
        """
        self.token = self._decoder.decode(token)
        return self.token

    def get_header(self) -> JWTHeader:
        """Return the header of the held token.

        Raises
        ------
        UnableToGetJWTError
            Raised if no token is held.
        UnableToGetHeaderError
            Raised if the held token cannot be decoded.
        """
        token = self._get_token()
        try:
            return self._decoder.get_components(token.string).header
        except JWTError as e:
            raise UnableToGetHeaderError from e

    def get_body(self) -> P:
        """Return the body of the held token.

        Raises
        ------
        UnableToGetJWTError
            Raised if no token is held.
        UnableToGetBodyError
            Raised if the held token cannot be decoded.
        """
        token = self._get_token()
        try:
            return self._decoder.get_components(token.string).payload
        except JWTError as e:
            raise UnableToGetBodyError from e

    def get_signature(self) -> str | None:
        """Return the signature segment of the held token.

        Raises
        ------
        UnableToGetJWTError
            Raised if no token is held.
        UnableToGetSignatureError
            Raised if the held token cannot be decoded.
        """
        token = self._get_token()
        try:
            return self._decoder.get_components(token.string).signature
        except JWTError as e:
            raise UnableToGetSignatureError from e

    def get_claim_value(
        self, key: ClaimKey
    ) -> str | list[str] | datetime | None:
        """Return the typed value of a claim of the held token.

        Raises
        ------
        UnableToGetJWTError
            Raised if no token is held.
        """
        return self._get_token().get_claim_value(key)

    def _get_token(self) -> JWTToken[P]:
        if self.token is None:
            raise UnableToGetJWTError
        return self.token
